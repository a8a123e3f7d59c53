# 인증 서비스 레이어
# - 이메일 중복 체크, 회원가입
# - 로그인 (비밀번호 검증, JWT 토큰 발급)

import logging
from fastapi import Depends
from fastapi.concurrency import run_in_threadpool
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from ..core.database import get_database
from ..core.exceptions import DuplicateUserError, InvalidCredentialsError
from ..core.security import create_access_token, get_password_hash, verify_password
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def register(self, name: str, email: str, password: str) -> str:
        existing = await self.repo.get_by_email(email)
        if existing:
            raise DuplicateUserError()
        # bcrypt는 CPU를 오래 쓰므로 이벤트 루프를 막지 않도록 스레드풀에서 실행
        hashed = await run_in_threadpool(get_password_hash, password)
        try:
            user_id = await self.repo.create(name, email, hashed)
        except DuplicateKeyError:
            # 중복 체크와 insert 사이에 같은 이메일이 먼저 저장된 경우 (unique 인덱스가 막아줌)
            logger.info("[auth] unique 인덱스로 중복 가입 차단")
            raise DuplicateUserError()
        logger.info(f"[auth] 회원가입 완료: user_id={user_id}")
        return user_id

    async def login(self, email: str, password: str) -> str:
        user = await self.repo.get_by_email(email)
        if not user or not await run_in_threadpool(verify_password, password, user["password"]):
            raise InvalidCredentialsError()
        return create_access_token(user["email"], user.get("name"))


def get_auth_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> AuthService:
    return AuthService(UserRepository(db))
