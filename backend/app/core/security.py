# 보안/인증 유틸리티
# - 비밀번호 해싱/검증 (bcrypt)
# - JWT 토큰 생성

from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext
import jwt

from .config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__default_rounds=settings.BCRYPT_ROUNDS,
)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def create_token(subject: dict, expires_delta: timedelta) -> str:
    now = datetime.now(tz=timezone.utc)
    payload = {
        "exp": now + expires_delta,
        "iat": now,
        **subject,
    }
    token = jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    return token

def create_access_token(email: str, name: str) -> str:
    # 로그인 토큰에는 이메일과 이름만 담습니다 (서버에 저장하지 않는 stateless 토큰)
    return create_token({"email": email, "name": name}, settings.token_lifetime)
