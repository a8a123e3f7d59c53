# MongoDB 연결 관리
# - 앱 시작 시 AsyncIOMotorClient 1회 생성, 종료 시 close
# - DB 핸들은 app.state에 보관하고 get_database 의존성으로 각 요청에 주입
# - pymongo 에러를 StorageUnavailableError로 변환

import logging
from contextlib import contextmanager

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from .config import settings
from .exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
PRODUCTS_COLLECTION = "products"
BRANDS_COLLECTION = "brands"


def create_client(uri: str = None) -> AsyncIOMotorClient:
    # 주니어 개발자님께: motor 클라이언트는 실제 쿼리가 실행될 때 연결합니다.
    # 그래서 생성 자체는 MongoDB가 꺼져 있어도 실패하지 않습니다.
    return AsyncIOMotorClient(uri or settings.MONGODB_URI, serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS)


async def ping(db: AsyncIOMotorDatabase) -> bool:
    try:
        await db.command("ping")
        return True
    except PyMongoError as e:
        logger.warning(f"[MongoDB] ping 실패: {e}")
        return False


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    # 이메일 unique 인덱스: 동시 회원가입 시 중복 체크(check-then-insert) 경쟁 조건 방지
    await db[USERS_COLLECTION].create_index("email", unique=True)


@contextmanager
def storage_errors(operation: str):
    """
    pymongo 예외를 StorageUnavailableError로 바꿔주는 컨텍스트 매니저입니다.

    DuplicateKeyError는 호출한 쪽(AuthService)이 의미를 알고 있으므로 그대로 전달합니다.
    원본 에러는 서버 로그에만 남기고 클라이언트에는 노출하지 않습니다.
    """
    try:
        yield
    except DuplicateKeyError:
        raise
    except PyMongoError as e:
        logger.error(f"[MongoDB] {operation} 실패: {e}")
        raise StorageUnavailableError(operation) from e


def get_database(request: Request) -> AsyncIOMotorDatabase:
    db = getattr(request.app.state, "db", None)
    if db is None:
        logger.error("[MongoDB] DB 핸들이 초기화되지 않았습니다")
        raise StorageUnavailableError("get_database")
    return db
