# 사용자 저장소 레이어
# - 데이터 접근(조회/생성)만 담당 (서비스 로직 분리)

from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..core.database import USERS_COLLECTION, storage_errors

class UserRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[USERS_COLLECTION]

    async def get_by_email(self, email: str) -> Optional[dict]:
        with storage_errors("users.find_one"):
            return await self.collection.find_one({"email": email})

    async def create(self, name: str, email: str, hashed_password: str) -> str:
        # unique 인덱스 위반 시 DuplicateKeyError가 그대로 올라갑니다
        with storage_errors("users.insert_one"):
            result = await self.collection.insert_one({"name": name, "email": email, "password": hashed_password})
        return str(result.inserted_id)
