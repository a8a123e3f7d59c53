# 카탈로그(상품/브랜드) 저장소 레이어
# - 스키마 검증 없이 받은 문서를 그대로 저장
# - 조회 결과의 _id(ObjectId)는 JSON 응답을 위해 문자열로 변환

from typing import Any, Dict, List, Optional
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..core.database import BRANDS_COLLECTION, PRODUCTS_COLLECTION, get_database, storage_errors
from ..core.exceptions import NotFoundError

# 주의: ratings/flashSale은 원래 데이터가 문자열로 저장되어 있어 문자열로 비교합니다.
# 숫자 5나 boolean true로 저장된 문서는 조회되지 않습니다.
POPULAR_FILTER = {"ratings": "5"}
FLASH_SALE_FILTER = {"flashSale": "true"}


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    doc = dict(document)
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


class CatalogRepository:
    collection_name: str = None

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[self.collection_name]

    async def insert(self, document: Dict[str, Any]) -> str:
        # insert_one은 전달한 dict에 _id를 추가하므로 복사본을 넘깁니다
        with storage_errors(f"{self.collection_name}.insert_one"):
            result = await self.collection.insert_one(dict(document))
        return str(result.inserted_id)

    async def find(self, query: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        with storage_errors(f"{self.collection_name}.find"):
            docs = await self.collection.find(query or {}).to_list(length=None)
        return [serialize_document(d) for d in docs]

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with storage_errors(f"{self.collection_name}.find_one"):
            doc = await self.collection.find_one(query)
        return serialize_document(doc) if doc is not None else None


class ProductRepository(CatalogRepository):
    collection_name = PRODUCTS_COLLECTION

    async def get_by_product_id(self, product_id: str) -> Dict[str, Any]:
        # Mongo 내부 _id가 아니라 논리적인 productId 필드로 조회합니다
        product = await self.find_one({"productId": product_id})
        if product is None:
            raise NotFoundError("Product not found")
        return product

    async def list_popular(self) -> List[Dict[str, Any]]:
        return await self.find(POPULAR_FILTER)

    async def list_flash_sale(self) -> List[Dict[str, Any]]:
        return await self.find(FLASH_SALE_FILTER)


class BrandRepository(CatalogRepository):
    collection_name = BRANDS_COLLECTION


def get_product_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> ProductRepository:
    return ProductRepository(db)


def get_brand_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> BrandRepository:
    return BrandRepository(db)
