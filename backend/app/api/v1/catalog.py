# 카탈로그 라우터 (인증 불필요)
# - POST /api/v1/create-product, GET /api/v1/products, GET /api/v1/products/{product_id}
# - GET /api/v1/popular-products, GET /api/v1/flash-sale
# - POST /api/v1/create-brand, GET /api/v1/brands
#
# 주의: 원래 서비스와 동일하게 상품/브랜드 생성에도 인증을 걸지 않습니다.

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status

from ...repositories.catalog_repository import (
    BrandRepository,
    ProductRepository,
    get_brand_repository,
    get_product_repository,
)
from ...schemas.response_schema import DataResponse, MessageResponse

router = APIRouter(tags=["catalog"])

# ---- Products ----

@router.post("/create-product", response_model=MessageResponse, status_code=status.HTTP_201_CREATED, summary="상품 생성 (임의 JSON 문서)")
async def create_product(document: Dict[str, Any] = Body(...), repo: ProductRepository = Depends(get_product_repository)):
    await repo.insert(document)
    return {"success": True, "message": "Product Created Successfully"}

@router.get("/products", response_model=DataResponse, summary="전체 상품 목록")
async def list_products(repo: ProductRepository = Depends(get_product_repository)):
    data = await repo.find()
    return {"success": True, "message": "Successfully fetched", "data": data}

@router.get("/products/{product_id}", response_model=DataResponse, summary="productId로 상품 조회")
async def get_product(product_id: str, repo: ProductRepository = Depends(get_product_repository)):
    product = await repo.get_by_product_id(product_id)
    return {"success": True, "message": "Product fetched successfully", "data": product}

@router.get("/popular-products", response_model=DataResponse, summary="인기 상품 (ratings == \"5\")")
async def popular_products(repo: ProductRepository = Depends(get_product_repository)):
    data = await repo.list_popular()
    return {"success": True, "message": "Successfully fetched", "data": data}

@router.get("/flash-sale", response_model=DataResponse, summary="플래시 세일 상품 (flashSale == \"true\")")
async def flash_sale(repo: ProductRepository = Depends(get_product_repository)):
    data = await repo.list_flash_sale()
    return {"success": True, "message": "Successfully fetched", "data": data}

# ---- Brands ----

@router.post("/create-brand", response_model=MessageResponse, status_code=status.HTTP_201_CREATED, summary="브랜드 생성 (임의 JSON 문서)")
async def create_brand(document: Dict[str, Any] = Body(...), repo: BrandRepository = Depends(get_brand_repository)):
    await repo.insert(document)
    return {"success": True, "message": "Brand Created Successfully"}

@router.get("/brands", response_model=DataResponse, summary="전체 브랜드 목록")
async def list_brands(repo: BrandRepository = Depends(get_brand_repository)):
    data = await repo.find()
    return {"success": True, "message": "Brand fetched Successfully", "data": data}
