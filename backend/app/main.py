# FastAPI 진입점
# - MongoDB(motor) 클라이언트 초기화 / 종료
# - 라우터 라우팅
# - CORS, 요청 로깅, 예외 핸들러 설정

import logging
from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from .core.config import settings
from .core.database import create_client, ensure_indexes, ping
from .api.errors import register_exception_handlers
from .api.middleware import RequestLoggingMiddleware
from .api.v1.auth import router as auth_router
from .api.v1.catalog import router as catalog_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI 애플리케이션 인스턴스 생성
app = FastAPI(
    title="Electronic Gadgets Shop API",
    description="회원가입/로그인, 상품/브랜드 카탈로그 API",
    version=settings.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)
register_exception_handlers(app)

# MongoDB 초기화 (앱 시작 시 1회)
# 주니어 개발자님께: DB 핸들은 전역 변수가 아니라 app.state에 보관하고,
# 각 라우터는 get_database 의존성으로 주입받아 사용합니다.
@app.on_event("startup")
async def app_init():
    client = create_client()
    app.state.mongo_client = client
    app.state.db = client[settings.MONGODB_DB]
    if await ping(app.state.db):
        try:
            await ensure_indexes(app.state.db)
            logger.info(f"MongoDB 연결 성공: {settings.MONGODB_DB}")
        except PyMongoError as e:
            logger.warning(f"인덱스 생성 실패: {e}")
    else:
        # MongoDB 연결 실패 시에도 서버는 시작됩니다. 데이터 API는 500을 반환합니다.
        logger.warning(f"MongoDB 연결 실패. 서버는 계속 시작됩니다: {settings.MONGODB_URI}")

@app.on_event("shutdown")
async def app_shutdown():
    client = getattr(app.state, "mongo_client", None)
    if client is not None:
        client.close()
        logger.info("MongoDB 연결 종료")

# 간단한 헬스체크
@app.get("/")
async def root():
    return {"message": "Server is running smoothly", "timestamp": datetime.now(timezone.utc).isoformat()}

@app.get("/health")
async def health_check(request: Request):
    db = getattr(request.app.state, "db", None)
    database = "ok" if db is not None and await ping(db) else "unavailable"
    return {"status": "ok", "app": settings.APP_NAME, "version": settings.APP_VERSION, "database": database}

# API v1 라우터 등록
app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(catalog_router, prefix=settings.API_PREFIX)


def run():
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
