# 테스트 공통 설정
# - app 모듈 import 전에 필수 환경변수 세팅
# - MongoDB 대신 mongomock_motor 인메모리 DB 사용

import asyncio
import os

os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("EXPIRES_IN", "1h")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.database import ensure_indexes, get_database
from app.main import app


@pytest.fixture
def db():
    database = AsyncMongoMockClient()["electronic-gadgets-shop-test"]
    asyncio.run(ensure_indexes(database))
    return database


@pytest.fixture
def client(db):
    # startup 이벤트를 실행하지 않도록 with 블록 없이 사용 (실제 MongoDB에 연결하지 않음)
    app.dependency_overrides[get_database] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()
