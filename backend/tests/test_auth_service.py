# 인증 서비스 테스트 (mongomock_motor 인메모리 DB)
import asyncio
from unittest.mock import AsyncMock, patch

import jwt
import pytest

from app.core.config import settings
from app.core.exceptions import DuplicateUserError, InvalidCredentialsError
from app.repositories.user_repository import UserRepository
from app.services.auth_service import AuthService

def test_register_stores_hashed_password(db):
    service = AuthService(UserRepository(db))
    asyncio.run(service.register("Alice", "alice@example.com", "pw-1234"))

    user = asyncio.run(db["users"].find_one({"email": "alice@example.com"}))
    assert user["name"] == "Alice"
    assert user["password"] != "pw-1234"

def test_register_duplicate_email_keeps_first_record(db):
    service = AuthService(UserRepository(db))
    asyncio.run(service.register("Alice", "alice@example.com", "first"))
    with pytest.raises(DuplicateUserError):
        asyncio.run(service.register("Mallory", "alice@example.com", "second"))

    users = asyncio.run(db["users"].find({"email": "alice@example.com"}).to_list(length=None))
    assert len(users) == 1
    assert users[0]["name"] == "Alice"
    # 첫 번째 비밀번호로 여전히 로그인 가능해야 함
    assert asyncio.run(service.login("alice@example.com", "first"))

def test_register_race_is_blocked_by_unique_index(db):
    repo = UserRepository(db)
    service = AuthService(repo)
    asyncio.run(service.register("Alice", "alice@example.com", "pw"))
    # 중복 체크를 통과했다고 가정 (동시 요청 상황)
    with patch.object(repo, "get_by_email", AsyncMock(return_value=None)):
        with pytest.raises(DuplicateUserError):
            asyncio.run(service.register("Alice2", "alice@example.com", "pw"))

def test_same_password_different_users_get_different_hashes(db):
    service = AuthService(UserRepository(db))
    asyncio.run(service.register("A", "a@example.com", "shared"))
    asyncio.run(service.register("B", "b@example.com", "shared"))
    a = asyncio.run(db["users"].find_one({"email": "a@example.com"}))
    b = asyncio.run(db["users"].find_one({"email": "b@example.com"}))
    assert a["password"] != b["password"]

def test_login_returns_token_with_claims(db):
    service = AuthService(UserRepository(db))
    asyncio.run(service.register("Alice", "alice@example.com", "pw-1234"))
    token = asyncio.run(service.login("alice@example.com", "pw-1234"))
    decoded = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    assert decoded["email"] == "alice@example.com"
    assert decoded["name"] == "Alice"

def test_login_failures_are_indistinguishable(db):
    service = AuthService(UserRepository(db))
    asyncio.run(service.register("Alice", "alice@example.com", "pw-1234"))

    with pytest.raises(InvalidCredentialsError) as wrong_pw:
        asyncio.run(service.login("alice@example.com", "nope"))
    with pytest.raises(InvalidCredentialsError) as unknown:
        asyncio.run(service.login("ghost@example.com", "pw-1234"))
    assert wrong_pw.value.message == unknown.value.message
