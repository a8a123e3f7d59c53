# 보안 유닛 테스트 (DB 의존성 없음)
from datetime import timedelta

import jwt
import pytest

from app.core.config import parse_duration, settings
from app.core.security import create_access_token, get_password_hash, verify_password

def test_password_hash_and_verify():
    pw = "S3cure!"
    hashed = get_password_hash(pw)
    assert hashed != pw
    assert hashed.startswith(f"$2b${settings.BCRYPT_ROUNDS:02d}$")
    assert verify_password(pw, hashed)
    assert not verify_password("wrong", hashed)

def test_same_password_gets_different_salt():
    assert get_password_hash("same-password") != get_password_hash("same-password")

def test_create_access_token():
    token = create_access_token("alice@example.com", "Alice")
    decoded = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    assert decoded["email"] == "alice@example.com"
    assert decoded["name"] == "Alice"
    assert decoded["exp"] - decoded["iat"] == int(settings.token_lifetime.total_seconds())

def test_token_rejected_with_other_secret():
    token = create_access_token("alice@example.com", "Alice")
    with pytest.raises(jwt.InvalidSignatureError):
        jwt.decode(token, "another-secret", algorithms=[settings.JWT_ALGORITHM])

@pytest.mark.parametrize("value, expected", [
    ("3600", timedelta(hours=1)),
    (90, timedelta(seconds=90)),
    ("30m", timedelta(minutes=30)),
    ("12h", timedelta(hours=12)),
    ("1d", timedelta(days=1)),
    ("2w", timedelta(weeks=2)),
    ("2.5h", timedelta(hours=2, minutes=30)),
    ("7 days", timedelta(days=7)),
    ("1y", timedelta(days=365.25)),
    ("10ms", timedelta(milliseconds=10)),
    ("2 Hours", timedelta(hours=2)),
    ("1.5", timedelta(seconds=1.5)),
])
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected

@pytest.mark.parametrize("value", ["", "abc", "5 fortnights", "-5m", "0", "1.2.3h"])
def test_parse_duration_invalid(value):
    with pytest.raises(ValueError):
        parse_duration(value)
