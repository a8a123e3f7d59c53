# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

import re
from datetime import timedelta
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# 프로젝트 루트 디렉토리 경로 찾기
# 주니어 개발자님께: 이 파일은 backend/app/core/config.py에 있으므로,
# 3단계 상위로 올라가면 프로젝트 루트가 됩니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

# "3600", "30m", "2.5h", "7 days", "1y", "10ms" 형태의 기간 문자열 (jsonwebtoken expiresIn 문법)
_DURATION_PATTERN = re.compile(
    r"^\s*(\d*\.?\d+)\s*"
    r"(milliseconds?|msecs?|ms|seconds?|secs?|s|minutes?|mins?|m|hours?|hrs?|h|days?|d|weeks?|w|years?|yrs?|y)?\s*$",
    re.IGNORECASE,
)
_UNIT_SECONDS = {
    "ms": 0.001, "msec": 0.001, "msecs": 0.001, "millisecond": 0.001, "milliseconds": 0.001,
    "s": 1, "sec": 1, "secs": 1, "second": 1, "seconds": 1,
    "m": 60, "min": 60, "mins": 60, "minute": 60, "minutes": 60,
    "h": 3600, "hr": 3600, "hrs": 3600, "hour": 3600, "hours": 3600,
    "d": 86400, "day": 86400, "days": 86400,
    "w": 604800, "week": 604800, "weeks": 604800,
    "y": 31557600, "yr": 31557600, "yrs": 31557600, "year": 31557600, "years": 31557600,
}


def parse_duration(value: Union[str, int]) -> timedelta:
    """
    토큰 만료 기간 문자열을 timedelta로 변환합니다.

    주니어 개발자님께: 단위 없이 숫자만 있으면 초 단위로 해석합니다.
    ms/s/m/h/d/w/y 단위와 "7 days", "2 hours" 같은 긴 이름, 소수("2.5h")를 지원합니다.
    1년은 365.25일로 계산합니다.
    예: "1d" -> 1일, "90m" -> 90분, "1y" -> 365.25일
    """
    match = _DURATION_PATTERN.match(str(value))
    if not match:
        raise ValueError(f"잘못된 기간 형식입니다: {value!r} (예: 3600, 30m, 12h, 7 days, 1y)")
    amount, unit = match.groups()
    seconds = float(amount) * _UNIT_SECONDS[(unit or "s").lower()]
    if seconds <= 0:
        raise ValueError("토큰 만료 기간은 0보다 커야 합니다")
    return timedelta(seconds=seconds)


class Settings(BaseSettings):
    APP_NAME: str = "gadget-shop"
    APP_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    API_PREFIX: str = "/api/v1"

    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "electronic-gadgets-shop"
    # 서버 선택 타임아웃(밀리초). 이 시간 안에 연결하지 못하면 에러가 발생합니다.
    MONGODB_TIMEOUT_MS: int = 5000

    JWT_SECRET: str = Field(..., description="JWT 토큰 서명에 사용되는 비밀키. 반드시 강력한 랜덤 문자열로 설정하세요.")
    JWT_ALGORITHM: str = "HS256"
    EXPIRES_IN: str = Field("1d", description="토큰 만료 기간 (예: 3600, 30m, 12h, 7 days, 1y)")

    # bcrypt cost factor. 값이 1 오를 때마다 해싱 시간이 2배가 됩니다.
    BCRYPT_ROUNDS: int = Field(10, ge=4, le=31)

    CORS_ALLOW_ORIGINS: str = "*"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @field_validator("EXPIRES_IN", mode="before")
    @classmethod
    def _check_expires_in(cls, value):
        parse_duration(value)
        return str(value).strip()

    @property
    def token_lifetime(self) -> timedelta:
        return parse_duration(self.EXPIRES_IN)

    @property
    def cors_origins(self) -> list:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


settings = Settings()
