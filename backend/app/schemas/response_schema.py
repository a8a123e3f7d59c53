# 공통 응답 스키마
# - 모든 응답은 {success, message, data?} 형태의 envelope

from typing import Any, Optional
from pydantic import BaseModel

class MessageResponse(BaseModel):
    success: bool = True
    message: str

class TokenResponse(MessageResponse):
    token: str

class DataResponse(MessageResponse):
    data: Optional[Any] = None
