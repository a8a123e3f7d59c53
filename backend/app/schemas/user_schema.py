# 요청 스키마 정의 (Pydantic 모델)
# - email은 형식 검증 없이 문자열로 받음 (로그인 실패는 항상 같은 401)

from pydantic import BaseModel

class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str

class LoginRequest(BaseModel):
    email: str
    password: str
