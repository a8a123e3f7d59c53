# 인증 라우터
# - 회원가입: POST /api/v1/register
# - 로그인: POST /api/v1/login

from fastapi import APIRouter, Depends, status

from ...schemas.response_schema import MessageResponse, TokenResponse
from ...schemas.user_schema import LoginRequest, RegisterRequest
from ...services.auth_service import AuthService, get_auth_service

router = APIRouter(tags=["auth"])

@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED, summary="회원가입 (이메일 중복 체크 포함)")
async def register(payload: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    await service.register(payload.name, payload.email, payload.password)
    return {"success": True, "message": "User registered successfully"}

@router.post("/login", response_model=TokenResponse, summary="로그인 (JWT 토큰 발급)")
async def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    token = await service.login(payload.email, payload.password)
    return {"success": True, "message": "Login successful", "token": token}
