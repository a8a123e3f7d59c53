# 예외 핸들러
# - 도메인 예외(ShopServiceError) -> 해당 상태 코드 + {success: false, message}
# - 요청 바디 검증 실패 -> 400
# - 그 외 모든 예외 -> 500 "Internal server error" (상세 내용은 서버 로그에만)

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import ShopServiceError, StorageUnavailableError
from ..schemas.response_schema import MessageResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    body = MessageResponse(success=False, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def shop_error_handler(request: Request, exc: ShopServiceError) -> JSONResponse:
    if isinstance(exc, StorageUnavailableError):
        logger.error(f"[{request.method} {request.url.path}] 저장소 오류: {exc.operation}")
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 첫 번째 에러만 "필드: 메시지" 형태로 알려줍니다
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"[{request.method} {request.url.path}] 처리되지 않은 예외: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShopServiceError, shop_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
