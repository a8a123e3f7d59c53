# 요청 로깅 미들웨어
# - 메서드, 경로, 상태 코드, 처리 시간을 로그로 남김
# - 응답 헤더에 X-Response-Time 추가

import logging
import time
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(f"{request.method} {request.url.path} failed ({duration_ms:.2f}ms)")
            raise

        duration_ms = (time.time() - start_time) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.2f}ms)")
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        return response
