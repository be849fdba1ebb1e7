"""요청/응답 로깅 미들웨어"""

from typing import Callable, cast

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import get_logger
from app.core.middlewares.context import set_request_id
from app.core.utils.time import measure_time

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# 로깅 제외 경로
EXCLUDE_PATHS = {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청 ID 발급, 처리 시간 측정, 응답 상태 로깅"""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        if request.url.path in EXCLUDE_PATHS:
            return cast(Response, await call_next(request))

        request_id = set_request_id(request.headers.get(REQUEST_ID_HEADER))
        route = f"{request.method} {request.url.path}"

        with measure_time() as timer:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    f"[{request_id}] ✗ {route}",
                    extra={"request_id": request_id},
                )
                raise

        elapsed_ms = timer["elapsed_ms"]
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed_ms:.2f}ms"

        log = logger.info if response.status_code < 400 else logger.warning
        log(
            f"[{request_id}] {route} → {response.status_code} "
            f"({elapsed_ms:.2f}ms)",
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
            },
        )

        return cast(Response, response)
