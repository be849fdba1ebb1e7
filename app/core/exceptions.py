from enum import Enum
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """전역 에러 코드"""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    BAD_REQUEST = "BAD_REQUEST"
    BAD_GATEWAY = "BAD_GATEWAY"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    # 인증
    INVALID_API_KEY = "INVALID_API_KEY"


class BaseAPIException(HTTPException):
    """기본 API 예외 클래스

    하위 클래스는 HTTP 상태와 기본 코드/메시지만 클래스 속성으로 지정합니다.
    """

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error_code: str = ErrorCode.INTERNAL_ERROR
    default_message: str = "서버 내부 오류가 발생했습니다."

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        detail: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.error_code = error_code or self.default_error_code
        self.message = message or self.default_message
        self.detail_info = detail or {}
        super().__init__(
            status_code=status_code or self.http_status, detail=self.message
        )


class BadRequestException(BaseAPIException):
    """400 Bad Request"""

    http_status = status.HTTP_400_BAD_REQUEST
    default_error_code = ErrorCode.BAD_REQUEST
    default_message = "잘못된 요청입니다."


class UnauthorizedException(BaseAPIException):
    """401 Unauthorized"""

    http_status = status.HTTP_401_UNAUTHORIZED
    default_error_code = ErrorCode.UNAUTHORIZED
    default_message = "인증이 필요합니다."


class NotFoundException(BaseAPIException):
    """404 Not Found"""

    http_status = status.HTTP_404_NOT_FOUND
    default_error_code = ErrorCode.NOT_FOUND
    default_message = "리소스를 찾을 수 없습니다."


class InternalServerException(BaseAPIException):
    """500 Internal Server Error"""


class BadGatewayException(BaseAPIException):
    """502 Bad Gateway (외부 서비스 호출 실패)"""

    http_status = status.HTTP_502_BAD_GATEWAY
    default_error_code = ErrorCode.BAD_GATEWAY
    default_message = "외부 서비스 호출에 실패했습니다."


class ServiceUnavailableException(BaseAPIException):
    """503 Service Unavailable"""

    http_status = status.HTTP_503_SERVICE_UNAVAILABLE
    default_error_code = ErrorCode.SERVICE_UNAVAILABLE
    default_message = "서비스를 사용할 수 없습니다."


def error_response(
    status_code: int,
    code: str,
    message: str,
    detail: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """에러 응답 생성 (success=false 공통 구조)"""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
            "error": {"code": code, "message": message, "detail": detail},
        },
    )


async def base_exception_handler(
    request: Request, exc: BaseAPIException
) -> JSONResponse:
    return error_response(
        exc.status_code, exc.error_code, exc.message, exc.detail_info
    )


async def http_exception_handler(
    request: Request, exc: HTTPException
) -> JSONResponse:
    return error_response(
        exc.status_code, ErrorCode.INTERNAL_ERROR, str(exc.detail)
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 검증 실패 (422)"""
    return error_response(
        422,
        ErrorCode.VALIDATION_ERROR,
        "요청 값이 올바르지 않습니다.",
        {"errors": jsonable_encoder(exc.errors())},
    )


async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """처리되지 않은 예외 (500)"""
    logger.exception(f"Unhandled exception: {request.method} {request.url.path}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL_ERROR,
        "서버 내부 오류가 발생했습니다.",
    )
