"""공통 의존성 함수"""

import secrets

from fastapi import Header

from app.core.config import settings
from app.core.exceptions import ErrorCode, UnauthorizedException


async def verify_internal_api_key(
    x_internal_api_key: str = Header(..., alias="X-Internal-Api-Key")
) -> None:
    """내부 API Key 검증 (프론트엔드 BFF 통신용)

    Raises:
        UnauthorizedException: API Key가 유효하지 않은 경우
    """
    if not secrets.compare_digest(
        x_internal_api_key.encode(), settings.internal_api_key.encode()
    ):
        raise UnauthorizedException(
            message="유효하지 않은 API 키입니다.",
            error_code=ErrorCode.INVALID_API_KEY,
        )
