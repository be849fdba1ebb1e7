"""AI 도메인 예외 클래스

원격 이미지 분류 모델 호출 중 발생할 수 있는 예외들을 정의합니다.
"""
from enum import Enum
from typing import Optional

from app.core.exceptions import (
    BadGatewayException,
    BadRequestException,
    ServiceUnavailableException,
)


class AIErrorCode(str, Enum):
    """AI 도메인 에러 코드"""

    INFERENCE_NOT_CONFIGURED = "INFERENCE_NOT_CONFIGURED"
    INFERENCE_FAILED = "INFERENCE_FAILED"
    INVALID_IMAGE_PAYLOAD = "INVALID_IMAGE_PAYLOAD"


class InferenceNotConfiguredException(ServiceUnavailableException):
    """추론 API 토큰이 설정되지 않은 경우

    클라이언트는 파일명 기반 분류(/api/waste/classify)로 대체해야 합니다.
    """

    def __init__(self):
        super().__init__(
            message="이미지 분류 모델이 설정되지 않았습니다.",
            error_code=AIErrorCode.INFERENCE_NOT_CONFIGURED,
            detail={"fallback": "/api/waste/classify"},
        )


class InferenceFailedException(BadGatewayException):
    """원격 추론 호출 실패"""

    def __init__(
        self,
        model_id: str,
        detail_msg: str,
        status_code: Optional[int] = None,
    ):
        detail: dict = {"model_id": model_id, "info": detail_msg[:500]}
        if status_code is not None:
            detail["upstream_status"] = status_code
        super().__init__(
            message="이미지 분류 모델 호출에 실패했습니다.",
            error_code=AIErrorCode.INFERENCE_FAILED,
            detail=detail,
        )


class InvalidImagePayloadException(BadRequestException):
    """이미지 데이터(base64) 디코딩 실패"""

    def __init__(self, detail_msg: str = "유효한 base64 이미지가 아닙니다."):
        super().__init__(
            message="이미지 데이터가 올바르지 않습니다.",
            error_code=AIErrorCode.INVALID_IMAGE_PAYLOAD,
            detail={"info": detail_msg},
        )
