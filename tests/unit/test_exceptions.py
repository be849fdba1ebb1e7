"""예외 단위 테스트"""

from app.core.exceptions import (
    BadGatewayException,
    BadRequestException,
    ErrorCode,
    InternalServerException,
    NotFoundException,
    ServiceUnavailableException,
    UnauthorizedException,
)
from app.domains.ai.exceptions import (
    AIErrorCode,
    InferenceFailedException,
    InferenceNotConfiguredException,
)
from app.domains.waste.exceptions import (
    CorrectionNotFoundException,
    InvalidCategoryException,
    WasteErrorCode,
)


class TestGlobalExceptions:
    """전역 예외 테스트"""

    def test_not_found_exception_custom(self):
        exc = NotFoundException(
            message="이력을 찾을 수 없습니다.",
            detail={"record_id": 123},
        )

        assert exc.status_code == 404
        assert exc.error_code == ErrorCode.NOT_FOUND
        assert exc.detail_info == {"record_id": 123}

    def test_status_codes(self):
        assert BadRequestException().status_code == 400
        assert UnauthorizedException().status_code == 401
        assert InternalServerException().status_code == 500
        assert BadGatewayException().status_code == 502
        assert ServiceUnavailableException().status_code == 503

    def test_default_detail_is_empty_dict(self):
        assert BadGatewayException().detail_info == {}


class TestDomainExceptions:
    """도메인 예외 테스트"""

    def test_correction_not_found(self):
        exc = CorrectionNotFoundException(user_id=1, label="banana")

        assert exc.status_code == 404
        assert exc.error_code == WasteErrorCode.CORRECTION_NOT_FOUND
        assert exc.detail_info == {"user_id": 1, "label": "banana"}

    def test_invalid_category(self):
        exc = InvalidCategoryException("Lava")

        assert exc.status_code == 400
        assert exc.detail_info == {"category": "Lava"}

    def test_inference_not_configured_points_to_fallback(self):
        exc = InferenceNotConfiguredException()

        assert exc.status_code == 503
        assert exc.error_code == AIErrorCode.INFERENCE_NOT_CONFIGURED
        assert exc.detail_info["fallback"] == "/api/waste/classify"

    def test_inference_failed_without_status(self):
        exc = InferenceFailedException(model_id="org/model", detail_msg="boom")

        assert exc.status_code == 502
        assert exc.detail_info == {"model_id": "org/model", "info": "boom"}
