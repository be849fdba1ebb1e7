"""Waste 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import BadRequestException, NotFoundException


class WasteErrorCode(str, Enum):
    """Waste 도메인 에러 코드"""

    CORRECTION_NOT_FOUND = "CORRECTION_NOT_FOUND"
    INVALID_CATEGORY = "INVALID_CATEGORY"


class CorrectionNotFoundException(NotFoundException):
    """라벨 보정을 찾을 수 없는 경우"""

    def __init__(self, user_id: int | None = None, label: str | None = None):
        detail: dict = {}
        if user_id is not None:
            detail["user_id"] = user_id
        if label is not None:
            detail["label"] = label
        super().__init__(
            message="라벨 보정을 찾을 수 없습니다.",
            error_code=WasteErrorCode.CORRECTION_NOT_FOUND,
            detail=detail,
        )


class InvalidCategoryException(BadRequestException):
    """지원하지 않는 카테고리인 경우"""

    def __init__(self, category: str):
        super().__init__(
            message="지원하지 않는 카테고리입니다.",
            error_code=WasteErrorCode.INVALID_CATEGORY,
            detail={"category": category},
        )
