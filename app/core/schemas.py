"""공통 API 응답 스키마

모든 응답은 `{success, message, data}` 구조이며, 목록 응답은 `meta`(페이지 정보)를,
에러 응답은 `error`(code, message, detail)를 추가로 가집니다.

Note:
    Generic 모델은 classmethod 팩토리에 제약이 있으므로
    create_response / create_list_response 함수를 사용합니다.
"""

import math
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")

DEFAULT_MESSAGE = "요청이 성공적으로 처리되었습니다."


class CamelSchema(BaseModel):
    """camelCase JSON 필드를 사용하는 스키마 베이스

    프론트엔드 계약(ecoPoints, topLabel 등)에 맞춰 camelCase로 직렬화하고,
    입력은 snake_case / camelCase 모두 허용합니다.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 응답"""

    success: bool = True
    message: str = DEFAULT_MESSAGE
    data: Optional[DataT] = None


class PageMeta(BaseModel):
    """페이지네이션 메타 정보"""

    total: int = Field(..., description="전체 아이템 수")
    page: int = Field(..., description="현재 페이지")
    size: int = Field(..., description="페이지 크기")
    total_pages: int = Field(..., description="전체 페이지 수")
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, total: int, page: int, size: int) -> "PageMeta":
        total_pages = math.ceil(total / size) if size > 0 else 0
        return cls(
            total=total,
            page=page,
            size=size,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


class ListAPIResponse(BaseModel, Generic[DataT]):
    """목록 데이터 응답 (페이지네이션 포함)"""

    success: bool = True
    message: str = DEFAULT_MESSAGE
    data: list[DataT] = Field(default_factory=list)
    meta: PageMeta


def create_response(
    data: Optional[DataT] = None,
    message: str = DEFAULT_MESSAGE,
    success: bool = True,
) -> APIResponse[DataT]:
    return APIResponse(success=success, message=message, data=data)


def create_list_response(
    data: list[DataT],
    total: int,
    page: int,
    size: int,
    message: str = DEFAULT_MESSAGE,
) -> ListAPIResponse[DataT]:
    """목록 응답 생성

    Example::

        records, total = await service.get_history(user_id, page=1, size=20)
        return create_list_response(data=records, total=total, page=1, size=20)
    """
    return ListAPIResponse(
        success=True,
        message=message,
        data=data,
        meta=PageMeta.build(total=total, page=page, size=size),
    )


class ErrorDetail(BaseModel):
    """에러 상세 정보"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(default=None, description="추가 정보")


class ErrorResponse(BaseModel):
    """에러 응답 (OpenAPI 문서용)

    Example::

        {
            "success": false,
            "message": "이미지 분류 모델이 설정되지 않았습니다.",
            "error": {
                "code": "INFERENCE_NOT_CONFIGURED",
                "message": "이미지 분류 모델이 설정되지 않았습니다.",
                "detail": {"fallback": "/api/waste/classify"}
            }
        }
    """

    success: bool = False
    message: str
    error: ErrorDetail
