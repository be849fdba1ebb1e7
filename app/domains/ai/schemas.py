"""AI 도메인 스키마 정의
"""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from app.core.schemas import CamelSchema


class ImageClassifyRequest(CamelSchema):
    """이미지 분류 요청

    imageBase64는 순수 base64 문자열 또는 data URL(`data:image/png;base64,...`)을 허용합니다.
    """

    model_config = ConfigDict(protected_namespaces=())

    image_base64: str = Field(..., min_length=1, description="base64 인코딩 이미지")
    mime: str = Field("image/png", description="이미지 MIME 타입")
    model_id: Optional[str] = Field(
        None, max_length=255, description="추론 모델 ID (미지정 시 기본 모델)"
    )
    filename: Optional[str] = Field(None, max_length=255, description="파일명")
    user_id: Optional[int] = Field(
        None, gt=0, description="사용자 ID (지정 시 보정 반영 및 이력 기록)"
    )

    @field_validator("mime")
    @classmethod
    def mime_is_image(cls, v: str) -> str:
        if not v.startswith("image/"):
            raise ValueError("mime must be an image type")
        return v
