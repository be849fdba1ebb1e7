"""Waste 도메인 스키마 정의

프론트엔드 계약에 맞춰 JSON 필드는 camelCase로 주고받습니다.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.core.schemas import CamelSchema
from app.domains.waste.scoring.types import Category, Prediction


class FilenameClassifyRequest(CamelSchema):
    """파일명 기반 분류 요청"""

    filename: str = Field(..., min_length=1, max_length=255, description="파일명")
    file_size: Optional[int] = Field(None, ge=0, description="파일 크기 (bytes)")
    width: Optional[int] = Field(None, ge=0, description="이미지 가로 (px)")
    height: Optional[int] = Field(None, ge=0, description="이미지 세로 (px)")
    user_id: Optional[int] = Field(
        None, gt=0, description="사용자 ID (지정 시 이력 기록)"
    )

    @field_validator("filename")
    @classmethod
    def filename_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("filename must not be blank")
        return v


class PredictionsClassifyRequest(CamelSchema):
    """모델 예측 기반 분류 요청"""

    predictions: list[Prediction] = Field(
        ..., max_length=100, description="모델 예측 (확률 높은 순)"
    )
    filename: Optional[str] = Field(None, max_length=255, description="파일명")
    user_id: Optional[int] = Field(
        None, gt=0, description="사용자 ID (지정 시 보정 반영 및 이력 기록)"
    )


class ClassifyResponse(CamelSchema):
    """분류 응답

    Attributes:
        label: 표시 라벨
        confidence: 신뢰도 (파일명 분류는 퍼센트, 예측 분류는 원점수)
        category: 분류 카테고리
        tips: 배출 요령
        eco_points: 획득 에코 포인트
        timestamp: 분류 시각
    """

    label: str
    confidence: float
    category: Category
    tips: list[str]
    eco_points: int
    timestamp: datetime
    matched_keywords: list[str] = Field(default_factory=list)


class PredictionsClassifyResponse(ClassifyResponse):
    """예측 기반 분류 응답"""

    top_label: str
    scores: dict[Category, float]
    raw: list[Prediction] = Field(default_factory=list)


class CorrectionRequest(CamelSchema):
    """라벨 보정 요청"""

    user_id: int = Field(..., gt=0, description="사용자 ID")
    label: str = Field(..., min_length=1, max_length=255, description="모델 라벨")
    category: Category = Field(..., description="보정 카테고리")

    @field_validator("label")
    @classmethod
    def label_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("label must not be blank")
        return v


class CorrectionResponse(CamelSchema):
    """라벨 보정 응답"""

    label: str
    category: Category
    created_at: datetime
    updated_at: Optional[datetime] = None


class HistoryRecordResponse(CamelSchema):
    """분류 이력 응답"""

    id: int
    source: str
    filename: Optional[str] = None
    label: str
    category: Category
    confidence: float
    eco_points: int
    tips: list[str] = Field(default_factory=list)
    created_at: datetime
