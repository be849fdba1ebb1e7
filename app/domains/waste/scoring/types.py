"""분류 점수 계산 관련 타입 정의"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """폐기물 분류 카테고리

    Attributes:
        RECYCLABLE: 재활용 가능
        ORGANIC: 음식물/유기성 폐기물 (퇴비화 가능)
        GENERAL: 일반 폐기물
    """

    RECYCLABLE = "Recyclable"
    ORGANIC = "Organic"
    GENERAL = "General Waste"

    @classmethod
    def from_rule_key(cls, key: str) -> "Category":
        """파일명 규칙 키(organic / recyclable / general)를 카테고리로 변환"""
        return _RULE_KEY_TO_CATEGORY.get(key, cls.GENERAL)


_RULE_KEY_TO_CATEGORY = {
    "recyclable": Category.RECYCLABLE,
    "organic": Category.ORGANIC,
    "general": Category.GENERAL,
}


class Prediction(BaseModel):
    """이미지 분류 모델의 예측 결과 (label, probability)

    라벨이나 확률이 누락된 입력도 허용합니다.
    - label 누락: 빈 문자열 (어떤 키워드와도 매칭되지 않음)
    - probability 누락: 0 (점수에 기여하지 않음)
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    label: str = ""
    probability: float = 0.0

    @field_validator("label", mode="before")
    @classmethod
    def coerce_label(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)

    @field_validator("probability", mode="before")
    @classmethod
    def coerce_probability(cls, v: Any) -> float:
        if v is None:
            return 0.0
        return v

    @field_validator("probability")
    @classmethod
    def clamp_negative(cls, v: float) -> float:
        # 음수 확률은 점수에 기여하지 않음
        return max(v, 0.0)


class ScoringResult(BaseModel):
    """예측 목록 기반 분류 결과

    Attributes:
        category: 최종 카테고리
        confidence: 승리한 카테고리의 누적 점수 (1.0을 넘을 수 있음)
        top_label: 확률이 가장 높은 원본 라벨
        scores: 카테고리별 누적 점수
        matched_labels: 최종 카테고리에 투표한 라벨 목록
    """

    category: Category
    confidence: float = Field(..., ge=0.0)
    top_label: str
    scores: dict[Category, float]
    matched_labels: list[str] = Field(default_factory=list)


class ImageProperties(BaseModel):
    """파일명 기반 분류 시 참고하는 이미지 부가 정보"""

    file_size_bytes: Optional[int] = Field(None, ge=0)
    width: Optional[int] = Field(None, ge=0)
    height: Optional[int] = Field(None, ge=0)


class FilenameScore(BaseModel):
    """파일명 기반 (Fallback) 분류 결과

    Attributes:
        category: 규칙 키 (organic, recyclable, general)
        confidence: 신뢰도 (0~95, 퍼센트 단위)
        matched_keywords: 파일명에서 매칭된 키워드 목록
        label: 매칭된 키워드로 만든 사람이 읽기 쉬운 라벨
    """

    category: str
    confidence: int
    matched_keywords: list[str] = Field(default_factory=list)
    label: str

    @property
    def waste_category(self) -> Category:
        return Category.from_rule_key(self.category)
