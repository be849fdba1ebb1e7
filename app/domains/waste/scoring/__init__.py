"""폐기물 카테고리 스코어링 모듈

구조:
    - types.py: Category, Prediction, ScoringResult, FilenameScore 등
    - rules.py: 키워드 세트 및 파일명 분류 규칙
    - scorer.py: CategoryScorer (예측 라벨 / 파일명 분류)
    - tips.py: 카테고리별 배출 요령
"""

from app.domains.waste.scoring.rules import DEFAULT_KEYWORDS, CategoryKeywordSet
from app.domains.waste.scoring.scorer import (
    CategoryScorer,
    default_scorer,
    image_property_bonus,
    score_from_filename,
    score_from_predictions,
)
from app.domains.waste.scoring.tips import build_tips, tips_for_category
from app.domains.waste.scoring.types import (
    Category,
    FilenameScore,
    ImageProperties,
    Prediction,
    ScoringResult,
)

__all__ = [
    "Category",
    "Prediction",
    "ScoringResult",
    "FilenameScore",
    "ImageProperties",
    "CategoryKeywordSet",
    "DEFAULT_KEYWORDS",
    "CategoryScorer",
    "default_scorer",
    "score_from_predictions",
    "score_from_filename",
    "image_property_bonus",
    "tips_for_category",
    "build_tips",
]
