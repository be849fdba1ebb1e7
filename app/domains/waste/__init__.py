"""Waste 도메인 모듈

이미지 분류 모델의 예측 라벨(또는 파일명)을 폐기물 카테고리로 분류합니다.

구조:
    - scoring/: 카테고리 스코어러 (순수 계산)
    - corrections/: 사용자 라벨 보정 (로컬 저장소 / DB)
    - history/: 분류 이력 및 통계
    - models.py: SQLAlchemy 모델 (LabelCorrection, ClassificationRecord)
    - schemas.py: Pydantic 스키마
    - rewards.py: 에코 포인트 계산
    - service.py: 분류 비즈니스 로직
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.waste.exceptions import (
    CorrectionNotFoundException,
    InvalidCategoryException,
    WasteErrorCode,
)
from app.domains.waste.models import ClassificationRecord, LabelCorrection
from app.domains.waste.scoring import Category, Prediction
from app.domains.waste.service import WasteService

__all__ = [
    "Category",
    "Prediction",
    "LabelCorrection",
    "ClassificationRecord",
    "WasteService",
    "WasteErrorCode",
    "CorrectionNotFoundException",
    "InvalidCategoryException",
]
