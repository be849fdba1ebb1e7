"""에코 포인트 계산"""

import math

from app.domains.waste.scoring.types import Category

# 카테고리별 기본 에코 포인트 (신뢰도 100% 기준)
ECO_POINTS: dict[Category, int] = {
    Category.RECYCLABLE: 10,
    Category.ORGANIC: 15,
    Category.GENERAL: 2,
}


def confidence_to_percent(confidence: float) -> float:
    """예측 원점수(0~1.25+)를 0~100 퍼센트로 변환

    사용자 보정 가중치로 1.0을 넘는 원점수는 100%로 잘라냅니다.
    """
    if math.isnan(confidence):
        return 0.0
    return min(max(confidence, 0.0), 1.0) * 100


def calculate_eco_points(category: Category, confidence_percent: float) -> int:
    """에코 포인트 계산

    Args:
        category: 분류 카테고리
        confidence_percent: 신뢰도 (퍼센트, 0~100)

    Returns:
        int: floor(기본 포인트 × 신뢰도 / 100)
    """
    percent = min(max(confidence_percent, 0.0), 100.0)
    return math.floor(ECO_POINTS[category] * percent / 100)
