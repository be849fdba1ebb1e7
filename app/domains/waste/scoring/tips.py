"""카테고리별 배출 요령(tips) 생성"""

from typing import Optional, Sequence

from app.domains.waste.scoring.types import Category

CATEGORY_TIPS: dict[Category, tuple[str, str, str]] = {
    Category.ORGANIC: (
        "Remove stickers or plastic ties",
        "Compost if available",
        "Keep liquids minimal",
    ),
    Category.RECYCLABLE: (
        "Rinse to remove residue",
        "Flatten cardboard if possible",
        "Place in appropriate bin",
    ),
    Category.GENERAL: (
        "If unsure, dispose in general waste",
        "Avoid contaminating recyclables",
        "Check local guidelines",
    ),
}

FALLBACK_DISCLAIMER = (
    "This is a fallback classification - use better lighting for more accuracy"
)


def tips_for_category(category: Category) -> list[str]:
    """카테고리별 기본 배출 요령 3개 반환"""
    return list(CATEGORY_TIPS[category])


def build_tips(
    category: Category,
    basis: Optional[Sequence[str]] = None,
    fallback: bool = False,
) -> list[str]:
    """배출 요령 생성

    Args:
        category: 분류 카테고리
        basis: 분류 근거가 된 키워드/라벨 (None이면 근거 문구 생략)
        fallback: 파일명 기반 Fallback 분류 여부 (True면 안내 문구 추가)

    Returns:
        배출 요령 목록
    """
    tips = tips_for_category(category)
    if basis is not None:
        tips.append(
            f"Classification based on: {', '.join(basis) or 'general analysis'}"
        )
    if fallback:
        tips.append(FALLBACK_DISCLAIMER)
    return tips
