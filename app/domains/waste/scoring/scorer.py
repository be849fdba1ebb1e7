"""폐기물 카테고리 스코어러

이미지 분류 모델의 예측 라벨(또는 파일명)을 재활용 / 유기성 / 일반 폐기물
세 카테고리 중 하나로 매핑합니다. 입출력 외의 부수효과가 없는 순수 계산이며,
키워드 테이블과 사용자 보정 맵은 호출 측에서 주입합니다.
"""

from typing import Iterable, Mapping, Optional

from app.domains.waste.scoring.rules import (
    CATEGORY_LABELS,
    DEFAULT_KEYWORDS,
    FILENAME_RULES,
    GENERAL_CONFIDENCE,
    KEYWORD_MATCH_BONUS,
    MAX_FILENAME_CONFIDENCE,
    MAX_PROPERTY_BONUS,
    SMART_LABELS,
    CategoryKeywordSet,
    FilenameRule,
)
from app.domains.waste.scoring.types import (
    Category,
    FilenameScore,
    ImageProperties,
    Prediction,
    ScoringResult,
)

# 동점일 때 앞쪽 카테고리가 우선
CATEGORY_ORDER: tuple[Category, ...] = (
    Category.RECYCLABLE,
    Category.ORGANIC,
    Category.GENERAL,
)

_MB = 1024 * 1024


class CategoryScorer:
    """예측 라벨 → 폐기물 카테고리 스코어러

    예측마다 다음 순서로 하나의 버킷에만 점수를 더합니다:
    1. 사용자 보정 라벨과 정확히 일치: probability × override_weight
    2. 유기성 키워드 포함: probability
    3. 재활용 키워드 포함: probability
    4. 그 외: probability × unknown_weight (일반 폐기물에 약한 투표)

    최고 점수가 min_confidence 미만이면 일반 폐기물로 분류합니다.
    """

    def __init__(
        self,
        keywords: CategoryKeywordSet = DEFAULT_KEYWORDS,
        filename_rules: tuple[FilenameRule, ...] = FILENAME_RULES,
        override_weight: float = 1.25,
        unknown_weight: float = 0.5,
        min_confidence: float = 0.25,
    ):
        """
        Args:
            keywords: 라벨 분류용 키워드 세트
            filename_rules: 파일명 분류 규칙 (앞쪽 규칙이 동점 시 우선)
            override_weight: 사용자 보정 라벨 가중치 (기본 1.25)
            unknown_weight: 미매칭 라벨의 일반 폐기물 가중치 (기본 0.5)
            min_confidence: 저신뢰 게이트 임계값 (기본 0.25)
        """
        self.keywords = keywords
        self.filename_rules = filename_rules
        self.override_weight = override_weight
        self.unknown_weight = unknown_weight
        self.min_confidence = min_confidence

    def score_predictions(
        self,
        predictions: Iterable[Prediction],
        corrections: Optional[Mapping[str, Category]] = None,
    ) -> ScoringResult:
        """예측 목록으로 카테고리 결정

        Args:
            predictions: (label, probability) 목록, 확률 높은 순
            corrections: 소문자 라벨 → 카테고리 사용자 보정 맵

        Returns:
            ScoringResult: 분류 결과 (빈 목록이면 일반 폐기물, 신뢰도 0)
        """
        preds = list(predictions)
        corrections = corrections or {}

        scores: dict[Category, float] = {c: 0.0 for c in CATEGORY_ORDER}
        voters: dict[Category, list[str]] = {c: [] for c in CATEGORY_ORDER}

        for pred in preds:
            label = pred.label.lower()

            corrected = corrections.get(label)
            if corrected is not None:
                scores[corrected] += pred.probability * self.override_weight
                voters[corrected].append(label)
                continue

            matched = self.keywords.match(label)
            if matched is not None:
                category, _ = matched
                scores[category] += pred.probability
                voters[category].append(label)
                continue

            scores[Category.GENERAL] += pred.probability * self.unknown_weight
            voters[Category.GENERAL].append(label)

        # sorted는 안정 정렬이므로 동점이면 CATEGORY_ORDER 순서 유지
        ranked = sorted(CATEGORY_ORDER, key=lambda c: scores[c], reverse=True)
        category = ranked[0]
        best_score = scores[category]

        if best_score < self.min_confidence:
            category = Category.GENERAL

        return ScoringResult(
            category=category,
            confidence=best_score,
            top_label=_top_label(preds),
            scores=scores,
            matched_labels=voters[category],
        )

    def score_filename(
        self,
        filename: Optional[str],
        properties: Optional[ImageProperties] = None,
    ) -> FilenameScore:
        """파일명 키워드로 카테고리 결정 (모델 사용 불가 시 Fallback)

        Args:
            filename: 업로드 파일명
            properties: 파일 크기 / 해상도 정보 (선택)

        Returns:
            FilenameScore: 분류 결과 (신뢰도는 퍼센트, 최대 95)
        """
        name = (filename or "").lower()

        best_key = "general"
        best_confidence = GENERAL_CONFIDENCE
        best_keywords: list[str] = []

        for rule in self.filename_rules:
            matched = [k for k in rule.keywords if k in name]
            if not matched:
                continue

            confidence = min(
                rule.base_confidence + KEYWORD_MATCH_BONUS * len(matched),
                MAX_FILENAME_CONFIDENCE,
            )
            if confidence > best_confidence:
                best_key = rule.key
                best_confidence = confidence
                best_keywords = matched

        if properties is not None:
            best_confidence = min(
                best_confidence + image_property_bonus(properties),
                MAX_FILENAME_CONFIDENCE,
            )

        return FilenameScore(
            category=best_key,
            confidence=best_confidence,
            matched_keywords=best_keywords,
            label=smart_label(best_key, best_keywords),
        )


def image_property_bonus(properties: ImageProperties) -> int:
    """이미지 부가 정보 기반 신뢰도 보너스 (0~20)

    - 파일 크기 0.1MB~10MB: +5, 1MB~5MB: +5 추가
    - 가로/세로 200px 이상: +5
    - 가로세로 비율 0.5~2 (과도하게 늘어나지 않음): +3
    """
    bonus = 0

    if properties.file_size_bytes:
        size_mb = properties.file_size_bytes / _MB
        if 0.1 < size_mb < 10:
            bonus += 5
        if 1 < size_mb < 5:
            bonus += 5

    if properties.width is not None and properties.height is not None:
        if properties.width >= 200 and properties.height >= 200:
            bonus += 5
        if properties.height > 0:
            aspect_ratio = properties.width / properties.height
            if 0.5 < aspect_ratio < 2:
                bonus += 3

    return min(bonus, MAX_PROPERTY_BONUS)


def smart_label(rule_key: str, matched_keywords: list[str]) -> str:
    """매칭된 첫 키워드로 표시용 라벨 생성"""
    if not matched_keywords:
        return CATEGORY_LABELS.get(rule_key, CATEGORY_LABELS["general"])

    primary = matched_keywords[0]
    return SMART_LABELS.get(primary, f"{primary.capitalize()} Item")


def _top_label(preds: list[Prediction]) -> str:
    """확률이 가장 높은 라벨 (동점이면 앞쪽 우선)"""
    if not preds:
        return ""
    top = preds[0]
    for pred in preds[1:]:
        if pred.probability > top.probability:
            top = pred
    return top.label


default_scorer = CategoryScorer()


def score_from_predictions(
    predictions: Iterable[Prediction],
    corrections: Optional[Mapping[str, Category]] = None,
) -> ScoringResult:
    """기본 스코어러로 예측 목록 분류"""
    return default_scorer.score_predictions(predictions, corrections)


def score_from_filename(
    filename: Optional[str],
    properties: Optional[ImageProperties] = None,
) -> FilenameScore:
    """기본 스코어러로 파일명 분류"""
    return default_scorer.score_filename(filename, properties)
