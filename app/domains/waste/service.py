"""Waste 도메인 서비스

스코어러, 사용자 보정, 분류 이력을 묶어 분류 결과를 만드는 비즈니스 로직 계층입니다.
"""

from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.core.utils.datetime import now_utc
from app.domains.waste.corrections.service import CorrectionService
from app.domains.waste.history.service import HistoryService
from app.domains.waste.rewards import calculate_eco_points, confidence_to_percent
from app.domains.waste.schemas import (
    ClassifyResponse,
    FilenameClassifyRequest,
    PredictionsClassifyResponse,
)
from app.domains.waste.scoring.scorer import CategoryScorer, default_scorer
from app.domains.waste.scoring.tips import build_tips
from app.domains.waste.scoring.types import ImageProperties, Prediction

logger = get_logger(__name__)


class WasteService:
    """폐기물 분류 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        scorer: CategoryScorer = default_scorer,
    ):
        self.scorer = scorer
        self.corrections = CorrectionService(session)
        self.history = HistoryService(session)

    async def classify_filename(
        self, request: FilenameClassifyRequest
    ) -> ClassifyResponse:
        """파일명 기반 분류 (모델 사용 불가 시 Fallback)

        Args:
            request: 파일명 및 이미지 부가 정보

        Returns:
            ClassifyResponse: 분류 결과 (신뢰도는 퍼센트)
        """
        properties = ImageProperties(
            file_size_bytes=request.file_size,
            width=request.width,
            height=request.height,
        )
        result = self.scorer.score_filename(request.filename, properties)
        category = result.waste_category

        tips = build_tips(category, basis=result.matched_keywords, fallback=True)
        eco_points = calculate_eco_points(category, result.confidence)

        logger.info(
            "Waste classified",
            extra={
                "request_id": get_request_id(),
                "source": "filename",
                "category": category.value,
                "confidence": result.confidence,
            },
        )

        if request.user_id is not None:
            await self.history.record(
                user_id=request.user_id,
                source="filename",
                filename=request.filename,
                label=result.label,
                category=category,
                confidence=float(result.confidence),
                eco_points=eco_points,
                tips=tips,
            )

        return ClassifyResponse(
            label=result.label,
            confidence=result.confidence,
            category=category,
            tips=tips,
            eco_points=eco_points,
            timestamp=now_utc(),
            matched_keywords=result.matched_keywords,
        )

    async def classify_predictions(
        self,
        predictions: Sequence[Prediction],
        user_id: Optional[int] = None,
        filename: Optional[str] = None,
        source: str = "predictions",
    ) -> PredictionsClassifyResponse:
        """모델 예측 기반 분류

        user_id가 주어지면 해당 사용자의 라벨 보정을 반영하고 이력을 기록합니다.

        Args:
            predictions: 모델 예측 (확률 높은 순)
            user_id: 사용자 ID (선택)
            filename: 업로드 파일명 (선택, 이력 기록용)
            source: 이력에 기록할 분류 방식

        Returns:
            PredictionsClassifyResponse: 분류 결과 (신뢰도는 원점수)
        """
        corrections = (
            await self.corrections.get_correction_map(user_id)
            if user_id is not None
            else {}
        )
        result = self.scorer.score_predictions(predictions, corrections)

        tips = build_tips(result.category, basis=result.matched_labels)
        eco_points = calculate_eco_points(
            result.category, confidence_to_percent(result.confidence)
        )

        logger.info(
            "Waste classified",
            extra={
                "request_id": get_request_id(),
                "source": source,
                "category": result.category.value,
                "confidence": result.confidence,
                "corrections_applied": len(corrections),
            },
        )

        if user_id is not None:
            await self.history.record(
                user_id=user_id,
                source=source,
                filename=filename,
                label=result.top_label or result.category.value,
                category=result.category,
                confidence=confidence_to_percent(result.confidence),
                eco_points=eco_points,
                tips=tips,
            )

        return PredictionsClassifyResponse(
            label=result.top_label,
            confidence=result.confidence,
            category=result.category,
            tips=tips,
            eco_points=eco_points,
            timestamp=now_utc(),
            matched_keywords=result.matched_labels,
            top_label=result.top_label,
            scores=result.scores,
            raw=list(predictions),
        )
