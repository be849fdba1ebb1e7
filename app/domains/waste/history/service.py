"""분류 이력 서비스"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.domains.waste.history.repository import HistoryRepository
from app.domains.waste.history.stats import compute_statistics
from app.domains.waste.history.types import ClassificationStats
from app.domains.waste.models import ClassificationRecord
from app.domains.waste.scoring.types import Category

logger = get_logger(__name__)


class HistoryService:
    """분류 이력 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = HistoryRepository(session)

    async def record(
        self,
        user_id: int,
        source: str,
        label: str,
        category: Category,
        confidence: float,
        eco_points: int,
        tips: list[str],
        filename: Optional[str] = None,
    ) -> ClassificationRecord:
        """분류 이력 기록

        Args:
            user_id: 사용자 ID
            source: 분류 방식 (filename, predictions, model)
            label: 표시 라벨
            category: 분류 카테고리
            confidence: 신뢰도 (퍼센트)
            eco_points: 획득 에코 포인트
            tips: 배출 요령
            filename: 업로드 파일명 (선택)

        Returns:
            생성된 이력 객체
        """
        record = await self.repository.create(
            ClassificationRecord(
                user_id=user_id,
                source=source,
                filename=filename,
                label=label,
                category=category.value,
                confidence=confidence,
                eco_points=eco_points,
                tips=tips,
            )
        )

        logger.info(
            "Classification recorded",
            extra={
                "request_id": get_request_id(),
                "user_id": user_id,
                "record_id": record.id,
                "category": category.value,
                "eco_points": eco_points,
            },
        )
        return record

    async def get_history(
        self, user_id: int, page: int = 1, size: int = 20
    ) -> tuple[list[ClassificationRecord], int]:
        """분류 이력 조회 (최신순)

        Returns:
            (이력 목록, 전체 이력 수) 튜플
        """
        skip = (page - 1) * size
        records = await self.repository.get_list(
            user_id, skip=skip, limit=size
        )
        total = await self.repository.count(user_id)
        return list(records), total

    async def get_statistics(self, user_id: int) -> ClassificationStats:
        """분류 통계 조회"""
        records = await self.repository.get_all(user_id)
        return compute_statistics(records)
