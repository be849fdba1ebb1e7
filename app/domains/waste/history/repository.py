"""분류 이력 리포지토리"""

from typing import Sequence, cast

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.waste.models import ClassificationRecord


class HistoryRepository:
    """분류 이력 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, record: ClassificationRecord) -> ClassificationRecord:
        """분류 이력 생성"""
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def get_list(
        self, user_id: int, skip: int = 0, limit: int = 20
    ) -> Sequence[ClassificationRecord]:
        """사용자 분류 이력 조회 (최신순)

        Args:
            user_id: 사용자 ID
            skip: 건너뛸 레코드 수
            limit: 조회할 최대 레코드 수

        Returns:
            분류 이력 목록
        """
        query = (
            select(ClassificationRecord)
            .where(ClassificationRecord.user_id == user_id)
            .order_by(
                ClassificationRecord.created_at.desc(),
                ClassificationRecord.id.desc(),
            )
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return cast(Sequence[ClassificationRecord], result.scalars().all())

    async def count(self, user_id: int) -> int:
        """사용자 분류 이력 수 조회"""
        query = select(func.count(ClassificationRecord.id)).where(
            ClassificationRecord.user_id == user_id
        )
        result = await self.session.execute(query)
        return int(result.scalar_one())

    async def get_all(self, user_id: int) -> Sequence[ClassificationRecord]:
        """통계 계산용 전체 이력 조회"""
        query = (
            select(ClassificationRecord)
            .where(ClassificationRecord.user_id == user_id)
            .order_by(ClassificationRecord.created_at.desc())
        )
        result = await self.session.execute(query)
        return cast(Sequence[ClassificationRecord], result.scalars().all())
