"""라벨 보정 리포지토리

사용자별 라벨 보정 데이터 접근 계층입니다.
"""

from typing import Optional, Sequence, cast

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.utils.datetime import now_utc
from app.domains.waste.models import LabelCorrection


class CorrectionRepository:
    """라벨 보정 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: int, label: str) -> Optional[LabelCorrection]:
        """사용자/라벨로 보정 조회

        Args:
            user_id: 사용자 ID
            label: 소문자 라벨

        Returns:
            보정 객체 또는 None
        """
        query = select(LabelCorrection).where(
            LabelCorrection.user_id == user_id,
            LabelCorrection.label == label,
        )
        result = await self.session.execute(query)
        return cast(Optional[LabelCorrection], result.scalar_one_or_none())

    async def get_list(self, user_id: int) -> Sequence[LabelCorrection]:
        """사용자의 전체 보정 목록 조회 (라벨 순)"""
        query = (
            select(LabelCorrection)
            .where(LabelCorrection.user_id == user_id)
            .order_by(LabelCorrection.label)
        )
        result = await self.session.execute(query)
        return cast(Sequence[LabelCorrection], result.scalars().all())

    async def upsert(
        self, user_id: int, label: str, category: str
    ) -> LabelCorrection:
        """보정 생성 또는 덮어쓰기

        Args:
            user_id: 사용자 ID
            label: 소문자 라벨
            category: 보정 카테고리 값

        Returns:
            저장된 보정 객체
        """
        # PostgreSQL INSERT ... ON CONFLICT DO UPDATE (UPSERT)
        stmt = insert(LabelCorrection).values(
            user_id=user_id,
            label=label,
            category=category,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "label"],
            set_={"category": category, "updated_at": now_utc()},
        )

        await self.session.execute(stmt)
        await self.session.flush()

        correction = await self.get(user_id, label)
        if correction is not None:
            # ON CONFLICT 갱신값 반영
            await self.session.refresh(correction)
        return cast(LabelCorrection, correction)

    async def delete(self, user_id: int, label: str) -> bool:
        """보정 삭제

        Returns:
            bool: 삭제 여부
        """
        stmt = delete(LabelCorrection).where(
            LabelCorrection.user_id == user_id,
            LabelCorrection.label == label,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return bool(result.rowcount)
