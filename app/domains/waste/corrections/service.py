"""라벨 보정 서비스

사용자별 라벨 보정(UserCorrectionMap)을 관리합니다.
"""

from typing import Union

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.domains.waste.corrections.repository import CorrectionRepository
from app.domains.waste.exceptions import (
    CorrectionNotFoundException,
    InvalidCategoryException,
)
from app.domains.waste.models import LabelCorrection
from app.domains.waste.scoring.types import Category

logger = get_logger(__name__)


class CorrectionService:
    """라벨 보정 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = CorrectionRepository(session)

    async def record_correction(
        self,
        user_id: int,
        label: str,
        category: Union[Category, str],
    ) -> LabelCorrection:
        """라벨 보정 기록 (같은 라벨은 덮어씀)

        Args:
            user_id: 사용자 ID
            label: 모델 라벨 (소문자로 정규화하여 저장)
            category: 보정 카테고리

        Returns:
            저장된 보정 객체

        Raises:
            InvalidCategoryException: 지원하지 않는 카테고리인 경우
        """
        try:
            category = Category(category)
        except ValueError:
            raise InvalidCategoryException(str(category))

        correction = await self.repository.upsert(
            user_id=user_id, label=label.lower(), category=category.value
        )

        logger.info(
            "Label correction recorded",
            extra={
                "request_id": get_request_id(),
                "user_id": user_id,
                "label": correction.label,
                "category": category.value,
            },
        )
        return correction

    async def get_correction_map(self, user_id: int) -> dict[str, Category]:
        """점수 계산용 보정 맵 조회 (소문자 라벨 → 카테고리)"""
        corrections = await self.repository.get_list(user_id)

        mapping: dict[str, Category] = {}
        for correction in corrections:
            try:
                mapping[correction.label] = Category(correction.category)
            except ValueError:
                logger.warning(
                    "Ignoring label correction with unknown category",
                    extra={
                        "user_id": user_id,
                        "label": correction.label,
                        "category": correction.category,
                    },
                )
        return mapping

    async def list_corrections(self, user_id: int) -> list[LabelCorrection]:
        """사용자 보정 목록 조회"""
        return list(await self.repository.get_list(user_id))

    async def delete_correction(self, user_id: int, label: str) -> None:
        """라벨 보정 삭제

        Raises:
            CorrectionNotFoundException: 보정이 존재하지 않는 경우
        """
        deleted = await self.repository.delete(user_id, label.lower())
        if not deleted:
            raise CorrectionNotFoundException(
                user_id=user_id, label=label.lower()
            )

        logger.info(
            "Label correction deleted",
            extra={
                "request_id": get_request_id(),
                "user_id": user_id,
                "label": label.lower(),
            },
        )
