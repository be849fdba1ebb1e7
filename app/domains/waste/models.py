"""Waste 도메인 데이터 모델

- LabelCorrection: 사용자별 라벨 보정 (라벨 → 카테고리)
- ClassificationRecord: 분류 이력 (에코 포인트 / 통계용)
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    ARRAY,
    DateTime,
    Float,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class LabelCorrection(Base):
    """사용자 라벨 보정

    사용자가 직접 지정한 (소문자 라벨 → 카테고리) 매핑입니다.
    같은 사용자/라벨 조합은 하나만 존재하며 마지막 보정이 우선합니다.
    """

    __tablename__ = "label_corrections"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "label", name="uq_label_corrections_user_label"
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True, comment="사용자 ID"
    )
    label: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="소문자 라벨"
    )
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, comment="보정 카테고리"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
        comment="수정 일시",
    )

    def __repr__(self) -> str:
        return (
            f"<LabelCorrection(user_id={self.user_id}, label={self.label!r}, "
            f"category={self.category!r})>"
        )


class ClassificationRecord(Base):
    """폐기물 분류 이력"""

    __tablename__ = "classification_records"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True, comment="사용자 ID"
    )
    source: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="분류 방식 (filename, predictions, model)",
    )
    filename: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="업로드 파일명"
    )
    label: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="표시 라벨"
    )
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, comment="분류 카테고리"
    )
    confidence: Mapped[float] = mapped_column(
        Float, nullable=False, comment="신뢰도 (퍼센트)"
    )
    eco_points: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, comment="획득 에코 포인트"
    )
    tips: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list, comment="배출 요령"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
        comment="분류 일시",
    )

    def __repr__(self) -> str:
        return (
            f"<ClassificationRecord(id={self.id}, user_id={self.user_id}, "
            f"category={self.category!r}, eco_points={self.eco_points})>"
        )
