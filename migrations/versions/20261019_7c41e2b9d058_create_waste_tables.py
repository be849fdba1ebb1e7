"""create_waste_tables

Revision ID: 7c41e2b9d058
Revises:
Create Date: 2026-10-19 10:12:44.105213

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "7c41e2b9d058"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """label_corrections, classification_records 테이블 생성"""
    op.create_table(
        "label_corrections",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False, comment="사용자 ID"),
        sa.Column(
            "label", sa.String(length=255), nullable=False, comment="소문자 라벨"
        ),
        sa.Column(
            "category",
            sa.String(length=20),
            nullable=False,
            comment="보정 카테고리",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="생성 일시",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="수정 일시",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "label", name="uq_label_corrections_user_label"
        ),
    )
    op.create_index(
        "ix_label_corrections_user_id", "label_corrections", ["user_id"]
    )

    op.create_table(
        "classification_records",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False, comment="사용자 ID"),
        sa.Column(
            "source",
            sa.String(length=20),
            nullable=False,
            comment="분류 방식 (filename, predictions, model)",
        ),
        sa.Column(
            "filename",
            sa.String(length=255),
            nullable=True,
            comment="업로드 파일명",
        ),
        sa.Column(
            "label", sa.String(length=255), nullable=False, comment="표시 라벨"
        ),
        sa.Column(
            "category",
            sa.String(length=20),
            nullable=False,
            comment="분류 카테고리",
        ),
        sa.Column(
            "confidence", sa.Float(), nullable=False, comment="신뢰도 (퍼센트)"
        ),
        sa.Column(
            "eco_points",
            sa.Integer(),
            nullable=False,
            comment="획득 에코 포인트",
        ),
        sa.Column(
            "tips",
            postgresql.ARRAY(sa.String()),
            nullable=False,
            comment="배출 요령",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="분류 일시",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_classification_records_user_id",
        "classification_records",
        ["user_id"],
    )
    op.create_index(
        "ix_classification_records_created_at",
        "classification_records",
        ["created_at"],
    )


def downgrade() -> None:
    """다운그레이드 마이그레이션"""
    op.drop_index(
        "ix_classification_records_created_at",
        table_name="classification_records",
    )
    op.drop_index(
        "ix_classification_records_user_id",
        table_name="classification_records",
    )
    op.drop_table("classification_records")
    op.drop_index(
        "ix_label_corrections_user_id", table_name="label_corrections"
    )
    op.drop_table("label_corrections")
