"""시작 시 마이그레이션 확인

서버 시작 시 Alembic revision을 비교하고, 설정에 따라 head까지 업그레이드합니다.
"""

from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def sync_database_url(url: str) -> str:
    """asyncpg URL을 alembic용 psycopg2 URL로 변환"""
    return url.replace("+asyncpg", "+psycopg2")


def get_alembic_config() -> Config:
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option(
        "sqlalchemy.url", sync_database_url(settings.database_url)
    )
    return config


def get_current_revision() -> Optional[str]:
    """DB에 기록된 revision (연결 실패 시 None)"""
    engine = create_engine(sync_database_url(settings.database_url))
    try:
        with engine.connect() as conn:
            rev = MigrationContext.configure(conn).get_current_revision()
            return str(rev) if rev else None
    except SQLAlchemyError as e:
        logger.warning(f"현재 마이그레이션 버전 조회 실패: {e}")
        return None
    finally:
        engine.dispose()


def get_head_revision() -> Optional[str]:
    script = ScriptDirectory.from_config(get_alembic_config())
    head = script.get_current_head()
    return str(head) if head else None


def run_migrations_on_startup(auto_migrate: bool = True) -> None:
    """revision 비교 후 필요하면 업그레이드

    Args:
        auto_migrate: False면 상태만 로그로 남김

    Raises:
        RuntimeError: 프로덕션에서 마이그레이션 실패
    """
    try:
        current = get_current_revision()
        head = get_head_revision()

        if current == head:
            logger.info(f"✅ 마이그레이션 상태: 최신 (revision: {current})")
            return

        logger.warning(f"⚠️ 마이그레이션 필요 ({current} → {head})")
        if auto_migrate:
            command.upgrade(get_alembic_config(), "head")
            logger.info(f"✅ 마이그레이션 완료 (revision: {head})")

    except Exception as e:
        logger.error(f"❌ 마이그레이션 실패: {e}")
        if settings.is_production:
            raise RuntimeError("프로덕션 환경에서 마이그레이션 실패") from e
        logger.warning("⚠️ 개발 환경이므로 서버를 계속 시작합니다.")
