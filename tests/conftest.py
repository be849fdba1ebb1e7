"""테스트 설정"""

import itertools
import json
import os
from typing import Generator
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio
from docker import from_env
from docker.errors import DockerException
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from app.core.config import Settings, settings
from app.core.database import Base, get_db
from app.core.utils.datetime import now_utc
from app.domains.ai.inference import (
    HuggingFaceInferenceClient,
    get_inference_client,
)
from app.main import app

# Hugging Face 응답 예시 (banana 이미지)
HF_BANANA_RESPONSE = [
    {"label": "banana", "score": 0.91},
    {"label": "lemon", "score": 0.04},
    {"label": "plastic bag", "score": 0.02},
]


def _is_docker_available() -> bool:
    """로컬 환경에서 Docker 접근 가능 여부 확인"""
    if os.getenv("FORCE_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return True
    if os.getenv("SKIP_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return False

    try:
        client = from_env()
        client.ping()
        return True
    except DockerException:
        return False


DOCKER_AVAILABLE = _is_docker_available()


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "real_inference: 실제 Hugging Face API 호출 테스트 (토큰 필요)"
    )


@pytest.fixture(scope="session")
def user_id_factory():
    """테스트마다 겹치지 않는 사용자 ID 팩토리 (UTC ms 타임스탬프 기준)"""
    start = int(now_utc().timestamp() * 1000) % 2_000_000_000
    counter = itertools.count(start=start)

    def _factory() -> int:
        return next(counter)

    return _factory


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """PostgreSQL 테스트 컨테이너"""
    if not DOCKER_AVAILABLE:
        pytest.skip("Docker is not available; skipping container-based tests.")

    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def test_database_url(postgres_container: PostgresContainer) -> str:
    """asyncpg용 테스트 데이터베이스 URL"""
    return str(
        postgres_container.get_connection_url().replace(
            "postgresql+psycopg2://", "postgresql+asyncpg://"
        )
    )


# NOTE:
# pytest-asyncio는 테스트마다 독립적인 event loop를 생성하므로
# async fixture는 모두 function 스코프로 유지
@pytest_asyncio.fixture
async def db_session(test_database_url: str):
    """테스트 데이터베이스 세션 (테스트마다 스키마 재생성)"""
    engine = create_async_engine(test_database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_maker() as session:
        yield session
        await session.rollback()

    await engine.dispose()


def make_inference_client(
    handler=None, **overrides
) -> HuggingFaceInferenceClient:
    """MockTransport 기반 추론 클라이언트 생성

    handler를 생략하면 HF_BANANA_RESPONSE를 반환합니다.
    """

    def default_handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=json.dumps(HF_BANANA_RESPONSE))

    config = Settings(hf_api_token="hf_test_token", **overrides)
    return HuggingFaceInferenceClient(
        config, transport=httpx.MockTransport(handler or default_handler)
    )


@pytest.fixture
def inference_client_factory():
    """MockTransport 추론 클라이언트 팩토리"""
    return make_inference_client


@pytest.fixture
def inference_client() -> HuggingFaceInferenceClient:
    return make_inference_client()


@pytest_asyncio.fixture
async def client(db_session, inference_client):
    """비동기 테스트 클라이언트 (테스트 DB, Mock 추론 API 사용)"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_inference_client] = lambda: inference_client

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api_client(inference_client):
    """DB 없이 사용하는 테스트 클라이언트

    세션은 MagicMock이므로 userId 없이 호출하는 분류 API처럼
    DB에 접근하지 않는 경로만 검증합니다.
    """

    async def override_get_db():
        yield MagicMock(spec=AsyncSession)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_inference_client] = lambda: inference_client

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def api_key_header():
    """Internal API Key 헤더"""
    return {"X-Internal-Api-Key": settings.internal_api_key}
