"""
Pytest configuration and fixtures for Pin Map tests.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from pinmap.config import Settings, get_settings
from pinmap.db.base import Base
from pinmap.db.session import enable_sqlite_foreign_keys, get_db
from pinmap.main import app
import pinmap.models  # noqa: F401


@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path):
    """Create a test database engine backed by a throwaway SQLite file."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
    )
    enable_sqlite_foreign_keys(engine.sync_engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with no admin token, so mutating routes are open."""
    return Settings(ADMIN_TOKEN=None, SEED_DATABASE=False)


@pytest_asyncio.fixture(scope="function")
async def asgi_transport(db_session, test_settings) -> AsyncGenerator[ASGITransport, None]:
    """ASGI transport into the app, wired to the test session and settings."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    yield ASGITransport(app=app)

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def client(asgi_transport) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(transport=asgi_transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_pin_data() -> dict[str, Any]:
    """Sample pin body for testing."""
    return {
        "title": "Clinic Expansion",
        "position": [52.1, 19.0],
        "mainTag": "health",
        "supportingTags": [],
        "content": [
            {"type": "text", "value": "New wing with twenty beds.", "title": "Description"},
        ],
    }


@pytest.fixture
def sample_boundary_data() -> dict[str, Any]:
    return {
        "name": "Mazovia",
        "coordinates": [[53.4, 19.3], [53.4, 23.1], [51.0, 23.1], [51.0, 19.3]],
        "minZoom": 6,
        "maxZoom": 16,
    }
