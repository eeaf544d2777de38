"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting and simulated latency, keep storage in memory
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SIMULATED_LATENCY_ENABLED"] = "false"
os.environ["STORAGE_BACKEND"] = "memory"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.services.profile_service import LatencyProfile, ProfileService
from infrastructure.database.models import Base
from infrastructure.database.session import build_session_factory
from infrastructure.store.memory_storage import InMemorySnapshotStorage
from infrastructure.store.profile_store import ProfileStore

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine with the schema in place."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return build_session_factory(engine)


@pytest.fixture
def storage() -> InMemorySnapshotStorage:
    """Empty in-memory snapshot storage."""
    return InMemorySnapshotStorage()


@pytest.fixture
async def store(storage: InMemorySnapshotStorage) -> ProfileStore:
    """Initialized store, seeded with the sample profiles."""
    store = ProfileStore(storage)
    await store.initialize()
    return store


@pytest.fixture
def service(store: ProfileStore) -> ProfileService:
    """Service facade over the test store with no simulated latency."""
    return ProfileService(store, LatencyProfile.none())


@pytest.fixture
async def client(store: ProfileStore) -> AsyncGenerator[AsyncClient, None]:
    """Async test client for an app backed by the test store."""
    from main import create_app

    app = create_app(profile_store=store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
