"""Unit tests for SQLAlchemySnapshotStorage."""

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from core.exceptions import StorageError
from infrastructure.database.snapshot_storage import SQLAlchemySnapshotStorage
from infrastructure.store.profile_store import ProfileStore


class TestSQLAlchemySnapshotStorage:
    @pytest.mark.asyncio
    async def test_load_missing_key_returns_none(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        storage = SQLAlchemySnapshotStorage(session_factory)

        assert await storage.load("userProfiles") is None

    @pytest.mark.asyncio
    async def test_save_then_overwrite(self, session_factory: async_sessionmaker[AsyncSession]):
        storage = SQLAlchemySnapshotStorage(session_factory)

        await storage.save("userProfiles", "[]")
        await storage.save("userProfiles", '[{"id": "1"}]')

        assert await storage.load("userProfiles") == '[{"id": "1"}]'

    @pytest.mark.asyncio
    async def test_missing_table_raises_storage_error(self, engine: AsyncEngine):
        from infrastructure.database.models import Base

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        storage = SQLAlchemySnapshotStorage(async_sessionmaker(bind=engine, class_=AsyncSession))

        with pytest.raises(StorageError):
            await storage.load("userProfiles")

    @pytest.mark.asyncio
    async def test_store_round_trip_through_database(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        store = ProfileStore(SQLAlchemySnapshotStorage(session_factory))
        await store.initialize()
        await store.update("1", {"location": "London"})

        restarted = ProfileStore(SQLAlchemySnapshotStorage(session_factory))
        await restarted.initialize()

        assert (await restarted.get_by_id("1")).location == "London"
        assert await restarted.get_all() == await store.get_all()
