"""Dependency injection factories for API v1."""

from fastapi import Request

from core.config import Settings, settings
from domain.repositories.snapshot_storage import ISnapshotStorage
from infrastructure.database.session import async_session_factory
from infrastructure.database.snapshot_storage import SQLAlchemySnapshotStorage
from infrastructure.store.memory_storage import InMemorySnapshotStorage
from infrastructure.store.profile_store import ProfileStore


def build_snapshot_storage(config: Settings = settings) -> ISnapshotStorage:
    """Select the snapshot backend named by ``STORAGE_BACKEND``."""
    if config.storage_backend == "memory":
        return InMemorySnapshotStorage()
    if config.storage_backend == "database":
        return SQLAlchemySnapshotStorage(async_session_factory)
    raise ValueError(f"Unknown storage backend: {config.storage_backend}")


def build_profile_store(config: Settings = settings) -> ProfileStore:
    """Create the process-wide store. Call ``initialize()`` before use."""
    return ProfileStore(build_snapshot_storage(config), storage_key=config.storage_key)


def get_profile_store(request: Request) -> ProfileStore:
    """Get the store created during application startup."""
    store: ProfileStore = request.app.state.profile_store
    return store
