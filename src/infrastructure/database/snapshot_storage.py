"""SQLAlchemy implementation of snapshot storage."""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import StorageError
from infrastructure.database.models import StorageEntryModel


class SQLAlchemySnapshotStorage:
    """SQLAlchemy implementation of ISnapshotStorage.

    Each save runs in its own session and commits before returning.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def load(self, key: str) -> str | None:
        """Get the payload stored under key."""
        try:
            async with self._session_factory() as session:
                stmt = select(StorageEntryModel.value).where(StorageEntryModel.key == key)
                result = await session.execute(stmt)
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read '{key}': {e}") from e

    async def save(self, key: str, payload: str) -> None:
        """Insert or overwrite the payload stored under key."""
        try:
            async with self._session_factory() as session:
                model = await session.get(StorageEntryModel, key)
                if model is None:
                    session.add(StorageEntryModel(key=key, value=payload))
                else:
                    model.value = payload
                await session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to write '{key}': {e}") from e
