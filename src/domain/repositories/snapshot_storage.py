"""Snapshot storage protocol."""

from typing import Protocol


class ISnapshotStorage(Protocol):
    """Key-value persistence for serialized record sets.

    Implementations raise ``StorageError`` when the backend cannot be read
    or written.
    """

    async def load(self, key: str) -> str | None:
        """Get the payload stored under key, if any."""
        ...

    async def save(self, key: str, payload: str) -> None:
        """Overwrite the payload stored under key."""
        ...
