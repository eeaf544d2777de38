"""Profile store protocol."""

from collections.abc import Mapping
from typing import Any, Protocol

from domain.entities.profile import Profile, ProfileDraft


class IProfileRepository(Protocol):
    """Repository interface for the canonical Profile record set."""

    async def get_all(self) -> list[Profile]:
        """Get all profiles in insertion order."""
        ...

    async def get_by_id(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def create(self, draft: ProfileDraft) -> Profile:
        """Create a new profile."""
        ...

    async def update(self, id: str, changes: Mapping[str, Any]) -> Profile | None:
        """Merge changes into a profile, or return None if it does not exist."""
        ...

    async def delete(self, id: str) -> bool:
        """Delete a profile and return success status."""
        ...

    async def search(self, query: str) -> list[Profile]:
        """Get profiles whose searchable fields contain the query."""
        ...
