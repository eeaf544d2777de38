"""Profile facade protocol consumed by the directory controller."""

from collections.abc import Mapping
from typing import Any, Protocol

from domain.entities.envelope import ApiResponse
from domain.entities.profile import Profile, ProfileDraft


class IProfileFacade(Protocol):
    """Envelope-returning boundary between the controller and a profile backend.

    Implemented in-process by ``ProfileService`` and over HTTP by
    ``HttpProfileGateway``.
    """

    async def get_all_profiles(self) -> ApiResponse[list[Profile]]:
        ...

    async def get_profile_by_id(self, profile_id: str) -> ApiResponse[Profile | None]:
        ...

    async def create_profile(self, draft: ProfileDraft) -> ApiResponse[Profile | None]:
        ...

    async def update_profile(
        self, profile_id: str, changes: Mapping[str, Any]
    ) -> ApiResponse[Profile | None]:
        ...

    async def delete_profile(self, profile_id: str) -> ApiResponse[bool]:
        ...

    async def search_profiles(self, query: str) -> ApiResponse[list[Profile]]:
        ...
