"""Profile service facade: envelopes and simulated latency over the store."""

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from core.exceptions import ProfileValidationError
from domain.entities.envelope import ApiResponse
from domain.entities.profile import Profile, ProfileDraft
from domain.repositories.profile_repository import IProfileRepository

logger = structlog.get_logger()

NOT_FOUND_MESSAGE = "User not found"


@dataclass(frozen=True, slots=True)
class LatencyProfile:
    """Artificial delay (seconds) applied before each facade call returns."""

    get_all: float = 0.3
    get_by_id: float = 0.2
    create: float = 0.5
    update: float = 0.5
    delete: float = 0.4
    search: float = 0.25

    @classmethod
    def none(cls) -> "LatencyProfile":
        return cls(get_all=0, get_by_id=0, create=0, update=0, delete=0, search=0)


class ProfileService:
    """Service layer the directory client depends on.

    Expected outcomes (not found, invalid input) come back as envelopes with
    ``success=False``. Anything else raised by the store propagates.
    """

    def __init__(
        self,
        repository: IProfileRepository,
        latency: LatencyProfile | None = None,
    ) -> None:
        self._repository = repository
        self._latency = latency or LatencyProfile()

    async def get_all_profiles(self) -> ApiResponse[list[Profile]]:
        await self._delay(self._latency.get_all)
        profiles = await self._repository.get_all()
        return ApiResponse.ok(profiles, "Users retrieved successfully")

    async def get_profile_by_id(self, profile_id: str) -> ApiResponse[Profile | None]:
        await self._delay(self._latency.get_by_id)
        profile = await self._repository.get_by_id(profile_id)
        if profile is None:
            return ApiResponse.fail(None, NOT_FOUND_MESSAGE)
        return ApiResponse.ok(profile, "User found")

    async def create_profile(self, draft: ProfileDraft) -> ApiResponse[Profile | None]:
        await self._delay(self._latency.create)
        try:
            profile = await self._repository.create(draft)
        except ProfileValidationError as e:
            logger.info("profile_create_rejected", reason=e.message)
            return ApiResponse.fail(None, e.message)
        return ApiResponse.ok(profile, "User created successfully")

    async def update_profile(
        self, profile_id: str, changes: Mapping[str, Any]
    ) -> ApiResponse[Profile | None]:
        await self._delay(self._latency.update)
        try:
            profile = await self._repository.update(profile_id, changes)
        except ProfileValidationError as e:
            logger.info("profile_update_rejected", profile_id=profile_id, reason=e.message)
            return ApiResponse.fail(None, e.message)
        if profile is None:
            return ApiResponse.fail(None, NOT_FOUND_MESSAGE)
        return ApiResponse.ok(profile, "User updated successfully")

    async def delete_profile(self, profile_id: str) -> ApiResponse[bool]:
        await self._delay(self._latency.delete)
        if not await self._repository.delete(profile_id):
            return ApiResponse.fail(False, NOT_FOUND_MESSAGE)
        return ApiResponse.ok(True, "User deleted successfully")

    async def search_profiles(self, query: str) -> ApiResponse[list[Profile]]:
        await self._delay(self._latency.search)
        profiles = await self._repository.search(query)
        return ApiResponse.ok(profiles, f"Found {len(profiles)} users")

    @staticmethod
    async def _delay(seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)
