"""Facade over the profile REST API using httpx."""

from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from api.v1.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from core.exceptions import TransportError
from domain.entities.envelope import ApiResponse
from domain.entities.profile import Profile, ProfileDraft
from domain.services.profile_service import NOT_FOUND_MESSAGE

logger = structlog.get_logger()

USERS_PATH = "/api/users"


def _to_entity(payload: Mapping[str, Any]) -> Profile:
    return Profile(**ProfileResponse.model_validate(payload).model_dump())


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(x) for x in error["loc"])
    return f"Invalid {field}: {error['msg']}"


class HttpProfileGateway:
    """Implementation of IProfileFacade against ``/api/users``.

    Returns the same envelopes and messages as the in-process service.
    Connection failures and unexpected statuses raise ``TransportError``.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get_all_profiles(self) -> ApiResponse[list[Profile]]:
        response = await self._send("GET", USERS_PATH)
        self._raise_for_status(response)
        profiles = [_to_entity(item) for item in response.json()]
        return ApiResponse.ok(profiles, "Users retrieved successfully")

    async def get_profile_by_id(self, profile_id: str) -> ApiResponse[Profile | None]:
        response = await self._send("GET", f"{USERS_PATH}/{profile_id}")
        self._raise_for_status(response)
        payload = response.json()
        if payload is None:
            return ApiResponse.fail(None, NOT_FOUND_MESSAGE)
        return ApiResponse.ok(_to_entity(payload), "User found")

    async def create_profile(self, draft: ProfileDraft) -> ApiResponse[Profile | None]:
        try:
            body = ProfileCreate(**asdict(draft)).model_dump(mode="json", by_alias=True)
        except ValidationError as e:
            return ApiResponse.fail(None, _first_error(e))
        response = await self._send("POST", USERS_PATH, json=body)
        if rejection := self._rejection_message(response):
            return ApiResponse.fail(None, rejection)
        self._raise_for_status(response)
        return ApiResponse.ok(_to_entity(response.json()), "User created successfully")

    async def update_profile(
        self, profile_id: str, changes: Mapping[str, Any]
    ) -> ApiResponse[Profile | None]:
        try:
            body = ProfileUpdate(**changes).model_dump(
                mode="json", by_alias=True, exclude_unset=True
            )
        except ValidationError as e:
            return ApiResponse.fail(None, _first_error(e))
        response = await self._send("PUT", f"{USERS_PATH}/{profile_id}", json=body)
        if response.status_code == httpx.codes.NOT_FOUND:
            return ApiResponse.fail(None, NOT_FOUND_MESSAGE)
        if rejection := self._rejection_message(response):
            return ApiResponse.fail(None, rejection)
        self._raise_for_status(response)
        return ApiResponse.ok(_to_entity(response.json()), "User updated successfully")

    async def delete_profile(self, profile_id: str) -> ApiResponse[bool]:
        response = await self._send("DELETE", f"{USERS_PATH}/{profile_id}")
        if response.status_code == httpx.codes.NOT_FOUND:
            return ApiResponse.fail(False, NOT_FOUND_MESSAGE)
        self._raise_for_status(response)
        return ApiResponse.ok(True, response.json().get("message", "User deleted successfully"))

    async def search_profiles(self, query: str) -> ApiResponse[list[Profile]]:
        response = await self._send("GET", USERS_PATH, params={"q": query})
        self._raise_for_status(response)
        profiles = [_to_entity(item) for item in response.json()]
        return ApiResponse.ok(profiles, f"Found {len(profiles)} users")

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("profile_api_unreachable", method=method, url=url, error=str(e))
            raise TransportError(f"Profile API request failed: {e}") from e

    @staticmethod
    def _rejection_message(response: httpx.Response) -> str | None:
        """Server message for a rejected payload (400/422), if this is one."""
        if response.status_code not in (
            httpx.codes.BAD_REQUEST,
            httpx.codes.UNPROCESSABLE_ENTITY,
        ):
            return None
        try:
            return str(response.json()["message"])
        except (ValueError, KeyError, TypeError):
            return "Invalid profile data"

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return
        raise TransportError(
            f"Profile API returned {response.status_code} for "
            f"{response.request.method} {response.request.url.path}",
            status_code=response.status_code,
        )
