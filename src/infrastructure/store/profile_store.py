"""Persisted, in-memory implementation of the profile repository."""

import asyncio
from collections.abc import Mapping
from dataclasses import asdict, replace
from datetime import datetime, timedelta
from typing import Any
from uuid import uuid4

import structlog
from pydantic import ValidationError

from core.exceptions import ProfileValidationError, StorageError
from domain.entities.profile import (
    EDITABLE_FIELDS,
    REQUIRED_FIELDS,
    Profile,
    ProfileDraft,
    utcnow,
)
from domain.repositories.snapshot_storage import ISnapshotStorage
from infrastructure.store.bootstrap import bootstrap_profiles
from infrastructure.store.codec import decode_profiles, encode_profiles, normalize_fields

logger = structlog.get_logger()

DEFAULT_STORAGE_KEY = "userProfiles"


class ProfileStore:
    """Implementation of IProfileRepository over a snapshot storage.

    The in-memory list is the source of truth for the process lifetime.
    Every mutation rewrites the whole set under ``storage_key``; a failed
    write is logged and the in-memory change is kept. All operations are
    serialized through one lock so overlapping rewrites cannot lose updates.
    """

    def __init__(
        self,
        storage: ISnapshotStorage,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._storage = storage
        self._storage_key = storage_key
        self._profiles: list[Profile] = []
        self._lock = asyncio.Lock()
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Load the persisted set, seeding sample profiles if there is none."""
        async with self._lock:
            if self._initialized:
                return
            loaded = await self._load()
            if loaded is None:
                self._profiles = bootstrap_profiles()
                logger.info("profile_store_seeded", count=len(self._profiles))
                await self._persist()
            else:
                self._profiles = loaded
                logger.info("profile_store_loaded", count=len(loaded))
            self._initialized = True

    async def get_all(self) -> list[Profile]:
        """Get all profiles in insertion order."""
        async with self._lock:
            self._require_initialized()
            return [replace(profile) for profile in self._profiles]

    async def get_by_id(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        async with self._lock:
            self._require_initialized()
            profile = self._find(id)
            return replace(profile) if profile else None

    async def create(self, draft: ProfileDraft) -> Profile:
        """Create a new profile with a fresh id and equal timestamps."""
        fields = asdict(draft)
        for name in REQUIRED_FIELDS:
            _require_text(name, fields[name])
        fields = _normalize(fields)

        async with self._lock:
            self._require_initialized()
            now = utcnow()
            profile = Profile(
                id=self._new_id(),
                created_at=now,
                updated_at=now,
                **fields,
            )
            self._profiles.append(profile)
            await self._persist()
            logger.info("profile_created", profile_id=profile.id)
            return replace(profile)

    async def update(self, id: str, changes: Mapping[str, Any]) -> Profile | None:
        """Merge supplied fields over an existing profile.

        Fields missing from ``changes`` keep their values. Returns None when
        no profile has the given id.
        """
        unknown = sorted(set(changes) - set(EDITABLE_FIELDS))
        if unknown:
            raise ProfileValidationError(
                unknown[0], f"Unknown profile field: {', '.join(unknown)}"
            )
        for name in REQUIRED_FIELDS:
            if name in changes:
                _require_text(name, changes[name])
        changes = _normalize(changes)

        async with self._lock:
            self._require_initialized()
            profile = self._find(id)
            if profile is None:
                return None
            for name, value in changes.items():
                setattr(profile, name, value)
            profile.updated_at = _advance(profile.updated_at)
            await self._persist()
            logger.info("profile_updated", profile_id=id, fields=sorted(changes))
            return replace(profile)

    async def delete(self, id: str) -> bool:
        """Delete a profile permanently. Returns False if it does not exist."""
        async with self._lock:
            self._require_initialized()
            profile = self._find(id)
            if profile is None:
                return False
            self._profiles.remove(profile)
            await self._persist()
            logger.info("profile_deleted", profile_id=id)
            return True

    async def search(self, query: str) -> list[Profile]:
        """Case-insensitive, trimmed substring search.

        A blank query matches every profile.
        """
        normalized = query.strip().lower()
        async with self._lock:
            self._require_initialized()
            return [replace(p) for p in self._profiles if p.matches(normalized)]

    def _find(self, id: str) -> Profile | None:
        return next((p for p in self._profiles if p.id == id), None)

    def _new_id(self) -> str:
        while True:
            candidate = str(uuid4())
            if self._find(candidate) is None:
                return candidate

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("ProfileStore not initialized. Call initialize() first.")

    async def _load(self) -> list[Profile] | None:
        """Read the persisted set; None if missing or unreadable."""
        try:
            payload = await self._storage.load(self._storage_key)
        except StorageError as e:
            logger.error("profile_store_load_failed", error=e.message)
            return None
        if not payload:
            return None
        try:
            return decode_profiles(payload)
        except ValidationError as e:
            logger.warning(
                "profile_store_snapshot_corrupt",
                key=self._storage_key,
                error_count=e.error_count(),
            )
            return None

    async def _persist(self) -> None:
        """Write the full set; failures are logged, never raised."""
        try:
            await self._storage.save(self._storage_key, encode_profiles(self._profiles))
        except StorageError as e:
            logger.error(
                "profile_store_save_failed",
                key=self._storage_key,
                error=e.message,
            )


_FIELD_LABELS = {
    "full_name": "Full name",
    "email": "Email",
    "phone_number": "Phone number",
    "bio": "Bio",
    "avatar_url": "Avatar URL",
    "date_of_birth": "Date of birth",
    "location": "Location",
}


def _require_text(name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ProfileValidationError(name, f"{_FIELD_LABELS[name]} is required")


def _normalize(values: Mapping[str, Any]) -> dict[str, Any]:
    """Validate supplied fields before any record is touched."""
    try:
        return normalize_fields(values)
    except ValidationError as e:
        error = e.errors()[0]
        name = str(error["loc"][0]) if error["loc"] else "profile"
        label = _FIELD_LABELS.get(name, name)
        raise ProfileValidationError(name, f"{label} is invalid: {error['msg']}") from e


def _advance(previous: datetime) -> datetime:
    """Current time, nudged forward if the clock has not moved past previous."""
    now = utcnow()
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now
