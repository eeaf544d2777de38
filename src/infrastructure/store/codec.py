"""Serialization of the profile record set to its persisted JSON form."""

from collections.abc import Mapping
from dataclasses import asdict
from datetime import date, datetime
from typing import Any

import orjson
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from domain.entities.profile import Profile


class ProfileRecord(BaseModel):
    """Persisted shape of a Profile: camelCase keys, ISO dates."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    full_name: str = Field(alias="fullName")
    email: str
    phone_number: str | None = Field(None, alias="phoneNumber")
    bio: str | None = None
    avatar_url: str | None = Field(None, alias="avatarUrl")
    date_of_birth: date | None = Field(None, alias="dateOfBirth")
    location: str | None = None
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class ProfileFields(BaseModel):
    """Editable profile fields in their stored types."""

    model_config = ConfigDict(extra="forbid")

    full_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    date_of_birth: date | None = None
    location: str | None = None


_records_adapter = TypeAdapter(list[ProfileRecord])


def normalize_fields(values: Mapping[str, Any]) -> dict[str, Any]:
    """Coerce supplied editable fields to their stored types.

    Only the keys present in ``values`` are returned, so partial updates
    stay partial. Raises ``pydantic.ValidationError`` for values that cannot
    be stored (e.g. an unparseable ``date_of_birth``).
    """
    fields = ProfileFields.model_validate(dict(values))
    return fields.model_dump(include=set(values))


def encode_profiles(profiles: list[Profile]) -> str:
    """Serialize profiles as a JSON array, omitting absent optional fields."""
    records = [
        ProfileRecord(**asdict(profile)).model_dump(
            mode="json", by_alias=True, exclude_none=True
        )
        for profile in profiles
    ]
    return orjson.dumps(records).decode()


def decode_profiles(payload: str) -> list[Profile]:
    """Parse a persisted JSON array.

    Raises ``pydantic.ValidationError`` when the payload is not a valid
    array of profile records.
    """
    records = _records_adapter.validate_json(payload)
    return [Profile(**record.model_dump()) for record in records]
