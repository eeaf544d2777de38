"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; snake_case is accepted on input too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileBase(CamelModel):
    """Base schema for Profile."""

    full_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=1, max_length=255)
    phone_number: str | None = Field(None, max_length=50)
    bio: str | None = Field(None, max_length=1000)
    avatar_url: str | None = Field(None, max_length=500)
    date_of_birth: date | None = None
    location: str | None = Field(None, max_length=100)

    @field_validator("full_name", "email")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class ProfileCreate(ProfileBase):
    """Schema for creating a Profile."""


class ProfileUpdate(CamelModel):
    """Schema for updating a Profile. Only supplied fields are changed."""

    full_name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, min_length=1, max_length=255)
    phone_number: str | None = Field(None, max_length=50)
    bio: str | None = Field(None, max_length=1000)
    avatar_url: str | None = Field(None, max_length=500)
    date_of_birth: date | None = None
    location: str | None = Field(None, max_length=100)


class ProfileResponse(ProfileBase):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "fullName": "Sarah Johnson",
                "email": "sarah.johnson@example.com",
                "phoneNumber": "+1 (555) 123-4567",
                "bio": "Full-stack developer.",
                "avatarUrl": "https://images.pexels.com/photos/1239291/pexels-photo-1239291.jpeg",
                "dateOfBirth": "1990-03-15",
                "location": "San Francisco, CA",
                "createdAt": "2026-01-28T10:00:00Z",
                "updatedAt": "2026-01-28T10:00:00Z",
            }
        },
    )

    id: str
    created_at: datetime
    updated_at: datetime


class ProfileDeleteResponse(BaseModel):
    """Confirmation returned after a profile is deleted."""

    message: str


class ErrorResponse(BaseModel):
    """Standardized error body produced by the exception handlers."""

    error_code: str
    message: str
    details: Any | None = None
