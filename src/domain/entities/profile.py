"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

# Fields a client may supply on create/update; id and timestamps are store-owned
EDITABLE_FIELDS: tuple[str, ...] = (
    "full_name",
    "email",
    "phone_number",
    "bio",
    "avatar_url",
    "date_of_birth",
    "location",
)

REQUIRED_FIELDS: tuple[str, ...] = ("full_name", "email")

# Fields matched by substring search
SEARCHABLE_FIELDS: tuple[str, ...] = ("full_name", "email", "location", "bio")


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


@dataclass
class ProfileDraft:
    """Client-supplied fields for a new profile."""

    full_name: str
    email: str
    phone_number: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    date_of_birth: date | None = None
    location: str | None = None


@dataclass
class Profile:
    """Domain entity for a user profile in the directory."""

    full_name: str
    email: str
    id: str
    phone_number: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    date_of_birth: date | None = None
    location: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match over the searchable fields.

        ``query`` must already be trimmed and lowercased. Absent optional
        fields never match.
        """
        for name in SEARCHABLE_FIELDS:
            value = getattr(self, name)
            if value and query in value.lower():
                return True
        # Empty query is a substring of every string, including empty ones
        return query == ""
