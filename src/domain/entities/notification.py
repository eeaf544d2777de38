"""Notification domain entity for the directory client."""

import itertools
import time
from dataclasses import dataclass, field
from enum import StrEnum


class NotificationKind(StrEnum):
    """Outcome category a notification reports."""

    SUCCESS = "success"
    ERROR = "error"


_sequence = itertools.count()


def new_notification_id() -> str:
    """Generation-time derived id, unique within the process."""
    return f"{time.time_ns()}-{next(_sequence)}"


@dataclass(frozen=True, slots=True)
class Notification:
    """Ephemeral, user-visible outcome message. Never persisted."""

    kind: NotificationKind
    message: str
    duration: float | None = None
    id: str = field(default_factory=new_notification_id)
