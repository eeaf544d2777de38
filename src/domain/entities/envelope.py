"""Result envelope returned by profile facades."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ApiResponse(Generic[T]):
    """Read-only value object: ``{data, success, message}``."""

    data: T
    success: bool
    message: str

    @classmethod
    def ok(cls, data: T, message: str) -> "ApiResponse[T]":
        return cls(data=data, success=True, message=message)

    @classmethod
    def fail(cls, data: T, message: str) -> "ApiResponse[T]":
        return cls(data=data, success=False, message=message)
