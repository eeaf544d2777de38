"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"

    # Upstream errors (502)
    TRANSPORT_ERROR = "TRANSPORT_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
            status_code=404,
            details={"user_id": profile_id},
        )


class ProfileValidationError(AppException):
    """A required profile field is missing or blank."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message or f"{field} is required",
            status_code=400,
            details={"field": field},
        )


class StorageError(AppException):
    """Reading or writing the persisted profile snapshot failed."""

    def __init__(self, message: str = "Profile storage is unavailable") -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_ERROR,
            message=message,
            status_code=500,
        )


class TransportError(AppException):
    """A call to the profile API could not be completed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.TRANSPORT_ERROR,
            message=message,
            status_code=502,
            details={"upstream_status": status_code} if status_code else None,
        )
