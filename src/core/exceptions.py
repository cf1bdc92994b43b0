"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PHONE = "INVALID_PHONE"

    # Conflict errors (reported as 400)
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


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


class NotFoundError(AppException):
    """A requested record does not exist."""

    def __init__(
        self, error_code: ErrorCode, message: str, details: Any | None = None
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=404,
            details=details,
        )


class ConflictError(AppException):
    """A write would violate a uniqueness rule.

    Reported as 400, the status clients of the profiles API expect for
    every business-rule violation.
    """

    def __init__(
        self, error_code: ErrorCode, message: str, details: Any | None = None
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details=details,
        )


class InvalidError(AppException):
    """Input failed a business validation rule."""

    def __init__(
        self, error_code: ErrorCode, message: str, details: Any | None = None
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details=details,
        )


class ProfileNotFoundError(NotFoundError):
    """Profile not found."""

    def __init__(self, profile_id: int) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found with id: {profile_id}",
            details={"profile_id": profile_id},
        )


class DuplicateEmailError(ConflictError):
    """Another profile already uses this email."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMAIL_ALREADY_EXISTS,
            message=f"Email already exists: {email}",
            details={"email": email},
        )


class InvalidPhoneError(InvalidError):
    """Phone number has the wrong number of digits."""

    def __init__(self, phone: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_PHONE,
            message="Phone number must be between 10 and 15 digits",
            details={"phone": phone},
        )
