"""Domain exceptions for the application.

Every service-level failure is one of four kinds. Each exception carries
its ``ErrorKind`` tag; the exception handlers map the tag to an HTTP
status and render the JSON error envelope.
"""

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    """Kinds of failure a service operation can report."""

    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message, echoed to the client
        error_code: Machine-readable error code for clients
        kind: The failure kind, which decides the HTTP status
        details: Additional error details
    """

    message: str = "An unexpected error occurred."
    error_code: str = "internal_error"
    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        """HTTP status code for this failure kind."""
        return ERROR_STATUS[self.kind]


class ValidationError(AppException):
    """Raised for malformed, missing or conflicting input.

    Example:
        raise ValidationError("Project name is required.")
    """

    message = "Validation error"
    error_code = "validation_error"
    kind = ErrorKind.VALIDATION


class UnauthorizedError(AppException):
    """Raised when credentials or the session token are missing or invalid.

    Example:
        raise UnauthorizedError("Invalid credentials.", error_code="invalid_credentials")
    """

    message = "Authentication required"
    error_code = "unauthorized"
    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(AppException):
    """Raised when an authenticated caller is not permitted to act."""

    message = "Access forbidden"
    error_code = "forbidden"
    kind = ErrorKind.FORBIDDEN


class NotFoundError(AppException):
    """Raised when an entity is absent or belongs to another organization.

    The two cases are reported identically.

    Example:
        raise NotFoundError("Project not found.", resource="project")
    """

    message = "Resource not found"
    error_code = "not_found"
    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        super().__init__(message=message, details=details, **kwargs)
