"""Error handling module with typed failures and a JSON error envelope."""

from workboard.core.errors.exceptions import (
    ERROR_STATUS,
    AppException,
    ErrorKind,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from workboard.core.errors.handlers import (
    ErrorResponse,
    FieldError,
    register_exception_handlers,
)


__all__ = [
    "ERROR_STATUS",
    # Exceptions
    "AppException",
    "ErrorKind",
    # Handlers
    "ErrorResponse",
    "FieldError",
    "ForbiddenError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
    "register_exception_handlers",
]
