"""Logging module with structured logging and request tracking."""

from workboard.core.logging.middleware import RequestLoggingMiddleware


__all__ = [
    "RequestLoggingMiddleware",
]
