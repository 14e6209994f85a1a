"""Authentication module for session tokens, passwords and access context."""

from workboard.core.auth.backend import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from workboard.core.auth.context import (
    ANONYMOUS,
    AccessContext,
    resolve_access_context,
)
from workboard.core.auth.schemas import TokenData


def get_middleware():
    """Import middleware lazily to avoid circular imports."""
    from workboard.core.auth.middleware import (
        OrganizationContextMiddleware,
        RequestIdMiddleware,
    )

    return RequestIdMiddleware, OrganizationContextMiddleware


__all__ = [
    "ANONYMOUS",
    # Access context
    "AccessContext",
    # Schemas
    "TokenData",
    # Token utilities
    "create_access_token",
    "decode_token",
    # Lazy loaders
    "get_middleware",
    # Password utilities
    "hash_password",
    "resolve_access_context",
    "verify_password",
]
