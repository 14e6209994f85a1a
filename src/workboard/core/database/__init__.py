"""Database layer - session management, base models, and mixins."""

from workboard.core.database.base import (
    Base,
    OrganizationMixin,
    TimestampMixin,
    UUIDMixin,
)
from workboard.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
)
from workboard.core.database.types import IntEnumType


__all__ = [
    "Base",
    "IntEnumType",
    "OrganizationMixin",
    "TimestampMixin",
    "UUIDMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
]
