"""Async database session management."""

import asyncio
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from workboard.config import settings


def _engine_options() -> dict[str, Any]:
    """Pool options for the configured backend.

    SQLite engines do not accept queue pool sizing.
    """
    if settings.is_sqlite:
        return {}
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_pre_ping": True,  # Verify connections before use
    }


# Create async engine
async_engine = create_async_engine(
    settings.async_database_url,
    echo=settings.database_echo,
    **_engine_options(),
)

# Create async session factory
async_session_factory = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that provides a database session.

    The session commits when the request handler returns. A failure or a
    cancelled request rolls back everything the request wrote.

    Usage:
        @router.get("/items")
        async def list_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except (Exception, asyncio.CancelledError):
            await session.rollback()
            raise
        finally:
            await session.close()
