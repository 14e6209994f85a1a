"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workboard.core.database import get_db


# Type alias for database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]


# Note: the organization partition comes from the access context.
# For authenticated routes, use Access from workboard.core.auth.dependencies
# which resolves the caller from the bearer token.
