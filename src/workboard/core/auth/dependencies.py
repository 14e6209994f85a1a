"""FastAPI dependencies for authentication.

This module provides FastAPI dependency injection functions for:
- Resolving the access context from the bearer token
- Requiring an authenticated caller
- Getting the current account
"""

from typing import TYPE_CHECKING, Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from workboard.api.dependencies import DBSession
from workboard.core.auth.context import AccessContext, resolve_access_context
from workboard.core.errors import UnauthorizedError


if TYPE_CHECKING:
    from workboard.modules.members.models import Account


# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_access_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> AccessContext:
    """Resolve the caller's access context, anonymous when unauthenticated."""
    return resolve_access_context(credentials.credentials if credentials else None)


async def require_access_context(
    context: Annotated[AccessContext, Depends(get_access_context)],
    db: DBSession,
) -> AccessContext:
    """Require an authenticated caller whose account still exists.

    Args:
        context: The resolved access context
        db: Database session

    Returns:
        The authenticated access context

    Raises:
        UnauthorizedError: If the caller is anonymous or the account is gone
    """
    if not context.is_authenticated:
        raise UnauthorizedError()

    from workboard.modules.members.repos import AccountRepository  # noqa: PLC0415

    account = await AccountRepository(db).get_by_id(
        context.organization_id, context.user_id
    )
    if account is None:
        raise UnauthorizedError()

    return context


async def get_current_account(
    context: Annotated[AccessContext, Depends(require_access_context)],
    db: DBSession,
) -> "Account":
    """Get the account of the authenticated caller.

    Raises:
        UnauthorizedError: If the account no longer exists
    """
    from workboard.modules.members.repos import AccountRepository  # noqa: PLC0415

    account = await AccountRepository(db).get_by_id(
        context.organization_id, context.user_id
    )
    if account is None:
        raise UnauthorizedError()
    return account


# Type aliases for cleaner dependency injection
Access = Annotated[AccessContext, Depends(require_access_context)]
CurrentAccount = Annotated["Account", Depends(get_current_account)]
