"""Per-request access context.

The context is the only source of the organization id that services use
to partition reads and writes.
"""

from dataclasses import dataclass
from uuid import UUID

from workboard.core.auth.backend import decode_token


@dataclass(frozen=True)
class AccessContext:
    """Identity of the caller, resolved once per request."""

    user_id: UUID | None = None
    organization_id: UUID | None = None
    email: str | None = None
    role: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None and self.organization_id is not None


ANONYMOUS = AccessContext()


def resolve_access_context(token: str | None) -> AccessContext:
    """Resolve a bearer token into an access context.

    Absent, malformed, expired or foreign tokens give the anonymous
    context. Never raises.
    """
    if not token:
        return ANONYMOUS

    token_data = decode_token(token)
    if token_data is None or token_data.type != "access":
        return ANONYMOUS

    return AccessContext(
        user_id=token_data.user_id,
        organization_id=token_data.organization_id,
        email=token_data.email,
        role=token_data.role,
    )
