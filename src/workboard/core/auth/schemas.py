"""Authentication schemas for token handling and session responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from workboard.core.constants import (
    MAX_NAME_LENGTH,
    MAX_ORGANIZATION_NAME_LENGTH,
    MAX_PASSWORD_LENGTH,
)


class TokenData(BaseModel):
    """Data extracted from a session token.

    Attributes:
        user_id: The account's UUID
        organization_id: The organization's UUID
        email: The account's normalized email
        role: The account's organization role
        exp: Token expiration time
        type: Token type
    """

    user_id: UUID
    organization_id: UUID
    email: str | None = None
    role: str | None = None
    exp: datetime
    type: str = "access"


class RegisterRequest(BaseModel):
    """Schema for organization registration.

    The email must be well formed. Blank names and passwords are rejected
    by the service after trimming.
    """

    organization_name: str = Field(..., max_length=MAX_ORGANIZATION_NAME_LENGTH)
    full_name: str = Field(..., max_length=MAX_NAME_LENGTH)
    email: EmailStr
    password: str = Field(..., max_length=MAX_PASSWORD_LENGTH)


class LoginRequest(BaseModel):
    """Schema for email/password login."""

    email: EmailStr
    password: str = Field(..., max_length=MAX_PASSWORD_LENGTH)


class AuthResponse(BaseModel):
    """Session token plus the identity it was issued for."""

    token: str
    token_type: str = "bearer"
    expires_in: int
    user_id: UUID
    organization_id: UUID
    email: str
    full_name: str
    role: str
