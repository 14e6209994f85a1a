"""Pydantic schemas for roster operations."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from workboard.core.constants import MAX_NAME_LENGTH


class AddMemberRequest(BaseModel):
    """Schema for adding a member to the roster.

    A temporary password is generated server-side and never returned.
    """

    full_name: str = Field(..., max_length=MAX_NAME_LENGTH)
    display_name: str = Field(..., max_length=MAX_NAME_LENGTH)
    email: EmailStr


class MemberResponse(BaseModel):
    """Schema for member response data."""

    id: UUID
    full_name: str
    display_name: str
    email: str
    role: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
