"""Pydantic schemas for project operations."""

from datetime import UTC, datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from workboard.core.constants import MAX_DESCRIPTION_LENGTH, MAX_PROJECT_NAME_LENGTH


def as_utc(value: datetime | None) -> datetime | None:
    """Normalize a datetime to UTC, treating naive values as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    name: str = Field(..., max_length=MAX_PROJECT_NAME_LENGTH)
    description: str | None = Field(None, max_length=MAX_DESCRIPTION_LENGTH)
    due_date: datetime | None = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class ProjectResponse(BaseModel):
    """Schema for an active project with work item counts."""

    id: UUID
    name: str
    description: str | None
    due_date: datetime | None
    total_tasks: int
    completed_tasks: int
    is_completed: bool


class CompletedProjectResponse(BaseModel):
    """Schema for a completed project."""

    id: UUID
    name: str
    description: str | None
    due_date: datetime | None
    total_tasks: int
    completed_tasks: int
    member_count: int
    completed_at: datetime
