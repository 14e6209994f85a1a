"""Pydantic schemas for work item operations."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from workboard.core.constants import (
    MAX_COMMENT_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
)
from workboard.modules.projects.schemas import as_utc
from workboard.modules.work_items.models import WorkItemPriority, WorkItemStatus


class WorkItemCreate(BaseModel):
    """Schema for creating a work item. New items start in Backlog."""

    project_id: UUID
    title: str = Field(..., max_length=MAX_TITLE_LENGTH)
    description: str | None = Field(None, max_length=MAX_DESCRIPTION_LENGTH)
    assignee_id: UUID | None = None
    priority: WorkItemPriority = WorkItemPriority.MEDIUM
    due_date: datetime | None = None
    story_points: int = Field(0, ge=0)

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class WorkItemStatusUpdate(BaseModel):
    """Any status may follow any other."""

    status: WorkItemStatus


class WorkItemAssigneeUpdate(BaseModel):
    """A null assignee unassigns the item."""

    assignee_id: UUID | None = None


class WorkItemResponse(BaseModel):
    """Schema for work item response data.

    ``status`` and ``priority`` are their integer workflow values.
    """

    id: UUID
    project_id: UUID
    title: str
    description: str | None
    status: WorkItemStatus
    priority: WorkItemPriority
    assignee_id: UUID | None
    assignee_name: str | None
    assignee_email: str | None
    due_date: datetime | None
    story_points: int


class CommentCreate(BaseModel):
    body: str = Field(..., max_length=MAX_COMMENT_LENGTH)


class CommentResponse(BaseModel):
    id: UUID
    work_item_id: UUID
    author_id: UUID | None
    author_name: str | None
    body: str
    created_at: datetime
