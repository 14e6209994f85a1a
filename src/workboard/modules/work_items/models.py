"""Work item database models."""

import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from workboard.core.constants import MAX_COMMENT_LENGTH, MAX_TITLE_LENGTH
from workboard.core.database.base import (
    Base,
    OrganizationMixin,
    TimestampMixin,
    UUIDMixin,
)
from workboard.core.database.types import IntEnumType


class WorkItemStatus(enum.IntEnum):
    """Position of a work item in the workflow.

    The integer value orders both the workflow and the board listing.
    """

    BACKLOG = 1
    TODO = 2
    IN_PROGRESS = 3
    IN_REVIEW = 4
    DONE = 5

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    WorkItemStatus.BACKLOG: "Backlog",
    WorkItemStatus.TODO: "Todo",
    WorkItemStatus.IN_PROGRESS: "InProgress",
    WorkItemStatus.IN_REVIEW: "InReview",
    WorkItemStatus.DONE: "Done",
}


class WorkItemPriority(enum.IntEnum):
    """Priority of a work item, used for sorting and display only."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4
    SYSTEM_BREAK = 5


class WorkItem(Base, UUIDMixin, TimestampMixin, OrganizationMixin):
    """Work item on a project's board.

    The assignee must belong to the same organization; this is checked
    when the assignee is written, not by a database constraint.

    Attributes:
        project_id: Owning project
        assignee_id: Optional assigned account
        title: Short title
        description: Optional free-text description
        status: Workflow status, starts at Backlog
        priority: Sort priority, defaults to Medium
        due_date: Optional due date
        story_points: Non-negative estimate
    """

    __tablename__ = "work_items"

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    assignee_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("accounts.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
    )
    title: Mapped[str] = mapped_column(
        String(MAX_TITLE_LENGTH),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    status: Mapped[WorkItemStatus] = mapped_column(
        IntEnumType(WorkItemStatus),
        default=WorkItemStatus.BACKLOG,
        index=True,
        nullable=False,
    )
    priority: Mapped[WorkItemPriority] = mapped_column(
        IntEnumType(WorkItemPriority),
        default=WorkItemPriority.MEDIUM,
        nullable=False,
    )
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    story_points: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<WorkItem {self.title} ({self.status.label})>"


class WorkItemComment(Base, UUIDMixin, TimestampMixin, OrganizationMixin):
    """Comment left on a work item.

    The author is cleared, not the comment, when the account is removed.
    """

    __tablename__ = "work_item_comments"

    work_item_id: Mapped[UUID] = mapped_column(
        ForeignKey("work_items.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    author_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("accounts.id", ondelete="SET NULL"),
        nullable=True,
    )
    body: Mapped[str] = mapped_column(
        String(MAX_COMMENT_LENGTH),
        nullable=False,
    )
