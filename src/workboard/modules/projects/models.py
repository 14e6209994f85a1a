"""Project database models."""

import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from workboard.core.constants import MAX_PROJECT_NAME_LENGTH
from workboard.core.database.base import (
    Base,
    OrganizationMixin,
    TimestampMixin,
    UUIDMixin,
)


class ProjectRole(str, enum.Enum):
    """Role of an account on a single project."""

    MANAGER = "manager"
    CONTRIBUTOR = "contributor"


class Project(Base, UUIDMixin, TimestampMixin, OrganizationMixin):
    """Project model.

    Completion is one-way: once ``is_completed`` is set no operation
    clears it.

    Attributes:
        name: Project name
        description: Optional free-text description
        due_date: Optional due date
        is_completed: Whether the project has been completed
    """

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(
        String(MAX_PROJECT_NAME_LENGTH),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    is_completed: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Project {self.name}>"


class ProjectMembership(Base, UUIDMixin, TimestampMixin):
    """Association of an account with a project.

    Scoped to an organization through its project.
    """

    __tablename__ = "project_memberships"
    __table_args__ = (
        UniqueConstraint("project_id", "account_id", name="uq_project_membership"),
    )

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    role: Mapped[str] = mapped_column(
        String(20),
        default=ProjectRole.CONTRIBUTOR.value,
        nullable=False,
    )
