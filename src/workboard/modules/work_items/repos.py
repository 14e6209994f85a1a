"""Work item repository for database operations."""

from typing import Annotated, Any, NamedTuple
from uuid import UUID

from fastapi import Depends
from sqlalchemy import Select, select

from workboard.api.dependencies import DBSession
from workboard.modules.members.models import Account
from workboard.modules.work_items.models import (
    WorkItem,
    WorkItemComment,
    WorkItemStatus,
)


class WorkItemWithAssignee(NamedTuple):
    """A work item with its assignee's name and email, when assigned."""

    item: WorkItem
    assignee_name: str | None
    assignee_email: str | None


class CommentWithAuthor(NamedTuple):
    comment: WorkItemComment
    author_name: str | None


class WorkItemRepository:
    """Repository for WorkItem and WorkItemComment database operations.

    All queries are scoped to an organization.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    def _with_assignee(self, organization_id: UUID) -> Select[Any]:
        return (
            select(WorkItem, Account.full_name, Account.email)
            .outerjoin(
                Account,
                (Account.id == WorkItem.assignee_id)
                & (Account.organization_id == WorkItem.organization_id),
            )
            .where(WorkItem.organization_id == organization_id)
        )

    async def create(self, item: WorkItem) -> WorkItem:
        """Create a new work item.

        Args:
            item: WorkItem instance to create

        Returns:
            The created work item with ID populated
        """
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def update(self, item: WorkItem) -> WorkItem:
        """Flush pending changes to a work item and reload it."""
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def get_by_id(self, organization_id: UUID, item_id: UUID) -> WorkItem | None:
        stmt = select(WorkItem).where(
            WorkItem.id == item_id,
            WorkItem.organization_id == organization_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_assignee(
        self, organization_id: UUID, item_id: UUID
    ) -> WorkItemWithAssignee | None:
        stmt = self._with_assignee(organization_id).where(WorkItem.id == item_id)
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        return WorkItemWithAssignee(*row) if row else None

    async def list_by_project(
        self, organization_id: UUID, project_id: UUID
    ) -> list[WorkItemWithAssignee]:
        """List a project's work items in board order.

        Items are ordered by status, then priority, both ascending.

        Args:
            organization_id: The organization's UUID
            project_id: The project's UUID

        Returns:
            Work items with assignee name and email
        """
        stmt = (
            self._with_assignee(organization_id)
            .where(WorkItem.project_id == project_id)
            .order_by(WorkItem.status, WorkItem.priority, WorkItem.created_at)
        )
        result = await self.session.execute(stmt)
        return [WorkItemWithAssignee(*row) for row in result.all()]

    async def list_statuses(
        self, organization_id: UUID, project_id: UUID
    ) -> list[WorkItemStatus]:
        """List the status of every work item in a project."""
        stmt = select(WorkItem.status).where(
            WorkItem.organization_id == organization_id,
            WorkItem.project_id == project_id,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_comment(self, comment: WorkItemComment) -> WorkItemComment:
        self.session.add(comment)
        await self.session.flush()
        await self.session.refresh(comment)
        return comment

    async def list_comments(
        self, organization_id: UUID, item_id: UUID
    ) -> list[CommentWithAuthor]:
        """List a work item's comments, oldest first, with author names."""
        stmt = (
            select(WorkItemComment, Account.full_name)
            .outerjoin(
                Account,
                (Account.id == WorkItemComment.author_id)
                & (Account.organization_id == WorkItemComment.organization_id),
            )
            .where(
                WorkItemComment.organization_id == organization_id,
                WorkItemComment.work_item_id == item_id,
            )
            .order_by(WorkItemComment.created_at, WorkItemComment.id)
        )
        result = await self.session.execute(stmt)
        return [CommentWithAuthor(*row) for row in result.all()]


# Type alias for dependency injection
WorkItemRepo = Annotated[WorkItemRepository, Depends(WorkItemRepository)]
