"""Work item service for board business logic."""

from datetime import UTC, datetime
from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from workboard.core.auth.context import AccessContext
from workboard.core.errors import NotFoundError, ValidationError
from workboard.modules.members.repos import AccountRepo
from workboard.modules.projects.repos import ProjectRepo
from workboard.modules.work_items.models import (
    WorkItem,
    WorkItemComment,
    WorkItemStatus,
)
from workboard.modules.work_items.repos import (
    CommentWithAuthor,
    WorkItemRepo,
    WorkItemWithAssignee,
)
from workboard.modules.work_items.schemas import (
    CommentResponse,
    WorkItemCreate,
    WorkItemResponse,
)


logger = structlog.get_logger()


def _to_response(entry: WorkItemWithAssignee) -> WorkItemResponse:
    item = entry.item
    return WorkItemResponse(
        id=item.id,
        project_id=item.project_id,
        title=item.title,
        description=item.description,
        status=item.status,
        priority=item.priority,
        assignee_id=item.assignee_id,
        assignee_name=entry.assignee_name,
        assignee_email=entry.assignee_email,
        due_date=item.due_date,
        story_points=item.story_points,
    )


def _to_comment_response(entry: CommentWithAuthor) -> CommentResponse:
    comment = entry.comment
    return CommentResponse(
        id=comment.id,
        work_item_id=comment.work_item_id,
        author_id=comment.author_id,
        author_name=entry.author_name,
        body=comment.body,
        created_at=comment.created_at,
    )


class WorkItemService:
    """Service for work item board operations.

    Projects and assignees are always resolved inside the caller's
    organization; anything outside it is reported as not found.
    """

    def __init__(
        self,
        repo: WorkItemRepo,
        projects: ProjectRepo,
        accounts: AccountRepo,
    ) -> None:
        self.repo = repo
        self.projects = projects
        self.accounts = accounts

    async def _get_item(self, ctx: AccessContext, item_id: UUID) -> WorkItem:
        item = await self.repo.get_by_id(ctx.organization_id, item_id)
        if item is None:
            raise NotFoundError("Task not found.", resource="work_item")
        return item

    async def _ensure_assignee(self, ctx: AccessContext, assignee_id: UUID | None) -> None:
        if assignee_id is None:
            return
        account = await self.accounts.get_by_id(ctx.organization_id, assignee_id)
        if account is None:
            raise NotFoundError("Member not found.", resource="member")

    async def _respond(self, ctx: AccessContext, item: WorkItem) -> WorkItemResponse:
        entry = await self.repo.get_with_assignee(ctx.organization_id, item.id)
        return _to_response(entry or WorkItemWithAssignee(item, None, None))

    async def list_by_project(
        self, ctx: AccessContext, project_id: UUID
    ) -> list[WorkItemResponse]:
        """List a project's items by status then priority.

        An unknown project yields an empty list.
        """
        entries = await self.repo.list_by_project(ctx.organization_id, project_id)
        return [_to_response(entry) for entry in entries]

    async def create_work_item(
        self, ctx: AccessContext, data: WorkItemCreate
    ) -> WorkItemResponse:
        """Create a work item in Backlog.

        Args:
            ctx: The caller's access context
            data: Work item creation data

        Returns:
            The created work item with assignee details

        Raises:
            ValidationError: If the title is blank
            NotFoundError: If the project or assignee is not in the organization
        """
        title = data.title.strip()
        if not title:
            raise ValidationError("Task title is required.")

        project = await self.projects.get_by_id(ctx.organization_id, data.project_id)
        if project is None:
            raise NotFoundError("Project not found.", resource="project")

        await self._ensure_assignee(ctx, data.assignee_id)

        description = data.description.strip() if data.description else None
        item = WorkItem(
            organization_id=ctx.organization_id,
            project_id=project.id,
            assignee_id=data.assignee_id,
            title=title,
            description=description or None,
            status=WorkItemStatus.BACKLOG,
            priority=data.priority,
            due_date=data.due_date,
            story_points=data.story_points,
        )
        item = await self.repo.create(item)

        logger.info(
            "work_item_created",
            organization_id=str(ctx.organization_id),
            project_id=str(project.id),
            work_item_id=str(item.id),
        )
        return await self._respond(ctx, item)

    async def update_status(
        self, ctx: AccessContext, item_id: UUID, status: WorkItemStatus
    ) -> WorkItemResponse:
        """Move a work item to any status.

        Raises:
            NotFoundError: If the item is not in the organization
        """
        item = await self._get_item(ctx, item_id)
        previous = item.status

        item.status = status
        item.updated_at = datetime.now(UTC)
        item = await self.repo.update(item)

        logger.info(
            "work_item_status_changed",
            work_item_id=str(item_id),
            from_status=previous.label,
            to_status=status.label,
        )
        return await self._respond(ctx, item)

    async def update_assignee(
        self, ctx: AccessContext, item_id: UUID, assignee_id: UUID | None
    ) -> WorkItemResponse:
        """Assign a work item to a member, or unassign it.

        Raises:
            NotFoundError: If the item or the assignee is not in the organization
        """
        item = await self._get_item(ctx, item_id)
        await self._ensure_assignee(ctx, assignee_id)

        item.assignee_id = assignee_id
        item.updated_at = datetime.now(UTC)
        item = await self.repo.update(item)

        logger.info(
            "work_item_assignee_changed",
            work_item_id=str(item_id),
            assignee_id=str(assignee_id) if assignee_id else None,
        )
        return await self._respond(ctx, item)

    async def list_comments(
        self, ctx: AccessContext, item_id: UUID
    ) -> list[CommentResponse]:
        await self._get_item(ctx, item_id)
        entries = await self.repo.list_comments(ctx.organization_id, item_id)
        return [_to_comment_response(entry) for entry in entries]

    async def add_comment(
        self, ctx: AccessContext, item_id: UUID, body: str
    ) -> CommentResponse:
        """Add a comment authored by the caller.

        Raises:
            ValidationError: If the body is blank
            NotFoundError: If the item is not in the organization
        """
        body = body.strip()
        if not body:
            raise ValidationError("Comment body is required.")

        item = await self._get_item(ctx, item_id)
        comment = WorkItemComment(
            organization_id=ctx.organization_id,
            work_item_id=item.id,
            author_id=ctx.user_id,
            body=body,
            created_at=datetime.now(UTC),
        )
        comment = await self.repo.create_comment(comment)

        logger.info(
            "work_item_comment_added",
            work_item_id=str(item_id),
            comment_id=str(comment.id),
        )
        author = await self.accounts.get_by_id(ctx.organization_id, ctx.user_id)
        return _to_comment_response(
            CommentWithAuthor(comment, author.full_name if author else None)
        )


# Type alias for dependency injection
WorkItemSvc = Annotated[WorkItemService, Depends(WorkItemService)]
