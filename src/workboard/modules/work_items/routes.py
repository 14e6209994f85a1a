"""Work item board API routes."""

from uuid import UUID

from fastapi import status

from workboard.core.auth.dependencies import Access
from workboard.modules.work_items import router
from workboard.modules.work_items.schemas import (
    CommentCreate,
    CommentResponse,
    WorkItemAssigneeUpdate,
    WorkItemCreate,
    WorkItemResponse,
    WorkItemStatusUpdate,
)
from workboard.modules.work_items.services import WorkItemSvc


@router.get(
    "/project/{project_id}",
    response_model=list[WorkItemResponse],
    summary="List project work items",
    description="List a project's work items ordered by status, then priority.",
)
async def list_project_work_items(
    project_id: UUID,
    ctx: Access,
    service: WorkItemSvc,
) -> list[WorkItemResponse]:
    """List work items of a project."""
    return await service.list_by_project(ctx, project_id)


@router.post(
    "",
    response_model=WorkItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create work item",
    description="Create a work item in the Backlog column of a project.",
)
async def create_work_item(
    data: WorkItemCreate,
    ctx: Access,
    service: WorkItemSvc,
) -> WorkItemResponse:
    """Create a work item."""
    return await service.create_work_item(ctx, data)


@router.patch(
    "/{item_id}/status",
    response_model=WorkItemResponse,
    summary="Change status",
    description="Move a work item to any workflow status.",
)
async def update_work_item_status(
    item_id: UUID,
    data: WorkItemStatusUpdate,
    ctx: Access,
    service: WorkItemSvc,
) -> WorkItemResponse:
    """Change a work item's status."""
    return await service.update_status(ctx, item_id, data.status)


@router.patch(
    "/{item_id}/assignee",
    response_model=WorkItemResponse,
    summary="Change assignee",
    description="Assign a work item to a member, or unassign it with null.",
)
async def update_work_item_assignee(
    item_id: UUID,
    data: WorkItemAssigneeUpdate,
    ctx: Access,
    service: WorkItemSvc,
) -> WorkItemResponse:
    """Change a work item's assignee."""
    return await service.update_assignee(ctx, item_id, data.assignee_id)


@router.get(
    "/{item_id}/comments",
    response_model=list[CommentResponse],
    summary="List comments",
)
async def list_work_item_comments(
    item_id: UUID,
    ctx: Access,
    service: WorkItemSvc,
) -> list[CommentResponse]:
    """List a work item's comments, oldest first."""
    return await service.list_comments(ctx, item_id)


@router.post(
    "/{item_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add comment",
)
async def add_work_item_comment(
    item_id: UUID,
    data: CommentCreate,
    ctx: Access,
    service: WorkItemSvc,
) -> CommentResponse:
    """Comment on a work item."""
    return await service.add_comment(ctx, item_id, data.body)
