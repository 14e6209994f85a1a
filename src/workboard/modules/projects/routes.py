"""Project registry API routes."""

from uuid import UUID

from fastapi import status

from workboard.core.auth.dependencies import Access
from workboard.modules.projects import router
from workboard.modules.projects.schemas import (
    CompletedProjectResponse,
    ProjectCreate,
    ProjectResponse,
)
from workboard.modules.projects.services import ProjectSvc


@router.get(
    "",
    response_model=list[ProjectResponse],
    summary="List active projects",
    description="List active projects ordered by name, with work item counts.",
)
async def list_projects(
    ctx: Access,
    service: ProjectSvc,
) -> list[ProjectResponse]:
    """List active projects."""
    return await service.list_active(ctx)


@router.get(
    "/completed",
    response_model=list[CompletedProjectResponse],
    summary="List completed projects",
    description="List completed projects, most recently completed first.",
)
async def list_completed_projects(
    ctx: Access,
    service: ProjectSvc,
) -> list[CompletedProjectResponse]:
    """List completed projects."""
    return await service.list_completed(ctx)


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project. The caller becomes its manager.",
)
async def create_project(
    data: ProjectCreate,
    ctx: Access,
    service: ProjectSvc,
) -> ProjectResponse:
    """Create a project."""
    return await service.create_project(ctx, data)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Delete a project with its work items and memberships.",
)
async def delete_project(
    project_id: UUID,
    ctx: Access,
    service: ProjectSvc,
) -> None:
    """Delete a project."""
    await service.delete_project(ctx, project_id)


@router.patch(
    "/{project_id}/complete",
    response_model=ProjectResponse,
    summary="Complete project",
    description="Complete a project. Fails while any work item is not Done.",
)
async def complete_project(
    project_id: UUID,
    ctx: Access,
    service: ProjectSvc,
) -> ProjectResponse:
    """Complete a project."""
    return await service.complete_project(ctx, project_id)
