"""Project service for registry business logic."""

from datetime import UTC, datetime
from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from workboard.core.auth.context import AccessContext
from workboard.core.errors import NotFoundError, ValidationError
from workboard.modules.projects.models import Project, ProjectRole
from workboard.modules.projects.repos import ProjectRepo, ProjectWithCounts
from workboard.modules.projects.schemas import (
    CompletedProjectResponse,
    ProjectCreate,
    ProjectResponse,
)
from workboard.modules.work_items.models import WorkItemStatus
from workboard.modules.work_items.repos import WorkItemRepo


logger = structlog.get_logger()


def _to_response(entry: ProjectWithCounts) -> ProjectResponse:
    project = entry.project
    return ProjectResponse(
        id=project.id,
        name=project.name,
        description=project.description,
        due_date=project.due_date,
        total_tasks=entry.total_tasks,
        completed_tasks=entry.completed_tasks,
        is_completed=project.is_completed,
    )


def _to_completed_response(entry: ProjectWithCounts) -> CompletedProjectResponse:
    project = entry.project
    return CompletedProjectResponse(
        id=project.id,
        name=project.name,
        description=project.description,
        due_date=project.due_date,
        total_tasks=entry.total_tasks,
        completed_tasks=entry.completed_tasks,
        member_count=entry.member_count,
        completed_at=project.updated_at,
    )


class ProjectService:
    """Service for project registry operations.

    Contains business logic for creating, listing, deleting and
    completing projects within the caller's organization.
    """

    def __init__(self, repo: ProjectRepo, work_items: WorkItemRepo) -> None:
        self.repo = repo
        self.work_items = work_items

    async def list_active(self, ctx: AccessContext) -> list[ProjectResponse]:
        """List active projects ordered by name, with work item counts."""
        entries = await self.repo.list_with_counts(ctx.organization_id, completed=False)
        return [_to_response(entry) for entry in entries]

    async def list_completed(self, ctx: AccessContext) -> list[CompletedProjectResponse]:
        """List completed projects, most recently completed first."""
        entries = await self.repo.list_with_counts(ctx.organization_id, completed=True)
        return [_to_completed_response(entry) for entry in entries]

    async def create_project(
        self, ctx: AccessContext, data: ProjectCreate
    ) -> ProjectResponse:
        """Create a project with the caller as its manager.

        Args:
            ctx: The caller's access context
            data: Project creation data

        Returns:
            The new project with zero counts

        Raises:
            ValidationError: If the name is blank
        """
        name = data.name.strip()
        if not name:
            raise ValidationError("Project name is required.")

        description = data.description.strip() if data.description else None
        project = Project(
            organization_id=ctx.organization_id,
            name=name,
            description=description or None,
            due_date=data.due_date,
            is_completed=False,
        )
        project = await self.repo.create(
            project, manager_id=ctx.user_id, role=ProjectRole.MANAGER.value
        )

        logger.info(
            "project_created",
            organization_id=str(ctx.organization_id),
            project_id=str(project.id),
        )
        return _to_response(ProjectWithCounts(project, 0, 0, 0))

    async def delete_project(self, ctx: AccessContext, project_id: UUID) -> None:
        """Delete a project and everything it owns.

        Raises:
            NotFoundError: If the project is not in the organization
        """
        project = await self.repo.get_by_id(ctx.organization_id, project_id)
        if project is None:
            raise NotFoundError("Project not found.", resource="project")

        await self.repo.delete(project)
        logger.info(
            "project_deleted",
            organization_id=str(ctx.organization_id),
            project_id=str(project_id),
        )

    async def complete_project(
        self, ctx: AccessContext, project_id: UUID
    ) -> ProjectResponse:
        """Mark a project completed once every work item is Done.

        Raises:
            NotFoundError: If the project is not in the organization
            ValidationError: If any work item is not Done; the offending
                statuses are named in workflow order
        """
        project = await self.repo.get_by_id(ctx.organization_id, project_id)
        if project is None:
            raise NotFoundError("Project not found.", resource="project")

        statuses = await self.work_items.list_statuses(ctx.organization_id, project_id)
        incomplete = sorted({s for s in statuses if s != WorkItemStatus.DONE})
        if incomplete:
            labels = [s.label for s in incomplete]
            raise ValidationError(
                "Cannot complete project. Not all tasks are finished. "
                f"Incomplete statuses: {', '.join(labels)}",
                error_code="project_incomplete",
                details={"incomplete_statuses": labels},
            )

        project.is_completed = True
        project.updated_at = datetime.now(UTC)
        await self.repo.update(project)

        logger.info(
            "project_completed",
            organization_id=str(ctx.organization_id),
            project_id=str(project_id),
            total_tasks=len(statuses),
        )
        entry = await self.repo.get_with_counts(ctx.organization_id, project_id)
        return _to_response(entry or ProjectWithCounts(project, 0, 0, 0))


# Type alias for dependency injection
ProjectSvc = Annotated[ProjectService, Depends(ProjectService)]
