"""Project repository for database operations."""

from typing import Annotated, Any, NamedTuple
from uuid import UUID

from fastapi import Depends
from sqlalchemy import Select, and_, case, delete, distinct, func, select

from workboard.api.dependencies import DBSession
from workboard.modules.projects.models import Project, ProjectMembership
from workboard.modules.work_items.models import (
    WorkItem,
    WorkItemComment,
    WorkItemStatus,
)


class ProjectWithCounts(NamedTuple):
    """A project annotated with its work item aggregates."""

    project: Project
    total_tasks: int
    completed_tasks: int
    member_count: int


class ProjectRepository:
    """Repository for Project database operations.

    All queries are scoped to an organization. Work item counts are
    aggregated per request, never stored.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    def _with_counts(self, organization_id: UUID) -> Select[Any]:
        done = case((WorkItem.status == WorkItemStatus.DONE, 1), else_=0)
        return (
            select(
                Project,
                func.count(WorkItem.id).label("total_tasks"),
                func.coalesce(func.sum(done), 0).label("completed_tasks"),
                func.count(distinct(WorkItem.assignee_id)).label("member_count"),
            )
            .outerjoin(
                WorkItem,
                and_(
                    WorkItem.project_id == Project.id,
                    WorkItem.organization_id == Project.organization_id,
                ),
            )
            .where(Project.organization_id == organization_id)
            .group_by(Project.id)
        )

    async def create(self, project: Project, manager_id: UUID, role: str) -> Project:
        """Create a project and bind its creator to it.

        Args:
            project: Project instance to create
            manager_id: Account that created the project
            role: Project role for the creator

        Returns:
            The created project with ID populated
        """
        self.session.add(project)
        await self.session.flush()
        self.session.add(
            ProjectMembership(project_id=project.id, account_id=manager_id, role=role)
        )
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def update(self, project: Project) -> Project:
        """Flush pending changes to a project and reload it."""
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def get_by_id(self, organization_id: UUID, project_id: UUID) -> Project | None:
        stmt = select(Project).where(
            Project.id == project_id,
            Project.organization_id == organization_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_counts(
        self, organization_id: UUID, project_id: UUID
    ) -> ProjectWithCounts | None:
        stmt = self._with_counts(organization_id).where(Project.id == project_id)
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        return ProjectWithCounts(*row) if row else None

    async def list_with_counts(
        self, organization_id: UUID, completed: bool
    ) -> list[ProjectWithCounts]:
        """List projects with their work item aggregates.

        Active projects are ordered by name, completed projects by most
        recently updated first.

        Args:
            organization_id: The organization's UUID
            completed: Whether to list completed or active projects

        Returns:
            Projects with total, done and distinct-assignee counts
        """
        stmt = self._with_counts(organization_id).where(
            Project.is_completed.is_(completed)
        )
        if completed:
            stmt = stmt.order_by(Project.updated_at.desc(), Project.name)
        else:
            stmt = stmt.order_by(Project.name, Project.created_at)
        result = await self.session.execute(stmt)
        return [ProjectWithCounts(*row) for row in result.all()]

    async def delete(self, project: Project) -> None:
        """Delete a project with its memberships, work items and comments."""
        item_ids = select(WorkItem.id).where(WorkItem.project_id == project.id)
        await self.session.execute(
            delete(WorkItemComment).where(WorkItemComment.work_item_id.in_(item_ids))
        )
        await self.session.execute(
            delete(WorkItem).where(WorkItem.project_id == project.id)
        )
        await self.session.execute(
            delete(ProjectMembership).where(ProjectMembership.project_id == project.id)
        )
        await self.session.delete(project)
        await self.session.flush()


# Type alias for dependency injection
ProjectRepo = Annotated[ProjectRepository, Depends(ProjectRepository)]
