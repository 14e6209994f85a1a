"""Dashboard repository for aggregate queries."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import and_, case, func, select

from workboard.api.dependencies import DBSession
from workboard.modules.projects.models import Project
from workboard.modules.work_items.models import WorkItem, WorkItemStatus


class DashboardRepository:
    """Aggregate counts over one organization's projects and work items."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def count_projects(self, organization_id: UUID) -> int:
        """Count all projects, active and completed."""
        stmt = select(func.count(Project.id)).where(
            Project.organization_id == organization_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_work_items(
        self, organization_id: UUID, now: datetime
    ) -> dict[str, int]:
        """Count work items by outcome in a single pass.

        Args:
            organization_id: The organization's UUID
            now: Reference time for the overdue check

        Returns:
            Counts keyed total, completed, in_progress and overdue
        """

        def count_where(condition):
            return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)

        stmt = select(
            func.count(WorkItem.id).label("total"),
            count_where(WorkItem.status == WorkItemStatus.DONE).label("completed"),
            count_where(WorkItem.status == WorkItemStatus.IN_PROGRESS).label(
                "in_progress"
            ),
            count_where(
                and_(
                    WorkItem.due_date.is_not(None),
                    WorkItem.due_date < now,
                    WorkItem.status != WorkItemStatus.DONE,
                )
            ).label("overdue"),
        ).where(WorkItem.organization_id == organization_id)
        result = await self.session.execute(stmt)
        row = result.one()
        return {key: int(value) for key, value in row._mapping.items()}


# Type alias for dependency injection
DashboardRepo = Annotated[DashboardRepository, Depends(DashboardRepository)]
