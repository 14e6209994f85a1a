"""Dashboard service."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import Depends

from workboard.core.auth.context import AccessContext
from workboard.modules.dashboard.repos import DashboardRepo
from workboard.modules.dashboard.schemas import DashboardSummary


class DashboardService:
    """Summarizes the caller's organization."""

    def __init__(self, repo: DashboardRepo) -> None:
        self.repo = repo

    async def summary(
        self, ctx: AccessContext, now: datetime | None = None
    ) -> DashboardSummary:
        """Compute the organization summary.

        Args:
            ctx: The caller's access context
            now: Reference time for overdue items (defaults to current UTC)

        Returns:
            Project and work item counts
        """
        now = now or datetime.now(UTC)
        total_projects = await self.repo.count_projects(ctx.organization_id)
        counts = await self.repo.count_work_items(ctx.organization_id, now)
        return DashboardSummary(
            total_projects=total_projects,
            total_tasks=counts["total"],
            completed_tasks=counts["completed"],
            in_progress_tasks=counts["in_progress"],
            overdue_tasks=counts["overdue"],
        )


# Type alias for dependency injection
DashboardSvc = Annotated[DashboardService, Depends(DashboardService)]
