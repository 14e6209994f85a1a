"""Dashboard API routes."""

from workboard.core.auth.dependencies import Access
from workboard.modules.dashboard import router
from workboard.modules.dashboard.schemas import DashboardSummary
from workboard.modules.dashboard.services import DashboardSvc


@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Dashboard summary",
    description="Project and work item counts for the caller's organization.",
)
async def get_summary(
    ctx: Access,
    service: DashboardSvc,
) -> DashboardSummary:
    """Get the organization summary."""
    return await service.summary(ctx)
