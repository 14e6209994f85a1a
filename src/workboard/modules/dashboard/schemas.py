"""Pydantic schemas for the dashboard."""

from pydantic import BaseModel


class DashboardSummary(BaseModel):
    """Organization-wide counts.

    Attributes:
        total_projects: Active and completed projects
        total_tasks: All work items
        completed_tasks: Work items in Done
        in_progress_tasks: Work items in InProgress
        overdue_tasks: Work items past their due date and not Done
    """

    total_projects: int
    total_tasks: int
    completed_tasks: int
    in_progress_tasks: int
    overdue_tasks: int
