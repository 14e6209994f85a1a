"""Dashboard module - per-organization summary counts."""

from fastapi import APIRouter


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


# Module metadata
__module_info__ = {
    "name": "dashboard",
    "version": "1.0.0",
    "description": "Organization summary counts",
    "dependencies": ["projects", "work_items"],
}


def register_routes() -> None:
    """Register routes - called after all imports are complete."""
    from workboard.modules.dashboard import routes  # noqa: F401
