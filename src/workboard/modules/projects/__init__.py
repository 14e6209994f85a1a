"""Projects module - the organization's project registry."""

from fastapi import APIRouter


router = APIRouter(prefix="/projects", tags=["projects"])


# Module metadata
__module_info__ = {
    "name": "projects",
    "version": "1.0.0",
    "description": "Project registry with completion gating",
    "dependencies": ["members", "work_items"],
}


def register_routes() -> None:
    """Register routes - called after all imports are complete."""
    from workboard.modules.projects import routes  # noqa: F401
