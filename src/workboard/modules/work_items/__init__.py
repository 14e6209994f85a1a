"""Work items module - the project board."""

from fastapi import APIRouter


router = APIRouter(prefix="/work-items", tags=["work-items"])


# Module metadata
__module_info__ = {
    "name": "work_items",
    "version": "1.0.0",
    "description": "Work item board with status workflow and comments",
    "dependencies": ["members", "projects"],
}


def register_routes() -> None:
    """Register routes - called after all imports are complete."""
    from workboard.modules.work_items import routes  # noqa: F401
