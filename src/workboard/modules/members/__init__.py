"""Members module - the organization's membership roster."""

from fastapi import APIRouter


router = APIRouter(prefix="/members", tags=["members"])


# Module metadata
__module_info__ = {
    "name": "members",
    "version": "1.0.0",
    "description": "Organization membership roster",
    "dependencies": ["organizations"],
}


def register_routes() -> None:
    """Register routes - called after all imports are complete."""
    from workboard.modules.members import routes  # noqa: F401
