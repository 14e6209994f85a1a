"""Feature modules with auto-discovery."""

import logging
from importlib import import_module
from pathlib import Path

from fastapi import APIRouter


logger = logging.getLogger(__name__)


def discover_modules() -> list[APIRouter]:
    """Auto-discover and return routers from all modules.

    This function scans the modules directory for subdirectories
    that expose a router attribute in their __init__.py. Routes are
    registered only after every module package has been imported, so
    modules may depend on each other's repositories.

    Returns:
        List of FastAPI routers from discovered modules.
    """
    modules_dir = Path(__file__).parent
    discovered = []

    for path in sorted(modules_dir.iterdir()):
        if path.is_dir() and not path.name.startswith("_"):
            module = import_module(f"workboard.modules.{path.name}")
            if hasattr(module, "router"):
                discovered.append((path.name, module))

    routers: list[APIRouter] = []
    for name, module in discovered:
        register_routes = getattr(module, "register_routes", None)
        if register_routes is not None:
            register_routes()
        routers.append(module.router)
        logger.info(f"Loaded module: {name}")

    return routers
