"""Routes package for API endpoints."""

from .simulation_routes import router as simulation_router
from .status_routes import router as status_router
from .tower_routes import router as tower_router

__all__ = ["simulation_router", "status_router", "tower_router"]
