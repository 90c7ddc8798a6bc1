"""Service layer shared by the API routes."""

from .simulation_service import SimulationService
from .singleton import get_simulation_service

__all__ = ["SimulationService", "get_simulation_service"]
