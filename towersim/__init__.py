"""Discrete-time airport control tower simulation."""

from .aircraft_queues import AircraftQueue, LandingQueue, TakeoffQueue
from .control_tower import ControlTower
from .exceptions import NoSpaceError, NoSuitableGateError, TowerError
from .loading_registry import LoadingRegistry

__all__ = [
    "AircraftQueue",
    "LandingQueue",
    "TakeoffQueue",
    "ControlTower",
    "LoadingRegistry",
    "NoSpaceError",
    "NoSuitableGateError",
    "TowerError",
]
