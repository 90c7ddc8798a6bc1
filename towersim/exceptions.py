"""Exceptions raised by the control tower and its ground entities."""

from typing import Dict, Optional


class TowerError(Exception):
    """Base class for control tower errors."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message)
        self.details = details or {}


class NoSuitableGateError(TowerError):
    """Raised when no eligible unoccupied gate exists for an aircraft."""


class NoSpaceError(TowerError):
    """Raised when a gate or terminal has no room left."""
