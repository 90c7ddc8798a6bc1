"""API schemas for request/response models."""

from .simulation_schemas import TickRequest, TickResponse
from .status_schemas import StatusResponse, QueuesResponse
from .tower_schemas import (
    TaskRequest,
    AircraftRequest,
    TerminalRequest,
    AircraftResponse,
    GateResponse,
    TerminalResponse,
    MessageResponse,
)

__all__ = [
    "TickRequest",
    "TickResponse",
    "StatusResponse",
    "QueuesResponse",
    "TaskRequest",
    "AircraftRequest",
    "TerminalRequest",
    "AircraftResponse",
    "GateResponse",
    "TerminalResponse",
    "MessageResponse",
]
