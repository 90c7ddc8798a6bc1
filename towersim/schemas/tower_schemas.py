"""Schemas for terminal and aircraft endpoints."""

from pydantic import BaseModel, Field
from typing import List, Optional

from ..models.aircraft import AircraftType
from ..models.task import TaskType


class TaskRequest(BaseModel):
    """A task in an aircraft's task list."""

    type: TaskType
    load_percent: int = Field(0, ge=0, description="Percent of capacity to load, LOAD tasks only")


class AircraftRequest(BaseModel):
    """Request model for admitting an aircraft."""

    callsign: str = Field(..., min_length=1)
    characteristics: str = Field(..., description="Aircraft model, e.g. AIRBUS_A320")
    tasks: List[TaskRequest] = Field(..., min_length=1)
    current_task_index: int = Field(0, ge=0)
    fuel_amount: float = Field(..., ge=0)
    on_board: int = Field(0, ge=0, description="Passengers, or kg of freight")
    emergency: bool = False


class TerminalRequest(BaseModel):
    """Request model for adding a terminal."""

    terminal_number: int = Field(..., ge=1)
    terminal_type: AircraftType
    gate_numbers: List[int] = Field(default_factory=list)


class AircraftResponse(BaseModel):
    """Response model for a single aircraft."""

    callsign: str
    characteristics: str
    aircraft_type: AircraftType
    cargo_class: str
    current_task: str
    fuel_percent: int
    on_board: int
    emergency: bool
    gate_number: Optional[int] = None


class GateResponse(BaseModel):
    """Response model for a gate."""

    gate_number: int
    aircraft: Optional[str] = None


class TerminalResponse(BaseModel):
    """Response model for a terminal and its gates."""

    terminal_number: int
    terminal_type: AircraftType
    emergency: bool
    occupancy_level: int
    gates: List[GateResponse]


class MessageResponse(BaseModel):
    """Response model for simple confirmations."""

    message: str
    status: str
