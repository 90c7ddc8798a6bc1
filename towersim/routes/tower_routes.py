"""Routes for terminals, aircraft and emergencies."""

import logging
from typing import List
from fastapi import APIRouter, HTTPException

from ..exceptions import NoSuitableGateError
from ..schemas.tower_schemas import (
    AircraftRequest,
    AircraftResponse,
    MessageResponse,
    TerminalRequest,
    TerminalResponse,
)
from ..services.singleton import get_simulation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tower"])


@router.post("/terminals", response_model=TerminalResponse, status_code=201)
async def add_terminal(request: TerminalRequest):
    """
    Add a terminal, with its gates, to the control tower.

    Args:
        request: Terminal number, type and gate numbers

    Returns:
        The new terminal
    """
    simulation_service = get_simulation_service()

    try:
        terminal = simulation_service.add_terminal(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return TerminalResponse(**simulation_service.describe_terminal(terminal))


@router.get("/terminals", response_model=List[TerminalResponse])
async def get_terminals():
    """Get all terminals in the order they were added."""
    simulation_service = get_simulation_service()
    return [TerminalResponse(**t) for t in simulation_service.get_terminals()]


@router.post("/terminals/{terminal_number}/emergency", response_model=TerminalResponse)
async def declare_terminal_emergency(terminal_number: int):
    """Declare an emergency at a terminal, closing its gates to new aircraft."""
    simulation_service = get_simulation_service()
    try:
        terminal = simulation_service.set_terminal_emergency(terminal_number, True)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    return TerminalResponse(**simulation_service.describe_terminal(terminal))


@router.delete("/terminals/{terminal_number}/emergency", response_model=TerminalResponse)
async def clear_terminal_emergency(terminal_number: int):
    simulation_service = get_simulation_service()
    try:
        terminal = simulation_service.set_terminal_emergency(terminal_number, False)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    return TerminalResponse(**simulation_service.describe_terminal(terminal))


@router.post("/aircraft", response_model=AircraftResponse, status_code=201)
async def admit_aircraft(request: AircraftRequest):
    """
    Admit an aircraft to the control tower.

    Waiting or loading aircraft are parked at a gate on admission.

    Args:
        request: Aircraft description and task list

    Returns:
        The admitted aircraft
    """
    simulation_service = get_simulation_service()

    try:
        aircraft = simulation_service.admit_aircraft(request)
    except NoSuitableGateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AircraftResponse(**simulation_service.describe_aircraft(aircraft))


@router.get("/aircraft", response_model=List[AircraftResponse])
async def get_aircraft():
    """Get all aircraft in the order they were admitted."""
    simulation_service = get_simulation_service()
    return [AircraftResponse(**a) for a in simulation_service.get_aircraft()]


@router.post("/aircraft/{callsign}/emergency", response_model=AircraftResponse)
async def declare_aircraft_emergency(callsign: str):
    """Declare an emergency on board, moving the aircraft to the front of the landing queue."""
    simulation_service = get_simulation_service()
    try:
        aircraft = simulation_service.set_aircraft_emergency(callsign, True)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    return AircraftResponse(**simulation_service.describe_aircraft(aircraft))


@router.delete("/aircraft/{callsign}/emergency", response_model=AircraftResponse)
async def clear_aircraft_emergency(callsign: str):
    simulation_service = get_simulation_service()
    try:
        aircraft = simulation_service.set_aircraft_emergency(callsign, False)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    return AircraftResponse(**simulation_service.describe_aircraft(aircraft))


@router.post("/reset", response_model=MessageResponse)
async def reset_tower():
    """Replace the control tower with an empty one."""
    simulation_service = get_simulation_service()
    simulation_service.reset()
    return MessageResponse(message="Control tower reset", status="empty")
