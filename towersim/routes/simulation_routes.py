"""Routes for advancing the simulation."""

import logging
from fastapi import APIRouter, HTTPException

from ..schemas.simulation_schemas import TickRequest, TickResponse
from ..services.singleton import get_simulation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["simulation"])


@router.post("/tick", response_model=TickResponse)
async def run_ticks(request: TickRequest):
    """
    Advance the control tower by one or more ticks.

    Args:
        request: Number of ticks to run

    Returns:
        Ticks run, the tower's tick count and summary, and any validation errors
    """
    simulation_service = get_simulation_service()

    try:
        report = simulation_service.advance(request.ticks)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error running ticks: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return TickResponse(
        ticks_completed=report["ticks_completed"],
        ticks_elapsed=report["ticks_elapsed"],
        summary=report["summary"],
        errors=report["errors"],
    )
