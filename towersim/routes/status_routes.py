"""Routes for status and queue endpoints."""

import logging
from fastapi import APIRouter

from ..schemas.status_schemas import StatusResponse, QueuesResponse
from ..services.singleton import get_simulation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/status", response_model=StatusResponse)
async def get_status():
    """
    Get current tower status.

    Returns:
        Tick count, terminal and aircraft counts, and queue sizes
    """
    simulation_service = get_simulation_service()
    status_data = simulation_service.get_status()
    return StatusResponse(**status_data)


@router.get("/queues", response_model=QueuesResponse)
async def get_queues():
    """
    Get queue contents by callsign.

    Returns:
        Landing queue in priority order, takeoff queue in FIFO order, and
        remaining loading ticks per aircraft
    """
    simulation_service = get_simulation_service()
    return QueuesResponse(**simulation_service.get_queues())
