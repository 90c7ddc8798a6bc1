"""Schemas for status endpoints."""

from pydantic import BaseModel
from typing import Dict, List


class StatusResponse(BaseModel):
    """Response model for tower status."""

    ticks_elapsed: int
    terminals: int
    total_aircraft: int
    landing: int
    takeoff: int
    loading: int
    summary: str


class QueuesResponse(BaseModel):
    """Response model for queue contents, by callsign."""

    landing_queue: List[str]
    takeoff_queue: List[str]
    loading: Dict[str, int]
