"""Schemas for simulation endpoints."""

from pydantic import BaseModel, Field
from typing import List


class TickRequest(BaseModel):
    """Request model for advancing the simulation."""

    ticks: int = Field(1, ge=1, description="Number of ticks to run")


class TickResponse(BaseModel):
    """Response model for a tick run."""

    ticks_completed: int
    ticks_elapsed: int
    summary: str
    errors: List[str] = Field(default_factory=list)
