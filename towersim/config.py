"""Configuration module for simulation constants and settings."""

from typing import Optional
from pydantic_settings import BaseSettings


# Landing priority
CRITICAL_FUEL_PERCENT = 20  # at or below this, an aircraft is low on fuel


# Ground constants
MAX_NUM_GATES = 6  # per terminal


# Aircraft behaviour
AWAY_FUEL_BURN_FRACTION = 0.1  # fraction of fuel capacity burned per tick while away
FREIGHT_LIGHT_LOAD_KG = 1000
FREIGHT_HEAVY_LOAD_KG = 50000


# Runner constants
DEFAULT_MAX_TICKS = 100
PROGRESS_LOG_INTERVAL = 50


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "towersim.log"
    TICK_LOG_FILE: Optional[str] = None  # JSON-lines tick log, disabled when unset

    # Simulation
    MAX_TICKS_PER_REQUEST: int = 1000
    VALIDATE_EACH_TICK: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
