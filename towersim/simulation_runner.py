"""Simulation runner for driving the control tower over many ticks."""

import logging
from typing import Callable, Dict, List, Optional

from .config import Config, DEFAULT_MAX_TICKS, PROGRESS_LOG_INTERVAL
from .control_tower import ControlTower
from .logger import JSONLogger
from .validator import Validator

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Orchestrates the tick loop."""

    def __init__(
        self,
        tower: ControlTower,
        validator: Validator,
        config: Config,
        json_logger: Optional[JSONLogger] = None,
    ):
        """
        Initialize simulation runner.

        Args:
            tower: Control tower to drive
            validator: Validator checking the tower after each tick
            config: Configuration object
            json_logger: Optional JSON-lines logger receiving every tick entry
        """
        self.tower = tower
        self.validator = validator
        self.config = config
        self.json_logger = json_logger
        self.tick_log: List[Dict] = []

    def run(
        self,
        max_ticks: int = DEFAULT_MAX_TICKS,
        progress_callback: Optional[Callable[[int, str], None]] = None,
    ) -> Dict:
        """
        Run the tick loop.

        Stops early if validation of the tower fails after a tick.

        Args:
            max_ticks: Number of ticks to run
            progress_callback: Called with (ticks completed, tower summary) every
                PROGRESS_LOG_INTERVAL ticks

        Returns:
            Final report dictionary
        """
        logger.info(f"Starting simulation with max_ticks={max_ticks} at tick {self.tower.ticks_elapsed}")

        ticks_completed = 0
        errors: List[str] = []

        while ticks_completed < max_ticks:
            self.tower.tick()
            ticks_completed += 1

            entry = self._snapshot_tick()
            self.tick_log.append(entry)
            if self.json_logger is not None:
                self.json_logger.log_tick(entry)

            if self.config.VALIDATE_EACH_TICK:
                report = self.validator.validate_tower(self.tower)
                if report.warnings:
                    logger.warning(f"Validation warnings at tick {entry['tick']}: {report.warnings}")
                if not report.is_valid():
                    logger.error(f"Validation errors at tick {entry['tick']}: {report.errors}")
                    errors = report.errors
                    break

            if ticks_completed % PROGRESS_LOG_INTERVAL == 0:
                logger.info(f"Completed {ticks_completed} ticks: {self.tower.summary()}")
                if progress_callback is not None:
                    progress_callback(ticks_completed, self.tower.summary())

        final_report = {
            "ticks_completed": ticks_completed,
            "ticks_elapsed": self.tower.ticks_elapsed,
            "summary": self.tower.summary(),
            "tick_log": self.tick_log,
            "errors": errors,
        }

        logger.info(f"Simulation completed: {ticks_completed} ticks, {self.tower.summary()}")
        return final_report

    def _snapshot_tick(self) -> Dict:
        """
        Capture the queues after a tick, by callsign.

        Returns:
            Tick entry for the tick log
        """
        return {
            "tick": self.tower.ticks_elapsed - 1,
            "landing_queue": [a.callsign for a in self.tower.get_landing_queue()],
            "takeoff_queue": [a.callsign for a in self.tower.get_takeoff_queue()],
            "loading": {
                a.callsign: remaining
                for a, remaining in self.tower.get_loading_aircraft().items()
            },
            "summary": self.tower.summary(),
        }
