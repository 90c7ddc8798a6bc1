"""Validator module for checking control tower invariants."""

import logging
from collections import Counter
from typing import List
from pydantic import BaseModel

from .config import CRITICAL_FUEL_PERCENT
from .control_tower import ControlTower
from .models.task import TaskType

logger = logging.getLogger(__name__)


class ValidationReport(BaseModel):
    """Validation report with errors and warnings."""

    errors: List[str]
    warnings: List[str]

    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0


class Validator:
    """Checks that a control tower is in a consistent state."""

    def validate_tower(self, tower: ControlTower) -> ValidationReport:
        """
        Validate queue membership, gate occupancy and loading timers.

        Args:
            tower: Control tower to check

        Returns:
            ValidationReport with errors and warnings
        """
        errors = []
        warnings = []

        takeoff = tower.get_takeoff_queue()
        landing = tower.get_landing_queue()
        loading = tower.get_loading_aircraft()

        # Each aircraft sits in at most one structure
        memberships = Counter(
            [a.callsign for a in takeoff]
            + [a.callsign for a in landing]
            + [a.callsign for a in loading]
        )
        for callsign, count in memberships.items():
            if count > 1:
                errors.append(f"Aircraft {callsign} is queued in {count} places")

        # ... and the structure matches its current task
        expected = (
            [(a, TaskType.TAKEOFF, "takeoff queue") for a in takeoff]
            + [(a, TaskType.LAND, "landing queue") for a in landing]
            + [(a, TaskType.LOAD, "loading registry") for a in loading]
        )
        for aircraft, task_type, place in expected:
            if aircraft.current_task_type != task_type:
                errors.append(
                    f"Aircraft {aircraft.callsign} is in the {place} "
                    f"but its current task is {aircraft.current_task_type.value}"
                )

        for aircraft, remaining in loading.items():
            if remaining < 0:
                errors.append(f"Aircraft {aircraft.callsign} has negative loading time {remaining}")

        # An aircraft is parked at no more than one gate
        parked = Counter(
            gate.aircraft_at_gate.callsign
            for terminal in tower.get_terminals()
            for gate in terminal.get_gates()
            if gate.aircraft_at_gate is not None
        )
        for callsign, count in parked.items():
            if count > 1:
                errors.append(f"Aircraft {callsign} is parked at {count} gates")

        for aircraft in landing:
            if aircraft.has_emergency:
                warnings.append(f"Aircraft {aircraft.callsign} is waiting to land with an emergency")
            elif aircraft.fuel_percent_remaining <= CRITICAL_FUEL_PERCENT:
                warnings.append(
                    f"Aircraft {aircraft.callsign} is waiting to land with "
                    f"{aircraft.fuel_percent_remaining}% fuel"
                )

        if errors:
            logger.debug(f"Tower validation found {len(errors)} errors")

        return ValidationReport(errors=errors, warnings=warnings)
