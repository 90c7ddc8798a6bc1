"""Registry of aircraft loading cargo at a gate."""

import logging
from typing import Callable, Dict, List, Optional

from .models.aircraft import Aircraft

logger = logging.getLogger(__name__)


class LoadingRegistry:
    """Maps each loading aircraft to the number of ticks it still needs."""

    def __init__(self, loading_aircraft: Optional[Dict[Aircraft, int]] = None):
        """
        Initialize the registry.

        Args:
            loading_aircraft: Optional initial mapping of aircraft to remaining ticks
        """
        self._remaining: Dict[Aircraft, int] = {}
        for aircraft, ticks in (loading_aircraft or {}).items():
            self.add(aircraft, ticks)

    def add(self, aircraft: Aircraft, ticks: int) -> None:
        if ticks < 0:
            raise ValueError(f"Loading time for {aircraft.callsign} cannot be negative: {ticks}")
        self._remaining[aircraft] = ticks

    def contains(self, aircraft: Aircraft) -> bool:
        return aircraft in self._remaining

    def remaining(self, aircraft: Aircraft) -> int:
        return self._remaining[aircraft]

    def snapshot(self) -> Dict[Aircraft, int]:
        return dict(self._remaining)

    def tick(self, release: Callable[[Aircraft], None]) -> List[Aircraft]:
        """
        Count down every loading aircraft by one tick.

        Aircraft reaching zero are collected during the pass and only then
        removed, moved on to their next task and released from their gate.

        Args:
            release: Called with each aircraft that finished loading, to free its gate

        Returns:
            Aircraft that finished loading this tick, in registry order
        """
        finished = []
        for aircraft in self._remaining:
            self._remaining[aircraft] -= 1
            if self._remaining[aircraft] <= 0:
                finished.append(aircraft)

        for aircraft in finished:
            del self._remaining[aircraft]
            release(aircraft)
            aircraft.tasks.move_to_next_task()
            logger.info(f"{aircraft.callsign} finished loading, next task {aircraft.tasks.current_task}")

        return finished

    def __len__(self) -> int:
        return len(self._remaining)
