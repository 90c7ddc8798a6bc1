"""Queues of aircraft waiting to take off or land."""

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from .config import CRITICAL_FUEL_PERCENT
from .models.aircraft import Aircraft, CargoClass


class AircraftQueue(ABC):
    """
    A queue of aircraft.

    Which aircraft leaves the queue next depends on the concrete queue. Queues
    hold references to aircraft owned by the control tower.
    """

    @abstractmethod
    def add_aircraft(self, aircraft: Aircraft) -> None:
        """Add an aircraft to the queue."""

    @abstractmethod
    def remove_aircraft(self) -> Optional[Aircraft]:
        """Remove and return the aircraft at the front, or None if empty."""

    @abstractmethod
    def peek_aircraft(self) -> Optional[Aircraft]:
        """Return the aircraft at the front without removing it, or None if empty."""

    @abstractmethod
    def get_aircraft_in_order(self) -> List[Aircraft]:
        """
        Return every queued aircraft in the order they would be removed.

        The returned list is a copy; changing it does not affect the queue.
        """

    @abstractmethod
    def contains_aircraft(self, aircraft: Aircraft) -> bool:
        """Check whether the aircraft is queued."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    def __str__(self) -> str:
        callsigns = ", ".join(aircraft.callsign for aircraft in self.get_aircraft_in_order())
        return f"{type(self).__name__} [{callsigns}]"


class TakeoffQueue(AircraftQueue):
    """First-in-first-out queue of aircraft waiting to take off."""

    def __init__(self):
        self._queue: Deque[Aircraft] = deque()

    def add_aircraft(self, aircraft: Aircraft) -> None:
        self._queue.append(aircraft)

    def peek_aircraft(self) -> Optional[Aircraft]:
        if not self._queue:
            return None
        return self._queue[0]

    def remove_aircraft(self) -> Optional[Aircraft]:
        if not self._queue:
            return None
        return self._queue.popleft()

    def get_aircraft_in_order(self) -> List[Aircraft]:
        return list(self._queue)

    def contains_aircraft(self, aircraft: Aircraft) -> bool:
        return aircraft in self._queue

    def __len__(self) -> int:
        return len(self._queue)


@dataclass
class LandingEntry:
    """An aircraft in the landing queue with the sequence it was queued at."""

    aircraft: Aircraft
    sequence: int


# Landing priority tiers, most urgent first
EMERGENCY_TIER = 0
LOW_FUEL_TIER = 1
PASSENGER_TIER = 2
OTHER_TIER = 3


def landing_tier(aircraft: Aircraft) -> int:
    """
    Priority tier of an aircraft waiting to land.

    Emergencies come first, then aircraft at or below the critical fuel level,
    then passenger aircraft, then everything else.
    """
    if aircraft.has_emergency:
        return EMERGENCY_TIER
    if aircraft.fuel_percent_remaining <= CRITICAL_FUEL_PERCENT:
        return LOW_FUEL_TIER
    if aircraft.cargo_class == CargoClass.PASSENGER:
        return PASSENGER_TIER
    return OTHER_TIER


class LandingQueue(AircraftQueue):
    """
    Rule-based queue of aircraft waiting in the air to land.

    Entries are stored in queue order and ranked on every access by
    ``(landing_tier, sequence)``, so within a tier the aircraft that joined
    the queue first lands first. Tiers are recomputed each time because fuel
    and emergency status change between ticks.
    """

    def __init__(self):
        self._entries: List[LandingEntry] = []
        self._next_sequence = 0

    @staticmethod
    def _rank(entry: LandingEntry) -> Tuple[int, int]:
        return landing_tier(entry.aircraft), entry.sequence

    def _top_entry(self) -> Optional[LandingEntry]:
        if not self._entries:
            return None
        return min(self._entries, key=self._rank)

    def add_aircraft(self, aircraft: Aircraft) -> None:
        self._entries.append(LandingEntry(aircraft=aircraft, sequence=self._next_sequence))
        self._next_sequence += 1

    def peek_aircraft(self) -> Optional[Aircraft]:
        entry = self._top_entry()
        return entry.aircraft if entry else None

    def remove_aircraft(self) -> Optional[Aircraft]:
        entry = self._top_entry()
        if entry is None:
            return None
        self._entries.remove(entry)
        return entry.aircraft

    def get_aircraft_in_order(self) -> List[Aircraft]:
        return [entry.aircraft for entry in sorted(self._entries, key=self._rank)]

    def contains_aircraft(self, aircraft: Aircraft) -> bool:
        return any(entry.aircraft == aircraft for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)
