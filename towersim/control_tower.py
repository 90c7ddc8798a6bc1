"""Control tower: owns the airport state and drives the simulation tick by tick."""

import logging
from typing import Dict, List, Optional

from .aircraft_queues import LandingQueue, TakeoffQueue
from .exceptions import NoSpaceError, NoSuitableGateError
from .loading_registry import LoadingRegistry
from .models.aircraft import Aircraft
from .models.task import TaskType
from .models.terminal import Gate, Terminal

logger = logging.getLogger(__name__)


class ControlTower:
    """
    Manages arrivals, departures and loading for the aircraft under its jurisdiction.

    The tower owns the aircraft and terminal lists; the takeoff queue, landing
    queue and loading registry only hold references to aircraft in that list.
    An aircraft is in at most one of them, matching its current task.
    """

    def __init__(
        self,
        ticks_elapsed: int = 0,
        aircraft: Optional[List[Aircraft]] = None,
        landing_queue: Optional[LandingQueue] = None,
        takeoff_queue: Optional[TakeoffQueue] = None,
        loading_aircraft: Optional[Dict[Aircraft, int]] = None,
    ):
        """
        Initialize control tower.

        Args:
            ticks_elapsed: Number of ticks elapsed since the tower was first created
            aircraft: Aircraft already managed by the tower, in arrival order
            landing_queue: Queue of aircraft waiting to land
            takeoff_queue: Queue of aircraft waiting to take off
            loading_aircraft: Mapping of loading aircraft to remaining loading ticks
        """
        if ticks_elapsed < 0:
            raise ValueError(f"Ticks elapsed cannot be negative: {ticks_elapsed}")

        self.ticks_elapsed = ticks_elapsed
        self.aircraft: List[Aircraft] = list(aircraft or [])
        self.terminals: List[Terminal] = []
        self.landing_queue = landing_queue if landing_queue is not None else LandingQueue()
        self.takeoff_queue = takeoff_queue if takeoff_queue is not None else TakeoffQueue()
        self.loading_registry = LoadingRegistry(loading_aircraft)

    # Terminals

    def add_terminal(self, terminal: Terminal) -> None:
        self.terminals.append(terminal)
        logger.info(f"Terminal {terminal.terminal_number} added ({terminal.terminal_type.value})")

    def get_terminals(self) -> List[Terminal]:
        return list(self.terminals)

    # Aircraft

    def add_aircraft(self, aircraft: Aircraft) -> None:
        """
        Bring an aircraft under the tower's jurisdiction.

        Aircraft currently waiting or loading are parked at a suitable gate
        first. If none exists the tower is left unchanged.

        Args:
            aircraft: Aircraft to add

        Raises:
            NoSuitableGateError: if the aircraft needs a gate and none is available
        """
        if aircraft.current_task_type in (TaskType.WAIT, TaskType.LOAD):
            gate = self.find_unoccupied_gate(aircraft)
            gate.park_aircraft(aircraft)
            logger.info(f"{aircraft.callsign} parked at gate {gate.gate_number}")

        self.aircraft.append(aircraft)
        self.place_aircraft_in_queues(aircraft)
        logger.info(f"{aircraft.callsign} added to control tower ({aircraft.tasks.current_task})")

    def get_aircraft(self) -> List[Aircraft]:
        return list(self.aircraft)

    def find_aircraft(self, callsign: str) -> Optional[Aircraft]:
        for aircraft in self.aircraft:
            if aircraft.callsign == callsign:
                return aircraft
        return None

    # Queue snapshots

    def get_takeoff_queue(self) -> List[Aircraft]:
        return self.takeoff_queue.get_aircraft_in_order()

    def get_landing_queue(self) -> List[Aircraft]:
        return self.landing_queue.get_aircraft_in_order()

    def get_loading_aircraft(self) -> Dict[Aircraft, int]:
        return self.loading_registry.snapshot()

    # Gates

    def find_unoccupied_gate(self, aircraft: Aircraft) -> Gate:
        """
        Find an unoccupied gate in a terminal compatible with the aircraft.

        Terminals are checked in the order they were added, skipping terminals
        with a declared emergency and terminals of another aircraft type.

        Raises:
            NoSuitableGateError: if no compatible terminal has a free gate
        """
        for terminal in self.terminals:
            if terminal.has_emergency or not terminal.accepts(aircraft):
                continue
            try:
                return terminal.find_unoccupied_gate()
            except NoSuitableGateError:
                continue

        raise NoSuitableGateError(
            f"No gate available for aircraft {aircraft.callsign}",
            {"callsign": aircraft.callsign, "aircraft_type": aircraft.aircraft_type.value},
        )

    def find_gate_of_aircraft(self, aircraft: Aircraft) -> Optional[Gate]:
        """Return the gate the aircraft is parked at, or None if it is not parked."""
        for terminal in self.terminals:
            for gate in terminal.get_gates():
                if gate.aircraft_at_gate == aircraft:
                    return gate
        return None

    def _release_gate(self, aircraft: Aircraft) -> None:
        gate = self.find_gate_of_aircraft(aircraft)
        if gate is not None:
            gate.aircraft_leaves()
            logger.debug(f"{aircraft.callsign} left gate {gate.gate_number}")

    # Simulation

    def tick(self) -> None:
        """
        Advance the simulation by one tick.

        Every aircraft ticks and moves on from AWAY or WAIT, loading timers
        count down, then a single runway operation is attempted: on even ticks
        a landing, falling back to a takeoff if nothing landed; on odd ticks a
        takeoff only. Finally every aircraft is filed into the queue matching
        its current task.
        """
        tick_number = self.ticks_elapsed
        self.ticks_elapsed += 1
        logger.debug(f"Tick {tick_number} started")

        for aircraft in self.aircraft:
            aircraft.tick()
            if aircraft.current_task_type in (TaskType.AWAY, TaskType.WAIT):
                aircraft.tasks.move_to_next_task()

        self.loading_registry.tick(self._release_gate)

        if tick_number % 2 == 0:
            if not self.try_land_aircraft():
                self.try_take_off_aircraft()
        else:
            self.try_take_off_aircraft()

        self.place_all_aircraft_in_queues()
        logger.debug(f"Tick {tick_number} finished: {self.summary()}")

    def try_land_aircraft(self) -> bool:
        """
        Attempt to land the highest priority aircraft in the landing queue.

        The aircraft is parked at the gate it already holds, or at a free
        compatible gate. If no gate can be found, or parking fails, nothing
        changes and the aircraft stays queued.

        Returns:
            True if an aircraft landed and was parked
        """
        aircraft = self.landing_queue.peek_aircraft()
        if aircraft is None:
            return False

        gate = self.find_gate_of_aircraft(aircraft)
        if gate is None:
            try:
                gate = self.find_unoccupied_gate(aircraft)
            except NoSuitableGateError:
                logger.debug(f"No gate yet for landing aircraft {aircraft.callsign}")
                return False
            try:
                gate.park_aircraft(aircraft)
            except NoSpaceError as e:
                logger.warning(f"Landing of {aircraft.callsign} deferred: {e}")
                return False

        self.landing_queue.remove_aircraft()
        aircraft.unload()
        aircraft.tasks.move_to_next_task()
        logger.info(f"{aircraft.callsign} landed and parked at gate {gate.gate_number}")
        return True

    def try_take_off_aircraft(self) -> Optional[Aircraft]:
        """
        Let the aircraft at the front of the takeoff queue take off.

        Returns:
            The aircraft that took off, or None if the queue was empty
        """
        aircraft = self.takeoff_queue.peek_aircraft()
        if aircraft is None:
            return None

        aircraft.tasks.move_to_next_task()
        self.takeoff_queue.remove_aircraft()
        logger.info(f"{aircraft.callsign} took off")
        return aircraft

    def place_aircraft_in_queues(self, aircraft: Aircraft) -> None:
        """File the aircraft into the queue or registry matching its current task."""
        task_type = aircraft.current_task_type

        if task_type == TaskType.LAND:
            if not self.landing_queue.contains_aircraft(aircraft):
                self.landing_queue.add_aircraft(aircraft)
        elif task_type == TaskType.TAKEOFF:
            if not self.takeoff_queue.contains_aircraft(aircraft):
                self.takeoff_queue.add_aircraft(aircraft)
        elif task_type == TaskType.LOAD:
            if not self.loading_registry.contains(aircraft):
                self.loading_registry.add(aircraft, aircraft.loading_time)

    def place_all_aircraft_in_queues(self) -> None:
        for aircraft in self.aircraft:
            self.place_aircraft_in_queues(aircraft)

    def summary(self) -> str:
        return (
            f"ControlTower: {len(self.terminals)} terminals, "
            f"{len(self.aircraft)} total aircraft "
            f"({len(self.landing_queue)} LAND, {len(self.takeoff_queue)} TAKEOFF, "
            f"{len(self.loading_registry)} LOAD)"
        )

    def __str__(self) -> str:
        return self.summary()
