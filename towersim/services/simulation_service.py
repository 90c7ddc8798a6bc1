"""Service for control tower management."""

import logging
from typing import Dict, List, Optional

from ..config import Config
from ..control_tower import ControlTower
from ..logger import JSONLogger
from ..models.aircraft import Aircraft, AircraftCharacteristics
from ..models.task import Task, TaskList
from ..models.terminal import Gate, Terminal
from ..schemas.tower_schemas import AircraftRequest, TerminalRequest
from ..simulation_runner import SimulationRunner
from ..validator import Validator

logger = logging.getLogger(__name__)


class SimulationService:
    """Service for managing one control tower and running it."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize simulation service."""
        self.config = config or Config()
        self.validator = Validator()
        self.tower = ControlTower()
        self.json_logger: Optional[JSONLogger] = None
        if self.config.TICK_LOG_FILE:
            self.json_logger = JSONLogger(self.config.TICK_LOG_FILE)

    def reset(self, ticks_elapsed: int = 0) -> None:
        """
        Replace the tower with an empty one.

        Args:
            ticks_elapsed: Tick count to start the new tower at
        """
        self.tower = ControlTower(ticks_elapsed=ticks_elapsed)
        logger.info(f"Control tower reset at tick {ticks_elapsed}")

    def add_terminal(self, request: TerminalRequest) -> Terminal:
        """
        Create a terminal with its gates and add it to the tower.

        Raises:
            ValueError: if the terminal number is taken or a gate is invalid
        """
        if any(t.terminal_number == request.terminal_number for t in self.tower.get_terminals()):
            raise ValueError(f"Terminal {request.terminal_number} already exists")
        if len(set(request.gate_numbers)) != len(request.gate_numbers):
            raise ValueError(f"Duplicate gate numbers for terminal {request.terminal_number}")

        terminal = Terminal(
            terminal_number=request.terminal_number,
            terminal_type=request.terminal_type,
            gates=[Gate(gate_number=number) for number in request.gate_numbers],
        )
        self.tower.add_terminal(terminal)
        return terminal

    def admit_aircraft(self, request: AircraftRequest) -> Aircraft:
        """
        Build an aircraft from the request and admit it to the tower.

        Raises:
            ValueError: if the callsign is taken or the aircraft is invalid
            NoSuitableGateError: if the aircraft needs a gate and none is free
        """
        if self.tower.find_aircraft(request.callsign) is not None:
            raise ValueError(f"Aircraft {request.callsign} already exists")

        try:
            characteristics = AircraftCharacteristics[request.characteristics]
        except KeyError:
            raise ValueError(f"Unknown aircraft characteristics {request.characteristics}")

        tasks = TaskList(
            tasks=[Task(type=t.type, load_percent=t.load_percent) for t in request.tasks],
            current_index=request.current_task_index,
        )
        aircraft = Aircraft(
            callsign=request.callsign,
            characteristics=characteristics,
            tasks=tasks,
            fuel_amount=request.fuel_amount,
            on_board=request.on_board,
            emergency=request.emergency,
        )
        self.tower.add_aircraft(aircraft)
        return aircraft

    def _get_aircraft(self, callsign: str) -> Aircraft:
        aircraft = self.tower.find_aircraft(callsign)
        if aircraft is None:
            raise KeyError(f"Aircraft {callsign} not found")
        return aircraft

    def _get_terminal(self, terminal_number: int) -> Terminal:
        for terminal in self.tower.get_terminals():
            if terminal.terminal_number == terminal_number:
                return terminal
        raise KeyError(f"Terminal {terminal_number} not found")

    def set_aircraft_emergency(self, callsign: str, emergency: bool) -> Aircraft:
        aircraft = self._get_aircraft(callsign)
        if emergency:
            aircraft.declare_emergency()
        else:
            aircraft.clear_emergency()
        logger.info(f"Emergency {'declared' if emergency else 'cleared'} for {callsign}")
        return aircraft

    def set_terminal_emergency(self, terminal_number: int, emergency: bool) -> Terminal:
        terminal = self._get_terminal(terminal_number)
        if emergency:
            terminal.declare_emergency()
        else:
            terminal.clear_emergency()
        logger.info(f"Emergency {'declared' if emergency else 'cleared'} for terminal {terminal_number}")
        return terminal

    def advance(self, ticks: int) -> Dict:
        """
        Run the tower for a number of ticks.

        Args:
            ticks: Number of ticks to run

        Returns:
            Final report from the simulation runner

        Raises:
            ValueError: if more ticks are requested than allowed per request
        """
        if ticks > self.config.MAX_TICKS_PER_REQUEST:
            raise ValueError(
                f"Cannot run {ticks} ticks at once (limit {self.config.MAX_TICKS_PER_REQUEST})"
            )

        runner = SimulationRunner(
            tower=self.tower,
            validator=self.validator,
            config=self.config,
            json_logger=self.json_logger,
        )
        return runner.run(max_ticks=ticks)

    def get_status(self) -> Dict:
        """
        Get current tower status.

        Returns:
            Status dictionary with counts per queue
        """
        tower = self.tower
        return {
            "ticks_elapsed": tower.ticks_elapsed,
            "terminals": len(tower.get_terminals()),
            "total_aircraft": len(tower.get_aircraft()),
            "landing": len(tower.get_landing_queue()),
            "takeoff": len(tower.get_takeoff_queue()),
            "loading": len(tower.get_loading_aircraft()),
            "summary": tower.summary(),
        }

    def get_queues(self) -> Dict:
        return {
            "landing_queue": [a.callsign for a in self.tower.get_landing_queue()],
            "takeoff_queue": [a.callsign for a in self.tower.get_takeoff_queue()],
            "loading": {
                a.callsign: remaining
                for a, remaining in self.tower.get_loading_aircraft().items()
            },
        }

    def describe_aircraft(self, aircraft: Aircraft) -> Dict:
        gate = self.tower.find_gate_of_aircraft(aircraft)
        return {
            "callsign": aircraft.callsign,
            "characteristics": aircraft.characteristics.name,
            "aircraft_type": aircraft.aircraft_type,
            "cargo_class": aircraft.cargo_class.value,
            "current_task": str(aircraft.tasks.current_task),
            "fuel_percent": aircraft.fuel_percent_remaining,
            "on_board": aircraft.on_board,
            "emergency": aircraft.has_emergency,
            "gate_number": gate.gate_number if gate else None,
        }

    def get_aircraft(self) -> List[Dict]:
        return [self.describe_aircraft(a) for a in self.tower.get_aircraft()]

    def describe_terminal(self, terminal: Terminal) -> Dict:
        return {
            "terminal_number": terminal.terminal_number,
            "terminal_type": terminal.terminal_type,
            "emergency": terminal.has_emergency,
            "occupancy_level": terminal.calculate_occupancy_level(),
            "gates": [
                {
                    "gate_number": gate.gate_number,
                    "aircraft": gate.aircraft_at_gate.callsign if gate.aircraft_at_gate else None,
                }
                for gate in terminal.get_gates()
            ],
        }

    def get_terminals(self) -> List[Dict]:
        return [self.describe_terminal(t) for t in self.tower.get_terminals()]
