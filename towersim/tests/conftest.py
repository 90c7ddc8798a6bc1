"""Shared fixtures for tower simulation tests."""

import pytest
from towersim.control_tower import ControlTower
from towersim.models.aircraft import Aircraft, AircraftCharacteristics, AircraftType
from towersim.models.task import Task, TaskList, TaskType
from towersim.models.terminal import Gate, Terminal


# AWAY -> LAND -> WAIT -> LOAD -> TAKEOFF, then around again
STANDARD_CYCLE = (
    TaskType.AWAY,
    TaskType.LAND,
    TaskType.WAIT,
    TaskType.LOAD,
    TaskType.TAKEOFF,
)


@pytest.fixture
def make_aircraft():
    """Factory building aircraft on the standard task cycle."""

    def _make(
        callsign: str,
        characteristics: AircraftCharacteristics = AircraftCharacteristics.AIRBUS_A320,
        current: TaskType = TaskType.AWAY,
        fuel_percent: float = 50,
        emergency: bool = False,
        load_percent: int = 60,
        on_board: int = 0,
    ) -> Aircraft:
        tasks = TaskList(
            tasks=[
                Task(type=t, load_percent=load_percent if t == TaskType.LOAD else 0)
                for t in STANDARD_CYCLE
            ],
            current_index=STANDARD_CYCLE.index(current),
        )
        return Aircraft(
            callsign=callsign,
            characteristics=characteristics,
            tasks=tasks,
            fuel_amount=characteristics.fuel_capacity * fuel_percent / 100,
            on_board=on_board,
            emergency=emergency,
        )

    return _make


@pytest.fixture
def make_terminal():
    """Factory building a terminal with numbered gates."""

    def _make(
        terminal_number: int,
        terminal_type: AircraftType = AircraftType.AIRPLANE,
        num_gates: int = 2,
    ) -> Terminal:
        return Terminal(
            terminal_number=terminal_number,
            terminal_type=terminal_type,
            gates=[Gate(gate_number=n) for n in range(1, num_gates + 1)],
        )

    return _make


@pytest.fixture
def tower(make_terminal):
    """Tower with a two-gate airplane terminal and a one-gate helicopter terminal."""
    control_tower = ControlTower()
    control_tower.add_terminal(make_terminal(1, AircraftType.AIRPLANE, num_gates=2))
    control_tower.add_terminal(make_terminal(2, AircraftType.HELICOPTER, num_gates=1))
    return control_tower
