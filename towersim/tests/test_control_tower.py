"""Tests for the control tower."""

import pytest
from towersim.control_tower import ControlTower
from towersim.exceptions import NoSpaceError, NoSuitableGateError
from towersim.models.aircraft import AircraftCharacteristics, AircraftType
from towersim.models.task import TaskType
from towersim.models.terminal import Gate
from towersim.validator import Validator


def _callsigns(aircraft_list):
    return [a.callsign for a in aircraft_list]


@pytest.fixture
def odd_tower(make_terminal):
    """Tower whose next tick is odd, with a two-gate airplane terminal."""
    control_tower = ControlTower(ticks_elapsed=1)
    control_tower.add_terminal(make_terminal(1, AircraftType.AIRPLANE, num_gates=2))
    return control_tower


def test_negative_ticks_elapsed_rejected():
    with pytest.raises(ValueError):
        ControlTower(ticks_elapsed=-1)


def test_add_aircraft_files_by_current_task(tower, make_aircraft):
    away = make_aircraft("AWY1", current=TaskType.AWAY)
    landing = make_aircraft("LND1", current=TaskType.LAND)
    departing = make_aircraft("TKO1", current=TaskType.TAKEOFF)
    loading = make_aircraft("LDG1", current=TaskType.LOAD)

    for aircraft in (away, landing, departing, loading):
        tower.add_aircraft(aircraft)

    assert _callsigns(tower.get_aircraft()) == ["AWY1", "LND1", "TKO1", "LDG1"]
    assert tower.get_landing_queue() == [landing]
    assert tower.get_takeoff_queue() == [departing]
    assert tower.get_loading_aircraft() == {loading: 2}
    assert tower.find_gate_of_aircraft(away) is None
    assert tower.find_gate_of_aircraft(loading).gate_number == 1
    assert str(tower) == "ControlTower: 2 terminals, 4 total aircraft (1 LAND, 1 TAKEOFF, 1 LOAD)"


def test_add_waiting_aircraft_parks_at_gate(tower, make_aircraft):
    first = make_aircraft("WAIT1", current=TaskType.WAIT)
    second = make_aircraft("WAIT2", current=TaskType.WAIT)
    tower.add_aircraft(first)
    tower.add_aircraft(second)

    gates = tower.get_terminals()[0].get_gates()
    assert gates[0].aircraft_at_gate is first
    assert gates[1].aircraft_at_gate is second
    assert tower.get_loading_aircraft() == {}


def test_helicopter_parks_at_helicopter_terminal(tower, make_aircraft):
    helicopter = make_aircraft(
        "HEL1", characteristics=AircraftCharacteristics.ROBINSON_R44, current=TaskType.WAIT
    )
    tower.add_aircraft(helicopter)

    gate = tower.find_gate_of_aircraft(helicopter)
    assert gate is tower.get_terminals()[1].get_gates()[0]


def test_find_unoccupied_gate_skips_emergency_terminal(tower, make_aircraft, make_terminal):
    spare = make_terminal(3, AircraftType.AIRPLANE, num_gates=1)
    tower.add_terminal(spare)
    tower.get_terminals()[0].declare_emergency()

    gate = tower.find_unoccupied_gate(make_aircraft("QFA481"))

    assert gate is spare.get_gates()[0]


def test_find_unoccupied_gate_moves_to_next_terminal(tower, make_aircraft, make_terminal):
    spare = make_terminal(3, AircraftType.AIRPLANE, num_gates=1)
    tower.add_terminal(spare)
    tower.add_aircraft(make_aircraft("WAIT1", current=TaskType.WAIT))
    tower.add_aircraft(make_aircraft("WAIT2", current=TaskType.WAIT))

    assert tower.find_unoccupied_gate(make_aircraft("QFA481")) is spare.get_gates()[0]


def test_admission_without_gate_leaves_tower_unchanged(tower, make_aircraft):
    """A failed admission neither registers nor parks the aircraft."""
    tower.add_aircraft(make_aircraft("WAIT1", current=TaskType.WAIT))
    tower.add_aircraft(make_aircraft("WAIT2", current=TaskType.WAIT))
    late = make_aircraft("LATE1", current=TaskType.LOAD)

    with pytest.raises(NoSuitableGateError) as exc_info:
        tower.add_aircraft(late)

    assert exc_info.value.details["callsign"] == "LATE1"
    assert _callsigns(tower.get_aircraft()) == ["WAIT1", "WAIT2"]
    assert tower.get_loading_aircraft() == {}
    assert tower.find_gate_of_aircraft(late) is None


def test_get_aircraft_and_terminals_are_copies(tower, make_aircraft):
    tower.add_aircraft(make_aircraft("QFA481"))
    tower.get_aircraft().clear()
    tower.get_terminals().clear()

    assert len(tower.get_aircraft()) == 1
    assert len(tower.get_terminals()) == 2
    assert tower.find_aircraft("QFA481") is not None
    assert tower.find_aircraft("NOPE") is None


def test_even_tick_lands_instead_of_takeoff(tower, make_aircraft):
    """On an even tick a successful landing uses the runway."""
    landing = make_aircraft("LND1", current=TaskType.LAND, on_board=100)
    departing = make_aircraft("TKO1", current=TaskType.TAKEOFF)
    tower.add_aircraft(landing)
    tower.add_aircraft(departing)

    tower.tick()

    assert tower.ticks_elapsed == 1
    assert landing.current_task_type == TaskType.WAIT
    assert landing.on_board == 0
    assert tower.find_gate_of_aircraft(landing).gate_number == 1
    assert tower.get_landing_queue() == []
    assert tower.get_takeoff_queue() == [departing]
    assert departing.current_task_type == TaskType.TAKEOFF


def test_even_tick_falls_back_to_takeoff(make_terminal, make_aircraft):
    """If nothing can land on an even tick, a takeoff is attempted."""
    tower = ControlTower()
    tower.add_terminal(make_terminal(1, AircraftType.HELICOPTER, num_gates=1))
    landing = make_aircraft("LND1", current=TaskType.LAND)
    departing = make_aircraft("TKO1", current=TaskType.TAKEOFF)
    tower.add_aircraft(landing)
    tower.add_aircraft(departing)

    tower.tick()

    assert tower.get_landing_queue() == [landing]
    assert departing.current_task_type == TaskType.AWAY
    assert tower.get_takeoff_queue() == []


def test_odd_tick_only_takes_off(odd_tower, make_aircraft):
    """On an odd tick no landing happens even with a free gate."""
    landing = make_aircraft("LND1", current=TaskType.LAND)
    departing = make_aircraft("TKO1", current=TaskType.TAKEOFF)
    odd_tower.add_aircraft(landing)
    odd_tower.add_aircraft(departing)

    odd_tower.tick()

    assert odd_tower.ticks_elapsed == 2
    assert departing.current_task_type == TaskType.AWAY
    assert odd_tower.get_takeoff_queue() == []
    assert odd_tower.get_landing_queue() == [landing]
    assert landing.current_task_type == TaskType.LAND


def test_emergency_lands_first(tower, make_aircraft):
    routine = make_aircraft("PAX1", current=TaskType.LAND)
    emergency = make_aircraft(
        "FRT1",
        characteristics=AircraftCharacteristics.BOEING_747_8F,
        current=TaskType.LAND,
        emergency=True,
    )
    tower.add_aircraft(routine)
    tower.add_aircraft(emergency)

    tower.tick()

    assert emergency.current_task_type == TaskType.WAIT
    assert tower.get_landing_queue() == [routine]


def test_landing_reuses_gate_already_held(tower, make_aircraft):
    aircraft = make_aircraft("LND1", current=TaskType.LAND)
    held_gate = tower.get_terminals()[0].get_gates()[1]
    held_gate.park_aircraft(aircraft)
    tower.add_aircraft(aircraft)

    assert tower.try_land_aircraft() is True

    assert tower.find_gate_of_aircraft(aircraft) is held_gate
    assert not tower.get_terminals()[0].get_gates()[0].is_occupied()
    assert aircraft.current_task_type == TaskType.WAIT


def test_landing_park_failure_keeps_aircraft_queued(tower, make_aircraft, monkeypatch):
    aircraft = make_aircraft("LND1", current=TaskType.LAND)
    tower.add_aircraft(aircraft)

    def refuse(self, incoming):
        raise NoSpaceError(f"Gate {self.gate_number} refused {incoming.callsign}")

    monkeypatch.setattr(Gate, "park_aircraft", refuse)

    assert tower.try_land_aircraft() is False
    assert tower.get_landing_queue() == [aircraft]
    assert aircraft.current_task_type == TaskType.LAND


def test_runway_operations_on_empty_queues(tower):
    assert tower.try_land_aircraft() is False
    assert tower.try_take_off_aircraft() is None


def test_loading_aircraft_departs(tower, make_aircraft):
    """A loading aircraft frees its gate and queues for takeoff when done."""
    aircraft = make_aircraft("LDG1", current=TaskType.LOAD, fuel_percent=10)
    tower.add_aircraft(aircraft)
    gate = tower.find_gate_of_aircraft(aircraft)

    tower.tick()
    assert tower.get_loading_aircraft() == {aircraft: 1}
    assert gate.aircraft_at_gate is aircraft

    tower.tick()
    assert tower.get_loading_aircraft() == {}
    assert not gate.is_occupied()
    assert tower.get_takeoff_queue() == [aircraft]
    assert aircraft.fuel_percent_remaining == 100

    tower.tick()
    assert aircraft.current_task_type == TaskType.AWAY
    assert tower.get_takeoff_queue() == []


def test_waiting_aircraft_starts_loading(tower, make_aircraft):
    aircraft = make_aircraft("WAIT1", current=TaskType.WAIT)
    tower.add_aircraft(aircraft)

    tower.tick()

    assert aircraft.current_task_type == TaskType.LOAD
    assert tower.get_loading_aircraft() == {aircraft: 2}
    assert tower.find_gate_of_aircraft(aircraft) is not None


def test_place_aircraft_in_queues_is_idempotent(tower, make_aircraft):
    aircraft = make_aircraft("LND1", current=TaskType.LAND)
    tower.add_aircraft(aircraft)

    tower.place_aircraft_in_queues(aircraft)
    tower.place_all_aircraft_in_queues()

    assert len(tower.landing_queue) == 1


def _populate(tower, make_aircraft):
    tower.add_aircraft(make_aircraft("AWY1", current=TaskType.AWAY, fuel_percent=90))
    tower.add_aircraft(make_aircraft("LND1", current=TaskType.LAND, fuel_percent=30))
    tower.add_aircraft(
        make_aircraft(
            "FRT1",
            characteristics=AircraftCharacteristics.BOEING_747_8F,
            current=TaskType.LAND,
            fuel_percent=60,
        )
    )
    tower.add_aircraft(make_aircraft("TKO1", current=TaskType.TAKEOFF))
    tower.add_aircraft(make_aircraft("LDG1", current=TaskType.LOAD, load_percent=100))
    tower.add_aircraft(
        make_aircraft(
            "HEL1",
            characteristics=AircraftCharacteristics.ROBINSON_R44,
            current=TaskType.AWAY,
        )
    )


def test_aircraft_never_in_two_places(tower, make_aircraft):
    """Queue membership and gate occupancy stay consistent over many ticks."""
    _populate(tower, make_aircraft)
    validator = Validator()

    for _ in range(60):
        tower.tick()
        report = validator.validate_tower(tower)
        assert report.is_valid(), report.errors

        queued = (
            _callsigns(tower.get_landing_queue())
            + _callsigns(tower.get_takeoff_queue())
            + _callsigns(tower.get_loading_aircraft())
        )
        assert len(queued) == len(set(queued))


def test_tick_is_deterministic(make_terminal, make_aircraft):
    def build():
        control_tower = ControlTower()
        control_tower.add_terminal(make_terminal(1, AircraftType.AIRPLANE, num_gates=2))
        control_tower.add_terminal(make_terminal(2, AircraftType.HELICOPTER, num_gates=1))
        _populate(control_tower, make_aircraft)
        return control_tower

    def state(control_tower):
        return [
            (
                a.callsign,
                a.current_task_type,
                a.fuel_amount,
                getattr(control_tower.find_gate_of_aircraft(a), "gate_number", None),
            )
            for a in control_tower.get_aircraft()
        ]

    first, second = build(), build()
    for _ in range(30):
        first.tick()
        second.tick()
        assert state(first) == state(second)
        assert _callsigns(first.get_landing_queue()) == _callsigns(second.get_landing_queue())
