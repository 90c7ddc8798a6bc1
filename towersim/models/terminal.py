"""Gate and terminal models."""

import math
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from ..config import MAX_NUM_GATES
from ..exceptions import NoSpaceError, NoSuitableGateError
from .aircraft import Aircraft, AircraftType


class Gate(BaseModel):
    """A gate that can hold at most one parked aircraft."""

    gate_number: int = Field(..., ge=1)
    aircraft_at_gate: Optional[Aircraft] = None

    def is_occupied(self) -> bool:
        return self.aircraft_at_gate is not None

    def park_aircraft(self, aircraft: Aircraft) -> None:
        """
        Park an aircraft at this gate.

        Raises:
            NoSpaceError: if any aircraft is already parked here
        """
        if self.aircraft_at_gate is not None:
            raise NoSpaceError(
                f"Gate {self.gate_number} is occupied by {self.aircraft_at_gate.callsign}",
                {
                    "gate_number": self.gate_number,
                    "occupant": self.aircraft_at_gate.callsign,
                    "requested_by": aircraft.callsign,
                },
            )
        self.aircraft_at_gate = aircraft

    def aircraft_leaves(self) -> None:
        self.aircraft_at_gate = None

    def __str__(self) -> str:
        occupant = self.aircraft_at_gate.callsign if self.aircraft_at_gate else "empty"
        return f"Gate {self.gate_number} [{occupant}]"


class Terminal(BaseModel):
    """A terminal of one aircraft type, owning its gates in addition order."""

    terminal_number: int = Field(..., ge=1)
    terminal_type: AircraftType
    gates: List[Gate] = Field(default_factory=list)
    emergency: bool = False

    @field_validator("gates")
    @classmethod
    def check_gate_count(cls, gates: List[Gate]) -> List[Gate]:
        if len(gates) > MAX_NUM_GATES:
            raise ValueError(f"A terminal holds at most {MAX_NUM_GATES} gates")
        return gates

    @property
    def has_emergency(self) -> bool:
        return self.emergency

    def declare_emergency(self) -> None:
        self.emergency = True

    def clear_emergency(self) -> None:
        self.emergency = False

    def accepts(self, aircraft: Aircraft) -> bool:
        """Check whether aircraft of this type may use the terminal."""
        return self.terminal_type == aircraft.aircraft_type

    def add_gate(self, gate: Gate) -> None:
        """
        Add a gate after the existing ones.

        Raises:
            NoSpaceError: if the terminal already has the maximum number of gates
        """
        if len(self.gates) >= MAX_NUM_GATES:
            raise NoSpaceError(
                f"Terminal {self.terminal_number} already has {MAX_NUM_GATES} gates",
                {"terminal_number": self.terminal_number},
            )
        self.gates.append(gate)

    def get_gates(self) -> List[Gate]:
        return list(self.gates)

    def find_unoccupied_gate(self) -> Gate:
        """
        Return the first unoccupied gate in gate order.

        Raises:
            NoSuitableGateError: if every gate is occupied
        """
        for gate in self.gates:
            if not gate.is_occupied():
                return gate
        raise NoSuitableGateError(
            f"No unoccupied gate in terminal {self.terminal_number}",
            {"terminal_number": self.terminal_number},
        )

    def calculate_occupancy_level(self) -> int:
        """Percentage of occupied gates, rounded half up; 0 without gates."""
        if not self.gates:
            return 0
        occupied = sum(1 for gate in self.gates if gate.is_occupied())
        return math.floor(occupied * 100 / len(self.gates) + 0.5)

    def __str__(self) -> str:
        text = f"{self.terminal_type.value} Terminal {self.terminal_number}, {len(self.gates)} gates"
        if self.emergency:
            text += " (EMERGENCY)"
        return text
