"""Aircraft model."""

import math
from enum import Enum
from pydantic import BaseModel, Field, model_validator

from ..config import (
    AWAY_FUEL_BURN_FRACTION,
    FREIGHT_HEAVY_LOAD_KG,
    FREIGHT_LIGHT_LOAD_KG,
)
from .task import TaskList, TaskType


class AircraftType(str, Enum):
    """Kind of aircraft; terminals are tagged with the same values."""

    AIRPLANE = "AIRPLANE"
    HELICOPTER = "HELICOPTER"


class CargoClass(str, Enum):
    """What an aircraft carries."""

    PASSENGER = "PASSENGER"
    FREIGHT = "FREIGHT"


class AircraftCharacteristics(Enum):
    """Known aircraft models and their physical characteristics."""

    # type, empty weight (kg), max takeoff weight (kg), fuel capacity (L),
    # passenger capacity, freight capacity (kg)
    AIRBUS_A320 = (AircraftType.AIRPLANE, 42600, 78000, 27200, 150, 0)
    BOEING_747_8F = (AircraftType.AIRPLANE, 197131, 447700, 229980, 0, 137756)
    BOEING_787 = (AircraftType.AIRPLANE, 119950, 227930, 126206, 242, 0)
    FOKKER_100 = (AircraftType.AIRPLANE, 24375, 44450, 13365, 97, 0)
    ROBINSON_R44 = (AircraftType.HELICOPTER, 658, 1089, 190, 4, 0)
    SIKORSKY_SKYCRANE = (AircraftType.HELICOPTER, 8724, 21319, 3328, 0, 9100)

    def __init__(
        self,
        aircraft_type: AircraftType,
        empty_weight: int,
        max_takeoff_weight: int,
        fuel_capacity: int,
        passenger_capacity: int,
        freight_capacity: int,
    ):
        self.aircraft_type = aircraft_type
        self.empty_weight = empty_weight
        self.max_takeoff_weight = max_takeoff_weight
        self.fuel_capacity = fuel_capacity
        self.passenger_capacity = passenger_capacity
        self.freight_capacity = freight_capacity

    @property
    def cargo_class(self) -> CargoClass:
        if self.passenger_capacity > 0:
            return CargoClass.PASSENGER
        return CargoClass.FREIGHT


class Aircraft(BaseModel):
    """
    An aircraft managed by the control tower.

    Identity is the callsign: two Aircraft with the same callsign compare equal
    and hash the same, so queues and the loading registry can hold references.
    ``on_board`` counts passengers for passenger aircraft and kilograms of
    freight for freight aircraft.
    """

    callsign: str = Field(..., min_length=1)
    characteristics: AircraftCharacteristics
    tasks: TaskList
    fuel_amount: float = Field(..., ge=0)
    on_board: int = Field(default=0, ge=0)
    emergency: bool = False

    @model_validator(mode="after")
    def check_capacities(self) -> "Aircraft":
        if self.fuel_amount > self.characteristics.fuel_capacity:
            raise ValueError(
                f"Fuel amount {self.fuel_amount} exceeds capacity "
                f"{self.characteristics.fuel_capacity}"
            )
        if self.on_board > self.cargo_capacity:
            raise ValueError(
                f"On-board cargo {self.on_board} exceeds capacity {self.cargo_capacity}"
            )
        return self

    @property
    def aircraft_type(self) -> AircraftType:
        return self.characteristics.aircraft_type

    @property
    def cargo_class(self) -> CargoClass:
        return self.characteristics.cargo_class

    @property
    def cargo_capacity(self) -> int:
        if self.cargo_class == CargoClass.PASSENGER:
            return self.characteristics.passenger_capacity
        return self.characteristics.freight_capacity

    @property
    def current_task_type(self) -> TaskType:
        return self.tasks.current_task.type

    @property
    def fuel_percent_remaining(self) -> int:
        """Fuel remaining as a whole percentage of capacity, rounded half up."""
        return math.floor(self.fuel_amount * 100 / self.characteristics.fuel_capacity + 0.5)

    @property
    def has_emergency(self) -> bool:
        return self.emergency

    @property
    def loading_time(self) -> int:
        """
        Number of ticks needed to load cargo for the current task's load percent.

        Passenger aircraft take ceil(log10(passengers to load)) ticks, freight
        aircraft 1, 2 or 3 ticks depending on the freight weight. Always at
        least one tick.
        """
        load_percent = self.tasks.current_task.load_percent
        to_load = round(self.cargo_capacity * load_percent / 100)

        if self.cargo_class == CargoClass.PASSENGER:
            if to_load <= 1:
                return 1
            return max(1, math.ceil(math.log10(to_load)))

        if to_load < FREIGHT_LIGHT_LOAD_KG:
            return 1
        if to_load <= FREIGHT_HEAVY_LOAD_KG:
            return 2
        return 3

    def declare_emergency(self) -> None:
        self.emergency = True

    def clear_emergency(self) -> None:
        self.emergency = False

    def unload(self) -> None:
        """Remove all passengers or freight from the aircraft."""
        self.on_board = 0

    def tick(self) -> None:
        """Burn fuel while away and refuel while loading."""
        capacity = self.characteristics.fuel_capacity
        task_type = self.current_task_type

        if task_type == TaskType.AWAY:
            self.fuel_amount = max(0.0, self.fuel_amount - capacity * AWAY_FUEL_BURN_FRACTION)
        elif task_type == TaskType.LOAD:
            self.fuel_amount = min(float(capacity), self.fuel_amount + capacity / self.loading_time)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Aircraft):
            return NotImplemented
        return self.callsign == other.callsign

    def __hash__(self) -> int:
        return hash(self.callsign)

    def __str__(self) -> str:
        if self.cargo_class == CargoClass.PASSENGER:
            cargo = f"{self.on_board} passengers"
        else:
            cargo = f"{self.on_board} kg of freight"
        text = (
            f"{self.characteristics.name} {self.callsign} at "
            f"{self.fuel_percent_remaining}% fuel, {cargo}"
        )
        if self.emergency:
            text += " (EMERGENCY)"
        return text
