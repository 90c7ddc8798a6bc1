"""Tower simulation models package."""

from .task import Task, TaskList, TaskType, ALLOWED_NEXT_TASKS
from .aircraft import Aircraft, AircraftCharacteristics, AircraftType, CargoClass
from .terminal import Gate, Terminal

__all__ = [
    "Task",
    "TaskList",
    "TaskType",
    "ALLOWED_NEXT_TASKS",
    "Aircraft",
    "AircraftCharacteristics",
    "AircraftType",
    "CargoClass",
    "Gate",
    "Terminal",
]
