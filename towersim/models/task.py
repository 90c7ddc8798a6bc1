"""Task models describing what an aircraft is currently doing."""

from enum import Enum
from typing import Dict, List, Tuple
from pydantic import BaseModel, Field, field_validator, model_validator


class TaskType(str, Enum):
    """Activity phase of an aircraft."""

    AWAY = "AWAY"
    WAIT = "WAIT"
    LOAD = "LOAD"
    TAKEOFF = "TAKEOFF"
    LAND = "LAND"


# Task types allowed to directly follow each task type (the list wraps around)
ALLOWED_NEXT_TASKS: Dict[TaskType, Tuple[TaskType, ...]] = {
    TaskType.AWAY: (TaskType.AWAY, TaskType.LAND),
    TaskType.LAND: (TaskType.WAIT, TaskType.LOAD),
    TaskType.WAIT: (TaskType.WAIT, TaskType.LOAD),
    TaskType.LOAD: (TaskType.TAKEOFF,),
    TaskType.TAKEOFF: (TaskType.AWAY,),
}


class Task(BaseModel):
    """A single task, with a load percentage that only applies to LOAD tasks."""

    type: TaskType
    load_percent: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    def __str__(self) -> str:
        if self.type == TaskType.LOAD:
            return f"LOAD at {self.load_percent}%"
        return self.type.value


class TaskList(BaseModel):
    """Ordered, cyclic list of tasks with a cursor on the current task."""

    tasks: List[Task]
    current_index: int = 0

    @field_validator("tasks")
    @classmethod
    def check_task_order(cls, tasks: List[Task]) -> List[Task]:
        """Reject empty lists and any task that may not follow its predecessor."""
        if not tasks:
            raise ValueError("Task list must contain at least one task")

        for index, task in enumerate(tasks):
            following = tasks[(index + 1) % len(tasks)]
            if following.type not in ALLOWED_NEXT_TASKS[task.type]:
                raise ValueError(f"{following} cannot follow {task}")

        return tasks

    @model_validator(mode="after")
    def check_current_index(self) -> "TaskList":
        if not 0 <= self.current_index < len(self.tasks):
            raise ValueError(
                f"Current index {self.current_index} is outside the task list"
            )
        return self

    @property
    def current_task(self) -> Task:
        return self.tasks[self.current_index]

    @property
    def next_task(self) -> Task:
        return self.tasks[(self.current_index + 1) % len(self.tasks)]

    def move_to_next_task(self) -> None:
        """Advance the cursor, wrapping back to the first task after the last."""
        self.current_index = (self.current_index + 1) % len(self.tasks)

    def __str__(self) -> str:
        return f"TaskList currently on {self.current_task} [{self.current_index + 1}/{len(self.tasks)}]"
