# src/todo_list/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Derived from Task.completed; the only transition is pending -> completed.
    """

    PENDING = "pending"
    COMPLETED = "completed"


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.COMPLETED if self.completed else TaskStatus.PENDING

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "description": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        return cls(
            id=int(raw["id"]),
            description=str(raw["description"]),
            completed=bool(raw["completed"]),
        )


@dataclass(slots=True)
class TaskResponse:
    """Envelope returned by the GetTasks query."""

    tasks: list[Task] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"tasks": [t.to_dict() for t in self.tasks]}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> TaskResponse:
        return cls(tasks=[Task.from_dict(t) for t in raw.get("tasks", [])])
