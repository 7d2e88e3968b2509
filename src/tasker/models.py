"""Domain models for tasks and command results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    """A single to-do item."""

    id: int
    description: str
    done: bool = False

    def to_payload(self) -> dict[str, Any]:
        return {"id": self.id, "description": self.description, "done": self.done}


@dataclass(slots=True)
class OperationResult:
    """Task list after an operation, with a flag telling whether it must be saved."""

    tasks: list[Task]
    changed: bool
    message: str | None = None


@dataclass(slots=True)
class TaskStats:
    """Counters reported by the info command."""

    path: str
    done: int
    remaining: int
    total: int
