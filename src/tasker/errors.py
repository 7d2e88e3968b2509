"""Error taxonomy surfaced to the process boundary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(slots=True)
class TaskError(Exception):
    """Base error for task commands."""

    message: str
    code: str = "task_error"

    exit_code: ClassVar[int] = 1

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class ValidationError(TaskError):
    """Invalid user input, for example an empty description."""

    code: str = "validation"

    exit_code: ClassVar[int] = 2


@dataclass(slots=True)
class StorageError(TaskError):
    """Task file is unreadable, unwritable, or malformed."""

    code: str = "storage"
    path: str | None = None

    exit_code: ClassVar[int] = 3


@dataclass(slots=True)
class NotFoundError(TaskError):
    """Referenced task id does not exist."""

    code: str = "not_found"
    task_id: int | None = None

    exit_code: ClassVar[int] = 4
