"""Runtime configuration for the task CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

TASKS_DIR_NAME = ".tasker"
TASKS_FILE_NAME = "tasks.json"


@dataclass(slots=True)
class Settings:
    """Application settings."""

    tasks_path: Path

    @classmethod
    def from_env(cls, home: Path | None = None) -> Settings:
        """Resolve the task file under the invoking user's home directory."""

        base = home if home is not None else Path.home()
        return cls(tasks_path=base / TASKS_DIR_NAME / TASKS_FILE_NAME)
