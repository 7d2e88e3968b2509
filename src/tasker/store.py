"""JSON file persistence for the task list."""

from __future__ import annotations

import contextlib
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

from tasker.errors import StorageError
from tasker.models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Loads and saves the task list as a single JSON array."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> list[Task]:
        """Read the task file; a missing file is an empty list."""

        try:
            text = self.path.read_text("utf-8")
        except (FileNotFoundError, NotADirectoryError):
            logger.debug("Task file %s does not exist, starting empty", self.path)
            return []
        except (OSError, UnicodeDecodeError) as error:
            raise self._error(f"Could not read {self.path}: {error}") from error
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as error:
            raise self._error(f"Task file {self.path} is not valid JSON: {error}") from error
        tasks = self._parse(payload)
        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Write the task list through a temporary file replaced in one step."""

        body = serialize_tasks(tasks)
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(body)
                handle.flush()
                os.fsync(handle.fileno())
            # keep the existing file's permissions; new files stay 0600
            with contextlib.suppress(FileNotFoundError):
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except OSError as error:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise self._error(f"Could not write to {self.path}: {error}") from error
        logger.debug("Saved %d tasks to %s", len(tasks), self.path)

    def _parse(self, payload: Any) -> list[Task]:
        if not isinstance(payload, list):
            raise self._error(f"Task file {self.path} must contain a JSON array")
        tasks: list[Task] = []
        seen: set[int] = set()
        for index, raw in enumerate(payload):
            try:
                task = task_from_payload(raw)
            except (TypeError, ValueError) as error:
                raise self._error(f"Task file {self.path}, entry {index}: {error}") from error
            if task.id in seen:
                raise self._error(f"Task file {self.path} contains duplicate id {task.id}")
            seen.add(task.id)
            tasks.append(task)
        return tasks

    def _error(self, message: str) -> StorageError:
        logger.debug(message)
        return StorageError(message, path=str(self.path))


def task_from_payload(raw: Any) -> Task:
    """Validate one JSON object and build a task from it."""

    if not isinstance(raw, dict):
        raise TypeError("expected a JSON object")
    task_id = raw.get("id")
    description = raw.get("description")
    done = raw.get("done")
    # bool is an int subclass
    if not isinstance(task_id, int) or isinstance(task_id, bool):
        raise TypeError("id must be an integer")
    if task_id < 1:
        raise ValueError(f"id must be a positive integer, got {task_id}")
    if not isinstance(description, str):
        raise TypeError("description must be a string")
    if not description.strip():
        raise ValueError("description must not be empty")
    if not isinstance(done, bool):
        raise TypeError("done must be a boolean")
    return Task(id=task_id, description=description, done=done)


def serialize_tasks(tasks: list[Task]) -> str:
    """Render the task list with deterministic formatting."""

    payload = [task.to_payload() for task in tasks]
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
