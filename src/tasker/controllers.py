"""Controllers for task CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from tasker.config import Settings
from tasker.models import OperationResult, Task, TaskStats
from tasker.operations import (
    add_task,
    list_tasks,
    mark_task,
    remove_task,
    reset_tasks,
    summarize_tasks,
    swap_tasks,
    update_task,
)
from tasker.store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AddCommand:
    """CLI inputs for add command."""

    description: str


@dataclass(slots=True)
class ListCommand:
    """CLI inputs for list command."""

    pending_only: bool = False


@dataclass(slots=True)
class MarkCommand:
    """CLI inputs for done/undone commands."""

    task_id: int
    done: bool


@dataclass(slots=True)
class UpdateCommand:
    """CLI inputs for update command."""

    task_id: int
    description: str


@dataclass(slots=True)
class RemoveCommand:
    """CLI inputs for remove command."""

    task_id: int


@dataclass(slots=True)
class SwapCommand:
    """CLI inputs for swap command."""

    first_id: int
    second_id: int


@dataclass(slots=True)
class ResetCommand:
    """CLI inputs for reset command.

    ``confirm`` receives the number of tasks about to be deleted and returns
    whether to proceed. It is not called when ``force`` is set.
    """

    force: bool
    confirm: Callable[[int], bool]


class TaskCliController:
    """Coordinates load, operation, and save for each command."""

    def add_task(self, command: AddCommand) -> OperationResult:
        return self._apply(lambda tasks: add_task(tasks, command.description))

    def list_tasks(self, command: ListCommand) -> OperationResult:
        result = self._apply(list_tasks)
        if command.pending_only:
            result.tasks = [task for task in result.tasks if not task.done]
        return result

    def mark_task(self, command: MarkCommand) -> OperationResult:
        return self._apply(lambda tasks: mark_task(tasks, command.task_id, done=command.done))

    def update_task(self, command: UpdateCommand) -> OperationResult:
        return self._apply(
            lambda tasks: update_task(tasks, command.task_id, command.description),
        )

    def remove_task(self, command: RemoveCommand) -> OperationResult:
        return self._apply(lambda tasks: remove_task(tasks, command.task_id))

    def swap_tasks(self, command: SwapCommand) -> OperationResult:
        return self._apply(lambda tasks: swap_tasks(tasks, command.first_id, command.second_id))

    def reset_tasks(self, command: ResetCommand) -> OperationResult:
        store = self._store()
        tasks = store.load()
        if tasks and not command.force and not command.confirm(len(tasks)):
            return OperationResult(tasks=tasks, changed=False, message="Reset cancelled.")
        return self._commit(store, reset_tasks(tasks))

    def info(self) -> TaskStats:
        store = self._store()
        return summarize_tasks(store.load(), str(store.path))

    def _apply(self, operation: Callable[[list[Task]], OperationResult]) -> OperationResult:
        store = self._store()
        return self._commit(store, operation(store.load()))

    @staticmethod
    def _commit(store: TaskStore, result: OperationResult) -> OperationResult:
        if result.changed:
            store.save(result.tasks)
            logger.info("%s", result.message)
        return result

    @staticmethod
    def _store() -> TaskStore:
        return TaskStore(Settings.from_env().tasks_path)
