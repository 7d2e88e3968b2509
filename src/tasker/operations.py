"""Task list operations.

Each operation takes the loaded task list and returns an ``OperationResult``
holding a new list. Input lists and their tasks are never mutated, so a
failing operation leaves nothing half-applied.
"""

from __future__ import annotations

from dataclasses import replace

from tasker.errors import NotFoundError, ValidationError
from tasker.models import OperationResult, Task, TaskStats


def add_task(tasks: list[Task], description: str) -> OperationResult:
    text = _require_description(description)
    next_id = max((task.id for task in tasks), default=0) + 1
    new_task = Task(id=next_id, description=text)
    return OperationResult(
        tasks=[*tasks, new_task],
        changed=True,
        message=f"Added task {next_id}.",
    )


def list_tasks(tasks: list[Task]) -> OperationResult:
    return OperationResult(tasks=list(tasks), changed=False)


def mark_task(tasks: list[Task], task_id: int, *, done: bool) -> OperationResult:
    """Set the done flag; marking a task with its current state is a no-op."""

    index = _index_of(tasks, task_id)
    state = "done" if done else "not done"
    if tasks[index].done == done:
        return OperationResult(
            tasks=list(tasks),
            changed=False,
            message=f"Task {task_id} is already {state}.",
        )
    updated = list(tasks)
    updated[index] = replace(tasks[index], done=done)
    return OperationResult(tasks=updated, changed=True, message=f"Task {task_id} marked {state}.")


def update_task(tasks: list[Task], task_id: int, description: str) -> OperationResult:
    text = _require_description(description)
    index = _index_of(tasks, task_id)
    if tasks[index].description == text:
        return OperationResult(tasks=list(tasks), changed=False)
    updated = list(tasks)
    updated[index] = replace(tasks[index], description=text)
    return OperationResult(tasks=updated, changed=True, message=f"Task {task_id} updated.")


def remove_task(tasks: list[Task], task_id: int) -> OperationResult:
    index = _index_of(tasks, task_id)
    updated = tasks[:index] + tasks[index + 1 :]
    return OperationResult(tasks=updated, changed=True, message=f"Task {task_id} removed.")


def swap_tasks(tasks: list[Task], first_id: int, second_id: int) -> OperationResult:
    """Exchange the ids of two tasks; list positions stay as they are."""

    first = _index_of(tasks, first_id)
    second = _index_of(tasks, second_id)
    if first == second:
        return OperationResult(tasks=list(tasks), changed=False)
    updated = list(tasks)
    updated[first] = replace(tasks[first], id=second_id)
    updated[second] = replace(tasks[second], id=first_id)
    return OperationResult(
        tasks=updated,
        changed=True,
        message=f"Tasks {first_id} and {second_id} swapped.",
    )


def reset_tasks(tasks: list[Task]) -> OperationResult:
    if not tasks:
        return OperationResult(tasks=[], changed=False)
    return OperationResult(
        tasks=[],
        changed=True,
        message=f"Deleted {pluralize(len(tasks), 'task', 'tasks')}.",
    )


def summarize_tasks(tasks: list[Task], path: str) -> TaskStats:
    done = sum(1 for task in tasks if task.done)
    return TaskStats(path=path, done=done, remaining=len(tasks) - done, total=len(tasks))


def pluralize(value: int, singular: str, plural: str) -> str:
    return f"{value} {singular if value in (0, 1) else plural}"


def _require_description(description: str) -> str:
    text = description.strip()
    if not text:
        raise ValidationError("Task description must not be empty.")
    return text


def _index_of(tasks: list[Task], task_id: int) -> int:
    for index, task in enumerate(tasks):
        if task.id == task_id:
            return index
    raise NotFoundError(f"Task {task_id} not found.", task_id=task_id)
