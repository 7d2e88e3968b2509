from __future__ import annotations

import allure
import pytest

from tasker.errors import NotFoundError, ValidationError
from tasker.models import Task
from tasker.operations import (
    add_task,
    list_tasks,
    mark_task,
    pluralize,
    remove_task,
    reset_tasks,
    summarize_tasks,
    swap_tasks,
    update_task,
)

pytestmark = [
    allure.epic("Command Layer"),
    allure.feature("Task Operations"),
]


def _sample() -> list[Task]:
    return [
        Task(id=1, description="buy milk"),
        Task(id=2, description="walk the dog", done=True),
        Task(id=5, description="file taxes"),
    ]


def test_add_assigns_strictly_increasing_ids() -> None:
    tasks: list[Task] = []
    for text in ("one", "two", "three", "four"):
        tasks = add_task(tasks, text).tasks

    ids = [task.id for task in tasks]
    assert ids == [1, 2, 3, 4]
    assert len(set(ids)) == len(ids)


def test_add_continues_after_highest_id() -> None:
    result = add_task(_sample(), "call mom")

    assert result.changed
    assert result.tasks[-1] == Task(id=6, description="call mom", done=False)
    assert result.message == "Added task 6."


def test_add_after_removing_middle_task_does_not_reuse_id() -> None:
    tasks = remove_task(_sample(), 2).tasks

    assert add_task(tasks, "new").tasks[-1].id == 6


def test_add_strips_description() -> None:
    assert add_task([], "  buy milk \n").tasks == [Task(id=1, description="buy milk")]


@pytest.mark.parametrize("description", ["", "   ", "\t\n"])
def test_add_rejects_empty_description(description: str) -> None:
    tasks = _sample()

    with pytest.raises(ValidationError, match="must not be empty"):
        add_task(tasks, description)

    assert tasks == _sample()


def test_add_does_not_mutate_input() -> None:
    tasks = _sample()

    add_task(tasks, "call mom")

    assert tasks == _sample()


def test_list_returns_stored_order_without_change() -> None:
    result = list_tasks(_sample())

    assert result.tasks == _sample()
    assert not result.changed


def test_done_marks_task() -> None:
    result = mark_task(_sample(), 1, done=True)

    assert result.changed
    assert result.tasks[0].done is True
    assert result.tasks[1:] == _sample()[1:]


def test_done_twice_is_idempotent() -> None:
    first = mark_task(_sample(), 1, done=True)
    second = mark_task(first.tasks, 1, done=True)

    assert not second.changed
    assert second.tasks == first.tasks
    assert second.message == "Task 1 is already done."


def test_done_does_not_mutate_input() -> None:
    tasks = _sample()

    mark_task(tasks, 1, done=True)

    assert tasks[0].done is False


def test_undone_clears_flag() -> None:
    result = mark_task(_sample(), 2, done=False)

    assert result.changed
    assert result.tasks[1].done is False


def test_mark_unknown_id_raises_not_found() -> None:
    with pytest.raises(NotFoundError, match="Task 9 not found") as excinfo:
        mark_task(_sample(), 9, done=True)

    assert excinfo.value.task_id == 9
    assert excinfo.value.code == "not_found"


def test_remove_then_done_raises_not_found() -> None:
    tasks = remove_task(_sample(), 1).tasks

    with pytest.raises(NotFoundError):
        mark_task(tasks, 1, done=True)


def test_remove_deletes_only_matching_task() -> None:
    result = remove_task(_sample(), 2)

    assert result.changed
    assert [task.id for task in result.tasks] == [1, 5]


def test_remove_unknown_id_raises_not_found() -> None:
    with pytest.raises(NotFoundError):
        remove_task(_sample(), 3)


def test_update_replaces_description() -> None:
    result = update_task(_sample(), 5, "  file taxes today ")

    assert result.changed
    assert result.tasks[2] == Task(id=5, description="file taxes today")


def test_update_with_same_description_is_noop() -> None:
    result = update_task(_sample(), 1, "buy milk")

    assert not result.changed


def test_update_validates_before_lookup() -> None:
    with pytest.raises(ValidationError):
        update_task(_sample(), 99, " ")


def test_update_unknown_id_raises_not_found() -> None:
    with pytest.raises(NotFoundError):
        update_task(_sample(), 99, "anything")


def test_swap_exchanges_ids_in_place() -> None:
    result = swap_tasks(_sample(), 1, 5)

    assert result.changed
    assert [(task.id, task.description) for task in result.tasks] == [
        (5, "buy milk"),
        (2, "walk the dog"),
        (1, "file taxes"),
    ]


def test_swap_with_itself_is_noop() -> None:
    result = swap_tasks(_sample(), 2, 2)

    assert not result.changed
    assert result.tasks == _sample()


def test_swap_reports_missing_id() -> None:
    with pytest.raises(NotFoundError, match="Task 7 not found"):
        swap_tasks(_sample(), 1, 7)


def test_reset_empties_list() -> None:
    result = reset_tasks(_sample())

    assert result.changed
    assert result.tasks == []
    assert result.message == "Deleted 3 tasks."


def test_reset_of_empty_list_is_noop() -> None:
    assert not reset_tasks([]).changed


def test_summarize_counts_done_and_remaining() -> None:
    stats = summarize_tasks(_sample(), "/tmp/tasks.json")

    assert (stats.done, stats.remaining, stats.total) == (1, 2, 3)
    assert stats.path == "/tmp/tasks.json"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, "0 task"), (1, "1 task"), (2, "2 tasks")],
)
def test_pluralize(value: int, expected: str) -> None:
    assert pluralize(value, "task", "tasks") == expected
