"""CLI entrypoint for tasker."""

from collections.abc import Iterator
from contextlib import contextmanager

import rich_click as click

from tasker import __version__
from tasker.controllers import (
    AddCommand,
    ListCommand,
    MarkCommand,
    RemoveCommand,
    ResetCommand,
    SwapCommand,
    TaskCliController,
    UpdateCommand,
)
from tasker.errors import TaskError
from tasker.logging_setup import configure_logging
from tasker.models import OperationResult
from tasker.operations import pluralize
from tasker.render import render_tasks

click.rich_click.USE_MARKDOWN = True
TASK_CONTROLLER = TaskCliController()
TASK_ID = click.IntRange(min=1)


@click.group()
@click.version_option(version=__version__, prog_name="tasker")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def tasker(verbose: bool) -> None:
    """A simple command line to-do manager.

    Tasks are stored in `~/.tasker/tasks.json`.
    """

    configure_logging(verbose=verbose)


@tasker.command("add")
@click.argument("description", nargs=-1, required=True)
def add(description: tuple[str, ...]) -> None:
    """Add a task."""

    with _task_errors():
        result = TASK_CONTROLLER.add_task(AddCommand(description=" ".join(description)))
    _emit_result(result)


@tasker.command("list")
@click.option(
    "--pending/--all",
    "pending_only",
    default=False,
    show_default=True,
    help="Hide tasks that are already done.",
)
def list_(pending_only: bool) -> None:
    """List tasks."""

    with _task_errors():
        result = TASK_CONTROLLER.list_tasks(ListCommand(pending_only=pending_only))
    _emit_result(result)


@tasker.command("done")
@click.argument("task_id", type=TASK_ID)
def done(task_id: int) -> None:
    """Mark a task as done."""

    with _task_errors():
        result = TASK_CONTROLLER.mark_task(MarkCommand(task_id=task_id, done=True))
    _emit_result(result)


@tasker.command("undone")
@click.argument("task_id", type=TASK_ID)
def undone(task_id: int) -> None:
    """Mark a task as not done."""

    with _task_errors():
        result = TASK_CONTROLLER.mark_task(MarkCommand(task_id=task_id, done=False))
    _emit_result(result)


@tasker.command("update")
@click.argument("task_id", type=TASK_ID)
@click.argument("description", nargs=-1, required=True)
def update(task_id: int, description: tuple[str, ...]) -> None:
    """Replace the description of a task."""

    with _task_errors():
        result = TASK_CONTROLLER.update_task(
            UpdateCommand(task_id=task_id, description=" ".join(description)),
        )
    _emit_result(result)


@tasker.command("remove")
@click.argument("task_id", type=TASK_ID)
def remove(task_id: int) -> None:
    """Remove a task."""

    with _task_errors():
        result = TASK_CONTROLLER.remove_task(RemoveCommand(task_id=task_id))
    _emit_result(result)


@tasker.command("swap")
@click.argument("first_id", type=TASK_ID)
@click.argument("second_id", type=TASK_ID)
def swap(first_id: int, second_id: int) -> None:
    """Swap the ids of two tasks."""

    with _task_errors():
        result = TASK_CONTROLLER.swap_tasks(SwapCommand(first_id=first_id, second_id=second_id))
    _emit_result(result)


@tasker.command("reset")
@click.option("-f", "--force", is_flag=True, default=False, help="Don't prompt for confirmation.")
def reset(force: bool) -> None:
    """Empty the task list."""

    with _task_errors():
        result = TASK_CONTROLLER.reset_tasks(ResetCommand(force=force, confirm=_confirm_reset))
    _emit_result(result)


@tasker.command("info")
def info() -> None:
    """Get information about your tasks."""

    with _task_errors():
        stats = TASK_CONTROLLER.info()
    _emit_lines(
        [
            f"File location: {stats.path}",
            f"Done tasks: {stats.done}",
            f"Remaining tasks: {stats.remaining}",
            f"Total tasks: {stats.total}",
        ],
    )


@contextmanager
def _task_errors() -> Iterator[None]:
    try:
        yield
    except TaskError as error:
        exception = click.ClickException(str(error))
        exception.exit_code = error.exit_code
        raise exception from error


def _confirm_reset(count: int) -> bool:
    return click.confirm(
        f"Are you sure you want to permanently delete {pluralize(count, 'task', 'tasks')}?",
        default=False,
    )


def _emit_result(result: OperationResult) -> None:
    if result.message:
        click.echo(result.message)
    render_tasks(result.tasks)


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    tasker()
