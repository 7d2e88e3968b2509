"""Table rendering for the task list."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from tasker.models import Task

DONE_MARK = "✓"
PENDING_MARK = "☐"
DONE_STYLE = "dim strike"


def build_table(tasks: list[Task]) -> Table:
    """Build a table with one row per task; an empty list keeps the header."""

    table = Table(header_style="bold blue")
    table.add_column("ID", justify="right", style="bold")
    table.add_column("Description")
    table.add_column("Done", justify="center")
    for task in tasks:
        if task.done:
            description = Text(task.description, style=DONE_STYLE)
            mark = Text(DONE_MARK, style="green")
        else:
            description = Text(task.description)
            mark = Text(PENDING_MARK)
        table.add_row(str(task.id), description, mark)
    return table


def render_tasks(tasks: list[Task], console: Console | None = None) -> None:
    (console or Console(highlight=False, emoji=False)).print(build_table(tasks))
