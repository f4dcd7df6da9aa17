"""Delete command - remove a task by id."""

import typer

from task_cli.services.config_service import open_task_store
from task_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import expect_args, parse_task_id, positional


@command_wrapper
def delete(
    args: list[str] | None = typer.Argument(None, metavar="ID", help="Task ID"),
) -> None:
    """Delete a task. Its id is never reused."""
    args = positional(args)
    store = open_task_store()
    expect_args(args, 1)
    task_id = parse_task_id(args[0])

    task = store.get_by_id(task_id)
    store.delete(task.id)
    format_success("Task deleted successfully")
