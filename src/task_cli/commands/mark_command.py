"""Command 'mark' of task-cli"""

import typer

from task_cli.services.config_service import open_task_store
from task_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import expect_args, parse_status, parse_task_id, positional


@command_wrapper
def mark(
    args: list[str] | None = typer.Argument(
        None, metavar="ID STATUS", help="Task ID and todo / in-progress / done"
    ),
) -> None:
    """
    Change a task's status.

    Examples:
      task mark 1 in-progress
      task mark 1 done
    """
    args = positional(args)
    store = open_task_store()
    expect_args(args, 2)
    task_id = parse_task_id(args[0])
    status = parse_status(args[1])

    task = store.get_by_id(task_id)
    task.status = status
    task = store.update(task)
    format_success(f"Task status updated to {task.status.label}")
