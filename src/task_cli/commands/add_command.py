"""Command 'add' of task-cli"""

import typer

from task_cli.services.config_service import open_task_store
from task_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import expect_args, positional


@command_wrapper
def add(
    args: list[str] | None = typer.Argument(
        None, metavar="DESCRIPTION", help="Task description (quote it)"
    ),
) -> None:
    """
    Add a new task with status todo.

    Examples:
      task add "Buy groceries"
    """
    args = positional(args)
    store = open_task_store()
    expect_args(args, 1)

    task = store.create(args[0])
    format_success(f"Task added successfully: (ID: {task.id})")
