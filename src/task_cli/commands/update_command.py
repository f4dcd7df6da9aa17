"""Command 'update' of task-cli"""

import typer

from task_cli.services.config_service import open_task_store
from task_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import expect_args, parse_task_id, positional


@command_wrapper
def update(
    args: list[str] | None = typer.Argument(
        None, metavar="ID DESCRIPTION", help="Task ID and its new description"
    ),
) -> None:
    """
    Replace a task's description.

    Examples:
      task update 1 "Buy groceries and cook dinner"
    """
    args = positional(args)
    store = open_task_store()
    expect_args(args, 2)
    task_id = parse_task_id(args[0])

    task = store.get_by_id(task_id)
    task.description = args[1]
    store.update(task)
    format_success("Task updated successfully")
