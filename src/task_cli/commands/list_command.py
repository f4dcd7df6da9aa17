"""List command - show tasks, optionally filtered by status."""

import typer

from task_cli.exceptions import AppError, WrongArgumentCountError
from task_cli.services.config_service import open_task_store
from task_cli.utils.exit_codes import ERROR_INVALID_ARGS
from task_cli.utils.ui.formatters import OUTPUT_FORMATS, format_output

from .decorators import command_wrapper
from .utils import parse_status, positional


@command_wrapper
def list_tasks(
    args: list[str] | None = typer.Argument(
        None, metavar="[STATUS]", help="Only show tasks with this status"
    ),
    output: str = typer.Option(
        "table", "--output", "-o", help="Output format (table/json/yaml)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """
    List tasks in the order they were added.

    Examples:
      task list
      task list done
      task list --json
    """
    if json_opt:
        output = "json"
    if output not in OUTPUT_FORMATS:
        raise AppError(f"unknown output format: {output}", ERROR_INVALID_ARGS)

    args = positional(args)
    store = open_task_store()
    if len(args) > 1:
        raise WrongArgumentCountError(1)

    if args:
        tasks = store.get_by_status(parse_status(args[0]))
    else:
        tasks = store.tasks

    format_output(tasks, output, store.meta.current_id)
