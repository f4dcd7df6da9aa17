"""Main entry point for task-cli."""

import typer

from task_cli import __version__
from task_cli.commands import (
    add_command,
    delete_command,
    help_command,
    list_command,
    mark_command,
    update_command,
)
from task_cli.utils.typer_helpers import SuggestingGroup
from task_cli.utils.ui.console import get_console

app = typer.Typer(
    name="task",
    cls=SuggestingGroup,
    help="Track personal tasks from the command line.",
    invoke_without_command=True,
    add_completion=False,
)

# Positional tokens such as "-5 pushups" are data, not options
RAW_ARGS = {"ignore_unknown_options": True}

app.command("help", context_settings=RAW_ARGS)(help_command.help_command)
app.command("add", context_settings=RAW_ARGS)(add_command.add)
app.command("update", context_settings=RAW_ARGS)(update_command.update)
app.command("delete", context_settings=RAW_ARGS)(delete_command.delete)
app.command("mark", context_settings=RAW_ARGS)(mark_command.mark)
app.command("list")(list_command.list_tasks)


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"task-cli {__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def root(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Track personal tasks from the command line."""
    if ctx.invoked_subcommand is None:
        help_command.show_usage()


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
