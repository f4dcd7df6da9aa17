"""Command 'help' of task-cli"""

import typer

from task_cli.utils.ui.formatters import print_plain

USAGE = """\
USAGE: task [command] [args]

COMMANDS:
    help       show this message
    add        add a new task
    update     update a task
    delete     delete a task
    mark       change a task status
    list       list all tasks

EXAMPLES:
    task help

    task add "Buy groceries"
    task update 1 "Buy groceries and cook dinner"
    task delete 1

    task mark 1 done
    task mark 1 todo
    task mark 1 in-progress

    task list
    task list done
    task list todo
    task list in-progress"""


def show_usage() -> None:
    print_plain(USAGE)


def help_command(
    args: list[str] | None = typer.Argument(None, hidden=True),
) -> None:
    """Show usage and examples."""
    show_usage()
