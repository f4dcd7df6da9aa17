"""Argument helpers shared by the command handlers.

Handlers take their positional tokens as one variadic list and check them
here, so every command reports count, id and status problems the same way.
"""

import re

from task_cli.exceptions import InvalidTaskIdError, WrongArgumentCountError
from task_cli.models import TaskStatus

_TASK_ID_RE = re.compile(r"[0-9]+")


def positional(args: list[str] | None) -> list[str]:
    """Normalize the value Typer passes for an empty variadic argument."""
    return list(args or [])


def expect_args(args: list[str], count: int) -> None:
    if len(args) != count:
        raise WrongArgumentCountError(count)


def parse_task_id(token: str) -> int:
    """Parse a task id token: ASCII digits only, no sign or spaces."""
    if not _TASK_ID_RE.fullmatch(token):
        raise InvalidTaskIdError(token)
    return int(token)


def parse_status(token: str) -> TaskStatus:
    return TaskStatus.from_label(token)
