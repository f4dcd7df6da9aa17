"""Output formatters for different formats."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from typing import Any

import yaml
from rich.text import Text

from task_cli.models import Task, TaskStatus

from .console import get_console

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
TIMESTAMP_WIDTH = len("2006-01-02 15:04:05")
COLUMN_GAP = " " * 4
TASK_TABLE_HEADERS = ("id", "status", "created at", "updated at", "description")
OUTPUT_FORMATS = ("table", "json", "yaml")


def format_columns(
    headers: Sequence[str],
    rows: Iterable[Sequence[str]],
    widths: Sequence[int],
    gap: str = COLUMN_GAP,
) -> list[str]:
    """Lay out rows as left-aligned fixed-width columns.

    Every cell but the last is padded to ``max(width, len(header))`` and
    followed by ``gap``; the last column is written as-is. Values longer than
    their column are not truncated.
    """
    if len(widths) != len(headers):
        raise ValueError("widths and headers must have the same length")

    sized = [max(width, len(header)) for width, header in zip(widths, headers)]

    def render(cells: Sequence[str]) -> str:
        parts = [cell.ljust(width) + gap for cell, width in zip(cells[:-1], sized)]
        parts.append(cells[-1])
        return "".join(parts)

    lines = [render(headers)]
    lines.extend(render(row) for row in rows)
    return lines


def task_table_widths(current_id: int) -> list[int]:
    """Column widths for the task table.

    The id column fits the next id to be assigned, so it is wide enough for
    every id already issued.
    """
    status_width = max(len(label) for label in TaskStatus.labels())
    return [len(str(current_id)), status_width, TIMESTAMP_WIDTH, TIMESTAMP_WIDTH, 0]


def task_row(task: Task) -> list[str]:
    return [
        str(task.id),
        task.status.label,
        task.created_at.strftime(TIMESTAMP_FORMAT),
        task.updated_at.strftime(TIMESTAMP_FORMAT),
        task.description,
    ]


def format_task_table(tasks: Iterable[Task], current_id: int) -> str:
    """Render tasks as the column-aligned listing shown by ``task list``."""
    lines = format_columns(
        TASK_TABLE_HEADERS,
        (task_row(task) for task in tasks),
        task_table_widths(current_id),
    )
    return "\n".join(lines)


def task_to_dict(task: Task) -> dict[str, Any]:
    """Task as plain data with the status shown by label."""
    data = task.model_dump(mode="json")
    data["status"] = task.status.label
    return data


def format_output(tasks: Sequence[Task], output_format: str, current_id: int) -> None:
    """Format and display tasks based on format."""
    if output_format == "json":
        print(json.dumps({"tasks": [task_to_dict(t) for t in tasks]}, indent=2))
    elif output_format == "yaml":
        data = {"tasks": [task_to_dict(t) for t in tasks]}
        print(yaml.dump(data, default_flow_style=False, sort_keys=False), end="")
    else:
        print_plain(format_task_table(tasks, current_id))


def print_plain(text: str) -> None:
    """Print text verbatim: no markup, emoji codes, highlighting or wrapping."""
    get_console().print(
        text, markup=False, emoji=False, highlight=False, soft_wrap=True
    )


def format_error(message: str) -> None:
    """Format and display an error message on stderr."""
    get_console(stderr=True).print(
        Text.assemble(("Error: ", "bold red"), message), soft_wrap=True
    )


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(Text(message, style="green"), soft_wrap=True)
