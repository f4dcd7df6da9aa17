"""Tests for output formatters."""

import json
from datetime import datetime, timedelta, timezone

import pytest
import yaml

from task_cli.models import Task, TaskStatus
from task_cli.utils.ui.formatters import (
    TASK_TABLE_HEADERS,
    format_columns,
    format_output,
    format_task_table,
    task_table_widths,
    task_to_dict,
)

TZ = timezone(timedelta(hours=2))
CREATED = datetime(2024, 5, 1, 9, 5, 0, tzinfo=TZ)
UPDATED = datetime(2024, 5, 2, 18, 30, 15, tzinfo=TZ)


def _task(task_id, description, status=TaskStatus.TODO):
    return Task(
        id=task_id,
        description=description,
        status=status,
        created_at=CREATED,
        updated_at=UPDATED,
    )


class TestFormatColumns:
    def test_pads_all_but_last_column(self):
        lines = format_columns(("a", "bb", "c"), [("1", "2", "tail")], (3, 1, 0), gap=" ")

        assert lines == ["a   bb c", "1   2  tail"]

    def test_header_length_is_minimum_width(self):
        lines = format_columns(("status", "x"), [("todo", "y")], (2, 0), gap="|")

        assert lines[0] == "status|x"
        assert lines[1] == "todo  |y"

    def test_long_values_are_not_truncated(self):
        lines = format_columns(("id", "d"), [("12345", "z")], (2, 0), gap=" ")

        assert lines[1] == "12345 z"

    def test_header_only_when_no_rows(self):
        assert format_columns(("a", "b"), [], (1, 0)) == ["a    b"]

    def test_mismatched_widths_rejected(self):
        with pytest.raises(ValueError):
            format_columns(("a", "b"), [], (1,))


class TestTaskTable:
    def test_widths_follow_counter_and_labels(self):
        assert task_table_widths(7) == [1, 11, 19, 19, 0]
        assert task_table_widths(123) == [3, 11, 19, 19, 0]

    def test_layout(self):
        table = format_task_table(
            [_task(1, "Buy milk"), _task(2, "Walk dog", TaskStatus.IN_PROGRESS)],
            current_id=3,
        )

        assert table.splitlines() == [
            "id    status         created at             updated at             description",
            "1     todo           2024-05-01 09:05:00    2024-05-02 18:30:15    Buy milk",
            "2     in-progress    2024-05-01 09:05:00    2024-05-02 18:30:15    Walk dog",
        ]

    def test_columns_align_with_multi_digit_ids(self):
        table = format_task_table([_task(3, "a"), _task(12, "b")], current_id=100)
        lines = table.splitlines()

        starts = {line.index(label) for line, label in zip(lines[1:], ("todo", "todo"))}
        assert starts == {lines[0].index("status")}

    def test_empty_table_is_header_only(self):
        table = format_task_table([], current_id=1)

        assert table.splitlines() == [
            "    ".join(
                h.ljust(w)
                for h, w in zip(TASK_TABLE_HEADERS[:-1], (2, 11, 19, 19))
            )
            + "    description"
        ]


class TestFormatOutput:
    def test_task_to_dict_uses_status_label(self):
        data = task_to_dict(_task(1, "Buy milk", TaskStatus.DONE))

        assert data["status"] == "done"
        assert data["id"] == 1
        assert data["created_at"].startswith("2024-05-01T09:05:00")

    def test_json(self, capsys):
        format_output([_task(1, "Buy milk")], "json", current_id=2)

        data = json.loads(capsys.readouterr().out)
        assert [t["description"] for t in data["tasks"]] == ["Buy milk"]

    def test_yaml(self, capsys):
        format_output([_task(1, "Buy milk")], "yaml", current_id=2)

        data = yaml.safe_load(capsys.readouterr().out)
        assert data["tasks"][0]["status"] == "todo"

    def test_table(self, capsys):
        format_output([_task(1, "[not markup]")], "table", current_id=2)

        out = capsys.readouterr().out
        assert out.splitlines()[0].startswith("id")
        assert "[not markup]" in out
