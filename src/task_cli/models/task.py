"""Task data models."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum

from pydantic import BaseModel, Field

from task_cli.exceptions import InvalidStatusError


class TaskStatus(IntEnum):
    """Task status.

    Stored on disk as an integer; 0 is reserved and never valid. The
    user-facing form is the label (``todo``, ``in-progress``, ``done``).
    """

    TODO = 1
    IN_PROGRESS = 2
    DONE = 3

    @property
    def label(self) -> str:
        return _STATUS_TO_LABEL[self]

    @classmethod
    def from_label(cls, label: str) -> TaskStatus:
        """Parse a status label, rejecting anything not listed exactly."""
        try:
            return _LABEL_TO_STATUS[label]
        except KeyError:
            raise InvalidStatusError(label) from None

    @classmethod
    def labels(cls) -> list[str]:
        return [status.label for status in cls]

    def __str__(self) -> str:
        return self.label


_STATUS_TO_LABEL: dict[TaskStatus, str] = {
    TaskStatus.TODO: "todo",
    TaskStatus.IN_PROGRESS: "in-progress",
    TaskStatus.DONE: "done",
}

_LABEL_TO_STATUS: dict[str, TaskStatus] = {
    label: status for status, label in _STATUS_TO_LABEL.items()
}


class Task(BaseModel):
    """Task model representing a single to-do item.

    Attributes:
        id: Positive identifier, assigned by the store and never reused
        description: Free-form text, unique across tasks
        status: Current status
        created_at: Creation timestamp, never changed afterwards
        updated_at: Last modification timestamp
    """

    id: int = Field(ge=1)
    description: str
    status: TaskStatus = TaskStatus.TODO
    created_at: datetime
    updated_at: datetime


class StoreMeta(BaseModel):
    """Store bookkeeping kept next to the task list."""

    current_id: int = Field(default=1, ge=1)


class StoreDocument(BaseModel):
    """Shape of the JSON file backing the store."""

    meta: StoreMeta = Field(default_factory=StoreMeta)
    tasks: list[Task] = Field(default_factory=list)
