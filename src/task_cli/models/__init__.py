"""task-cli domain models.

Pydantic models for tasks and the on-disk store document. They are used for
validation when the task file is loaded and for serialization when it is
saved.
"""

from .task import StoreDocument, StoreMeta, Task, TaskStatus

__all__ = [
    "Task",
    "TaskStatus",
    "StoreMeta",
    "StoreDocument",
]
