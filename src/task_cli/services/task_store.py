"""JSON-file backed task store.

The whole collection lives in memory for the duration of a command. Every
mutating operation writes the complete document back before returning, so
a command either leaves the previous file untouched or replaces it with the
new state.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from task_cli.exceptions import StoreError, TaskAlreadyExistsError, TaskNotFoundError
from task_cli.models import StoreDocument, StoreMeta, Task, TaskStatus

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now().astimezone()


class TaskStore:
    """Ordered task collection plus the next-id counter.

    Example:
        >>> store = TaskStore(Path("~/.config/task/task.json").expanduser())
        >>> store.load()
        >>> task = store.create("Buy milk")
        >>> task = store.get_by_id(task.id)
        >>> task.status = TaskStatus.DONE
        >>> store.update(task)
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.meta = StoreMeta()
        self.tasks: list[Task] = []

    # -------------------- persistence --------------------
    def load(self) -> None:
        """Replace in-memory state with the file contents.

        A missing file leaves the store empty with ``current_id == 1``.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                logger.debug("no task file at %s, starting empty", self.path)
                return
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreError(f"failed to read {self.path}: {e}") from e

        try:
            document = StoreDocument.model_validate_json(raw)
        except ValidationError as e:
            raise StoreError(f"failed to parse {self.path}: {e}") from e

        self.meta = document.meta
        self.tasks = document.tasks
        logger.debug("loaded %d tasks from %s", len(self.tasks), self.path)

    def save(self) -> None:
        """Write the full store next to the target, then rename it into place."""
        document = StoreDocument(meta=self.meta, tasks=self.tasks)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(document.model_dump_json(indent=4), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise StoreError(f"failed to write {self.path}: {e}") from e
        logger.debug("saved %d tasks to %s", len(self.tasks), self.path)

    # -------------------- queries --------------------
    def index(self, task_id: int) -> int | None:
        """Position of the task with ``task_id``, or None."""
        for position, task in enumerate(self.tasks):
            if task.id == task_id:
                return position
        return None

    def exists(self, candidate: Task) -> bool:
        """True if a task other than ``candidate`` has its description."""
        return any(
            task.id != candidate.id and task.description == candidate.description
            for task in self.tasks
        )

    def get_by_id(self, task_id: int) -> Task:
        """Return a copy of the task; edits apply only after update()."""
        position = self.index(task_id)
        if position is None:
            raise TaskNotFoundError()
        return self.tasks[position].model_copy()

    def get_by_status(self, status: TaskStatus) -> list[Task]:
        return [task for task in self.tasks if task.status == status]

    # -------------------- mutations --------------------
    def create(self, description: str) -> Task:
        """Append a new ``todo`` task and persist.

        Raises:
            TaskAlreadyExistsError: another task has this description
        """
        if any(task.description == description for task in self.tasks):
            raise TaskAlreadyExistsError()

        stamp = _now()
        task = Task(
            id=self.meta.current_id,
            description=description,
            status=TaskStatus.TODO,
            created_at=stamp,
            updated_at=stamp,
        )
        self.meta.current_id += 1
        self.tasks.append(task)
        self.save()
        logger.info("created task %d", task.id)
        return task

    def update(self, task: Task) -> Task:
        """Replace the stored task with the same id and persist.

        Raises:
            TaskNotFoundError: no stored task has ``task.id``
            TaskAlreadyExistsError: a different task has the new description
        """
        position = self.index(task.id)
        if position is None:
            raise TaskNotFoundError()
        if self.exists(task):
            raise TaskAlreadyExistsError()

        updated = task.model_copy(
            update={
                "created_at": self.tasks[position].created_at,
                "updated_at": _now(),
            }
        )
        self.tasks[position] = updated
        self.save()
        logger.info("updated task %d", updated.id)
        return updated.model_copy()

    def delete(self, task_id: int) -> None:
        """Remove the task with ``task_id`` and persist.

        The id counter is left alone so deleted ids are never handed out again.

        Raises:
            TaskNotFoundError: no stored task has ``task_id``
        """
        position = self.index(task_id)
        if position is None:
            raise TaskNotFoundError()
        del self.tasks[position]
        self.save()
        logger.info("deleted task %d", task_id)
