"""Configuration service for task-cli.

Resolves where the task file lives. The path is computed once per process
from the platform configuration directory and handed to the store, which
never looks it up on its own.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir

from task_cli.services.task_store import TaskStore

APP_DIR_NAME = "task"
STORE_FILE_NAME = "task.json"


class ConfigService:
    """Service holding the resolved filesystem locations."""

    def __init__(self, config_dir: Path | None = None):
        """Initialize the config service.

        Args:
            config_dir: Override for the configuration directory; defaults
                to platformdirs' user config dir for the app.
        """
        self.config_dir = (
            Path(config_dir) if config_dir else Path(user_config_dir(APP_DIR_NAME))
        )
        self.store_path = self.config_dir / STORE_FILE_NAME

    def open_task_store(self) -> TaskStore:
        """Build a task store bound to the configured file and load it."""
        store = TaskStore(self.store_path)
        store.load()
        return store


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Return the process-wide config service."""
    return ConfigService()


def open_task_store() -> TaskStore:
    """Shortcut used by command handlers."""
    return get_config_service().open_task_store()
