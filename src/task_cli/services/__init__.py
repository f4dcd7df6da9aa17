"""Services: task persistence and configuration."""

from .config_service import ConfigService, get_config_service, open_task_store
from .task_store import TaskStore

__all__ = [
    "ConfigService",
    "TaskStore",
    "get_config_service",
    "open_task_store",
]
