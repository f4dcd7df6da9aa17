"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config and log
directories.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from task_cli.services.task_store import TaskStore

# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path):
    """Send the application log file into *tmp_path*."""
    from task_cli.utils.logger import reset_logger

    log_dir = tmp_path / "logs"
    reset_logger()
    with patch("task_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    reset_logger()


@pytest.fixture(autouse=True)
def config_dir(tmp_path):
    """Point platformdirs' config dir at *tmp_path* for every test.

    Also clears the lru_cache so each test gets a fresh config service.
    """
    from task_cli.services.config_service import get_config_service

    directory = tmp_path / "config"
    get_config_service.cache_clear()
    with patch(
        "task_cli.services.config_service.user_config_dir",
        return_value=str(directory),
    ):
        yield directory
    get_config_service.cache_clear()


@pytest.fixture()
def store_path(config_dir) -> Path:
    """Path of the task file the CLI reads and writes during a test."""
    return config_dir / "task.json"


@pytest.fixture()
def store(store_path) -> TaskStore:
    """A loaded, empty store on the same file the CLI uses."""
    task_store = TaskStore(store_path)
    task_store.load()
    return task_store


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def invoke(runner):
    """Run the root app with the given arguments."""
    from task_cli.main import app

    def _invoke(*args: str):
        return runner.invoke(app, list(args))

    return _invoke


@pytest.fixture()
def reload_store(store_path):
    """Read the task file from disk into a fresh store."""

    def _reload() -> TaskStore:
        fresh = TaskStore(store_path)
        fresh.load()
        return fresh

    return _reload
