"""File logging for task-cli.

Everything goes to a rotating file under platformdirs' user_log_dir; the
terminal only ever sees command output and error messages.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

ROOT_LOGGER_NAME = "task_cli"
LOG_FILE_NAME = "task.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_root: logging.Logger | None = None


def log_file_path() -> Path:
    """Location of the active log file."""
    return Path(user_log_dir(ROOT_LOGGER_NAME)) / LOG_FILE_NAME


def _find_file_handler(
    root: logging.Logger, path: Path
) -> logging.handlers.RotatingFileHandler | None:
    for handler in root.handlers:
        if (
            isinstance(handler, logging.handlers.RotatingFileHandler)
            and handler.baseFilename == os.path.abspath(path)
        ):
            return handler
    return None


def _configure_root() -> logging.Logger:
    path = log_file_path()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    root.propagate = False

    # other handlers (e.g. log capture) may already be attached
    if _find_file_handler(root, path) is None:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        root.addHandler(handler)
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or a named child of it.

    The file handler is attached on first use. Child names are given relative
    to the package, e.g. ``get_logger("store")`` -> ``task_cli.store``.
    """
    global _root
    if _root is None:
        _root = _configure_root()
    if not name:
        return _root
    return _root.getChild(name)


def reset_logger() -> None:
    """Detach and close the file handlers so the next call reconfigures them."""
    global _root
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    _root = None
