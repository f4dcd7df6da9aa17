"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from task_cli.exceptions import AppError
from task_cli.utils.exit_codes import (
    ERROR_GENERAL,
    get_exit_code_description,
    get_exit_code_name,
)
from task_cli.utils.logger import get_logger
from task_cli.utils.ui.formatters import format_error


def command_wrapper(func: Callable) -> Callable:
    """Log a command's lifetime and turn its errors into exit codes.

    ``AppError`` subclasses are reported as ``Error: <message>`` on stderr
    and exit with the error's code; anything else exits with ERROR_GENERAL.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger("commands")
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s [%s: %s]",
                cmd,
                elapsed,
                str(e),
                get_exit_code_name(e.exit_code),
                get_exit_code_description(e.exit_code),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e
        except typer.Exit:
            raise
        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

        elapsed = time.monotonic() - start
        logger.info("command completed: %s (%.3fs)", cmd, elapsed)
        return result

    return wrapper
