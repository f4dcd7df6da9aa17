"""Custom exceptions for task-cli."""

from task_cli.utils.exit_codes import (
    ERROR_ALREADY_EXISTS,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
)


class AppError(Exception):
    """Base application error carrying the process exit code."""

    exit_code: int = ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class TaskAlreadyExistsError(AppError):
    """Raised when another task already has the same description."""

    exit_code = ERROR_ALREADY_EXISTS

    def __init__(self, message: str = "task already exists"):
        super().__init__(message)


class TaskNotFoundError(AppError):
    """Raised when no task has the requested id."""

    exit_code = ERROR_NOT_FOUND

    def __init__(self, message: str = "task does not exist"):
        super().__init__(message)


class WrongArgumentCountError(AppError):
    """Raised when a command receives too few or too many arguments."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self, expected: int):
        noun = "argument is" if expected == 1 else "arguments are"
        word = {1: "one", 2: "two"}.get(expected, str(expected))
        super().__init__(f"only {word} {noun} allowed")
        self.expected = expected


class InvalidStatusError(AppError):
    """Raised for a status string outside todo / in-progress / done."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self, value: str | None = None):
        super().__init__("invalid task status")
        self.value = value


class InvalidTaskIdError(AppError):
    """Raised when a task id argument is not a non-negative integer."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self, value: str):
        super().__init__(f"invalid task id: {value!r}")
        self.value = value


class StoreError(AppError):
    """Raised when the task file cannot be read, parsed or written."""

    exit_code = ERROR_STORAGE
