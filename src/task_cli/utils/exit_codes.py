"""
Exit codes for task-cli.

Each failure class maps to its own code so scripts wrapping the CLI can tell
a missing task from a bad argument without parsing stderr.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments: wrong count, non-numeric id, unknown status or command
ERROR_INVALID_ARGS = 2

# Task id not present in the store
ERROR_NOT_FOUND = 3

# Another task already has the same description
ERROR_ALREADY_EXISTS = 4

# Backing file could not be read, parsed or written
ERROR_STORAGE = 5


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_ALREADY_EXISTS: "ERROR_ALREADY_EXISTS",
        ERROR_STORAGE: "ERROR_STORAGE",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NOT_FOUND: "Task not found",
        ERROR_ALREADY_EXISTS: "A task with the same description already exists",
        ERROR_STORAGE: "Task file could not be read or written",
    }
    return descriptions.get(code, "Unknown error")
