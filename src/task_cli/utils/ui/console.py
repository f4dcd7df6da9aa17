"""Console utilities for task-cli."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=4)
def get_console(stderr: bool = False, highlight: bool = False) -> Console:
    """Get a Rich Console bound to stdout, or to stderr for error messages."""
    return Console(stderr=stderr, highlight=highlight)
