"""task-cli - track personal tasks from the command line."""

__version__ = "1.0.0"
