"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from task_cli.utils.exit_codes import ERROR_INVALID_ARGS
from task_cli.utils.ui.console import get_console
from task_cli.utils.ui.formatters import format_error


class SuggestingGroup(TyperGroup):
    """Typer group that names unknown commands and suggests close matches."""

    def list_commands(self, ctx):
        # keep registration order in --help instead of alphabetical
        return list(self.commands)

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if not args:
                raise
            attempted = args[0]
            format_error(f"invalid command: {attempted}")

            suggestions = get_close_matches(
                attempted, list(self.commands), n=3, cutoff=0.6
            )
            if suggestions:
                console = get_console(stderr=True)
                console.print()
                if len(suggestions) == 1:
                    console.print("Did you mean this?", style="yellow")
                else:
                    console.print("Did you mean one of these?", style="yellow")
                for suggestion in suggestions:
                    console.print(f"        {suggestion}", markup=False)
            raise typer.Exit(ERROR_INVALID_ARGS) from e
