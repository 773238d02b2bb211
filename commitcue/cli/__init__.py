"""CLI entry point for commitcue."""

import typer

from commitcue.cli.main import VALID_MODES, main_command

app = typer.Typer(
    name="commitcue",
    help="commitcue: commit message suggestions from staged changes",
    add_completion=False,
)

app.command()(main_command)


__all__ = [
    "app",
    "main_command",
    "VALID_MODES",
]
