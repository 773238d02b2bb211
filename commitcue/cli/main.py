"""Main CLI command for suggesting commit messages."""

import os
import sys
import traceback
from pathlib import Path
from typing import Optional

import typer

from commitcue.backends import BackendsExhaustedError
from commitcue.config import ConfigError, dump_config, load_config
from commitcue.git import GitError, NoStagedChangesError
from commitcue.router import MODE_PROMPT, MODE_RESULT, MODE_SHORT, RoutingContext, route

MODE_CONFIG = "config"
MODE_HELP = "help"

# Set to a non-empty value to print the full traceback of fatal errors
DEBUG_ENV_VAR = "COMMITCUE_DEBUG"

VALID_MODES = (MODE_PROMPT, MODE_RESULT, MODE_SHORT, MODE_CONFIG, MODE_HELP)


def _echo_error(prefix: str, error: BaseException) -> None:
    """Print an error and the chain of exceptions that caused it.

    The full traceback is printed only when COMMITCUE_DEBUG is set.
    """
    typer.echo(f"{prefix}: {error}", err=True)
    if os.environ.get(DEBUG_ENV_VAR):
        typer.echo("".join(traceback.format_exception(error)).rstrip("\n"), err=True)
        return
    cause = error.__cause__
    while cause is not None:
        typer.echo(f"  caused by {type(cause).__name__}: {cause}", err=True)
        cause = cause.__cause__


def main_command(
    ctx: typer.Context,
    modes: Optional[list[str]] = typer.Argument(
        None,
        help=(
            "Modes: 'prompt' (output the prompt only), 'result' (copy the result "
            "to the clipboard), 'short' (shortened prompt), 'config' (show the "
            "effective configuration), 'help'"
        ),
        show_default=False,
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Read option overrides from this file instead of ~/.commitcue/",
    ),
) -> None:
    """Suggest a commit message for the staged changes using configurable model commands."""
    modes = modes or []

    unknown = [mode for mode in modes if mode not in VALID_MODES]
    if unknown:
        typer.echo(f"Unknown mode: {', '.join(unknown)}", err=True)
        typer.echo(f"Valid modes: {', '.join(VALID_MODES)}", err=True)
        raise typer.Exit(1)

    if MODE_HELP in modes:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _echo_error("Configuration error", e)
        raise typer.Exit(1)

    if MODE_CONFIG in modes:
        typer.echo(dump_config(config))
        raise typer.Exit(0)

    context = RoutingContext.create(modes, config, is_terminal=sys.stdout.isatty())

    try:
        route(context)
    except NoStagedChangesError:
        typer.echo("nothing to commit (no changes staged for commit)", err=True)
        typer.echo("", err=True)
        typer.echo("Stage your changes first with:", err=True)
        typer.echo("  git add <file>...", err=True)
        raise typer.Exit(0)
    except ConfigError as e:
        _echo_error("Configuration error", e)
        raise typer.Exit(1)
    except GitError as e:
        _echo_error("Git error", e)
        raise typer.Exit(1)
    except BackendsExhaustedError as e:
        _echo_error("Error", e)
        raise typer.Exit(1)
