"""Issue messages and their reporting on stderr."""

import shlex
from dataclasses import dataclass

import typer

from commitcue.backends.invoker import InvocationOutcome, OutcomeKind
from commitcue.config import CommandSpec


@dataclass(frozen=True)
class IssueRecord:
    """A problem with one command, held back for end-of-run reporting."""

    message: str
    command: CommandSpec


def describe_outcome(outcome: InvocationOutcome, role: str) -> str:
    """Build the human-readable message for a failed outcome.

    Args:
        outcome: A non-success outcome.
        role: "Model" or "Filter", used as the message subject.

    Returns:
        The message text.
    """
    name = outcome.command[0]
    command = shlex.join(outcome.command)

    if outcome.kind is OutcomeKind.UNAVAILABLE:
        return f"{role} command not available: {name} (from {command})"
    if outcome.kind is OutcomeKind.UNCONFIGURED:
        message = f"{role} command not configured: {name}"
        if outcome.hint:
            message += f" ({outcome.hint})"
        return message
    if outcome.returncode is not None:
        return f"{role} command failed with exit code {outcome.returncode}: {command}"
    return f"{role} command failed: {command}: {outcome.detail}"


def report_issue(message: str) -> None:
    """Print one issue immediately."""
    typer.echo(f"Warning: {message}", err=True)


def flush_issues(heading: str, issues: list[IssueRecord]) -> None:
    """Print deferred issues as one grouped block.

    Args:
        heading: First line of the block.
        issues: The deferred records. Nothing is printed if empty.
    """
    if not issues:
        return
    typer.echo(heading, err=True)
    for issue in issues:
        typer.echo(f"  - {issue.message}", err=True)
