"""Backend invocation.

Runs one descriptor against an input text and classifies the outcome.
"""

import shutil
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import typer

from commitcue.backends.descriptor import BackendDescriptor
from commitcue.backends.exceptions import CapabilityError
from commitcue.config import CommandSpec


class OutcomeKind(Enum):
    """Classification of an invocation."""

    SUCCESS = "success"
    PROCESS_FAILURE = "process_failure"
    UNAVAILABLE = "unavailable"
    UNCONFIGURED = "unconfigured"


@dataclass(frozen=True)
class InvocationOutcome:
    """Result of invoking one command.

    Attributes:
        kind: The outcome classification.
        command: The command specification that was attempted.
        output: Captured output text, set only on success.
        returncode: Exit status of an external command that failed.
        detail: Error description for failures without an exit status.
        hint: Setup hint for unconfigured capabilities.
    """

    kind: OutcomeKind
    command: CommandSpec
    output: Optional[str] = None
    returncode: Optional[int] = None
    detail: Optional[str] = None
    hint: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


def is_executable(name: str) -> bool:
    """Check whether a name resolves to an executable (PATH lookup or path)."""
    return shutil.which(name) is not None


def invoke(descriptor: BackendDescriptor, payload: str) -> InvocationOutcome:
    """Invoke a descriptor with the payload as input.

    Args:
        descriptor: The resolved command.
        payload: Text passed to the command (stdin for external commands).

    Returns:
        The classified outcome. Never raises for command failures.
    """
    command = descriptor.command

    if not (descriptor.is_builtin or is_executable(descriptor.name)):
        return InvocationOutcome(OutcomeKind.UNAVAILABLE, command)
    if not descriptor.is_available():
        return InvocationOutcome(OutcomeKind.UNAVAILABLE, command)
    if not descriptor.is_configured():
        return InvocationOutcome(OutcomeKind.UNCONFIGURED, command, hint=descriptor.hint)

    if descriptor.is_builtin:
        return _run_builtin(descriptor, payload)
    return _run_external(descriptor, payload)


def _run_builtin(descriptor: BackendDescriptor, payload: str) -> InvocationOutcome:
    """Call an in-process capability runner."""
    try:
        output = descriptor.runner(descriptor.args, payload)
    except CapabilityError as e:
        return InvocationOutcome(OutcomeKind.PROCESS_FAILURE, descriptor.command, detail=str(e))
    except Exception as e:
        # Runners registered by a host may raise anything
        return InvocationOutcome(
            OutcomeKind.PROCESS_FAILURE,
            descriptor.command,
            detail=f"{type(e).__name__}: {e}",
        )
    return InvocationOutcome(OutcomeKind.SUCCESS, descriptor.command, output=output)


def _run_external(descriptor: BackendDescriptor, payload: str) -> InvocationOutcome:
    """Run an external command with the payload on stdin, capturing stdout.

    No timeout is applied; a command that never exits blocks the run.
    """
    typer.echo(f"Running: {descriptor.display()}", err=True)

    try:
        # stderr is inherited so the command's own diagnostics stay visible
        result = subprocess.run(
            list(descriptor.command),
            input=payload,
            stdout=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except OSError as e:
        return InvocationOutcome(
            OutcomeKind.PROCESS_FAILURE,
            descriptor.command,
            detail=f"could not start: {e}",
        )
    except UnicodeDecodeError as e:
        return InvocationOutcome(
            OutcomeKind.PROCESS_FAILURE,
            descriptor.command,
            detail=f"output is not valid text: {e}",
        )

    if result.returncode != 0:
        return InvocationOutcome(
            OutcomeKind.PROCESS_FAILURE,
            descriptor.command,
            returncode=result.returncode,
        )
    return InvocationOutcome(OutcomeKind.SUCCESS, descriptor.command, output=result.stdout)
