"""Fallback chain over the configured model commands."""

from typing import Sequence

from commitcue.backends.descriptor import BackendDescriptor
from commitcue.backends.exceptions import BackendsExhaustedError
from commitcue.backends.invoker import OutcomeKind, invoke
from commitcue.backends.issues import (
    IssueRecord,
    describe_outcome,
    flush_issues,
    report_issue,
)


def run_fallback_chain(
    descriptors: Sequence[BackendDescriptor],
    prompt: str,
    report_immediately: bool = False,
) -> str:
    """Query model commands in order until one succeeds.

    Commands that fail to run are reported right away. Unavailable and
    unconfigured commands are reported right away only when
    report_immediately is set; otherwise they are held back and printed
    only if every command fails. Held-back issues are dropped on success.

    Args:
        descriptors: Model commands in preference order.
        prompt: Input text for each command.
        report_immediately: Report unavailable/unconfigured commands as they
            are skipped.

    Returns:
        The output of the first successful command.

    Raises:
        BackendsExhaustedError: If no command succeeds.
    """
    deferred: list[IssueRecord] = []

    for descriptor in descriptors:
        outcome = invoke(descriptor, prompt)

        if outcome.kind is OutcomeKind.SUCCESS:
            return outcome.output

        message = describe_outcome(outcome, "Model")
        if outcome.kind is OutcomeKind.PROCESS_FAILURE or report_immediately:
            report_issue(message)
        else:
            deferred.append(IssueRecord(message=message, command=outcome.command))

    flush_issues("Problems with the configured model commands:", deferred)

    if not descriptors:
        raise BackendsExhaustedError("No model commands are configured (model_preferences is empty).")
    raise BackendsExhaustedError(
        f"None of the {len(descriptors)} configured model commands succeeded.",
        issues=deferred,
    )
