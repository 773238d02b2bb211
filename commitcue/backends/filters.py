"""Result filter pipeline."""

from typing import Sequence

from commitcue.backends.descriptor import BackendDescriptor
from commitcue.backends.invoker import OutcomeKind, invoke
from commitcue.backends.issues import (
    IssueRecord,
    describe_outcome,
    flush_issues,
    report_issue,
)


def run_filter_pipeline(
    descriptors: Sequence[BackendDescriptor],
    text: str,
    report_immediately: bool = False,
) -> str:
    """Pass text through every filter in order.

    Each filter's output is the next filter's input. A filter that is
    unavailable, unconfigured or fails is skipped and its input passes
    through unchanged. Held-back issues are always printed at the end.

    Args:
        descriptors: Filter commands in order.
        text: The text to refine.
        report_immediately: Report unavailable/unconfigured filters as they
            are skipped.

    Returns:
        The filtered text, or the input unchanged if nothing applied.
    """
    deferred: list[IssueRecord] = []

    for descriptor in descriptors:
        outcome = invoke(descriptor, text)

        if outcome.kind is OutcomeKind.SUCCESS:
            text = outcome.output
            continue

        message = describe_outcome(outcome, "Filter")
        if outcome.kind is OutcomeKind.PROCESS_FAILURE or report_immediately:
            report_issue(message)
        else:
            deferred.append(IssueRecord(message=message, command=outcome.command))

    flush_issues("Skipped result filters:", deferred)
    return text
