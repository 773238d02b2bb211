"""Model and filter command orchestration for commitcue.

This package provides:
- registry: Capability, CapabilityRegistry
- descriptor: BackendDescriptor, resolve_descriptor, resolve_descriptors
- invoker: invoke, InvocationOutcome, OutcomeKind
- issues: IssueRecord, describe_outcome, report_issue, flush_issues
- chain: run_fallback_chain
- filters: run_filter_pipeline
- builtins: default_registry
"""

from commitcue.backends.exceptions import (
    BackendsExhaustedError,
    CapabilityError,
)
from commitcue.backends.registry import (
    Capability,
    CapabilityRegistry,
)
from commitcue.backends.descriptor import (
    BackendDescriptor,
    resolve_descriptor,
    resolve_descriptors,
)
from commitcue.backends.invoker import (
    InvocationOutcome,
    OutcomeKind,
    invoke,
)
from commitcue.backends.issues import IssueRecord
from commitcue.backends.chain import run_fallback_chain
from commitcue.backends.filters import run_filter_pipeline
from commitcue.backends.builtins import default_registry


__all__ = [
    "BackendsExhaustedError",
    "CapabilityError",
    "Capability",
    "CapabilityRegistry",
    "BackendDescriptor",
    "resolve_descriptor",
    "resolve_descriptors",
    "InvocationOutcome",
    "OutcomeKind",
    "invoke",
    "IssueRecord",
    "run_fallback_chain",
    "run_filter_pipeline",
    "default_registry",
]
