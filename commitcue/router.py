"""Output routing.

Decides, from the invocation modes, the configuration and whether stdout is
a terminal, where the prompt and the generated message go.

Precedence:
- Non-interactive output always gets plain text on stdout, safe to pipe.
- Explicit modes (prompt, result) win over configuration defaults.
- Configuration flags (copy_prompt, copy_result, commit_with_template)
  apply only when no explicit mode decides.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import typer

from commitcue.backends import (
    CapabilityRegistry,
    default_registry,
    resolve_descriptors,
    run_fallback_chain,
    run_filter_pipeline,
)
from commitcue.clipboard import copy_to_clipboard
from commitcue.config import CommitCueConfig
from commitcue.git import build_prompt, commit_with_template

MODE_PROMPT = "prompt"
MODE_RESULT = "result"
MODE_SHORT = "short"


class Disposition(Enum):
    """Where the run's output ended up."""

    PROMPT_PRINTED = "prompt_printed"
    PROMPT_COPIED = "prompt_copied"
    QUERY_SKIPPED = "query_skipped"
    RESULT_PRINTED = "result_printed"
    RESULT_COPIED = "result_copied"
    RESULT_COMMITTED = "result_committed"


@dataclass(frozen=True)
class RoutingContext:
    """Inputs to the routing decision.

    Attributes:
        config: The effective configuration.
        modes: Mode words given on the command line. Case-sensitive;
            order and duplicates do not matter.
        is_terminal: Whether stdout is an interactive terminal.
    """

    config: CommitCueConfig
    modes: frozenset[str] = frozenset()
    is_terminal: bool = False

    @classmethod
    def create(cls, modes: Iterable[str], config: CommitCueConfig, is_terminal: bool) -> "RoutingContext":
        return cls(modes=frozenset(modes), config=config, is_terminal=is_terminal)

    def has_mode(self, mode: str) -> bool:
        return mode in self.modes


def generate_message(prompt: str, config: CommitCueConfig, registry: CapabilityRegistry) -> str:
    """Run the model fallback chain, then the result filters.

    Raises:
        BackendsExhaustedError: If no model command succeeds.
    """
    models = resolve_descriptors(config.model_preferences, registry)
    filters = resolve_descriptors(config.result_filters, registry)

    typer.echo("Generating commit message...", err=True)
    raw = run_fallback_chain(models, prompt, report_immediately=config.report_unavailable_models)
    return run_filter_pipeline(filters, raw, report_immediately=config.report_unavailable_filters)


def _emit(text: str) -> None:
    """Write text to stdout verbatim, adding a newline only if it lacks one."""
    typer.echo(text, nl=not text.endswith("\n"))


def _warn_if_prompt_too_long(context: RoutingContext, prompt: str) -> None:
    config = context.config
    if context.has_mode(MODE_SHORT):
        return
    if not (config.copy_prompt or context.has_mode(MODE_PROMPT)):
        return
    if len(prompt) > config.interactive_prompt_limit:
        typer.echo(
            f"Warning: The prompt is {len(prompt):,} characters, over the interactive "
            f"limit of {config.interactive_prompt_limit:,}. "
            f"Consider the '{MODE_SHORT}' mode for a shortened prompt.",
            err=True,
        )


def route(context: RoutingContext, registry: Optional[CapabilityRegistry] = None) -> Disposition:
    """Build the prompt, query the models if needed, and dispose of the output.

    Args:
        context: Modes, configuration and terminal state.
        registry: Capabilities for resolving commands. Defaults to the
            built-in registry.

    Returns:
        The final disposition.

    Raises:
        NoStagedChangesError: If nothing is staged.
        GitError: If the repository cannot be read or the commit fails.
        BackendsExhaustedError: If no model command succeeds.
        ConfigError: If a configured command is malformed.
    """
    config = context.config
    if registry is None:
        registry = default_registry(config)

    typer.echo("Collecting git context...", err=True)
    prompt = build_prompt(config, short=context.has_mode(MODE_SHORT))

    _warn_if_prompt_too_long(context, prompt)

    if context.has_mode(MODE_PROMPT):
        if not context.is_terminal:
            _emit(prompt)
            return Disposition.PROMPT_PRINTED
        copy_to_clipboard(prompt, "prompt")
        typer.echo("Skipping model query (prompt mode).", err=True)
        return Disposition.PROMPT_COPIED

    if config.copy_prompt and not context.has_mode(MODE_RESULT) and context.is_terminal:
        copy_to_clipboard(prompt, "prompt")

    if not config.query_language_model:
        typer.echo("Skipping model query (query_language_model is disabled).", err=True)
        return Disposition.QUERY_SKIPPED

    result = generate_message(prompt, config, registry)

    if not context.is_terminal:
        _emit(result)
        return Disposition.RESULT_PRINTED

    if context.has_mode(MODE_RESULT):
        copy_to_clipboard(result, "result")
        return Disposition.RESULT_COPIED

    if config.copy_result:
        copy_to_clipboard(result, "result")

    if config.commit_with_template:
        commit_with_template(result)
        return Disposition.RESULT_COMMITTED

    _emit(result)
    return Disposition.RESULT_PRINTED
