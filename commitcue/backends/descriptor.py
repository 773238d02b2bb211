"""Backend descriptor resolution.

Turns configured command specifications into descriptors bound to the
capability registry.
"""

import shlex
from dataclasses import dataclass
from typing import Optional, Sequence

from commitcue.backends.registry import CapabilityRegistry, Predicate, Runner
from commitcue.config import CommandSpec, ConfigError


def _always_ready() -> bool:
    return True


@dataclass(frozen=True)
class BackendDescriptor:
    """A command specification with its capability bindings resolved."""

    command: CommandSpec
    is_available: Predicate = _always_ready
    is_configured: Predicate = _always_ready
    runner: Optional[Runner] = None
    hint: Optional[str] = None

    @property
    def name(self) -> str:
        return self.command[0]

    @property
    def args(self) -> list[str]:
        return list(self.command[1:])

    @property
    def is_builtin(self) -> bool:
        return self.runner is not None

    def display(self) -> str:
        """Render the command as a shell-quoted string."""
        return shlex.join(self.command)


def resolve_descriptor(entry: Sequence[str], registry: CapabilityRegistry) -> BackendDescriptor:
    """Resolve one configuration entry into a descriptor.

    Args:
        entry: The command specification from the configuration.
        registry: Capabilities to bind by the entry's first token.

    Returns:
        The resolved descriptor. Missing predicates default to always ready.

    Raises:
        ConfigError: If the entry is not a non-empty sequence of strings.
    """
    if isinstance(entry, str) or not isinstance(entry, (list, tuple)):
        raise ConfigError(f"Command must be a list of strings, got {entry!r}")
    if not entry or not entry[0]:
        raise ConfigError("Command must not be empty")
    if not all(isinstance(token, str) for token in entry):
        raise ConfigError(f"Command must contain only strings, got {list(entry)!r}")

    command = tuple(entry)
    capability = registry.get(command[0])
    if capability is None:
        return BackendDescriptor(command=command)

    return BackendDescriptor(
        command=command,
        is_available=capability.is_available or _always_ready,
        is_configured=capability.is_configured or _always_ready,
        runner=capability.runner,
        hint=capability.hint,
    )


def resolve_descriptors(
    entries: Sequence[Sequence[str]], registry: CapabilityRegistry
) -> list[BackendDescriptor]:
    """Resolve a configured command list, preserving order."""
    return [resolve_descriptor(entry, registry) for entry in entries]
