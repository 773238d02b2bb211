"""Registry of named capabilities.

A capability is keyed by the first token of a command specification. It can
carry an availability predicate, a configuration predicate, a hint shown when
it is not configured, and an in-process runner. Names without an entry are
plain executables looked up on PATH.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

# Predicate: no arguments, True when ready
Predicate = Callable[[], bool]

# Runner: (arguments after the name, input text) -> output text.
# Raises CapabilityError on failure; any other exception is also a failure.
Runner = Callable[[list[str], str], str]


@dataclass(frozen=True)
class Capability:
    """A named capability entry."""

    name: str
    is_available: Optional[Predicate] = None
    is_configured: Optional[Predicate] = None
    runner: Optional[Runner] = None
    hint: Optional[str] = None

    @property
    def is_builtin(self) -> bool:
        """Whether the capability runs in-process."""
        return self.runner is not None


class CapabilityRegistry:
    """Explicit mapping from command names to capabilities."""

    def __init__(self, capabilities: Iterable[Capability] = ()):
        self._capabilities: dict[str, Capability] = {}
        for capability in capabilities:
            self.register(capability)

    def register(self, capability: Capability) -> None:
        """Add or replace a capability.

        Args:
            capability: The capability; its name is the lookup key.
        """
        self._capabilities[capability.name] = capability

    def get(self, name: str) -> Optional[Capability]:
        """Look up a capability by exact name."""
        return self._capabilities.get(name)

    def names(self) -> list[str]:
        """Get the registered names in registration order."""
        return list(self._capabilities)

    def __contains__(self, name: object) -> bool:
        return name in self._capabilities

    def __len__(self) -> int:
        return len(self._capabilities)
