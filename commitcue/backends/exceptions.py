"""Backend-related exception classes.

Contains:
- CapabilityError: Raised by a built-in capability runner when it fails
- BackendsExhaustedError: Raised when no configured model command succeeds
"""


class CapabilityError(Exception):
    """Raised when an in-process capability fails to produce output."""

    pass


class BackendsExhaustedError(Exception):
    """Raised when every configured model command failed.

    Attributes:
        issues: The deferred issue records flushed when the chain gave up.
    """

    def __init__(self, message: str, issues=None):
        super().__init__(message)
        self.issues = list(issues or [])
