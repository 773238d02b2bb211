"""Shared test fixtures and configuration."""

import sys
import tempfile
from pathlib import Path

import pytest

from commitcue.backends import Capability, CapabilityRegistry, CapabilityError
from commitcue.config import build_config


IDENTITY_CODE = "import sys; sys.stdout.write(sys.stdin.read())"
UPPERCASE_CODE = "import sys; sys.stdout.write(sys.stdin.read().upper())"
FAILING_CODE = "import sys; sys.stdin.read(); sys.exit(3)"
NON_UTF8_CODE = "import sys; sys.stdin.read(); sys.stdout.buffer.write(b'\\xff\\xfe bad')"

MISSING_COMMAND = "commitcue-test-no-such-command"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def default_config():
    """The built-in configuration without user overrides."""
    return build_config()


@pytest.fixture
def py_command():
    """Build a command running a Python snippet with the test interpreter."""

    def make(code: str) -> list[str]:
        return [sys.executable, "-c", code]

    return make


@pytest.fixture
def test_registry():
    """Registry with in-process capabilities for each invocation outcome."""

    def fail(args, text):
        raise CapabilityError("model exploded")

    def echo_args(args, text):
        return " ".join(args)

    return CapabilityRegistry([
        Capability(name="needs-key", is_configured=lambda: False, runner=echo_args, hint="set TEST_KEY"),
        Capability(name="offline", is_available=lambda: False, runner=echo_args),
        Capability(name="broken", runner=fail),
        Capability(name="say", runner=echo_args),
        Capability(name="upper", runner=lambda args, text: text.upper()),
    ])


@pytest.fixture
def sample_prompt():
    """Sample prompt text."""
    return """Write a git commit message for the staged changes below.

[BRANCH]
main

[FILE_CHANGES]
New files (did not exist before this commit):
  + parser.py

[RECENT_COMMITS]
- Add tokenizer

[STAGED_DIFF]
diff --git a/parser.py b/parser.py
new file mode 100644
+def parse(tokens):
+    return tokens
"""
