"""Git diff utilities.

Contains:
- get_staged_diff: Get the staged diff, excluding ignored files
- get_staged_diff_stat: Get a per-file summary of the staged diff
- _should_exclude_file: Check if a file should be excluded based on patterns
"""

import fnmatch
from pathlib import Path

from commitcue.git.runner import _run_git_command
from commitcue.git.exceptions import NoStagedChangesError
from commitcue.git.status import _get_staged_files_list


def _should_exclude_file(filename: str, patterns: list[str]) -> bool:
    """Check if a file should be excluded based on patterns.

    Supports glob patterns like *.lock, build/*, etc.

    Args:
        filename: The file path to check.
        patterns: List of patterns to match against.

    Returns:
        True if the file should be excluded.
    """
    for pattern in patterns:
        if filename == pattern:
            return True
        if fnmatch.fnmatch(filename, pattern):
            return True
        # Patterns may also match just the basename
        if fnmatch.fnmatch(Path(filename).name, pattern):
            return True
    return False


def _files_to_include(exclude_patterns: list[str]) -> list[str]:
    """Get the staged files that are not excluded.

    Raises:
        NoStagedChangesError: If there are no staged changes.
    """
    staged_files = _get_staged_files_list()

    if not staged_files:
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    return [f for f in staged_files if not _should_exclude_file(f, exclude_patterns)]


def get_staged_diff(max_chars: int = 100000, exclude_patterns: list[str] | None = None) -> str:
    """Get the staged diff, excluding ignored files and truncating if necessary.

    Args:
        max_chars: Maximum characters for the diff output.
        exclude_patterns: Glob patterns of files to leave out of the diff.

    Returns:
        The staged diff string.

    Raises:
        NoStagedChangesError: If there are no staged changes.
    """
    files_to_include = _files_to_include(exclude_patterns or [])

    if not files_to_include:
        return "(Only ignored files staged - no code changes to describe)"

    diff = _run_git_command(["diff", "--staged", "--"] + files_to_include)

    if not diff:
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    if len(diff) > max_chars:
        diff = diff[:max_chars] + "\n...[truncated]\n"

    return diff


def get_staged_diff_stat(exclude_patterns: list[str] | None = None) -> str:
    """Get the per-file change summary of the staged diff.

    Args:
        exclude_patterns: Glob patterns of files to leave out.

    Returns:
        The output of git diff --staged --stat.

    Raises:
        NoStagedChangesError: If there are no staged changes.
    """
    files_to_include = _files_to_include(exclude_patterns or [])

    if not files_to_include:
        return "(Only ignored files staged - no code changes to describe)"

    return _run_git_command(["diff", "--staged", "--stat", "--"] + files_to_include)
