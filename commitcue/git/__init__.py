"""Git context collection and commit flow for commitcue.

This package provides:
- exceptions: GitError, NoStagedChangesError
- runner: _run_git_command, get_repo_root
- branch: get_branch, get_last_commits
- status: get_staged_status, _get_staged_files_list
- diff: get_staged_diff, get_staged_diff_stat, _should_exclude_file
- context: build_prompt, _parse_file_changes
- commit: commit_with_template
"""

from commitcue.git.exceptions import (
    GitError,
    NoStagedChangesError,
)
from commitcue.git.runner import (
    _run_git_command,
    get_repo_root,
)
from commitcue.git.branch import (
    get_branch,
    get_last_commits,
)
from commitcue.git.status import (
    get_staged_status,
    _get_staged_files_list,
)
from commitcue.git.diff import (
    get_staged_diff,
    get_staged_diff_stat,
    _should_exclude_file,
)
from commitcue.git.context import (
    build_prompt,
    _parse_file_changes,
)
from commitcue.git.commit import commit_with_template


__all__ = [
    "GitError",
    "NoStagedChangesError",
    "_run_git_command",
    "get_repo_root",
    "get_branch",
    "get_last_commits",
    "get_staged_status",
    "_get_staged_files_list",
    "get_staged_diff",
    "get_staged_diff_stat",
    "_should_exclude_file",
    "build_prompt",
    "_parse_file_changes",
    "commit_with_template",
]
