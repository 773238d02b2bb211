"""Prompt builder for commit message generation.

Contains:
- build_prompt: Build the complete prompt sent to the model backends
- _parse_file_changes: Parse git status into a human-readable file change summary
"""

from commitcue.config import CommitCueConfig
from commitcue.git.runner import get_repo_root
from commitcue.git.branch import get_branch, get_last_commits
from commitcue.git.status import get_staged_status
from commitcue.git.diff import get_staged_diff, get_staged_diff_stat

# History depth used by the shortened prompt
SHORT_HISTORY_COUNT = 3


def build_prompt(config: CommitCueConfig, short: bool = False) -> str:
    """Build the prompt: rules, recent history and the staged changes.

    Args:
        config: The effective configuration.
        short: Replace the full diff with a diff stat and trim the history.

    Returns:
        The prompt text.

    Raises:
        NoStagedChangesError: If there are no staged changes.
        GitError: If not in a git repository.
    """
    # Fails early with a clear message outside a repository
    get_repo_root()

    if short:
        changes_header = "[STAGED_DIFF_STAT]"
        changes = get_staged_diff_stat(exclude_patterns=config.diff_exclude)
        history_count = min(config.recent_commit_count, SHORT_HISTORY_COUNT)
    else:
        changes_header = "[STAGED_DIFF]"
        changes = get_staged_diff(
            max_chars=config.max_diff_chars,
            exclude_patterns=config.diff_exclude,
        )
        history_count = config.recent_commit_count

    branch = get_branch()
    status = get_staged_status()
    last_commits = get_last_commits(n=history_count)

    commits_formatted = (
        "\n".join(f"- {commit}" for commit in last_commits)
        if last_commits
        else "- (no commits yet)"
    )
    file_changes = _parse_file_changes(status)

    return f"""{config.prompt_rules}

[BRANCH]
{branch}

[FILE_CHANGES]
{file_changes}

[RECENT_COMMITS]
{commits_formatted}

{changes_header}
{changes}"""


def _parse_file_changes(status: str) -> str:
    """Parse git status into a human-readable file change summary.

    Args:
        status: Staged git status in porcelain format.

    Returns:
        Human-readable summary of file changes.
    """
    new_files = []
    modified_files = []
    deleted_files = []
    renamed_files = []

    for line in status.split("\n"):
        if not line or line.startswith("##"):
            continue
        if len(line) < 3:
            continue

        status_code = line[0]
        filename = line[3:]

        # Renames look like "R  old -> new"
        if " -> " in filename:
            old_name, new_name = filename.split(" -> ", 1)
            renamed_files.append(f"{old_name} -> {new_name}")
            continue

        if status_code == "A":
            new_files.append(filename)
        elif status_code == "M":
            modified_files.append(filename)
        elif status_code == "D":
            deleted_files.append(filename)

    lines = []
    if new_files:
        lines.append("New files (did not exist before this commit):")
        lines.extend(f"  + {f}" for f in new_files)
    if modified_files:
        lines.append("Modified files (already existed, now changed):")
        lines.extend(f"  ~ {f}" for f in modified_files)
    if deleted_files:
        lines.append("Deleted files:")
        lines.extend(f"  - {f}" for f in deleted_files)
    if renamed_files:
        lines.append("Renamed files:")
        lines.extend(f"  > {f}" for f in renamed_files)

    return "\n".join(lines) if lines else "(no files)"
