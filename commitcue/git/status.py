"""Git status utilities."""

from commitcue.git.runner import _run_git_command


def get_staged_status() -> str:
    """Get git status filtered to only show staged files.

    The porcelain format uses two columns: the first is the index (staged)
    status, the second the worktree status. Only lines with a staged change
    in the first column are kept.

    Returns:
        Filtered status showing only staged files.
    """
    # The branch header keeps the first file line from losing its leading space
    full_status = _run_git_command(["status", "--porcelain=v1", "-b"])
    filtered_lines = []

    for line in full_status.split("\n"):
        if line.startswith("##") or len(line) < 2:
            continue
        first_col = line[0]
        if first_col != " " and first_col != "?":
            filtered_lines.append(line)

    return "\n".join(filtered_lines)


def _get_staged_files_list() -> list[str]:
    """Get list of staged file paths."""
    output = _run_git_command(["diff", "--staged", "--name-only"])
    if not output:
        return []
    return output.split("\n")
