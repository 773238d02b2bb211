"""Git branch and history utilities."""

from commitcue.git.runner import _run_git_command
from commitcue.git.exceptions import GitError


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or 'HEAD (detached)' in detached state.
    """
    branch = _run_git_command(["branch", "--show-current"])
    if not branch:
        return "HEAD (detached)"
    return branch


def get_last_commits(n: int = 10) -> list[str]:
    """Get the last n commit subjects.

    Args:
        n: Number of commits to retrieve.

    Returns:
        List of commit subject lines, newest first.
    """
    if n <= 0:
        return []
    try:
        output = _run_git_command(["log", f"-n{n}", "--pretty=%s"])
        if not output:
            return []
        return output.split("\n")
    except GitError:
        # No commits yet in the repo
        return []
