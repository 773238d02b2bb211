"""Commit flow pre-filled with a generated message."""

import os
import subprocess
import tempfile

import typer

from commitcue.git.exceptions import GitError


def commit_with_template(message: str) -> None:
    """Open git's commit editor pre-filled with the message.

    The commit is created only if the user saves the message in the editor.

    Args:
        message: The commit message to start from.

    Raises:
        GitError: If git is missing or the commit does not complete.
    """
    fd, template_path = tempfile.mkstemp(prefix="commitcue-", suffix=".txt")
    try:
        with os.fdopen(fd, "w") as f:
            f.write(message)
            if not message.endswith("\n"):
                f.write("\n")

        typer.echo("Opening commit editor...", err=True)
        try:
            # Inherit the terminal so the editor can run
            result = subprocess.run(
                ["git", "commit", "--edit", "--file", template_path],
                check=False,
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH.")

        if result.returncode != 0:
            raise GitError(f"git commit exited with code {result.returncode}")
    finally:
        os.unlink(template_path)
