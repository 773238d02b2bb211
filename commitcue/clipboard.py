"""Clipboard access with a print fallback."""

import pyperclip
import typer


def copy_to_clipboard(text: str, label: str = "text") -> bool:
    """Copy text to the system clipboard, printing it if that is impossible.

    Args:
        text: The text to copy.
        label: What the text is ("prompt", "result"), for status messages.

    Returns:
        True if the text was copied, False if it was printed instead.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        typer.echo(f"Warning: Could not copy {label} to clipboard: {e}", err=True)
        typer.echo(f"Printing the {label} instead.", err=True)
        typer.echo(text)
        return False

    typer.echo(f"Copied {label} to clipboard.", err=True)
    return True
