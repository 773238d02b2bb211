"""Commit message suggestions from staged changes via configurable backends."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitcue")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
