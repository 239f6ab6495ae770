"""Project to prompt conversion utilities.

This package walks a project directory and serializes its structure and textual
file contents into a single block of text suitable for pasting into a Large
Language Model (LLM) prompt.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("proj2prompt")
except PackageNotFoundError:
    __version__ = "unknown"
