"""Output strategy base class defining the interface for entry formatting.

This module provides the abstract base class that defines how each visited entry is
marked in the output text. Every strategy must produce a layout that can be parsed back by
the same rules on every run.
"""

from abc import ABC, abstractmethod


class OutputStrategy(ABC):
    """Abstract base class defining the interface for output layout strategies.

    The explorer emits entries in pre-order and asks the strategy for three pieces of text:

    1. A directory marker, emitted once per included directory (including the root, whose
       relative path is ".").
    2. A file header, emitted before the rendered file content.
    3. A file trailer, emitted after the rendered file content.

    Relative paths always use forward slashes.

    Example:
        >>> class ArrowStrategy(OutputStrategy):
        ...     def format_directory(self, relative_path: str) -> str:
        ...         return f"> {relative_path}/\\n"
        ...
        ...     def format_file_start(self, relative_path: str) -> str:
        ...         return f"> {relative_path}\\n"
        ...
        ...     def format_file_end(self) -> str:
        ...         return "\\n"
        >>> ArrowStrategy().format_directory("src")
        '> src/\\n'
    """

    @abstractmethod
    def format_directory(self, relative_path: str) -> str:
        """Format the marker for a directory.

        Args:
            relative_path: Path of the directory relative to the traversal root.

        Returns:
            The formatted directory marker.
        """
        pass

    @abstractmethod
    def format_file_start(self, relative_path: str) -> str:
        """Format the header preceding a file's rendered content.

        Args:
            relative_path: Path of the file relative to the traversal root.

        Returns:
            The formatted file header.
        """
        pass

    @abstractmethod
    def format_file_end(self) -> str:
        """Format the separator following a file's rendered content."""
        pass
