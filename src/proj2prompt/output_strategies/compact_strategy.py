"""Minimal output layout with one path line per entry."""

from .base_strategy import OutputStrategy


class CompactOutputStrategy(OutputStrategy):
    """Layout that emits each entry's relative path on its own line.

    Directory paths carry a trailing slash so they can be told apart from files; file paths
    are followed immediately by the rendered content.

    Example:
        >>> strategy = CompactOutputStrategy()
        >>> strategy.format_directory("src")
        'src/\\n'
        >>> strategy.format_file_start("src/main.py")
        'src/main.py\\n'
    """

    def format_directory(self, relative_path: str) -> str:
        return f"{relative_path}/\n"

    def format_file_start(self, relative_path: str) -> str:
        return f"{relative_path}\n"

    def format_file_end(self) -> str:
        return "\n"
