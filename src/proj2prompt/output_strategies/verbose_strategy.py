"""Bannered output layout."""

from .base_strategy import OutputStrategy

DIRECTORY_BANNER = "#######"
FILE_BANNER = "-----"


class VerboseOutputStrategy(OutputStrategy):
    """Layout that surrounds every entry header with a banner line.

    Directories are announced as ``Directory: <path>`` between ``#######`` banners and files
    as ``File: <path>`` between ``-----`` banners. Every header starts with an empty line so
    consecutive entries stay visually separated.

    Example:
        >>> strategy = VerboseOutputStrategy()
        >>> print(strategy.format_directory("src"), end="")
        <BLANKLINE>
        #######
        Directory: src
        #######
        >>> print(strategy.format_file_start("src/main.py") + "print('hi')" + strategy.format_file_end(), end="")
        <BLANKLINE>
        -----
        File: src/main.py
        -----
        print('hi')
    """

    def format_directory(self, relative_path: str) -> str:
        return f"\n{DIRECTORY_BANNER}\nDirectory: {relative_path}\n{DIRECTORY_BANNER}\n"

    def format_file_start(self, relative_path: str) -> str:
        return f"\n{FILE_BANNER}\nFile: {relative_path}\n{FILE_BANNER}\n"

    def format_file_end(self) -> str:
        return "\n"
