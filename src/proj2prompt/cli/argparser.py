"""Command-line argument parsing for proj2prompt.

This module defines the command-line interface for proj2prompt,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from proj2prompt import __version__


class CommaSeparatedAction(argparse.Action):
    """Action collecting repeatable, comma-separable values into one list.

    ``-e "*.tmp,*.log" -e build`` yields ``["*.tmp", "*.log", "build"]``. Empty items are
    dropped and the order of appearance on the command line is preserved.
    """

    def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
        kwargs.setdefault("default", [])
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        # Copy so the shared default list is never mutated
        items = list(getattr(namespace, self.dest, None) or [])
        if values is not None:
            items.extend(item.strip() for item in str(values).split(",") if item.strip())
        setattr(namespace, self.dest, items)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with proj2prompt's options.
    """
    description = """
    proj2prompt: Generate a project structure for LLM prompts.

    Walks a directory in a fixed, sorted order and writes every directory and file it
    finds, together with the file contents, as one block of text ready to paste into a
    Large Language Model (LLM) prompt.

    Filtering:
    - The .git directory is always skipped
    - A .gitignore at the root of the directory is honored (negations included)
    - Extra glob patterns given with -e are matched against file and directory names

    Content:
    - At most the first 8000 bytes of each file are included
    - Binary files are summarized by name, size and their first 10 bytes in hex
    """

    epilog = """
    Examples:
      # Print the current directory
      proj2prompt

      # Exclude temporary files and build output
      proj2prompt -e "*.tmp" -e build /path/to/project
      proj2prompt -e "*.tmp,*.log" /path/to/project

      # Save the output to a file and copy it to the clipboard
      proj2prompt -o prompt.txt -c /path/to/project

      # Compact layout, skipping unreadable entries with a warning
      proj2prompt -f compact -P warn /path/to/project

      # Report size and token count on stderr
      proj2prompt -s -t gpt-4 /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="proj2prompt",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v", "--version", action="version", version=f"proj2prompt {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=Path("."),
        help="The directory to process (default: current directory). Paths in the output are relative to it.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="PATTERN",
        action=CommaSeparatedAction,
        help=(
            "Glob pattern matched against file and directory names (not full paths). Can be "
            "specified multiple times or as a comma-separated list."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Save the output to a file (overwritten if it exists) instead of printing it.",
    )
    parser.add_argument(
        "-c",
        "--clipboard",
        action="store_true",
        help="Copy the output to the clipboard instead of printing it.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["verbose", "compact"],
        default="verbose",
        help="Output layout: bannered headers (verbose) or bare paths (compact). Default: verbose.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["fail", "warn"],
        default="fail",
        help="How to handle unreadable files and directories (default: fail).",
    )
    parser.add_argument(
        "--ignore-file",
        metavar="NAME",
        default=".gitignore",
        help="Name of the ignore file looked up at the root of the directory (default: .gitignore).",
    )
    parser.add_argument(
        "--mark-truncated",
        action="store_true",
        help="Add a notice after text files that were cut at the 8000-byte limit.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print a summary of directories, files, lines and characters to stderr.",
    )
    parser.add_argument(
        "-t",
        "--tokenizer",
        metavar="MODEL",
        help="Tokenizer model used to add a token count to the summary (e.g., gpt-4). Requires -s.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every excluded path to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.tokenizer and not args.summary:
        raise ValueError("-t/--tokenizer requires -s/--summary to be specified")
