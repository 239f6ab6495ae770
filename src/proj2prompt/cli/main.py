"""Command-line interface for proj2prompt.

This module wires the parsed command line into an ExplorerConfig, runs the traversal, and
delivers the resulting text to stdout, a file, the clipboard, or a combination of the
last two.

Exit Codes:
    0: Successful completion
    1: Traversal failure, delivery failure, or other runtime error
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe while printing to stdout

Example:
    # Print the current directory
    $ proj2prompt

    # Save to a file, leaving out temporary files
    $ proj2prompt -e "*.tmp" -o prompt.txt /path/to/project
"""

import logging
import os
import sys
from collections.abc import Mapping
from typing import List, Optional, Sequence

from proj2prompt.cli.argparser import create_parser, validate_args
from proj2prompt.cli.disposal import copy_to_clipboard, write_to_file
from proj2prompt.exceptions import DisposalError, TokenizerNotAvailableError, TraversalError
from proj2prompt.explorer import ErrorAction, Explorer, ExplorerConfig
from proj2prompt.token_counter import TokenCounter

PERMISSION_ACTIONS = {
    "fail": ErrorAction.RAISE,
    "warn": ErrorAction.WARN,
}


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr as single ``LEVEL: message`` lines."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing various count metrics.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    result: List[str] = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Lines: {counts['lines']}",
        f"Characters: {counts['characters']}",
    ]

    if counts["tokens"] is not None:
        result.append(f"Tokens: {counts['tokens']}")

    return "\n".join(result)


def print_to_stdout(text: str) -> None:
    """Print the text to stdout, leaving quietly if the reader went away."""
    try:
        print(text)
        sys.stdout.flush()
    except BrokenPipeError:
        # Python flushes stdout again at exit; point it at devnull to avoid a second error
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the proj2prompt command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        validate_args(args)
        counter = TokenCounter(model=args.tokenizer) if args.summary else None

        try:
            config = ExplorerConfig(
                args.directory,
                exclude_patterns=args.exclude,
                ignore_file_name=args.ignore_file,
                layout=args.format,
                error_action=PERMISSION_ACTIONS[args.permission_action],
                mark_truncated=args.mark_truncated,
                skip_paths=[args.output] if args.output else [],
            )
            explorer = Explorer(config)
            result = explorer.explore()
        except (TraversalError, FileNotFoundError, NotADirectoryError) as e:
            print(f"Error exploring directories: {e}", file=sys.stderr)
            sys.exit(1)

        try:
            if args.output:
                write_to_file(result, args.output)
                print(f"Output written to file: {args.output}")
            if args.clipboard:
                copy_to_clipboard(result)
                print("Output copied to clipboard.")
        except DisposalError as e:
            print(str(e), file=sys.stderr)
            sys.exit(1)

        if not args.output and not args.clipboard:
            print_to_stdout(result)

        if counter is not None:
            count = counter.count(result)
            counts = {
                "directories": explorer.directory_count,
                "files": explorer.file_count,
                "lines": count.lines,
                "characters": count.characters,
                "tokens": count.tokens,
            }
            print(format_counts(counts), file=sys.stderr)

    except TokenizerNotAvailableError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    except (OSError, ValueError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
