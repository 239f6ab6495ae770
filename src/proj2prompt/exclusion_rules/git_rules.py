"""Implementation of exclusion rules using .gitignore pattern syntax."""

import logging
import re
from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from proj2prompt.exceptions import IgnoreFileError
from proj2prompt.types import PathType

from .base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_FILE = ".gitignore"


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Patterns are compiled with pathspec's GitIgnoreSpec, which reproduces Git's own matching
    behavior, including its handling of re-included files:

    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /), which only match paths given with a
      trailing slash or paths beneath such a directory
    - Negation patterns (starting with !), where later patterns override earlier ones
    - Double-asterisk matching (**)
    - Comment lines (starting with #) and blank lines

    Patterns are interpreted relative to the directory holding the rules file, so paths
    passed to exclude() must be relative to that directory.

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> import tempfile
        >>> import os
        >>> with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
        ...     _ = f.write('node_modules/\\n')
        >>> rules = GitIgnoreExclusionRules(f.name)
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("node_modules")  # a file, not a directory
        False
        >>> rules.add_rule("*.log")
        >>> rules.exclude("app.log")
        True
        >>> os.unlink(f.name)
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            IgnoreFileError: If any rules file cannot be read or compiled.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the loaded .gitignore patterns.

        Args:
            path: Root-relative path with forward slashes; directories end with a slash.

        Returns:
            bool: True if the last pattern matching the path is not a negation.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.log")
            >>> rules.add_rule("!keep.log")
            >>> rules.exclude("other.log")
            True
            >>> rules.exclude("keep.log")
            False
        """
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Patterns are appended after the ones already loaded, so negations in a later file
        can re-include paths excluded by an earlier one.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            IgnoreFileError: If a rules file cannot be read, is not valid UTF-8, or
                contains a pattern pathspec refuses to compile. Rules loaded before the
                failing file are kept.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            try:
                lines = path.read_text(encoding="utf-8-sig").splitlines()
            except (OSError, UnicodeDecodeError) as e:
                raise IgnoreFileError(str(path), str(e)) from e

            self._extend(lines, str(path))

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern (e.g., "*.pyc", "node_modules/", "!important.txt").

        Raises:
            IgnoreFileError: If pathspec refuses to compile the pattern.
        """
        self._extend([rule], "<rule>")

    def _extend(self, lines: List[str], source: str) -> None:
        combined = self._lines + lines
        try:
            spec = GitIgnoreSpec.from_lines(combined)
        except (ValueError, re.error) as e:
            raise IgnoreFileError(source, str(e)) from e
        self._lines = combined
        self.spec = spec


def load_ignore_rules(
    root_path: PathType, file_name: str = DEFAULT_IGNORE_FILE
) -> Optional[GitIgnoreExclusionRules]:
    """Load the ignore file found directly under a traversal root.

    A missing ignore file is not an error. A broken one is not fatal either: the problem is
    logged as a warning and the traversal carries on without ignore rules.

    Args:
        root_path: The traversal root.
        file_name: Name of the ignore file to look for. Defaults to ".gitignore".

    Returns:
        The compiled rules, or None if the file is absent or could not be compiled.
    """
    rules_file = Path(root_path) / file_name
    if not rules_file.is_file():
        return None

    try:
        return GitIgnoreExclusionRules(rules_file)
    except IgnoreFileError as e:
        logger.warning("%s", e)
        return None
