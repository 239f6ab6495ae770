"""Directory traversal producing prompt text.

This module provides the Explorer class, which walks a directory tree in a fixed order,
applies the layered exclusion rules to every entry, and collects the headers and rendered
file contents into a single string.
"""

import logging
import os
import stat
from pathlib import Path
from typing import List, Optional

from proj2prompt.exceptions import TraversalError
from proj2prompt.exclusion_rules.base_rules import BaseExclusionRules
from proj2prompt.exclusion_rules.composite_rules import CompositeExclusionRules
from proj2prompt.exclusion_rules.git_rules import GitIgnoreExclusionRules, load_ignore_rules
from proj2prompt.exclusion_rules.glob_rules import GlobExclusionRules
from proj2prompt.exclusion_rules.vcs_rules import VcsExclusionRules
from proj2prompt.output_strategies import OutputStrategy, get_strategy

from .config import ExplorerConfig
from .content_renderer import ContentRenderer
from .error_action import ErrorAction
from .traversal_entry import TraversalEntry

logger = logging.getLogger(__name__)

ROOT_RELATIVE_PATH = "."


class Explorer:
    """Walks a directory tree and serializes its structure and file contents.

    The traversal is depth-first and pre-order: a directory's header is emitted before
    anything inside it, and the children of every directory are visited in lexicographic
    order of their names. Given the same filesystem state and the same configuration, the
    output is always identical.

    Every entry below the root is checked against three rule sources, and is excluded if
    any of them matches:

    - the built-in version-control rule (any ``.git`` path segment),
    - the ignore file found at the root, if there is one and it compiles,
    - the caller's glob patterns, matched against the entry's base name.

    An excluded directory is never listed, so nothing below it is visited. Directories are
    recognized without following symbolic links; a link to a directory is reported as a
    single entry and not descended into.

    Error Handling:
        Filesystem errors (permission denied, broken symbolic links, failed reads) are
        handled according to ``config.error_action``:
        - RAISE (default): abort with a TraversalError; no partial output is returned
        - WARN: log a warning and leave the failing entry out of the output entirely

    The explorer never writes anything. Delivering the text is up to the caller.

    Attributes:
        config (ExplorerConfig): The traversal configuration.
        root_path (Path): The directory being traversed.
        ignore_rules (Optional[GitIgnoreExclusionRules]): Rules from the root ignore file.
        exclusion_rules (CompositeExclusionRules): Combined inclusion predicate.

    Example:
        >>> explorer = Explorer(ExplorerConfig("src", exclude_patterns=["*.pyc"]))  # doctest: +SKIP
        >>> print(explorer.explore())  # doctest: +SKIP
        <BLANKLINE>
        #######
        Directory: .
        #######
        <BLANKLINE>
        -----
        File: main.py
        -----
        print("hello")
    """

    def __init__(self, config: Optional[ExplorerConfig] = None) -> None:
        """Initialize the explorer and load the root ignore file.

        Args:
            config: Traversal configuration. Defaults to the current directory with no
                extra exclusion patterns.

        Raises:
            FileNotFoundError: If the root directory does not exist.
            NotADirectoryError: If the root path is not a directory.
        """
        self.config = config if config is not None else ExplorerConfig()
        self.root_path = Path(self.config.root_path)
        # Skip paths are matched against paths joined onto this; entries are never resolved
        self._resolved_root = self.root_path.resolve()

        self.ignore_rules: Optional[GitIgnoreExclusionRules] = load_ignore_rules(
            self.root_path, self.config.ignore_file_name
        )

        rules: List[BaseExclusionRules] = [VcsExclusionRules()]
        if self.ignore_rules is not None:
            rules.append(self.ignore_rules)
        rules.append(GlobExclusionRules(self.config.exclude_patterns))
        self.exclusion_rules = CompositeExclusionRules(rules)

        self._renderer = ContentRenderer(self.config.sample_size, self.config.mark_truncated)
        self._strategy: OutputStrategy = get_strategy(self.config.layout)

        self._directory_count = 0
        self._file_count = 0

    @property
    def directory_count(self) -> int:
        """Number of directories emitted by the last traversal, excluding the root."""
        return self._directory_count

    @property
    def file_count(self) -> int:
        """Number of files emitted by the last traversal."""
        return self._file_count

    def explore(self) -> str:
        """Traverse the tree and return the complete output text.

        Returns:
            str: Directory markers and file sections, in pre-order.

        Raises:
            TraversalError: If a filesystem error occurs and error_action is RAISE.
        """
        self._directory_count = 0
        self._file_count = 0

        buffer: List[str] = []
        self._visit_directory(self.root_path, "", buffer)
        return "".join(buffer)

    def is_excluded(self, relative_path: str, is_dir: bool) -> bool:
        """Decide whether an entry is left out of the output.

        Args:
            relative_path: Root-relative path of the entry, with forward slashes.
            is_dir: Whether the entry is a directory.

        Returns:
            True if any exclusion rule matches, or if the entry is one of the skip paths.
        """
        match_path = f"{relative_path}/" if is_dir else relative_path
        if self.exclusion_rules.exclude(match_path):
            return True
        skip_paths = self.config.skip_paths
        return bool(skip_paths) and self._resolved_root.joinpath(relative_path) in skip_paths

    def _visit_directory(self, path: Path, relative_path: str, buffer: List[str]) -> None:
        # List first so that an unreadable directory leaves no header behind under WARN
        try:
            with os.scandir(path) as it:
                children = sorted(it, key=lambda child: child.name)
        except OSError as e:
            self._handle_error(path, e)
            return

        buffer.append(self._strategy.format_directory(relative_path or ROOT_RELATIVE_PATH))
        if relative_path:
            self._directory_count += 1

        for child in children:
            child_relative_path = f"{relative_path}/{child.name}" if relative_path else child.name
            try:
                is_dir = child.is_dir(follow_symlinks=False)
                if self.is_excluded(child_relative_path, is_dir):
                    logger.debug("Excluded %s", child_relative_path)
                    continue
                entry = self._create_entry(child, child_relative_path, is_dir)
            except OSError as e:
                self._handle_error(Path(child.path), e)
                continue

            if entry.is_dir:
                self._visit_directory(entry.path, entry.relative_path, buffer)
            else:
                self._visit_file(entry, buffer)

    def _visit_file(self, entry: TraversalEntry, buffer: List[str]) -> None:
        try:
            content = self._render(entry)
        except OSError as e:
            self._handle_error(entry.path, e)
            return

        buffer.append(self._strategy.format_file_start(entry.relative_path))
        buffer.append(content)
        buffer.append(self._strategy.format_file_end())
        self._file_count += 1

    def _render(self, entry: TraversalEntry) -> str:
        if entry.is_regular_file:
            return self._renderer.render(entry.path, entry.size)
        if entry.is_symlink and entry.path.is_dir():
            return f"[Symlink to directory: {os.readlink(entry.path)}]"
        # FIFOs, sockets and devices are never opened; reading them could block
        return f"[Special file: {entry.name}]"

    def _create_entry(self, child: "os.DirEntry[str]", relative_path: str, is_dir: bool) -> TraversalEntry:
        size = 0
        is_regular_file = False
        if not is_dir:
            # Follows symbolic links, so a dangling link fails here
            stat_info = child.stat()
            size = stat_info.st_size
            is_regular_file = stat.S_ISREG(stat_info.st_mode)

        return TraversalEntry(
            path=Path(child.path),
            relative_path=relative_path,
            name=child.name,
            is_dir=is_dir,
            size=size,
            is_symlink=child.is_symlink(),
            is_regular_file=is_regular_file,
        )

    def _handle_error(self, path: Path, error: OSError) -> None:
        message = error.strerror or str(error)
        if self.config.error_action == ErrorAction.RAISE:
            raise TraversalError(str(path), message) from error
        logger.warning("Skipping %s: %s", path, message)
