"""Immutable configuration for a single traversal."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from proj2prompt.exclusion_rules.git_rules import DEFAULT_IGNORE_FILE
from proj2prompt.types import PathType

from .content_renderer import DEFAULT_SAMPLE_SIZE
from .error_action import ErrorAction

LAYOUTS = ("verbose", "compact")


@dataclass(frozen=True)
class ExplorerConfig:
    """Everything an Explorer needs to know, fixed before the traversal starts.

    Values are normalized in ``__post_init__``: the root becomes a Path, patterns become a
    tuple, skip paths become a frozenset of resolved absolute paths, and the error action is
    coerced from its string form.

    Attributes:
        root_path: Directory to traverse. Defaults to the current directory.
        exclude_patterns: Glob patterns matched against entry base names.
        ignore_file_name: Name of the ignore file looked up at the root.
        layout: Output layout, "verbose" (bannered headers) or "compact" (bare paths).
        error_action: What to do when an entry cannot be listed, inspected or read.
        sample_size: Maximum number of bytes read from each file.
        mark_truncated: Append a truncation notice to text files longer than the sample.
        skip_paths: Absolute paths that never appear in the output, such as the file the
            output is about to be written to.

    Raises:
        FileNotFoundError: If the root does not exist.
        NotADirectoryError: If the root is not a directory.
        ValueError: If the layout, error action or sample size is invalid.

    Example:
        >>> config = ExplorerConfig(".", exclude_patterns=["*.tmp"], error_action="warn")
        >>> config.exclude_patterns
        ('*.tmp',)
        >>> config.error_action
        <ErrorAction.WARN: 'warn'>
    """

    root_path: PathType = "."
    exclude_patterns: Iterable[str] = ()
    ignore_file_name: str = DEFAULT_IGNORE_FILE
    layout: str = "verbose"
    error_action: Union[str, ErrorAction] = ErrorAction.RAISE
    sample_size: int = DEFAULT_SAMPLE_SIZE
    mark_truncated: bool = False
    skip_paths: Iterable[PathType] = ()

    def __post_init__(self) -> None:
        # Frozen dataclasses can only be normalized through object.__setattr__
        object.__setattr__(self, "root_path", Path(self.root_path))
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns))
        object.__setattr__(self, "skip_paths", frozenset(Path(p).resolve() for p in self.skip_paths))

        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        if self.layout not in LAYOUTS:
            raise ValueError(f"Unsupported layout: {self.layout}. Must be one of: {', '.join(LAYOUTS)}")

        if isinstance(self.error_action, str) and not isinstance(self.error_action, ErrorAction):
            try:
                object.__setattr__(self, "error_action", ErrorAction(self.error_action.lower()))
            except ValueError:
                raise ValueError(f"Invalid error_action: {self.error_action}. Must be one of: 'raise', 'warn'")

        if self.sample_size <= 0:
            raise ValueError(f"sample_size must be positive, got {self.sample_size}")
