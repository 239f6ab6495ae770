"""Record describing a single visited filesystem entry."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TraversalEntry:
    """Metadata about one file or directory visited by the explorer.

    Entries are created when a node is visited and discarded once it has been rendered.

    Attributes:
        path: Absolute path to the entry.
        relative_path: Path relative to the traversal root, with forward slashes.
        name: Base name of the entry.
        is_dir: True for real directories. Symbolic links are never directories here, even
            when they point at one.
        size: Size in bytes (of the link target for symbolic links); 0 for directories.
        is_symlink: True if the entry is a symbolic link.
        is_regular_file: True if the entry (or the target of a link) is a regular file.
    """

    path: Path
    relative_path: str
    name: str
    is_dir: bool
    size: int = 0
    is_symlink: bool = False
    is_regular_file: bool = False

