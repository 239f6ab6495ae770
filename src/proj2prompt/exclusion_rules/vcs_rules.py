"""Built-in exclusion of version-control metadata."""

from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules

VCS_METADATA_NAMES = frozenset({".git"})


class VcsExclusionRules(BaseExclusionRules):
    """Always-active rule excluding version-control metadata.

    A path is excluded when any of its segments is exactly one of the metadata names, so
    the metadata directory is pruned wherever it appears in the tree.

    Example:
        >>> rules = VcsExclusionRules()
        >>> rules.exclude(".git/")
        True
        >>> rules.exclude("vendor/lib/.git/")
        True
        >>> rules.exclude(".gitignore")
        False
    """

    def __init__(self, names: Iterable[str] = VCS_METADATA_NAMES) -> None:
        self.names: FrozenSet[str] = frozenset(names)

    def exclude(self, path: str) -> bool:
        return any(segment in self.names for segment in path.split("/") if segment)
