"""Caller-supplied shell-style glob patterns matched against base names."""

from fnmatch import fnmatchcase
from typing import Iterable, Tuple

from .base_rules import BaseExclusionRules


def base_name(path: str) -> str:
    """Return the last segment of a root-relative path, ignoring a trailing slash.

    Example:
        >>> base_name("src/build/")
        'build'
        >>> base_name("notes.txt")
        'notes.txt'
    """
    return path.rstrip("/").rsplit("/", 1)[-1]


class GlobExclusionRules(BaseExclusionRules):
    """Exclusion rules built from shell-style glob patterns.

    Each pattern is matched independently against the entry's base name only, never
    against the full path, with the usual shell wildcards: ``*``, ``?`` and character
    classes such as ``[abc]`` or ``[!0-9]``. Matching is case-sensitive on every platform
    so that output does not depend on the host.

    The pattern set is fixed at construction time.

    Attributes:
        patterns (Tuple[str, ...]): The glob patterns, in the order given.

    Example:
        >>> rules = GlobExclusionRules(["*.tmp", "node_modules"])
        >>> rules.exclude("cache.tmp")
        True
        >>> rules.exclude("web/node_modules/")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self.patterns: Tuple[str, ...] = tuple(p for p in patterns if p)

    def exclude(self, path: str) -> bool:
        name = base_name(path)
        return any(fnmatchcase(name, pattern) for pattern in self.patterns)
