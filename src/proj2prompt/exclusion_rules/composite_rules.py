"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules determines it should be excluded.
    The explorer combines three sources this way: the built-in version-control rule, the
    ignore file found at the root (when there is one), and the caller's glob patterns.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from proj2prompt.exclusion_rules.glob_rules import GlobExclusionRules
        >>> from proj2prompt.exclusion_rules.vcs_rules import VcsExclusionRules
        >>> composite = CompositeExclusionRules([VcsExclusionRules(), GlobExclusionRules(["*.tmp"])])
        >>> composite.exclude(".git/")
        True
        >>> composite.exclude("cache.tmp")
        True
        >>> composite.exclude("main.py")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Returns:
            True if ANY of the constituent rules excludes the path, False if ALL allow it.
        """
        return any(rule.exclude(path) for rule in self.rules)

    def get_rules(self) -> List[BaseExclusionRules]:
        """Get a copy of the constituent rules list."""
        return list(self.rules)
