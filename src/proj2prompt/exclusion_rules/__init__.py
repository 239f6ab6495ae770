"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules, load_ignore_rules
from .glob_rules import GlobExclusionRules
from .vcs_rules import VcsExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "GlobExclusionRules",
    "VcsExclusionRules",
    "load_ignore_rules",
]
