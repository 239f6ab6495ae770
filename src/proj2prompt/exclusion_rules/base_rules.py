from abc import ABC, abstractmethod
from typing import Sequence, Union

from proj2prompt.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Every kind of rule consulted during a traversal (ignore-file rules, caller-supplied
    globs, the built-in version-control rule) implements this interface, so the explorer
    only ever asks one question: "is this path excluded?".

    Paths handed to ``exclude`` follow one convention across all implementations:

    - They are relative to the traversal root.
    - Segments are separated by forward slashes (/) on every platform.
    - Directories carry a trailing slash (``"build/"``), files do not (``"build"``).

    File loading and individual rule addition are optional capabilities that depend on the
    rule type.

    Example:
        >>> from proj2prompt.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('*.pyc')
        >>> git_rules.exclude('test.pyc')
        True
        >>> git_rules.exclude('test.py')
        False
        >>> from proj2prompt.exclusion_rules.glob_rules import GlobExclusionRules
        >>> glob_rules = GlobExclusionRules(['*.tmp'])
        >>> glob_rules.exclude('cache/data.tmp')
        True
        >>> # glob_rules.load_rules('file.txt')  # Would raise NotImplementedError
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): Root-relative path using forward slashes, with a trailing slash
                for directories.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types that don't support file operations use this default implementation,
        which raises NotImplementedError.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. The format depends on the specific
                implementation (e.g., a gitignore pattern like "*.pyc").

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
