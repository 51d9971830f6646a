"""Interface shared by the name pattern and gitignore rule sets."""

from abc import ABC, abstractmethod
from typing import NoReturn, Sequence, Union

from treewalk.types import PathType


class BaseExclusionRules(ABC):
    """Rule set answering "does this entry match?" for one path string.

    What the string holds depends on the rule set. Name pattern rules look at the
    base name only; gitignore rules look at the path relative to the listing root,
    with forward slashes and a trailing slash on directories. The EntryFilter
    builds both kinds from a TreeConfig and decides what a match means (drop the
    entry, or keep it for an include pattern).

    Rule sets that are fixed at construction do not need to override
    ``load_rules`` or ``add_rule``; the defaults reject the call.

    Example:
        >>> from treewalk.exclusion_rules.pattern_rules import NamePatternRules
        >>> rules = NamePatternRules("*.pyc|*.pyo")
        >>> rules.exclude("module.pyc"), rules.exclude("module.py")
        (True, False)
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """Return True if ``path`` matches the rules.

        Args:
            path: Base name or root-relative path, depending on the rule set.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append rules read from one or more files.

        Raises:
            NotImplementedError: If the rule set is fixed at construction.
            FileNotFoundError: If a rules file does not exist.
        """
        self._unsupported("loading rules from files")

    def add_rule(self, rule: str) -> None:
        """Append a single rule.

        Raises:
            NotImplementedError: If the rule set is fixed at construction.
        """
        self._unsupported("adding individual rules")

    def has_rules(self) -> bool:
        """Whether the rule set can match anything at all."""
        return True

    def _unsupported(self, operation: str) -> NoReturn:
        raise NotImplementedError(f"{type(self).__name__} doesn't support {operation}")
