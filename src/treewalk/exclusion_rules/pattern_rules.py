"""Name pattern rules for the include (-P) and exclude (-I) options."""

from typing import List

from pathspec import GitIgnoreSpec

from .base_rules import BaseExclusionRules

WILDCARD_CHARS = frozenset("*?[")
GITIGNORE_PREFIX_CHARS = ("#", "!")


def escape_gitignore_prefix(alternative: str) -> str:
    """Escape a leading ``#`` or ``!`` so the alternative is matched literally.

    In a gitignore file those would start a comment or a negation.

    Example:
        >>> escape_gitignore_prefix("#*")
        '\\\\#*'
        >>> escape_gitignore_prefix("*.py")
        '*.py'
    """
    if alternative.startswith(GITIGNORE_PREFIX_CHARS):
        return "\\" + alternative
    return alternative


class NamePatternRules(BaseExclusionRules):
    """Match entry base names against a user supplied name pattern.

    A pattern without any wildcard character is a plain substring test, so ``log``
    matches ``server.log`` and ``logrotate.conf``. A pattern containing ``*``, ``?``
    or ``[`` is a ``|``-separated list of wildcard alternatives, each compared
    against the whole base name with pathspec's gitignore-style matcher.

    ``exclude()`` answers "does the name match", which the filter uses directly for
    exclude patterns and inverts for include patterns.

    Attributes:
        pattern (str): The pattern as supplied.
        ignore_case (bool): Whether matching folds case on both sides.

    Example:
        >>> NamePatternRules("log").exclude("server.log")
        True
        >>> NamePatternRules("*.py|*.txt").exclude("notes.txt")
        True
        >>> NamePatternRules("*.py").exclude("notes.txt")
        False
        >>> NamePatternRules("README", ignore_case=True).exclude("readme.md")
        True
    """

    def __init__(self, pattern: str, ignore_case: bool = False) -> None:
        """Compile the pattern.

        Args:
            pattern: Substring or ``|``-separated wildcard alternatives.
            ignore_case: Fold case of both pattern and names.

        Raises:
            ValueError: If the pattern is empty.
        """
        if not pattern:
            raise ValueError("Name pattern must not be empty")
        self.pattern = pattern
        self.ignore_case = ignore_case

        folded = pattern.lower() if ignore_case else pattern
        self.is_wildcard = any(char in WILDCARD_CHARS for char in folded)
        if self.is_wildcard:
            alternatives: List[str] = [escape_gitignore_prefix(alt) for alt in folded.split("|") if alt]
            self._substring = ""
            self._spec = GitIgnoreSpec.from_lines(alternatives)
        else:
            self._substring = folded
            self._spec = None

    def exclude(self, path: str) -> bool:
        """Return True if the base name matches the pattern.

        Args:
            path: The entry's base name.
        """
        name = path.lower() if self.ignore_case else path
        if self._spec is None:
            return self._substring in name
        return bool(self._spec.match_file(name))
