"""Gitignore rule sets for --gitignore and --exclude-from."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from treewalk.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Rules written in .gitignore syntax, matched against root-relative paths.

    Paths are matched with pathspec's GitIgnoreSpec, which follows Git's own
    precedence rules (later patterns override earlier ones, negation with ``!``,
    directory-only patterns ending in ``/``). The walker passes paths relative to
    the listing root, using forward slashes and a trailing slash for directories,
    so ``build/`` matches the directory itself and not a file named ``build``.

    Rules are kept as raw lines and the matcher is recompiled whenever lines are
    added, so files and individual rules can be mixed in any order.

    Attributes:
        lines (List[str]): Every rule line loaded so far, in order.
        spec (GitIgnoreSpec): Compiled matcher for ``lines``.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("build/")
        >>> rules.exclude("server.log")
        True
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("build")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Start with the rules from ``rules_files``, or with no rules.

        Args:
            rules_files: One rules file or several, read in order.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self.lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Return True if the loaded rules ignore ``path``.

        Args:
            path: Root-relative path with forward slashes; directories end with "/".
        """
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the lines of one or more rules files, in order.

        Later lines take precedence, so a file loaded later can re-include what an
        earlier one ignored.

        Args:
            rules_files: One rules file or several.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        paths = [Path(rules_file) for rules_file in rules_files]
        missing = [str(path) for path in paths if not path.is_file()]
        if missing:
            raise FileNotFoundError(f"Rules file not found: {', '.join(missing)}")

        for path in paths:
            self.lines.extend(path.read_text(encoding="utf-8").splitlines())

        self.spec = GitIgnoreSpec.from_lines(self.lines)

    def add_rule(self, rule: str) -> None:
        """Append one rule line.

        Args:
            rule: A single .gitignore pattern (e.g. "*.pyc", "node_modules/", "!keep.pyc").

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.add_rule("!important.pyc")
            >>> rules.exclude("test.pyc"), rules.exclude("important.pyc")
            (True, False)
        """
        self.lines.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self.lines)

    def has_rules(self) -> bool:
        """Return True if any non-blank, non-comment line has been loaded."""
        return any(line.strip() and not line.lstrip().startswith("#") for line in self.lines)
