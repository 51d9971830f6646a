"""Per-entry inclusion decision: visibility, type, name patterns and gitignore rules."""

import logging
import os
from pathlib import Path
from typing import Optional

from treewalk.config import TreeConfig
from treewalk.exclusion_rules.git_rules import GitIgnoreExclusionRules
from treewalk.exclusion_rules.pattern_rules import NamePatternRules
from treewalk.walker.entry import DirectoryEntry

logger = logging.getLogger(__name__)


class EntryFilter:
    """Decide whether an entry appears in the listing.

    Rules are applied in order, and the first one that rejects wins:

    1. Hidden: names starting with "." are dropped unless ``show_hidden``.
    2. Type: with ``dirs_only``, anything that is not a directory is dropped.
    3. Gitignore: with ``gitignore`` or ``exclude_from``, entries whose root-relative
       path matches the loaded rules are dropped (directories included).
    4. Name patterns: a non-directory must match ``include_pattern`` and must not
       match ``exclude_pattern``. Directories are exempt unless ``match_dirs``, so
       matching files below them can still be reached.

    Attributes:
        config: The active configuration.
        root: Filesystem path of the listing root, used for relative paths.
        include_rules: Compiled include pattern, if any.
        exclude_rules: Compiled exclude pattern, if any.
        gitignore_rules: Loaded gitignore rules, if any.
    """

    def __init__(self, config: TreeConfig) -> None:
        """Compile patterns and load gitignore rule files.

        Raises:
            FileNotFoundError: If a file named in ``exclude_from`` does not exist.
        """
        self.config = config
        self.root = os.fspath(config.root)
        self.include_rules: Optional[NamePatternRules] = None
        self.exclude_rules: Optional[NamePatternRules] = None
        self.gitignore_rules: Optional[GitIgnoreExclusionRules] = None

        if config.include_pattern:
            self.include_rules = NamePatternRules(config.include_pattern, config.ignore_case)
        if config.exclude_pattern:
            self.exclude_rules = NamePatternRules(config.exclude_pattern, config.ignore_case)

        if config.gitignore or config.exclude_from:
            rules = GitIgnoreExclusionRules()
            if config.gitignore:
                gitignore_file = Path(self.root) / ".gitignore"
                if gitignore_file.is_file():
                    rules.load_rules(gitignore_file)
                else:
                    logger.warning(f"No .gitignore found in {self.root}")
            if config.exclude_from:
                rules.load_rules(config.exclude_from)
            if rules.has_rules():
                self.gitignore_rules = rules

    def survives(self, entry: DirectoryEntry) -> bool:
        """Return True if ``entry`` should be listed."""
        config = self.config
        if not config.show_hidden and entry.is_hidden:
            return False
        if config.dirs_only and not entry.is_dir:
            return False
        if self.gitignore_rules is not None and self.gitignore_rules.exclude(self.relative_path(entry)):
            return False
        if entry.is_dir and not config.match_dirs:
            return True
        if self.include_rules is not None and not self.include_rules.exclude(entry.name):
            return False
        if self.exclude_rules is not None and self.exclude_rules.exclude(entry.name):
            return False
        return True

    def relative_path(self, entry: DirectoryEntry) -> str:
        """Path of ``entry`` relative to the root, with forward slashes.

        Directories get a trailing slash so directory-only gitignore patterns apply.
        """
        relative = os.path.relpath(entry.fs_path, self.root).replace(os.sep, "/")
        if entry.is_dir:
            relative += "/"
        return relative
