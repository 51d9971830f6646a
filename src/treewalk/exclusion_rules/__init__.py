"""Exclusion rules for filtering directory entries."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .pattern_rules import NamePatternRules

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
    "NamePatternRules",
]
