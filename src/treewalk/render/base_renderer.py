"""Renderer base class defining how a walk is turned into output lines.

This module provides the abstract base class that every output format implements.
The walker produces the same stream of steps regardless of format; a renderer
decides what each step looks like.
"""

from abc import ABC, abstractmethod
from typing import Iterator, NamedTuple

from treewalk.config import TreeConfig
from treewalk.walker.walker import WalkStep


class TreeCounts(NamedTuple):
    """Number of directories and files listed by a walk (the root is not counted)."""

    directories: int
    files: int

    def summary(self, dirs_only: bool = False) -> str:
        """Report line in the style of ``tree``.

        Example:
            >>> TreeCounts(1, 3).summary()
            '1 directory, 3 files'
            >>> TreeCounts(2, 0).summary(dirs_only=True)
            '2 directories'
        """
        directories = f"{self.directories} director{'y' if self.directories == 1 else 'ies'}"
        if dirs_only:
            return directories
        return f"{directories}, {self.files} file{'' if self.files == 1 else 's'}"


class TreeRenderer(ABC):
    """Abstract base class for output formats of a tree listing.

    Rendering happens in three phases, each yielding zero or more lines without
    trailing newlines:

    1. ``begin`` - once, with the root as supplied by the user
    2. ``render_step`` - once per WalkStep, in walk order
    3. ``end`` - once, with the final counts

    Attributes:
        config: The active configuration.

    Example:
        >>> class NameOnlyRenderer(TreeRenderer):
        ...     def begin(self, root_label):
        ...         yield root_label
        ...
        ...     def render_step(self, step):
        ...         yield "  " * step.depth + step.entry.name
        ...
        ...     def end(self, counts):
        ...         return iter(())
    """

    def __init__(self, config: TreeConfig) -> None:
        self.config = config

    @abstractmethod
    def begin(self, root_label: str) -> Iterator[str]:
        """Lines emitted before the first entry.

        Args:
            root_label: The root path exactly as supplied.
        """
        pass

    @abstractmethod
    def render_step(self, step: WalkStep) -> Iterator[str]:
        """Lines for one listed entry. May yield nothing to skip the entry."""
        pass

    @abstractmethod
    def end(self, counts: TreeCounts) -> Iterator[str]:
        """Lines emitted after the last entry."""
        pass
