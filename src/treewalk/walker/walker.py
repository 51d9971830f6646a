"""Depth-first traversal producing one step per listed entry.

The walker knows nothing about glyphs, colors or output formats. It enumerates,
filters and sorts each directory, then yields a WalkStep for every surviving child
before descending into it. Renderers turn the step stream into text.
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterator, List, Optional, Set, Tuple

from treewalk.config import TreeConfig
from treewalk.walker.entry import DirectoryEntry
from treewalk.walker.entry_filter import EntryFilter
from treewalk.walker.enumerator import list_entries
from treewalk.walker.file_identifier import FileIdentifier
from treewalk.walker.sorting import sort_entries

logger = logging.getLogger(__name__)

NOTE_OPEN_ERROR = "error opening dir"
NOTE_RECURSIVE = "recursive, not followed"


@dataclass(frozen=True)
class WalkStep:
    """One listed entry together with its position in the tree.

    Attributes:
        entry: The entry being listed.
        depth: 1 for children of the root, 2 for grandchildren, and so on.
        ancestors_last: For each ancestor between the root and this entry, whether
            that ancestor was the last of its siblings. Renderers use it to draw the
            continuation columns of the prefix.
        is_last: Whether this entry is the last of its siblings.
        note: Why the entry was not descended into, if it is a directory that could
            not or should not be opened.
    """

    entry: DirectoryEntry
    depth: int
    ancestors_last: Tuple[bool, ...]
    is_last: bool
    note: Optional[str] = None


class TreeWalker:
    """Depth-first walker over a directory hierarchy.

    Every directory goes through the same pipeline: list its children, drop those
    rejected by the EntryFilter, order the rest with sort_entries, then yield a step
    for each child. A child is descended into right after its own step when it is a
    directory (or, with ``follow_symlinks``, a symlink to one), the depth limit
    allows it, and it lives on the root's device when ``stay_on_fs`` is set.

    Local failures never abort the walk. An unreadable child is dropped by the
    enumerator, and a symlink whose target text cannot be read is dropped before
    ordering. A directory that cannot be opened, holds more than ``file_limit``
    entries, or is a symlink back into the current descent path is listed with a
    note and not descended.

    Attributes:
        config: The active configuration.
        root: Filesystem path of the listing root, as supplied.
        entry_filter: Inclusion rules applied to every child.
        directory_count: Number of directories listed by the last walk.
        file_count: Number of non-directories listed by the last walk.

    Example:
        >>> walker = TreeWalker(TreeConfig(root="src", max_depth=1))  # doctest: +SKIP
        >>> [step.entry.name for step in walker.walk()]  # doctest: +SKIP
        ['treewalk']
    """

    def __init__(self, config: TreeConfig, entry_filter: Optional[EntryFilter] = None) -> None:
        self.config = config
        self.root = os.fspath(config.root)
        self.entry_filter = entry_filter if entry_filter is not None else EntryFilter(config)
        self.directory_count = 0
        self.file_count = 0

    def validate_root(self) -> None:
        """Check that the root can be walked.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        if not os.path.exists(self.root):
            raise FileNotFoundError(f"Root path does not exist: {self.root}")
        if not os.path.isdir(self.root):
            raise NotADirectoryError(f"Root path is not a directory: {self.root}")

    def walk(self) -> Iterator[WalkStep]:
        """Yield a step for every listed entry, depth-first.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            PermissionError: If the root directory itself cannot be opened.
        """
        self.validate_root()
        self.directory_count = 0
        self.file_count = 0

        root_id = FileIdentifier.for_path(self.root)
        visited: Set[FileIdentifier] = {root_id} if root_id is not None else set()
        root_device = root_id.device_id if root_id is not None else None

        children = self._ordered_children(list_entries(self.root))
        yield from self._walk(children, 1, (), visited, root_device)

    def _ordered_children(self, entries: List[DirectoryEntry]) -> List[DirectoryEntry]:
        survivors = [entry for entry in entries if self._listable(entry) and self.entry_filter.survives(entry)]
        return sort_entries(survivors, self.config.sort_key, self.config.reverse, self.config.dirs_first)

    def _walk(
        self,
        children: List[DirectoryEntry],
        depth: int,
        ancestors_last: Tuple[bool, ...],
        visited: Set[FileIdentifier],
        root_device: Optional[int],
    ) -> Iterator[WalkStep]:
        for index, entry in enumerate(children):
            is_last = index == len(children) - 1
            note = None
            grandchildren: Optional[List[DirectoryEntry]] = None
            identifier = None

            if self._may_descend(entry, depth):
                identifier = self._identify(entry)
                if identifier is None:
                    note = NOTE_OPEN_ERROR
                elif identifier in visited:
                    note = NOTE_RECURSIVE
                elif self.config.stay_on_fs and root_device is not None and identifier.device_id != root_device:
                    logger.debug(f"Not descending into {entry.fs_path}: different filesystem")
                else:
                    note, grandchildren = self._open(entry)

            if entry.is_dir:
                self.directory_count += 1
            else:
                self.file_count += 1

            yield WalkStep(entry, depth, ancestors_last, is_last, note)

            if grandchildren is not None and identifier is not None:
                visited.add(identifier)
                yield from self._walk(grandchildren, depth + 1, ancestors_last + (is_last,), visited, root_device)
                visited.discard(identifier)

    @staticmethod
    def _listable(entry: DirectoryEntry) -> bool:
        # dropped before ordering, so the last listed sibling is really the last
        if entry.is_symlink and entry.link_target is None:
            logger.warning(f"Cannot read link target of {entry.path}, skipping")
            return False
        return True

    def _may_descend(self, entry: DirectoryEntry, depth: int) -> bool:
        if not entry.is_dir:
            return False
        if entry.is_symlink and not self.config.follow_symlinks:
            return False
        return self.config.max_depth is None or depth < self.config.max_depth

    def _identify(self, entry: DirectoryEntry) -> Optional[FileIdentifier]:
        if entry.is_symlink:
            return FileIdentifier.for_path(entry.fs_path)
        return FileIdentifier(entry.device, entry.inode)

    def _open(self, entry: DirectoryEntry) -> Tuple[Optional[str], Optional[List[DirectoryEntry]]]:
        """List a child directory ahead of yielding its step.

        Returns:
            ``(note, None)`` when the directory is not to be descended, otherwise
            ``(None, ordered_children)``.
        """
        try:
            entries = list_entries(entry.fs_path, entry.path)
        except OSError as e:
            logger.warning(f"Cannot open directory {entry.path}: {e}")
            return NOTE_OPEN_ERROR, None

        file_limit = self.config.file_limit
        if file_limit is not None and len(entries) > file_limit:
            return f"{len(entries)} entries exceeds filelimit, not opening dir", None
        return None, self._ordered_children(entries)
