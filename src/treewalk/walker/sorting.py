"""Ordering of sibling entries."""

import re
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from treewalk.types import SortKey
from treewalk.walker.entry import DirectoryEntry

_DIGIT_RUN = re.compile(r"(\d+)")


def version_key(name: str) -> Tuple[Union[str, int], ...]:
    """Split a name into text and integer runs for version-aware comparison.

    ``re.split`` with a capturing group always yields text at even positions and
    digit runs at odd positions, so two keys only ever compare str to str and int
    to int.

    Example:
        >>> version_key("file10.txt")
        ('file', 10, '.txt')
        >>> sorted(["v1.10", "v1.9", "v1.2"], key=version_key)
        ['v1.2', 'v1.9', 'v1.10']
    """
    return tuple(int(part) if index % 2 else part for index, part in enumerate(_DIGIT_RUN.split(name)))


# Every key ends with the name so the ordering is total and reversing it is exact.
SORT_KEYS: Dict[SortKey, Callable[[DirectoryEntry], Any]] = {
    SortKey.NAME: lambda entry: entry.name,
    SortKey.VERSION: lambda entry: (version_key(entry.name), entry.name),
    SortKey.SIZE: lambda entry: (entry.size, entry.name),
    SortKey.MTIME: lambda entry: (entry.mtime, entry.name),
    SortKey.CTIME: lambda entry: (entry.ctime, entry.name),
}


def sort_entries(
    entries: Sequence[DirectoryEntry],
    sort_key: Optional[SortKey] = SortKey.NAME,
    reverse: bool = False,
    dirs_first: bool = False,
) -> List[DirectoryEntry]:
    """Return ``entries`` in display order.

    Args:
        entries: Siblings to order.
        sort_key: Primary key, or None to keep enumeration order.
        reverse: Reverse the primary ordering (enumeration order too when unsorted).
        dirs_first: Move directories ahead of everything else. The partition is
            applied after the primary ordering and is not affected by ``reverse``.

    Returns:
        A new list; the input is not modified.

    Example:
        >>> from treewalk.walker.entry import DirectoryEntry
        >>> from treewalk.types import FileType
        >>> def make(name, file_type=FileType.FILE):
        ...     return DirectoryEntry(name, name, name, file_type, 0, 0.0, 0.0, 0, 0, 0, 0, 0)
        >>> entries = [make("b"), make("a"), make("c", FileType.DIRECTORY)]
        >>> [e.name for e in sort_entries(entries)]
        ['a', 'b', 'c']
        >>> [e.name for e in sort_entries(entries, reverse=True, dirs_first=True)]
        ['c', 'b', 'a']
    """
    if sort_key is None:
        ordered = list(reversed(entries)) if reverse else list(entries)
    else:
        ordered = sorted(entries, key=SORT_KEYS[sort_key], reverse=reverse)

    if dirs_first:
        ordered = [entry for entry in ordered if entry.is_dir] + [entry for entry in ordered if not entry.is_dir]
    return ordered
