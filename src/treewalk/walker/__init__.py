"""Directory traversal: enumeration, filtering, ordering and the depth-first walk.

This package turns a TreeConfig into a stream of WalkStep records that renderers
format into a tree listing.
"""

from .entry import DirectoryEntry
from .entry_filter import EntryFilter
from .enumerator import list_entries
from .file_identifier import FileIdentifier
from .sorting import sort_entries, version_key
from .walker import TreeWalker, WalkStep

__all__ = [
    "DirectoryEntry",
    "EntryFilter",
    "FileIdentifier",
    "TreeWalker",
    "WalkStep",
    "list_entries",
    "sort_entries",
    "version_key",
]
