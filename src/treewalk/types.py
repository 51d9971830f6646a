from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of file types for classifying entries during traversal.

    The classification is taken from ``lstat``, so a symbolic link is always a
    SYMLINK regardless of what it points to.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
        OTHER: FIFO, socket, device node or anything else
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "link"
    OTHER = "other"


class SortKey(str, Enum):
    """Primary key used to order sibling entries.

    Values:
        NAME: Plain string comparison of the base name
        VERSION: Base name with embedded digit runs compared numerically
        SIZE: Size in bytes, ascending
        MTIME: Last modification time, ascending
        CTIME: Last status change time, ascending
    """

    NAME = "name"
    VERSION = "version"
    SIZE = "size"
    MTIME = "mtime"
    CTIME = "ctime"


class ColorMode(str, Enum):
    """When to colorize entry names.

    Values:
        AUTO: Colorize only when the output sink is a terminal (default)
        ALWAYS: Always emit ANSI styles
        NEVER: Never emit ANSI styles
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"
