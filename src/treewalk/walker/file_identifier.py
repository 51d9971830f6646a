"""File identifier for recognising a directory reached through more than one path."""

import os
from typing import Any, Optional

from treewalk.types import PathType


class FileIdentifier:
    """Identify a filesystem object by its device and inode numbers.

    The walker keeps the identifiers of the directories on the current descent path.
    A followed symlink whose target already appears on that path would recurse
    forever, so it is reported instead of being descended.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.

    Example:
        >>> FileIdentifier(1, 42) == FileIdentifier(1, 42)
        True
        >>> len({FileIdentifier(1, 42), FileIdentifier(1, 42), FileIdentifier(2, 42)})
        2
    """

    def __init__(self, device_id: int, inode_number: int):
        self.device_id = device_id
        self.inode_number = inode_number

    @classmethod
    def for_path(cls, path: PathType) -> Optional["FileIdentifier"]:
        """Build the identifier of whatever ``path`` resolves to.

        Symlinks are followed, so a link and its target share an identifier.

        Returns:
            The identifier, or None if the path cannot be stat'ed.
        """
        try:
            stat_info = os.stat(path)
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileIdentifier):
            return False
        return self.device_id == other.device_id and self.inode_number == other.inode_number

    def __hash__(self) -> int:
        return hash((self.device_id, self.inode_number))

    def __repr__(self) -> str:
        return f"FileIdentifier(device_id={self.device_id}, inode_number={self.inode_number})"
