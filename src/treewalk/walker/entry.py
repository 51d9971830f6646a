"""Directory entry snapshot read from the filesystem during enumeration."""

import os
import stat
from dataclasses import dataclass
from typing import Optional

from treewalk.types import FileType

EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def classify_mode(mode: int) -> FileType:
    """Map an ``st_mode`` value to a FileType.

    Example:
        >>> classify_mode(stat.S_IFDIR | 0o755)
        <FileType.DIRECTORY: 'directory'>
        >>> classify_mode(stat.S_IFIFO | 0o644)
        <FileType.OTHER: 'other'>
    """
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISREG(mode):
        return FileType.FILE
    return FileType.OTHER


@dataclass(frozen=True)
class DirectoryEntry:
    """One filesystem object encountered while listing a directory.

    Metadata comes from ``lstat``, so for a symbolic link the size, times and mode
    describe the link itself. The immediate link target and whether it resolves to
    a directory are recorded separately.

    Attributes:
        name: Base name.
        path: Display path, joined onto the root exactly as the root was supplied.
        fs_path: Path used for filesystem access.
        file_type: Classification of the object itself (links are not followed).
        size: Size in bytes.
        mtime: Modification time as a POSIX timestamp.
        ctime: Status change time as a POSIX timestamp.
        mode: Raw ``st_mode``.
        inode: Inode number.
        device: Device number.
        uid: Owner user id.
        gid: Owner group id.
        link_target: ``readlink`` text for symlinks; None when unreadable or not a link.
        target_is_dir: True when the entry is a symlink resolving to a directory.
    """

    name: str
    path: str
    fs_path: str
    file_type: FileType
    size: int
    mtime: float
    ctime: float
    mode: int
    inode: int
    device: int
    uid: int
    gid: int
    link_target: Optional[str] = None
    target_is_dir: bool = False

    @classmethod
    def from_stat(cls, name: str, path: str, fs_path: str, stat_result: os.stat_result) -> "DirectoryEntry":
        """Build an entry from an ``lstat`` result.

        Args:
            name: Base name of the entry.
            path: Display path.
            fs_path: Path used for filesystem access.
            stat_result: Result of ``os.lstat`` (or ``DirEntry.stat(follow_symlinks=False)``).

        Returns:
            The populated entry. Reading a symlink target never raises; an unreadable
            target is recorded as None.
        """
        file_type = classify_mode(stat_result.st_mode)
        link_target = None
        target_is_dir = False
        if file_type is FileType.SYMLINK:
            try:
                link_target = os.readlink(fs_path)
            except OSError:
                link_target = None
            target_is_dir = os.path.isdir(fs_path)

        return cls(
            name=name,
            path=path,
            fs_path=fs_path,
            file_type=file_type,
            size=stat_result.st_size,
            mtime=stat_result.st_mtime,
            ctime=stat_result.st_ctime,
            mode=stat_result.st_mode,
            inode=stat_result.st_ino,
            device=stat_result.st_dev,
            uid=getattr(stat_result, "st_uid", 0),
            gid=getattr(stat_result, "st_gid", 0),
            link_target=link_target,
            target_is_dir=target_is_dir,
        )

    @classmethod
    def from_path(cls, fs_path: str, path: Optional[str] = None) -> "DirectoryEntry":
        """Build an entry by calling ``lstat`` on ``fs_path``.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        name = os.path.basename(os.path.normpath(fs_path))
        return cls.from_stat(name, path if path is not None else fs_path, fs_path, os.lstat(fs_path))

    @property
    def is_symlink(self) -> bool:
        return self.file_type is FileType.SYMLINK

    @property
    def is_dir(self) -> bool:
        """True for directories and for symlinks that resolve to a directory."""
        return self.file_type is FileType.DIRECTORY or self.target_is_dir

    @property
    def is_executable(self) -> bool:
        """True for regular files with any execute bit set."""
        return self.file_type is FileType.FILE and bool(self.mode & EXECUTABLE_BITS)

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")
