"""Formatting of per-entry metadata fields (size, permissions, owner, date)."""

import stat
import time
from typing import Dict, List

from treewalk.config import TreeConfig
from treewalk.types import SortKey
from treewalk.walker.entry import DirectoryEntry

BINARY_UNITS = "BKMGTPE"
HUMAN_SIZE_WIDTH = 8


def format_human_size(size: int, si: bool = False) -> str:
    """Scale a byte count to the largest unit that keeps the value at or above 1.

    Units step by 1024 (or 1000 with ``si``) and the value is shown with two
    decimals. Padding for column alignment is left to the caller.

    Args:
        size: Size in bytes.
        si: Use powers of 1000 instead of 1024.

    Returns:
        The scaled size followed by a one-letter unit.

    Example:
        >>> format_human_size(0)
        '0.00B'
        >>> format_human_size(1536)
        '1.50K'
        >>> format_human_size(1048576)
        '1.00M'
        >>> format_human_size(1500, si=True)
        '1.50K'
    """
    base = 1000 if si else 1024
    value = float(size)
    unit = 0
    while value >= base and unit < len(BINARY_UNITS) - 1:
        value /= base
        unit += 1
    return f"{value:.2f}{BINARY_UNITS[unit]}"


def format_size(entry: DirectoryEntry, config: TreeConfig) -> str:
    """Size field for ``entry``: raw bytes, or a right-aligned human readable size."""
    if config.human_size or config.si:
        return format_human_size(entry.size, si=config.si).rjust(HUMAN_SIZE_WIDTH)
    return str(entry.size)


def format_protections(entry: DirectoryEntry) -> str:
    """``ls -l`` style permission string, e.g. ``drwxr-xr-x``."""
    return stat.filemode(entry.mode)


_user_names: Dict[int, str] = {}
_group_names: Dict[int, str] = {}


def user_name(uid: int) -> str:
    """Login name for ``uid``, or the number when it has no passwd entry."""
    if uid not in _user_names:
        import pwd

        try:
            _user_names[uid] = pwd.getpwuid(uid).pw_name
        except KeyError:
            _user_names[uid] = str(uid)
    return _user_names[uid]


def group_name(gid: int) -> str:
    """Group name for ``gid``, or the number when it has no group entry."""
    if gid not in _group_names:
        import grp

        try:
            _group_names[gid] = grp.getgrgid(gid).gr_name
        except KeyError:
            _group_names[gid] = str(gid)
    return _group_names[gid]


def format_date(entry: DirectoryEntry, config: TreeConfig) -> str:
    """Modification time, or status change time when sorting by ctime."""
    timestamp = entry.ctime if config.sort_key is SortKey.CTIME else entry.mtime
    return time.strftime(config.time_format, time.localtime(timestamp))


def entry_fields(entry: DirectoryEntry, config: TreeConfig) -> List[str]:
    """Every metadata field enabled in ``config``, in display order.

    The order is inode, device, protections, user, group, size, date.
    """
    fields: List[str] = []
    if config.inodes:
        fields.append(str(entry.inode))
    if config.device:
        fields.append(str(entry.device))
    if config.protections:
        fields.append(format_protections(entry))
    if config.user:
        fields.append(user_name(entry.uid))
    if config.group:
        fields.append(group_name(entry.gid))
    if config.show_size:
        fields.append(format_size(entry, config))
    if config.date:
        fields.append(format_date(entry, config))
    return fields
