"""Listing of the immediate children of a directory."""

import logging
import os
from typing import List, Optional

from treewalk.walker.entry import DirectoryEntry

logger = logging.getLogger(__name__)


def list_entries(directory: str, display_path: Optional[str] = None) -> List[DirectoryEntry]:
    """List the direct children of a directory in enumeration order.

    A child whose metadata cannot be read (permission denied, removed while the
    listing is in progress) is dropped so the remaining siblings are still listed.

    Args:
        directory: Directory to list, used for filesystem access.
        display_path: Path the children's display paths are joined onto. Defaults
            to ``directory``.

    Returns:
        One DirectoryEntry per readable child, in the order the OS returned them.

    Raises:
        NotADirectoryError: If ``directory`` is not a directory.
        OSError: If the directory cannot be opened (e.g. PermissionError).
    """
    if not os.path.isdir(directory):
        raise NotADirectoryError(f"Not a directory: {directory}")

    display_dir = directory if display_path is None else display_path
    entries: List[DirectoryEntry] = []
    with os.scandir(directory) as it:
        for dir_entry in it:
            try:
                stat_result = dir_entry.stat(follow_symlinks=False)
            except OSError as e:
                logger.warning(f"Skipping unreadable entry {dir_entry.path}: {e}")
                continue
            entries.append(
                DirectoryEntry.from_stat(
                    dir_entry.name,
                    os.path.join(display_dir, dir_entry.name),
                    dir_entry.path,
                    stat_result,
                )
            )
    return entries
