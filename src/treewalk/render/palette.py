"""ANSI styling of entry names."""

import os
from typing import Optional

from rich.color import ColorSystem
from rich.style import Style

from treewalk.types import ColorMode, FileType
from treewalk.walker.entry import DirectoryEntry


def resolve_color(mode: ColorMode, is_terminal: bool) -> bool:
    """Decide whether names are colorized for a sink.

    ``AUTO`` colorizes only terminals, and never when ``NO_COLOR`` is set, so output
    redirected to a file stays plain text.

    Example:
        >>> resolve_color(ColorMode.ALWAYS, is_terminal=False)
        True
        >>> resolve_color(ColorMode.NEVER, is_terminal=True)
        False
    """
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    return is_terminal and "NO_COLOR" not in os.environ


class Palette:
    """Styles applied to names by kind.

    Directories, executables, symlinks, link targets and special files each get
    their own style; plain regular files are left unstyled. Styles are rendered to
    ANSI escape sequences with rich, using the 8-color system so the output works
    on any terminal.

    Attributes:
        directory: Style for directories.
        executable: Style for regular files with an execute bit.
        symlink: Style for the name of a symbolic link.
        link_target: Style for the target shown after ``->``.
        special: Style for FIFOs, sockets and device nodes.
        color_system: rich color system used for rendering.

    Example:
        >>> palette = Palette()
        >>> palette.paint("src", palette.directory)
        '\\x1b[1;34msrc\\x1b[0m'
    """

    def __init__(self, color_system: ColorSystem = ColorSystem.STANDARD) -> None:
        self.directory = Style(color="blue", bold=True)
        self.executable = Style(color="green", bold=True)
        self.symlink = Style(color="cyan", bold=True)
        self.link_target = Style(color="red")
        self.special = Style(color="yellow")
        self.color_system = color_system

    def paint(self, text: str, style: Optional[Style]) -> str:
        """Wrap ``text`` in the ANSI sequences for ``style``."""
        if style is None:
            return text
        return style.render(text, color_system=self.color_system)

    def style_for(self, entry: DirectoryEntry) -> Optional[Style]:
        """Style for the name of ``entry``; None for plain regular files."""
        if entry.file_type is FileType.SYMLINK:
            return self.symlink
        if entry.file_type is FileType.DIRECTORY:
            return self.directory
        if entry.file_type is FileType.OTHER:
            return self.special
        if entry.is_executable:
            return self.executable
        return None
