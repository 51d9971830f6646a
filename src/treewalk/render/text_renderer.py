"""Classic indented tree listing with branch glyphs."""

import stat
from typing import Iterator, Optional

from anytree import AsciiStyle, ContStyle

from treewalk.config import TreeConfig
from treewalk.render.base_renderer import TreeCounts, TreeRenderer
from treewalk.render.fields import entry_fields
from treewalk.render.palette import Palette
from treewalk.types import FileType
from treewalk.walker.entry import DirectoryEntry
from treewalk.walker.walker import WalkStep


def replace_nonprintable(text: str) -> str:
    """Replace every non-printable character with ``?``.

    Example:
        >>> replace_nonprintable("bad\\tname\\n")
        'bad?name?'
    """
    return "".join(char if char.isprintable() else "?" for char in text)


class TextRenderer(TreeRenderer):
    """Render steps as the familiar ``tree`` view.

    Each line is the branch prefix, an optional bracketed metadata field, the
    display name and an optional note::

        .
        ├── [   1.50K] notes.txt
        ├── src
        │   └── main.py
        └── link -> src

    The last sibling at any depth gets the corner glyph and contributes blank
    columns to its descendants' prefixes; every other sibling gets the tee glyph
    and contributes a vertical bar. Glyph sets come from anytree's render styles:
    ContStyle for utf-8, AsciiStyle for ascii.

    Attributes:
        config: The active configuration.
        palette: Styles for names, or None when output is not colorized.
        vertical: Continuation column below a non-last sibling.
        cont: Glyph for a non-last sibling.
        last: Glyph for the last sibling.
        blank: Continuation column below a last sibling.

    Example:
        >>> from treewalk.config import TreeConfig
        >>> renderer = TextRenderer(TreeConfig(charset="ascii"))
        >>> renderer.cont, renderer.last
        ('|-- ', '+-- ')
    """

    def __init__(self, config: TreeConfig, colorize: bool = False) -> None:
        super().__init__(config)
        style = AsciiStyle() if config.charset == "ascii" else ContStyle()
        self.vertical = style.vertical
        self.cont = style.cont
        self.last = style.end
        self.blank = " " * len(style.vertical)
        self.palette: Optional[Palette] = Palette() if colorize else None

    def begin(self, root_label: str) -> Iterator[str]:
        label = self._decorate(root_label)
        if self.palette is not None:
            label = self.palette.paint(label, self.palette.directory)
        yield label

    def render_step(self, step: WalkStep) -> Iterator[str]:
        text = self.render_entry(step.entry)
        if text is None:
            return
        line = self.branch_prefix(step) + text
        if step.note:
            line += f"  [{step.note}]"
        yield line

    def end(self, counts: TreeCounts) -> Iterator[str]:
        if self.config.no_report:
            return
        yield ""
        yield counts.summary(dirs_only=self.config.dirs_only)

    def branch_prefix(self, step: WalkStep) -> str:
        """Glyphs preceding the entry: one column per ancestor, then the branch."""
        if self.config.no_indent:
            return ""
        columns = [self.blank if was_last else self.vertical for was_last in step.ancestors_last]
        columns.append(self.last if step.is_last else self.cont)
        return "".join(columns)

    def render_entry(self, entry: DirectoryEntry) -> Optional[str]:
        """Metadata fields and display name of one entry, without the branch prefix.

        Returns:
            The text, or None when the entry is a symlink whose target cannot be
            read; the line is then skipped.
        """
        name = self.format_name(entry)
        if name is None:
            return None
        fields = entry_fields(entry, self.config)
        if fields:
            return f"[{' '.join(fields)}] {name}"
        return name

    def format_name(self, entry: DirectoryEntry) -> Optional[str]:
        """Display name with quoting, symlink arrow, colors and type indicator."""
        name = self._decorate(entry.path if self.config.full_path else entry.name)

        if entry.is_symlink:
            if entry.link_target is None:
                return None
            target = self._decorate(entry.link_target)
            if self.config.classify and entry.target_is_dir:
                target += "/"
            if self.palette is not None:
                name = self.palette.paint(name, self.palette.symlink)
                target = self.palette.paint(target, self.palette.link_target)
            return f"{name} -> {target}"

        if self.palette is not None:
            name = self.palette.paint(name, self.palette.style_for(entry))
        if self.config.classify:
            name += self.classify_suffix(entry)
        return name

    @staticmethod
    def classify_suffix(entry: DirectoryEntry) -> str:
        """``ls -F`` indicator: ``/`` directory, ``*`` executable, ``=`` socket, ``|`` FIFO."""
        if entry.file_type is FileType.DIRECTORY:
            return "/"
        if entry.is_executable:
            return "*"
        if stat.S_ISSOCK(entry.mode):
            return "="
        if stat.S_ISFIFO(entry.mode):
            return "|"
        return ""

    def _decorate(self, text: str) -> str:
        if self.config.replace_nonprintable:
            text = replace_nonprintable(text)
        if self.config.quote:
            text = f'"{text}"'
        return text
