"""Resolved configuration for a single tree listing.

The command-line layer (or any other caller) builds one TreeConfig per run. The
walker and renderers only ever read it, so it is frozen.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from treewalk.exceptions import ConfigurationError, UnsupportedSortError
from treewalk.types import ColorMode, PathType, SortKey

CHARSETS = ("utf-8", "ascii")
OUTPUT_FORMATS = ("text", "json", "xml")
DEFAULT_TIME_FORMAT = "%b %d %H:%M"


def parse_sort_key(name: Optional[str]) -> Optional[SortKey]:
    """Map a sort name to a SortKey.

    Args:
        name: One of "name", "version", "size", "mtime", "ctime" (case-insensitive),
            or None/"none" for no reordering.

    Returns:
        The matching SortKey, or None when entries should stay in enumeration order.

    Raises:
        UnsupportedSortError: If the name is not a known sort mode.

    Example:
        >>> parse_sort_key("MTIME")
        <SortKey.MTIME: 'mtime'>
        >>> parse_sort_key("none") is None
        True
    """
    if name is None or name.lower() == "none":
        return None
    try:
        return SortKey(name.lower())
    except ValueError:
        raise UnsupportedSortError(name)


@dataclass(frozen=True)
class TreeConfig:
    """Options controlling traversal, filtering, ordering and rendering.

    Attributes:
        root: Directory to list. Kept exactly as supplied so full paths are
            displayed relative to it.
        show_hidden: Include entries whose name starts with a dot.
        dirs_only: List directories only.
        follow_symlinks: Descend into symbolic links that point to directories.
        full_path: Display each entry's path joined onto the root instead of its base name.
        stay_on_fs: Do not descend into directories on another device.
        max_depth: Maximum number of levels to descend, or None for no limit.
        file_limit: Do not descend into directories holding more entries than this.
        include_pattern: Only list non-directory entries whose name matches.
        exclude_pattern: Do not list entries whose name matches.
        ignore_case: Match name patterns case-insensitively.
        match_dirs: Apply name patterns to directory names as well.
        gitignore: Exclude entries matched by the root's .gitignore file.
        exclude_from: Additional gitignore-style rule files.
        no_report: Omit the trailing directory/file count report.
        charset: Glyph set for branch lines, "utf-8" or "ascii".
        no_indent: Do not draw branch lines at all.
        quote: Wrap displayed names in double quotes.
        replace_nonprintable: Replace non-printable characters in names with "?".
        protections: Show the permission string of each entry.
        user: Show the owner of each entry.
        group: Show the group of each entry.
        inodes: Show the inode number of each entry.
        device: Show the device number of each entry.
        size: Show the size of each entry in bytes.
        human_size: Show sizes scaled by powers of 1024 (implies size).
        si: Show sizes scaled by powers of 1000 (implies size).
        date: Show the modification time (status change time when sorting by ctime).
        time_format: strftime format used for the date field.
        classify: Append an ``ls -F`` style type indicator to names.
        sort_key: Primary sibling ordering, or None to keep enumeration order.
        reverse: Reverse the primary ordering.
        dirs_first: List directories before other entries.
        color: When to colorize names.
        output_format: "text", "json" or "xml".
    """

    root: PathType = "."
    show_hidden: bool = False
    dirs_only: bool = False
    follow_symlinks: bool = False
    full_path: bool = False
    stay_on_fs: bool = False
    max_depth: Optional[int] = None
    file_limit: Optional[int] = None
    include_pattern: Optional[str] = None
    exclude_pattern: Optional[str] = None
    ignore_case: bool = False
    match_dirs: bool = False
    gitignore: bool = False
    exclude_from: Tuple[PathType, ...] = ()
    no_report: bool = False
    charset: str = "utf-8"
    no_indent: bool = False
    quote: bool = False
    replace_nonprintable: bool = False
    protections: bool = False
    user: bool = False
    group: bool = False
    inodes: bool = False
    device: bool = False
    size: bool = False
    human_size: bool = False
    si: bool = False
    date: bool = False
    time_format: str = DEFAULT_TIME_FORMAT
    classify: bool = False
    sort_key: Union[SortKey, str, None] = None
    reverse: bool = False
    dirs_first: bool = False
    color: Union[ColorMode, str] = ColorMode.AUTO
    output_format: str = "text"

    def __post_init__(self) -> None:
        """Validate option values and normalize string enums.

        Raises:
            ConfigurationError: If any option is out of range or unknown.
        """
        if self.max_depth is not None and self.max_depth < 1:
            raise ConfigurationError("Invalid level, must be greater than 0", option="max_depth")
        if self.file_limit is not None and self.file_limit < 1:
            raise ConfigurationError("Invalid file limit, must be greater than 0", option="file_limit")

        charset = self.charset.lower().replace("_", "-")
        if charset == "utf8":
            charset = "utf-8"
        if charset not in CHARSETS:
            raise ConfigurationError(
                f"Unsupported charset '{self.charset}'. Choose one of: {', '.join(CHARSETS)}", option="charset"
            )
        object.__setattr__(self, "charset", charset)

        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"Unsupported output format: {self.output_format}", option="output_format")

        if isinstance(self.sort_key, str) and not isinstance(self.sort_key, SortKey):
            object.__setattr__(self, "sort_key", parse_sort_key(self.sort_key))

        if not isinstance(self.color, ColorMode):
            try:
                object.__setattr__(self, "color", ColorMode(str(self.color).lower()))
            except ValueError:
                raise ConfigurationError(f"Invalid color mode: {self.color}", option="color")

        object.__setattr__(self, "exclude_from", tuple(self.exclude_from))

    @property
    def show_size(self) -> bool:
        """Whether any size field is displayed."""
        return self.size or self.human_size or self.si

    @property
    def has_name_patterns(self) -> bool:
        """Whether an include or exclude name pattern is configured."""
        return bool(self.include_pattern) or bool(self.exclude_pattern)
