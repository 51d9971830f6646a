"""Command-line argument parsing for treewalk.

This module defines the command-line interface, handles argument parsing and
resolves the parsed arguments into a TreeConfig.
"""

import argparse
from typing import Optional, Sequence

from treewalk import __version__
from treewalk.config import DEFAULT_TIME_FORMAT, TreeConfig, parse_sort_key
from treewalk.types import ColorMode, SortKey


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    ``-h`` selects human readable sizes as in ``tree``, so help is only available
    as ``--help``.

    Returns:
        An ArgumentParser instance configured with treewalk's options.
    """
    description = """
    treewalk: list the contents of directories in a tree-like format.

    Walks the given directory depth-first and prints every entry below it with
    branch lines connecting parents and children. Entries can be filtered by
    visibility, type and name, ordered by name, version, size or time, and
    annotated with sizes, permissions, owners and dates.
    """

    epilog = """
    Examples:
      # List the current directory
      treewalk

      # Include hidden files, two levels deep, directories first
      treewalk -a -L 2 --dirsfirst /path/to/project

      # Only Python files, ignoring case, with human readable sizes
      treewalk -P "*.py" --ignore-case -h /path/to/project

      # Skip anything the project's .gitignore excludes
      treewalk --gitignore /path/to/project

      # Newest files last, with modification dates
      treewalk -t -D /path/to/project

      # Write a JSON document to a file
      treewalk -J -o tree.json /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="treewalk",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )

    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument(
        "--version", action="version", version=f"treewalk {__version__}", help="Show the version and exit"
    )
    parser.add_argument("directory", nargs="?", default=".", help="The directory to list (default: .).")

    listing = parser.add_argument_group("listing options")
    listing.add_argument("-a", dest="all", action="store_true", help="All files are listed, even hidden files.")
    listing.add_argument("-d", dest="dirs_only", action="store_true", help="List directories only.")
    listing.add_argument("-l", dest="follow_links", action="store_true", help="Follow symbolic links like directories.")
    listing.add_argument("-f", dest="full_path", action="store_true", help="Print the full path prefix for each file.")
    listing.add_argument("-x", dest="stay_on_fs", action="store_true", help="Stay on the current filesystem only.")
    listing.add_argument("-L", dest="level", type=int, metavar="LEVEL", help="Descend only LEVEL directories deep.")
    listing.add_argument(
        "--filelimit",
        type=int,
        metavar="N",
        help="Do not descend directories that contain more than N entries.",
    )
    listing.add_argument(
        "-P",
        dest="pattern",
        metavar="PATTERN",
        help=(
            "List only files whose name matches PATTERN. A plain word matches as a substring; "
            "a pattern with *, ? or [ is a |-separated list of wildcards."
        ),
    )
    listing.add_argument("-I", dest="ignore", metavar="PATTERN", help="Do not list files whose name matches PATTERN.")
    listing.add_argument("--ignore-case", action="store_true", help="Ignore case when pattern matching.")
    listing.add_argument("--matchdirs", action="store_true", help="Apply -P and -I to directory names too.")
    listing.add_argument(
        "--gitignore", action="store_true", help="Exclude entries matched by the directory's .gitignore file."
    )
    listing.add_argument(
        "--exclude-from",
        action="append",
        default=[],
        metavar="FILE",
        help="Exclude entries matched by gitignore-style rules in FILE (can be specified multiple times).",
    )
    listing.add_argument("--noreport", action="store_true", help="Omit the file and directory report at the end.")
    listing.add_argument(
        "-o", dest="output", metavar="FILE", help="Output to FILE instead of stdout. Colors are off unless -C."
    )

    # argparse expands % in help strings
    default_timefmt = DEFAULT_TIME_FORMAT.replace("%", "%%")

    files = parser.add_argument_group("file options")
    files.add_argument("-q", dest="question", action="store_true", help="Print non-printable characters as '?'.")
    files.add_argument("-Q", dest="quote", action="store_true", help="Quote filenames with double quotes.")
    files.add_argument("-p", dest="protections", action="store_true", help="Print the protections for each file.")
    files.add_argument("-u", dest="user", action="store_true", help="Display file owner or UID number.")
    files.add_argument("-g", dest="group", action="store_true", help="Display file group owner or GID number.")
    files.add_argument("-s", dest="size", action="store_true", help="Print the size in bytes of each file.")
    files.add_argument("-h", dest="human", action="store_true", help="Print the size in a more human readable way.")
    files.add_argument("--si", action="store_true", help="Like -h, but use SI units (powers of 1000).")
    files.add_argument(
        "-D", dest="date", action="store_true", help="Print the date of last modification or (-c) status change."
    )
    files.add_argument(
        "--timefmt",
        metavar="FORMAT",
        help=f"Print and format time according to the strftime FORMAT (implies -D, default: {default_timefmt}).",
    )
    files.add_argument("-F", dest="classify", action="store_true", help="Append '/', '*', '=' or '|' as per ls -F.")
    files.add_argument("--inodes", action="store_true", help="Print inode number of each file.")
    files.add_argument("--device", action="store_true", help="Print device ID number to which each file belongs.")

    sorting = parser.add_argument_group("sorting options")
    sorting.add_argument("-v", dest="version_sort", action="store_true", help="Sort files alphanumerically by version.")
    sorting.add_argument("-t", dest="time_sort", action="store_true", help="Sort files by last modification time.")
    sorting.add_argument("-c", dest="ctime_sort", action="store_true", help="Sort files by last status change time.")
    sorting.add_argument(
        "-U", dest="unsorted", action="store_true", help="Leave files unsorted (the default when no sort is selected)."
    )
    sorting.add_argument("-r", dest="reverse", action="store_true", help="Reverse the order of the sort.")
    sorting.add_argument("--dirsfirst", action="store_true", help="List directories before files.")
    sorting.add_argument(
        "--sort",
        metavar="TYPE",
        choices=[key.value for key in SortKey],
        help="Select sort: name, version, size, mtime, ctime.",
    )

    graphics = parser.add_argument_group("graphics options")
    graphics.add_argument("-i", dest="no_indent", action="store_true", help="Don't print indentation lines.")
    graphics.add_argument(
        "--charset", default="utf-8", metavar="CHARSET", help="Use utf-8 or ascii indentation lines (default: utf-8)."
    )
    graphics.add_argument(
        "-n", dest="no_color", action="store_true", help="Turn colorization off always (-C overrides)."
    )
    graphics.add_argument("-C", dest="color", action="store_true", help="Turn colorization on always.")

    formats = parser.add_argument_group("output formats").add_mutually_exclusive_group()
    formats.add_argument("-X", dest="xml", action="store_true", help="Print an XML representation of the tree.")
    formats.add_argument("-J", dest="json", action="store_true", help="Print a JSON representation of the tree.")

    parser.add_argument("--verbose", action="store_true", help="Report skipped entries and other details on stderr.")

    return parser


def resolve_sort_key(args: argparse.Namespace) -> Optional[SortKey]:
    """Pick the sort key from the sorting flags.

    ``-U`` wins over everything, then ``-c``, ``-t``, ``-v`` and ``--sort``; with
    none of them, entries keep the order the directory listing returned.
    """
    if args.unsorted:
        return None
    if args.ctime_sort:
        return SortKey.CTIME
    if args.time_sort:
        return SortKey.MTIME
    if args.version_sort:
        return SortKey.VERSION
    if args.sort:
        return parse_sort_key(args.sort)
    return None


def resolve_color_mode(args: argparse.Namespace) -> ColorMode:
    """``-C`` forces colors on and overrides ``-n``; otherwise colors follow the terminal."""
    if args.color:
        return ColorMode.ALWAYS
    if args.no_color:
        return ColorMode.NEVER
    return ColorMode.AUTO


def build_config(args: argparse.Namespace) -> TreeConfig:
    """Resolve parsed arguments into a TreeConfig.

    Raises:
        ConfigurationError: If any option value is invalid.
    """
    output_format = "text"
    if args.json:
        output_format = "json"
    elif args.xml:
        output_format = "xml"

    return TreeConfig(
        root=args.directory,
        show_hidden=args.all,
        dirs_only=args.dirs_only,
        follow_symlinks=args.follow_links,
        full_path=args.full_path,
        stay_on_fs=args.stay_on_fs,
        max_depth=args.level,
        file_limit=args.filelimit,
        include_pattern=args.pattern,
        exclude_pattern=args.ignore,
        ignore_case=args.ignore_case,
        match_dirs=args.matchdirs,
        gitignore=args.gitignore,
        exclude_from=tuple(args.exclude_from),
        no_report=args.noreport,
        charset=args.charset,
        no_indent=args.no_indent,
        quote=args.quote,
        replace_nonprintable=args.question,
        protections=args.protections,
        user=args.user,
        group=args.group,
        inodes=args.inodes,
        device=args.device,
        size=args.size,
        human_size=args.human,
        si=args.si,
        date=args.date or args.timefmt is not None,
        time_format=args.timefmt or DEFAULT_TIME_FORMAT,
        classify=args.classify,
        sort_key=resolve_sort_key(args),
        reverse=args.reverse,
        dirs_first=args.dirsfirst,
        color=resolve_color_mode(args),
        output_format=output_format,
    )


def parse_config(argv: Optional[Sequence[str]] = None) -> TreeConfig:
    """Parse ``argv`` (defaults to ``sys.argv[1:]``) straight into a TreeConfig."""
    return build_config(create_parser().parse_args(argv))
