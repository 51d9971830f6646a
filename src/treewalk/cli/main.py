"""Command-line interface for treewalk.

This module provides the ``treewalk`` command. It parses the command line into a
TreeConfig, opens the output sink, streams the listing into it and maps failures
to exit codes.

Diagnostics (unreadable entries and directories, missing .gitignore, and with
``--verbose`` directories left on another filesystem) go through logging to
stderr; the listing itself only ever goes to the output sink, so the two streams
can be separated.

Exit Codes:
    0: Successful completion, including listings with unreadable entries
    1: Runtime error (invalid root, invalid option value, unwritable output)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # List a directory two levels deep
    $ treewalk -L 2 /path/to/dir

    # Display version information
    $ treewalk --version
"""

import logging
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from treewalk.cli.argparser import build_config, create_parser
from treewalk.cli.safe_writer import SafeWriter
from treewalk.cli.signal_handler import setup_signal_handling, signal_handler
from treewalk.render.palette import resolve_color
from treewalk.treewalk import TreeWalk


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich.

    Args:
        verbose: Show debug records (e.g. directories not descended because they
            are on another filesystem) in addition to warnings.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
        force=True,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the treewalk command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # argparse exits with 2 on syntax errors and 0 for --help/--version
        args = create_parser().parse_args(argv)
        setup_logging(args.verbose)
        config = build_config(args)

        is_terminal = args.output is None and sys.stdout.isatty()
        listing = TreeWalk(config, colorize=resolve_color(config.color, is_terminal))

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            try:
                safe_writer.write_lines(listing.stream_tree())
            except BrokenPipeError:
                pass  # reader went away or a signal arrived; exit status comes from the handler

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
