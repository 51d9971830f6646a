"""Directory tree listing utilities.

This package walks a directory hierarchy and renders it as an indented tree,
with filtering, sorting, colors and per-entry metadata, in the manner of the
classic ``tree`` command.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treewalk")
except PackageNotFoundError:
    __version__ = "unknown"
