"""Output sink for the treewalk CLI.

The sink is owned by the top-level run for its whole duration; the listing only
borrows it to write lines. Any write failure is fatal.
"""

import errno
import os
from types import TracebackType
from typing import Iterable, Optional, Type, Union

from treewalk.cli.signal_handler import signal_handler
from treewalk.types import PathType

OUTPUT_FILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC


class SafeWriter:
    """Write text to a file descriptor or a file, aware of SIGPIPE and SIGINT.

    Text is encoded as UTF-8 with ``surrogateescape``, so file names that are not
    valid UTF-8 are written back as the bytes the filesystem returned. Once a
    signal has been recorded every further write raises BrokenPipeError, which the
    caller treats as "stop quietly".

    Attributes:
        target: The file descriptor or path given at construction.
        fd: The file descriptor actually written to.
        owns_fd: Whether ``fd`` was opened here and is closed by ``close``.

    Example:
        >>> import sys
        >>> with SafeWriter(sys.stdout.fileno()) as writer:  # doctest: +SKIP
        ...     writer.write_lines(["a\\n", "b\\n"])
        a
        b
        2
    """

    def __init__(self, target: Union[int, PathType]) -> None:
        """Open the sink.

        Args:
            target: A file descriptor (borrowed, never closed here) or a path to
                create or truncate.

        Raises:
            TypeError: If ``target`` is neither an int nor path-like.
            OSError: If the file cannot be created.
        """
        if isinstance(target, bool) or not isinstance(target, (int, str, os.PathLike)):
            raise TypeError(f"Output target must be a file descriptor or a path, not {type(target).__name__}")

        self.target = target
        self.owns_fd = not isinstance(target, int)
        self.fd = os.open(target, OUTPUT_FILE_FLAGS, 0o666) if self.owns_fd else target
        self._closed = False

    @property
    def is_terminal(self) -> bool:
        """Whether the sink is an interactive terminal."""
        return os.isatty(self.fd)

    def write(self, data: str) -> None:
        """Write ``data`` completely, retrying after short writes.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the reader went away.
            OSError: If any other I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("write to closed SafeWriter")
        if signal_handler.interrupted:
            raise BrokenPipeError(errno.EPIPE, "Output interrupted")

        pending = memoryview(data.encode("utf-8", errors="surrogateescape"))
        # EPIPE surfaces as BrokenPipeError
        while pending:
            written = os.write(self.fd, pending)
            pending = pending[written:]

    def write_lines(self, lines: Iterable[str]) -> int:
        """Write every line in order and return how many were written."""
        count = 0
        for line in lines:
            self.write(line)
            count += 1
        return count

    def close(self) -> None:
        """Close the file if this writer opened it. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self.owns_fd:
            try:
                os.close(self.fd)
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        """Close the sink; an exception from the ``with`` body takes precedence."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
