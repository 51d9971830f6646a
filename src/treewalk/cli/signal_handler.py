"""Signal handling utilities for the treewalk CLI.

A listing piped into ``head`` or interrupted with Ctrl+C should stop quietly with
the conventional exit status instead of printing a traceback.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

HAS_SIGPIPE = hasattr(signal, "SIGPIPE")


class SignalHandler:
    """Record SIGPIPE and SIGINT so the main loop can stop writing.

    Each handler fires once: it records the signal and restores the original
    handler, so a second Ctrl+C behaves as the default would.

    Attributes:
        sigpipe_received: Set when SIGPIPE arrives (always clear where SIGPIPE doesn't exist).
        sigint_received: Set when SIGINT arrives.
    """

    def __init__(self) -> None:
        """Remember the handlers in place before treewalk installs its own."""
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._original_sigpipe: Any = signal.getsignal(signal.SIGPIPE) if HAS_SIGPIPE else None
        self._original_sigint: Any = signal.getsignal(signal.SIGINT)

    @property
    def interrupted(self) -> bool:
        """Whether either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        """Note that the reader closed the pipe.

        Args:
            signum: Number of the delivered signal.
            frame: Stack frame interrupted by the signal.
        """
        self._record(self.sigpipe_received, signum, self._original_sigpipe)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Note that the user pressed Ctrl+C.

        Args:
            signum: Number of the delivered signal.
            frame: Stack frame interrupted by the signal.
        """
        self._record(self.sigint_received, signum, self._original_sigint)

    @staticmethod
    def _record(received: Event, signum: int, original: Any) -> None:
        received.set()
        signal.signal(signum, original)

    def exit_code(self) -> Optional[int]:
        """Exit status owed to a received signal: 141 for SIGPIPE, 130 for SIGINT."""
        if self.sigpipe_received.is_set():
            return 141
        if self.sigint_received.is_set():
            return 130
        return None


# Process-wide instance shared by the CLI and the output sink
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the handlers for SIGPIPE (where available) and SIGINT."""
    if HAS_SIGPIPE:
        signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Silence stdout at exit after SIGPIPE or SIGINT.

    Python flushes stdout during shutdown; on a closed pipe that flush would print
    a second error, so stdout is pointed at the null device first.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
