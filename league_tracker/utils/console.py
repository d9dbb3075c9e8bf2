"""Console helpers for status lines and view output."""

import sys
import os
from typing import Optional, TextIO


class ConsoleManager:
    """Prints view output and a single overwritable status line.

    The status line is used for the loading indicator while a lookup is in
    flight; permanent output clears it first.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.status_line = ""
        self.supports_ansi = self._supports_ansi_colors()

    def _supports_ansi_colors(self) -> bool:
        """Check if the stream is a terminal that understands ANSI codes."""
        if not hasattr(self.stream, 'isatty') or not self.stream.isatty():
            return False

        # Windows Terminal sets WT_SESSION, plain CMD does not
        if sys.platform == "win32":
            return os.environ.get('TERM') is not None or 'WT_SESSION' in os.environ

        return True

    def _clear_status(self):
        if not self.status_line:
            return
        if self.supports_ansi:
            self.stream.write('\r\033[K')
        else:
            self.stream.write('\r' + ' ' * len(self.status_line) + '\r')
        self.stream.flush()
        self.status_line = ""

    def show_status(self, message: str):
        """Show a temporary status line, replacing any previous one."""
        if message == self.status_line:
            return
        self._clear_status()
        self.stream.write(message)
        self.stream.flush()
        self.status_line = message

    def clear_status(self):
        self._clear_status()

    def print(self, message: str = ""):
        """Print a permanent message below any cleared status line."""
        self._clear_status()
        self.stream.write(message + "\n")
        self.stream.flush()

