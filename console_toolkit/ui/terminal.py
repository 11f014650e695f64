"""
Line input from the terminal - visible, hidden (echo off), and readline.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Callable, Optional

try:
    import termios
except ImportError:  # Windows
    termios = None

try:
    import readline
except ImportError:  # Windows without pyreadline
    readline = None

logger = logging.getLogger(__name__)

Completer = Callable[[str, int], Optional[str]]


class ConsoleError(Exception):
    """Base exception for console toolkit errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ToolUnavailableError(ConsoleError):
    """The terminal facility needed for an operation is not available."""


class Terminal:
    """
    Blocking line I/O over a pair of text streams.

    read_line / read_hidden return '' at end of input; read_history_line
    raises EOFError so the interactive loop can tell the two apart.
    """

    def __init__(self, in_stream=None, out_stream=None):
        self.in_stream = in_stream or sys.stdin
        self.out_stream = out_stream or sys.stdout

    def write(self, text: str) -> None:
        self.out_stream.write(text)
        self.out_stream.flush()

    def _read_raw(self, prompt: str) -> str:
        if prompt:
            self.write(prompt)
        return self.in_stream.readline()

    def read_line(self, prompt: str = "") -> str:
        """Write prompt, read one line, strip the trailing newline."""
        return self._read_raw(prompt).rstrip('\r\n')

    @contextmanager
    def echo_disabled(self):
        """Turn terminal echo off, restoring the old mode on every exit path."""
        if termios is None:
            raise ToolUnavailableError("Can not control terminal echo on this platform!")
        try:
            fd = self.in_stream.fileno()
            old_settings = termios.tcgetattr(fd)
        except (AttributeError, ValueError, OSError, termios.error) as e:
            raise ToolUnavailableError(f"Can not disable echo to input password: {e}") from e

        new_settings = termios.tcgetattr(fd)
        new_settings[3] &= ~termios.ECHO
        logger.debug(f"Disabling echo on fd {fd}")
        termios.tcsetattr(fd, termios.TCSADRAIN, new_settings)
        try:
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
            logger.debug(f"Restored echo on fd {fd}")

    def read_hidden(self, prompt: str = "") -> str:
        """Read a line with echo off, then emit the newline the user can't see."""
        with self.echo_disabled():
            value = self.read_line(prompt)
        self.write("\n")
        return value

    def read_history_line(self, prompt: str = "") -> str:
        """
        Read a line with readline editing and history.

        Raises:
            EOFError: On end of input
        """
        if self.in_stream is sys.stdin and self.out_stream is sys.stdout:
            if readline is not None:
                # History is added by the caller, only for lines it keeps
                readline.set_auto_history(False)
            return input(prompt)
        # input() only edits the real stdin/stdout
        raw = self._read_raw(prompt)
        if not raw:
            raise EOFError
        return raw.rstrip('\r\n')

    @property
    def supports_completion(self) -> bool:
        return readline is not None

    def add_history(self, line: str) -> None:
        if readline is not None:
            readline.add_history(line)

    def set_completer(self, completer: Optional[Completer]) -> None:
        if readline is None:
            raise ToolUnavailableError("readline is not available for completion!")
        readline.set_completer(completer)
        if completer is not None:
            readline.parse_and_bind("tab: complete")

    def load_history(self, path, length: int = 1000) -> None:
        """Read history from path. Missing files are not an error."""
        if readline is None:
            return
        readline.set_history_length(length)
        try:
            readline.read_history_file(str(path))
            logger.debug(f"Loaded history from {path}")
        except FileNotFoundError:
            logger.debug(f"No history file at {path}")
        except OSError as e:
            logger.warning(f"Could not read history file {path}: {e}")

    def save_history(self, path, length: int = 1000) -> None:
        if readline is None:
            return
        readline.set_history_length(length)
        try:
            readline.write_history_file(str(path))
            logger.debug(f"Saved history to {path}")
        except OSError as e:
            logger.warning(f"Could not write history file {path}: {e}")
