"""
Interactive read loop with line history and tab completion.
"""

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Union

from .colors import Renderer, render
from .terminal import Terminal, Completer

logger = logging.getLogger(__name__)


class InteractiveExit(SystemExit):
    """
    End of input reached in the interactive loop.

    Subclasses SystemExit with status 0, so an uncaught one ends the
    process cleanly; embedding callers can catch it to clean up.
    """

    def __init__(self, message: str = "End of input"):
        self.message = message
        super().__init__(0)


class Interactive:
    """Prompt, read, dispatch - until end of input."""

    def __init__(
        self,
        title: str,
        on_line: Callable[[str], None],
        end: Union[bool, str] = True,
        completer: Optional[Completer] = None,
        terminal: Optional[Terminal] = None,
        renderer: Optional[Renderer] = None,
        history_file: Optional[Path] = None,
        history_length: int = 1000
    ):
        self.title = title
        self.on_line = on_line
        self.end = end
        self.completer = completer
        self.terminal = terminal or Terminal()
        self.renderer = renderer
        self.history_file = history_file
        self.history_length = history_length
        self.history: List[str] = []

    def _prompt(self) -> str:
        if self.renderer:
            return self.renderer.render(self.title)
        return render(self.title)

    def _line_end(self) -> str:
        if self.end is True:
            return os.linesep
        return self.end or ''

    def run(self) -> None:
        """
        Run the loop.

        Raises:
            InteractiveExit: On end of input
        """
        if self.completer is not None:
            self.terminal.set_completer(self.completer)
        if self.history_file:
            self.terminal.load_history(self.history_file, self.history_length)

        try:
            while True:
                try:
                    line = self.terminal.read_history_line(self._prompt())
                except EOFError:
                    logger.debug(f"End of input after {len(self.history)} line(s)")
                    raise InteractiveExit()

                if not line:
                    continue

                self.history.append(line)
                self.terminal.add_history(line)
                self.on_line(line)

                line_end = self._line_end()
                if line_end:
                    self.terminal.write(line_end)
        finally:
            if self.completer is not None:
                self.terminal.set_completer(None)
            if self.history_file:
                self.terminal.save_history(self.history_file, self.history_length)


def interactive(
    title: str,
    on_line: Callable[[str], None],
    end: Union[bool, str, Completer] = True,
    completer: Optional[Completer] = None,
    **kwargs
) -> None:
    """
    Interactive mode.

    Args:
        title: Prompt shown before each line, markup allowed
        on_line: Called with every non-empty line
        end: Line ending written after each callback. A callable here is
            taken as ``completer`` with no line ending.
        completer: readline completion function (text, state) -> match
        **kwargs: terminal, renderer, history_file, history_length

    Raises:
        InteractiveExit: On end of input
    """
    if callable(end):
        completer, end = end, False
    Interactive(title, on_line, end=end, completer=completer, **kwargs).run()
