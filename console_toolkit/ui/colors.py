"""
Terminal colors and styling - palette names, inline markup, line endings.

    render('Hello', 'red')                # "Hello" in red
    render('Hello', end=True)             # "Hello" followed by os.linesep
    render('Hello', 'red', end='\\r')      # red "Hello" ending with "\\r"
    render('Hello', ['red', 'bold'])      # red and bold
    render('<grey redbg>H<reset>ello')    # "H" grey on red, "ello" plain
"""

import os
import re
import sys
from typing import Optional, Sequence, Union

from colorama import just_fix_windows_console

from .palette import Palette, DEFAULT_PALETTE

# Make ANSI sequences work on legacy Windows consoles; no-op elsewhere
just_fix_windows_console()

ESC = '\033['
RESET = '\033[0m'

ColorSpec = Union[None, bool, str, Sequence[str]]
LineEnd = Union[bool, str]

# Non-greedy, single line: "<red>a</>" is two tags
TAG_PATTERN = re.compile(r'<(/?.*?)>')


def stdout_is_tty(stream=None) -> bool:
    """Check if we're writing to a real terminal."""
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty()) and os.environ.get("TERM") != "dumb"


def colors_enabled(mode: str = "auto", stream=None) -> bool:
    """Resolve a color mode ("auto", "always", "never") to on/off."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    if "NO_COLOR" in os.environ:
        return False
    return stdout_is_tty(stream)


def sgr(codes: Sequence[str]) -> str:
    """Build an SGR escape sequence from one or more codes."""
    return f"{ESC}{';'.join(codes)}m"


class Renderer:
    """Turns text plus a color spec, or inline markup, into ANSI text."""

    def __init__(self, palette: Palette = DEFAULT_PALETTE, enabled: bool = True):
        self.palette = palette
        self.enabled = enabled

    def resolve(self, names: Union[str, Sequence[str]]) -> list:
        """Look up names in the palette, dropping the ones it doesn't know."""
        if isinstance(names, str):
            names = [names]
        codes = []
        for name in names:
            code = self.palette.lookup(name)
            if code is not None:
                codes.append(code)
        return codes

    def _replace_tag(self, match: 're.Match') -> str:
        content = match.group(1)
        if content.startswith('/'):
            return RESET if self.enabled else ''

        codes = []
        for token in content.split(' '):
            token = token.strip()
            if token.isascii() and token.isdigit():
                codes.append(token)
            else:
                code = self.palette.lookup(token)
                if code is not None:
                    codes.append(code)

        if not codes:
            # Not ours; leave it visible
            return match.group(0)
        return sgr(codes) if self.enabled else ''

    def markup(self, text: str) -> str:
        """Substitute <name ...> and </> tags. Runs are not auto-closed."""
        return TAG_PATTERN.sub(self._replace_tag, text)

    def render(self, text: str, color: ColorSpec = None, end: LineEnd = False) -> str:
        """
        Color output text for the terminal.

        Args:
            text: The text to render
            color: Palette name or list of names. Without one, inline
                markup in the text is expanded instead. ``True`` is the
                legacy spelling of ``end=True``.
            end: False for no line ending, True for os.linesep, or a
                literal string to append

        Returns:
            The rendered string
        """
        if color is True:
            color, end = None, True

        if isinstance(color, (str, list, tuple)):
            codes = self.resolve(color)
            if codes and self.enabled:
                text = f"{sgr(codes)}{text}{RESET}"
        elif not color and '<' in text:
            text = self.markup(text)

        if end is True:
            return text + os.linesep
        if end:
            return text + end
        return text


_default_renderer = Renderer()


def render(text: str, color: ColorSpec = None, end: LineEnd = False) -> str:
    """Render with the default palette, colors always on."""
    return _default_renderer.render(text, color, end)


def get_renderer(mode: Optional[str] = None, stream=None) -> Renderer:
    """Renderer honoring the configured color mode."""
    if mode is None:
        from ..config import get_color_mode
        mode = get_color_mode()
    return Renderer(DEFAULT_PALETTE, enabled=colors_enabled(mode, stream))
