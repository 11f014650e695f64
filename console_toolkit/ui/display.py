"""
Display helpers - print rendered text in status colors.
"""

import re
from typing import Optional

from .colors import ColorSpec, LineEnd, Renderer, get_renderer
from .terminal import Terminal

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*m')


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences."""
    return ANSI_PATTERN.sub('', text)


def log(
    text: str,
    color: ColorSpec = None,
    end: LineEnd = True,
    terminal: Optional[Terminal] = None,
    renderer: Optional[Renderer] = None
) -> None:
    """Print the text, colored per the configured color mode."""
    terminal = terminal or Terminal()
    renderer = renderer or get_renderer(stream=terminal.out_stream)
    terminal.write(renderer.render(text, color, end))


def success(text: str, **kwargs) -> None:
    """Done with something - green."""
    log(text, 'green', **kwargs)


def warn(text: str, **kwargs) -> None:
    """Something to look at - yellow."""
    log(text, 'yellow', **kwargs)


def error(text: str, **kwargs) -> None:
    """Failed with something - red."""
    log(text, 'red', **kwargs)
