"""
Console Toolkit - colored terminal text, prompts, confirmations and
interactive loops for command line tools.
"""

__version__ = "1.0.0"

from .ui import (
    Palette, DEFAULT_PALETTE,
    Renderer, render, get_renderer, colors_enabled, RESET,
    log, success, warn, error, strip_ansi,
    Terminal, ConsoleError, ToolUnavailableError,
    prompt, confirm, InvalidInputError,
    Interactive, InteractiveExit, interactive,
)
