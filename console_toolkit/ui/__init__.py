"""
Terminal output and input components.
"""

from .palette import Palette, DEFAULT_PALETTE
from .colors import Renderer, render, get_renderer, colors_enabled, RESET
from .display import log, success, warn, error, strip_ansi
from .terminal import Terminal, ConsoleError, ToolUnavailableError
from .prompts import prompt, confirm, InvalidInputError
from .interactive import Interactive, InteractiveExit, interactive
