"""
Interactive input prompts with retry limits and yes/no confirmation.
"""

import logging
from typing import Optional, Union

from .colors import Renderer, render
from .terminal import Terminal

logger = logging.getLogger(__name__)


class InvalidInputError(SystemExit):
    """
    Confirmation gave up on bad input.

    Subclasses SystemExit: left uncaught it stops the script with a
    non-zero status and the message on stderr.
    """

    def __init__(self, message: str = "Error input"):
        self.message = message
        super().__init__(message)


def prompt(
    label: str,
    hide: Union[bool, int] = False,
    retries: int = 0,
    terminal: Optional[Terminal] = None,
    renderer: Optional[Renderer] = None
) -> str:
    """
    Prompt a message and return the input.

    Args:
        label: Prompt text, markup allowed
        hide: Hide input (for passwords). An int here is taken as
            ``retries`` with input shown, so ``prompt('Name: ', 5)`` works.
        retries: Extra attempts while the input is empty
        terminal: Terminal to read from (default stdin/stdout)
        renderer: Renderer for the label

    Returns:
        The input, or '' if every attempt came back empty

    Raises:
        ToolUnavailableError: Hidden input requested but echo can't be disabled

    Examples:
        prompt('Your username: ')            # visible input
        prompt('Your password: ', True)      # hidden input
        prompt('Your password: ', True, 10)  # hidden, retry 10 times
        prompt('Your username: ', 5)         # visible, retry 5 times
    """
    if isinstance(hide, int) and not isinstance(hide, bool):
        retries, hide = hide, False

    terminal = terminal or Terminal()
    text = renderer.render(label) if renderer else render(label)

    value = ''
    remaining = retries
    while not value and remaining > -1:
        if hide:
            value = terminal.read_hidden(text)
        else:
            value = terminal.read_line(text)
        remaining -= 1
        if not value:
            logger.debug(f"Empty input, {max(remaining + 1, 0)} attempt(s) left")

    return value


def confirm(
    text: str,
    default_yes: bool = False,
    retries: int = 3,
    terminal: Optional[Terminal] = None,
    renderer: Optional[Renderer] = None
) -> bool:
    """
    Yes/No confirmation prompt.

    Args:
        text: The question, markup allowed
        default_yes: Answer for empty input
        retries: Total attempts before giving up on bad input
        terminal: Terminal to read from (default stdin/stdout)
        renderer: Renderer for the question

    Returns:
        Boolean result

    Raises:
        InvalidInputError: Every attempt was something other than y/n/empty
    """
    terminal = terminal or Terminal()
    suffix = '[Y/n]' if default_yes else '[y/N]'
    question = f"{text} {suffix}: "
    terminal.write(renderer.render(question) if renderer else render(question))

    remaining = retries - 1
    choice = terminal.read_line().strip().lower()
    while choice and choice not in ('y', 'n') and remaining > 0:
        logger.debug(f"Invalid confirmation {choice!r}, {remaining} attempt(s) left")
        terminal.write('Confirm: ')
        remaining -= 1
        choice = terminal.read_line().strip().lower()

    if choice not in ('', 'y', 'n'):
        raise InvalidInputError()

    if not choice:
        return bool(default_yes)
    return choice == 'y'
