#!/usr/bin/env python3
"""
Console Toolkit - command line front end

Usage:
    console-toolkit render '<red bold>Hello</> world'
    console-toolkit prompt 'Password: ' --hide
    console-toolkit confirm 'Continue?' --default-yes && echo yes
    console-toolkit repl
"""

import logging
import sys

import click

from . import __version__
from .config import (
    COLOR_MODES, get_color_mode, get_prompt_settings,
    get_history_settings, run_config_editor
)
from .ui.colors import get_renderer
from .ui.interactive import Interactive
from .ui.palette import DEFAULT_PALETTE
from .ui.prompts import prompt as prompt_input, confirm as confirm_input
from .ui.terminal import Terminal, ToolUnavailableError

logger = logging.getLogger(__name__)


@click.group()
@click.option('--color', 'color_mode', type=click.Choice(COLOR_MODES),
              default=None, help='Override the configured color mode')
@click.option('--debug', is_flag=True, help='Log debug output to stderr')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, color_mode, debug):
    """Console Toolkit - colored text and prompts for shell scripts."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format='%(asctime)s %(name)s %(levelname)s: %(message)s'
        )
    mode = color_mode or get_color_mode()
    logger.debug(f"Color mode: {mode}")
    ctx.obj = {
        'terminal': Terminal(),
        'renderer': get_renderer(mode),
    }


@cli.command()
@click.argument('text')
@click.option('--color', '-c', 'colors', multiple=True,
              help='Palette name; repeat for several. Disables markup.')
@click.option('--no-newline', '-n', is_flag=True, help='Do not end with a newline')
@click.pass_obj
def render(obj, text, colors, no_newline):
    """Print TEXT, expanding <name> ... </> markup."""
    color = list(colors) if colors else None
    obj['terminal'].write(obj['renderer'].render(text, color, end=not no_newline))


@cli.command()
@click.argument('label')
@click.option('--hide', is_flag=True, help='Hide input (for passwords)')
@click.option('--retries', type=int, default=None, help='Extra attempts on empty input')
@click.pass_obj
def prompt(obj, label, hide, retries):
    """Ask for a line of input and print it."""
    if retries is None:
        retries = get_prompt_settings()['retries']
    try:
        value = prompt_input(label, hide=hide, retries=retries,
                             terminal=obj['terminal'], renderer=obj['renderer'])
    except ToolUnavailableError as e:
        raise click.ClickException(e.message)
    click.echo(value)


@cli.command()
@click.argument('text')
@click.option('--default-yes', '-y', is_flag=True, help='Empty input means yes')
@click.option('--retries', type=int, default=None, help='Attempts before giving up')
@click.pass_obj
def confirm(obj, text, default_yes, retries):
    """Ask a yes/no question. Exits 0 for yes, 1 for no."""
    if retries is None:
        retries = get_prompt_settings()['confirm_retries']
    answer = confirm_input(text, default_yes, retries,
                           terminal=obj['terminal'], renderer=obj['renderer'])
    sys.exit(0 if answer else 1)


@cli.command()
@click.option('--title', default='<cyan>></> ', help='Prompt, markup allowed')
@click.pass_obj
def repl(obj, title):
    """Echo every line back until end of input."""
    terminal = obj['terminal']
    renderer = obj['renderer']
    history = get_history_settings()

    def echo_line(line):
        terminal.write(renderer.render(line))

    def complete_palette(text, state):
        matches = [name for name in DEFAULT_PALETTE if name.startswith(text)]
        return matches[state] if state < len(matches) else None

    Interactive(
        title,
        echo_line,
        completer=complete_palette if terminal.supports_completion else None,
        terminal=terminal,
        renderer=renderer,
        history_file=history['history_file'],
        history_length=history['history_length']
    ).run()


@cli.command()
@click.pass_obj
def palette(obj):
    """List palette names, each in its own style."""
    renderer = obj['renderer']
    for name, code in DEFAULT_PALETTE.as_dict().items():
        obj['terminal'].write(renderer.render(f"{name:<12} {code}", name, end=True))


@cli.command()
@click.pass_obj
def configure(obj):
    """Edit settings interactively."""
    run_config_editor(terminal=obj['terminal'], renderer=obj['renderer'])


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
