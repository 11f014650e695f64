"""
Configuration management - load, save, and edit console settings.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Dict, Any

logger = logging.getLogger(__name__)

# Config file location (home directory unless overridden)
CONFIG_FILE = Path(
    os.environ.get("CONSOLE_TOOLKIT_CONFIG", Path.home() / ".console_toolkit.json")
)

COLOR_MODES = ("auto", "always", "never")

DEFAULT_CONFIG = {
    "version": "1.0",
    "output": {
        "color": "auto"  # "auto", "always", or "never"
    },
    "prompt": {
        "retries": 0,
        "confirm_retries": 3
    },
    "interactive": {
        "history_file": "",
        "history_length": 1000
    }
}


def config_exists() -> bool:
    """Check if config file exists."""
    return CONFIG_FILE.exists()


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay file values on top of the defaults, section by section."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config() -> Dict[str, Any]:
    """Load config from file or return defaults."""
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE, 'r') as f:
                return _merge(DEFAULT_CONFIG, json.load(f))
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Ignoring unreadable config {CONFIG_FILE}: {e}")
    return copy.deepcopy(DEFAULT_CONFIG)


def save_config(config: Dict[str, Any]) -> None:
    """Save config to file with restricted permissions."""
    with open(CONFIG_FILE, 'w') as f:
        json.dump(config, f, indent=2)
    # Restrict permissions (owner read/write only)
    os.chmod(CONFIG_FILE, 0o600)


def get_color_mode() -> str:
    """Configured color mode, falling back to "auto" on unknown values."""
    mode = load_config().get("output", {}).get("color", "auto")
    if mode not in COLOR_MODES:
        logger.debug(f"Unknown color mode {mode!r}, using auto")
        return "auto"
    return mode


def get_prompt_settings() -> Dict[str, int]:
    """
    Get retry settings for prompts.

    Returns:
        Dict with retries and confirm_retries
    """
    prompt = load_config().get("prompt", {})
    return {
        "retries": int(prompt.get("retries", 0)),
        "confirm_retries": int(prompt.get("confirm_retries", 3))
    }


def get_history_settings() -> Dict[str, Any]:
    """
    Get interactive history settings.

    Returns:
        Dict with history_file (Path or None) and history_length
    """
    interactive = load_config().get("interactive", {})
    history_file = interactive.get("history_file") or ""
    return {
        "history_file": Path(history_file).expanduser() if history_file else None,
        "history_length": int(interactive.get("history_length", 1000))
    }


def run_config_editor(terminal=None, renderer=None) -> Dict[str, Any]:
    """
    Edit the configuration interactively.
    Shows current values; empty input keeps them.
    """
    from .ui.display import log
    from .ui.prompts import prompt, confirm

    config = load_config()
    output = config["output"]
    settings = config["prompt"]
    interactive = config["interactive"]

    log("<bold>Console Toolkit Settings</>", terminal=terminal, renderer=renderer)
    log("<grey>Press Enter to keep current value</>", terminal=terminal, renderer=renderer)

    mode = prompt(f"Color mode ({'/'.join(COLOR_MODES)}) [{output['color']}]: ",
                  terminal=terminal, renderer=renderer).strip()
    if mode in COLOR_MODES:
        output["color"] = mode

    value = prompt(f"Confirm retries [{settings['confirm_retries']}]: ",
                   terminal=terminal, renderer=renderer).strip()
    if value.isdigit() and int(value) > 0:
        settings["confirm_retries"] = int(value)

    value = prompt(f"Prompt retries on empty input [{settings['retries']}]: ",
                   terminal=terminal, renderer=renderer).strip()
    if value.isdigit():
        settings["retries"] = int(value)

    current = interactive["history_file"] or "none"
    if confirm(f"Persist interactive history? (current: {current})",
               bool(interactive["history_file"]), terminal=terminal, renderer=renderer):
        path = prompt("History file [~/.console_toolkit_history]: ",
                      terminal=terminal, renderer=renderer).strip()
        interactive["history_file"] = path or interactive["history_file"] or "~/.console_toolkit_history"
    else:
        interactive["history_file"] = ""

    save_config(config)
    log(f"<green>Configuration saved to {CONFIG_FILE}</>", terminal=terminal, renderer=renderer)

    return config
