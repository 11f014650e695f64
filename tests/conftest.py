"""
Pytest configuration and fixtures for Console Toolkit tests.
"""

import io
import json
import sys
from pathlib import Path

import pytest

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from console_toolkit.ui.colors import Renderer
from console_toolkit.ui.terminal import Terminal


class FakeTerminal(Terminal):
    """Terminal fed from a list of lines; records hidden reads and history."""

    def __init__(self, lines=()):
        data = ''.join(f"{line}\n" for line in lines)
        super().__init__(io.StringIO(data), io.StringIO())
        self.hidden_reads = 0
        self.history_added = []
        self.completers = []
        self.loaded_history = []
        self.saved_history = []

    @property
    def output(self):
        return self.out_stream.getvalue()

    def read_hidden(self, prompt=""):
        self.hidden_reads += 1
        value = self.read_line(prompt)
        self.write("\n")
        return value

    def add_history(self, line):
        self.history_added.append(line)

    def set_completer(self, completer):
        self.completers.append(completer)

    def load_history(self, path, length=1000):
        self.loaded_history.append((path, length))

    def save_history(self, path, length=1000):
        self.saved_history.append((path, length))


@pytest.fixture
def make_terminal():
    """Factory for fake terminals with scripted input."""
    def _make(*lines):
        return FakeTerminal(lines)
    return _make


@pytest.fixture
def renderer():
    """Renderer with the default palette and colors on."""
    return Renderer()


@pytest.fixture
def plain_renderer():
    """Renderer with colors off."""
    return Renderer(enabled=False)


@pytest.fixture
def mock_config():
    """Mock configuration data."""
    return {
        "version": "1.0",
        "output": {
            "color": "never"
        },
        "prompt": {
            "retries": 2,
            "confirm_retries": 5
        },
        "interactive": {
            "history_file": "~/.test_history",
            "history_length": 50
        }
    }


@pytest.fixture
def temp_config_file(tmp_path, mock_config):
    """Create a temporary config file."""
    config_path = tmp_path / "config.json"
    with open(config_path, 'w') as f:
        json.dump(mock_config, f)
    return config_path
