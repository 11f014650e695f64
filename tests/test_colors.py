"""
Tests for the palette and text renderer.
"""

import io
import os
from pathlib import Path

import pytest

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from console_toolkit.ui.colors import Renderer, render, colors_enabled, get_renderer, RESET
from console_toolkit.ui.palette import Palette, DEFAULT_PALETTE, DEFAULT_COLORS


class TestPalette:
    """Tests for Palette lookups."""

    def test_lookup_known_name(self):
        """Test known names resolve to their SGR code."""
        assert DEFAULT_PALETTE.lookup("red") == "31"
        assert DEFAULT_PALETTE.lookup("reset") == "0"

    def test_lookup_composite_code(self):
        """Test multi-parameter code is stored pre-joined."""
        assert DEFAULT_PALETTE.lookup("greybg") == "49;5;8"

    def test_lookup_unknown_name(self):
        """Test unknown names return None."""
        assert DEFAULT_PALETTE.lookup("magenta") is None

    def test_lookup_is_case_sensitive(self):
        """Test lookup does not fold case."""
        assert DEFAULT_PALETTE.lookup("Red") is None

    def test_palette_contents(self):
        """Test palette has every style, color and background."""
        assert len(DEFAULT_PALETTE) == len(DEFAULT_COLORS) == 25
        for name in ("bold", "italic", "underline", "blink", "inverse",
                     "linethrough", "grey", "whitebg"):
            assert name in DEFAULT_PALETTE

    def test_palette_is_read_only(self):
        """Test the underlying table can't be modified."""
        with pytest.raises(TypeError):
            DEFAULT_PALETTE._colors["red"] = "99"

    def test_custom_palette_copies_source(self):
        """Test later changes to the source dict don't leak in."""
        source = {"accent": 95}
        palette = Palette(source)
        source["accent"] = 1

        assert palette.lookup("accent") == "95"


class TestRenderColorSpec:
    """Tests for rendering with an explicit color spec."""

    def test_plain_text_unchanged(self, renderer):
        """Test text without color or markup comes back as-is."""
        assert renderer.render("Hello") == "Hello"

    def test_single_color(self, renderer):
        """Test a single palette name wraps the text."""
        assert renderer.render("Hello", "red") == "\x1b[31mHello\x1b[0m"

    def test_color_list_keeps_order(self, renderer):
        """Test a list of names joins codes in the given order."""
        assert renderer.render("Hello", ["red", "bold"]) == "\x1b[31;1mHello\x1b[0m"

    def test_unknown_color(self, renderer):
        """Test an unknown name leaves the text unwrapped."""
        assert renderer.render("Hello", "not-a-color") == "Hello"

    def test_unknown_names_dropped_from_list(self, renderer):
        """Test unknown names in a list are skipped."""
        assert renderer.render("Hi", ["nope", "green"]) == "\x1b[32mHi\x1b[0m"

    def test_all_unknown_in_list(self, renderer):
        """Test a list with nothing resolvable leaves the text alone."""
        assert renderer.render("Hi", ["nope", "nada"]) == "Hi"

    def test_zero_code_kept_in_list(self):
        """Test a "0" code counts as found in list form."""
        renderer = Renderer(Palette({"zero": "0"}))
        assert renderer.render("x", ["zero"]) == "\x1b[0mx\x1b[0m"

    def test_color_spec_bypasses_markup(self, renderer):
        """Test markup is left alone when a color is given."""
        assert renderer.render("<red>x", "bold") == "\x1b[1m<red>x\x1b[0m"

    def test_module_level_render(self):
        """Test render() uses the default palette."""
        assert render("ok", "green") == "\x1b[32mok\x1b[0m"


class TestRenderMarkup:
    """Tests for inline <name> markup."""

    def test_open_and_reset_names(self, renderer):
        """Test named tags become escape sequences."""
        assert renderer.render("<red>H<reset>ello") == "\x1b[31mH\x1b[0mello"

    def test_multiple_names_in_tag(self, renderer):
        """Test space separated names share one sequence."""
        assert renderer.render("<grey redbg>H</>") == "\x1b[90;41mH\x1b[0m"

    def test_unknown_tag_kept(self, renderer):
        """Test unresolvable tags stay in the text, closers still reset."""
        assert renderer.render("<bogus>X</>") == "<bogus>X\x1b[0m"

    def test_closing_tag_content_ignored(self, renderer):
        """Test anything after the slash still resets."""
        assert renderer.render("<bold>a</bold>") == "\x1b[1ma\x1b[0m"

    def test_numeric_codes_pass_through(self, renderer):
        """Test raw numbers are used as SGR codes."""
        assert renderer.render("<1 38>a") == "\x1b[1;38ma"

    def test_mixed_numeric_and_names(self, renderer):
        """Test numbers and names mix in one tag."""
        assert renderer.render("<4 cyan>a") == "\x1b[4;36ma"

    def test_unknown_names_dropped_from_tag(self, renderer):
        """Test unresolved tokens are skipped when others resolve."""
        assert renderer.render("<nope red>a") == "\x1b[31ma"

    def test_non_ascii_digits_not_codes(self, renderer):
        """Test only ASCII digits pass through as raw codes."""
        assert renderer.render("<\u00b2 red>a") == "\x1b[31ma"
        assert renderer.render("<\u0663>a") == "<\u0663>a"

    def test_empty_tag_kept(self, renderer):
        """Test an empty tag is not swallowed."""
        assert renderer.render("<>a") == "<>a"

    def test_no_auto_close(self, renderer):
        """Test runs bleed to the end without a closer."""
        assert renderer.render("<green>ok") == "\x1b[32mok"

    def test_less_than_without_tag(self, renderer):
        """Test a lone < is untouched."""
        assert renderer.render("a < b") == "a < b"

    def test_tags_are_non_greedy(self, renderer):
        """Test adjacent tags are matched separately."""
        assert renderer.render("<red>a</><blue>b</>") == "\x1b[31ma\x1b[0m\x1b[34mb\x1b[0m"


class TestLineEnd:
    """Tests for the line ending option."""

    def test_end_true_appends_linesep(self, renderer):
        """Test end=True appends exactly one platform line ending."""
        result = renderer.render("Hello", end=True)
        assert result == "Hello" + os.linesep

    def test_end_string_appended_verbatim(self, renderer):
        """Test a string line ending is appended as given."""
        assert renderer.render("Hello", end="\r") == "Hello\r"

    def test_end_after_color(self, renderer):
        """Test the line ending goes after the reset."""
        assert renderer.render("Hi", "red", "\n") == "\x1b[31mHi\x1b[0m\n"

    def test_color_true_means_line_end(self, renderer):
        """Test color=True is read as end=True and adds no color."""
        assert renderer.render("Hello", True, False) == "Hello" + os.linesep

    def test_color_true_still_expands_markup(self, renderer):
        """Test color=True leaves markup parsing on."""
        assert renderer.render("<red>x", True) == "\x1b[31mx" + os.linesep


class TestDisabledRenderer:
    """Tests for a renderer with colors off."""

    def test_color_spec_ignored(self, plain_renderer):
        """Test explicit colors produce bare text."""
        assert plain_renderer.render("Hello", "red") == "Hello"

    def test_markup_stripped(self, plain_renderer):
        """Test resolved tags and closers vanish."""
        assert plain_renderer.render("<red>H</>ello") == "Hello"

    def test_unknown_markup_kept(self, plain_renderer):
        """Test unresolvable tags still show."""
        assert plain_renderer.render("<bogus>X</>") == "<bogus>X"


class TestColorsEnabled:
    """Tests for color mode resolution."""

    def test_always(self):
        assert colors_enabled("always", io.StringIO()) is True

    def test_never(self):
        assert colors_enabled("never") is False

    def test_auto_not_a_tty(self, monkeypatch):
        """Test auto is off when output is not a terminal."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert colors_enabled("auto", io.StringIO()) is False

    def test_auto_tty(self, monkeypatch):
        """Test auto is on for a terminal."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm")

        class Tty(io.StringIO):
            def isatty(self):
                return True

        assert colors_enabled("auto", Tty()) is True

    def test_auto_no_color(self, monkeypatch):
        """Test NO_COLOR turns auto off."""
        monkeypatch.setenv("NO_COLOR", "1")
        assert colors_enabled("auto") is False

    def test_dumb_terminal(self, monkeypatch):
        """Test TERM=dumb turns auto off."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")

        class Tty(io.StringIO):
            def isatty(self):
                return True

        assert colors_enabled("auto", Tty()) is False

    def test_get_renderer_mode(self):
        """Test get_renderer honors an explicit mode."""
        assert get_renderer("always").enabled is True
        assert get_renderer("never").enabled is False
        assert RESET == "\x1b[0m"
