"""Tests for console color helpers."""

import io

import pytest

from utilkit.console import (
    ERROR_BANNER,
    RESET,
    STYLES,
    catch_err,
    color,
    format_segment,
    format_segments,
    format_stack,
    print_color_console,
)


class TestFormatSegments:
    """Tests for segment formatting."""

    def test_plain_segment(self):
        """Test a segment without color still gets a reset."""
        assert format_segments(("Regular text",)) == f"Regular text{RESET}"

    def test_color_then_styles(self):
        """Test the color code precedes style codes."""
        result = format_segment("Multi-style", "yellow", ["bold", "underline", "inverse"])
        assert result == "\x1b[33m\x1b[1m\x1b[4m\x1b[7mMulti-style\x1b[0m"

    def test_single_style_string(self):
        assert format_segment("Blue bold", "blue", "bold") == "\x1b[34m\x1b[1mBlue bold\x1b[0m"

    def test_unknown_keys_skipped(self):
        """Test unrecognized color and style keys are ignored."""
        assert format_segment("x", "chartreuse", ["wobbly", "dim"]) == "\x1b[2mx\x1b[0m"

    def test_segments_joined_by_space(self):
        result = format_segments(("a", "red"), ("b", "green"))
        assert result == "\x1b[31ma\x1b[0m \x1b[32mb\x1b[0m"

    def test_bare_string_segment(self):
        """Test a plain string is one segment, not a sequence of characters."""
        assert format_segments("hello") == f"hello{RESET}"
        assert format_segments("hello", ("world", "red"), enabled=False) == "hello world"

    def test_disabled(self):
        assert format_segments(("a", "red", "bold"), ("b",), enabled=False) == "a b"

    def test_style_table(self):
        assert STYLES["bright_red"] == "\x1b[91m"
        assert STYLES["bg_bright_white"] == "\x1b[107m"
        assert len(STYLES) == 41


class TestColor:
    """Tests for printing helpers."""

    def test_color_prints_line(self, capsys):
        color(("Red text", "red"), ("Green underline", "green", ["underline"]), enabled=True)

        out = capsys.readouterr().out
        assert out == "\x1b[31mRed text\x1b[0m \x1b[32m\x1b[4mGreen underline\x1b[0m\n"

    def test_color_to_file(self):
        stream = io.StringIO()
        color(("hello", "cyan"), file=stream, enabled=True)
        assert stream.getvalue() == "\x1b[36mhello\x1b[0m\n"

    def test_color_respects_settings(self, capsys, monkeypatch):
        """Test UTILKIT_COLOR_ENABLED=false prints plain text."""
        monkeypatch.setenv("UTILKIT_COLOR_ENABLED", "false")

        color(("plain", "red"))

        assert capsys.readouterr().out == "plain\n"

    def test_print_color_console(self, capsys):
        print_color_console("hi", "magenta")
        assert capsys.readouterr().out == "\x1b[35mhi\x1b[0m\n"

    def test_print_color_console_keyword(self, capsys):
        print_color_console("hi", color_name="green")
        assert capsys.readouterr().out == "\x1b[32mhi\x1b[0m\n"

    def test_print_color_console_default_white(self, capsys):
        print_color_console("hi")
        assert capsys.readouterr().out.startswith("\x1b[37mhi")


class TestCatchErr:
    """Tests for the error printer."""

    def test_exception_report(self, capsys):
        try:
            raise ValueError("This is a test error")
        except ValueError as err:
            catch_err(err, "/test/path")

        out = capsys.readouterr().out
        assert ERROR_BANNER in out
        assert "\x1b[31m\x1b[4m\x1b[1m" in out
        assert "This is a test error" in out
        assert "path: /test/path" in out
        assert "Stack trace:" in out
        assert "test_console.py" in out

    @pytest.mark.parametrize("err", ["String error", {"custom": "object"}])
    def test_non_exception(self, capsys, err):
        """Test non-exception values print their str() and no stack."""
        catch_err(err, "/another/path")

        out = capsys.readouterr().out
        assert str(err) in out
        assert "path: /another/path" in out
        assert out.rstrip("\n").endswith(f"\x1b[37m{RESET}")

    def test_format_stack_unraised(self):
        assert format_stack(RuntimeError("never raised")) == ""
