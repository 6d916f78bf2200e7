"""Tests for the Rich console factory and today highlighting."""

import re

from ptcal.output.console import (
    CAL_THEME,
    create_console,
    get_output,
    highlight_line,
    render_highlighted,
)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


class TestCreateConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("Maio 2024")
        assert _ANSI.sub("", get_output(console)) == "Maio 2024\n"

    def test_theme_has_today_style(self) -> None:
        assert "cal.today" in CAL_THEME.styles


class TestHighlightLine:
    def test_styles_matching_cell(self) -> None:
        text = highlight_line("12 13 14 15 16 17 18 ", 15)
        assert len(text.spans) == 1
        span = text.spans[0]
        assert (span.start, span.end) == (9, 11)
        assert span.style == "cal.today"

    def test_single_digit_day(self) -> None:
        text = highlight_line("          1  2  3  4 ", 2)
        span = text.spans[0]
        assert text.plain[span.start : span.end] == " 2"

    def test_does_not_match_across_cells(self) -> None:
        """Day 1 must not match the '1' inside '11' or '12'."""
        text = highlight_line(" 5  6  7  8  9 10 11 ", 1)
        assert text.spans == []


class TestRenderHighlighted:
    def test_reverse_video_on_today(self) -> None:
        lines = ["Maio 2024", "Do Se Te Qa Qi Se Sa", "12 13 14 15 16 17 18 "]
        output = render_highlighted(lines, 15)
        assert "\x1b[7m15" in output
        plain = _ANSI.sub("", output).splitlines()
        assert [line.rstrip() for line in plain] == [line.rstrip() for line in lines]
