"""Rich Console factory and theme for highlighted output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. Highlighting only adds ANSI
styling; the characters of each line are unchanged.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

CAL_THEME = Theme(
    {
        "cal.today": "reverse",
        "cal.title": "bold",
        "cal.header": "dim",
    }
)


def create_console(*, no_color: bool = False, force_terminal: bool = True) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        force_terminal: Emit styles even though the buffer is not a TTY.
    """
    return Console(
        file=StringIO(),
        theme=CAL_THEME,
        no_color=no_color,
        force_terminal=force_terminal,
        color_system="standard",
        highlight=False,
        soft_wrap=True,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def highlight_line(line: str, day: int) -> Text:
    """Style the cell holding *day* in a single week line."""
    text = Text(line)
    cell = f"{day:2d}"
    # Cells start every three columns.
    for start in range(0, len(line), 3):
        if line[start : start + 2] == cell:
            text.stylize("cal.today", start, start + 2)
            break
    return text


def render_highlighted(lines: list[str], today: int, *, no_color: bool = False) -> str:
    """Render a month page with *today* in reverse video."""
    console = create_console(no_color=no_color)
    for index, line in enumerate(lines):
        if index == 0:
            text = Text(line, style="cal.title")
        elif index == 1:
            text = Text(line, style="cal.header")
        else:
            text = highlight_line(line, today)
        console.print(text)
    return get_output(console).rstrip("\n")
