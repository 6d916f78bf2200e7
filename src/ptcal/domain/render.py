"""Fixed-width text rendering of month and year pages.

Output shape, one month::

    Janeiro 2024
    Do Se Te Qa Qi Se Sa
        1  2  3  4  5  6
     7  8  9 10 11 12 13
    ...
    28 29 30 31

Each week line ends with a single trailing space after its last day.
Trailing blank cells of the final week are not printed.
"""

from __future__ import annotations

from ptcal.domain.layout import BLANK_CELL, WEEKDAY_HEADER, MonthLayout


def format_cell(day: int | None) -> str:
    return BLANK_CELL if day is None else f"{day:2d}"


def format_week(week: list[int | None]) -> str:
    """Render one week row, dropping blanks after the last day."""
    last = max(i for i, day in enumerate(week) if day is not None)
    return " ".join(format_cell(day) for day in week[: last + 1]) + " "


def render_layout(layout: MonthLayout) -> list[str]:
    lines = [layout.title, WEEKDAY_HEADER]
    lines.extend(format_week(week) for week in layout.weeks)
    return lines


def render_month(month: int, year: int) -> list[str]:
    """Title line, weekday header, and one line per week."""
    return render_layout(MonthLayout.build(month, year))


def render_year(year: int) -> list[str]:
    """All twelve months of *year*, blocks separated by a blank line."""
    lines: list[str] = []
    for month in range(1, 13):
        if lines:
            lines.append("")
        lines.extend(render_month(month, year))
    return lines
