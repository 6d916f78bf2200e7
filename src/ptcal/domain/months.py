"""Month names, month lengths, and the day numbers printed on a page."""

from __future__ import annotations

from ptcal.domain.leap import is_leap
from ptcal.domain.types import (
    REFORM_FIRST_SKIPPED_DAY,
    REFORM_MONTH,
    REFORM_SKIPPED_DAYS,
    REFORM_YEAR,
)

MONTH_NAMES: tuple[str, ...] = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)

WEEKDAY_ABBREVIATIONS: tuple[str, ...] = ("Do", "Se", "Te", "Qa", "Qi", "Se", "Sa")

# February is resolved against the leap rule.
_DAYS_PER_MONTH: dict[int, int] = {
    1: 31,
    2: 28,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


def days_in_month(month: int, year: int) -> int:
    """Nominal number of days in *month* of *year*."""
    if month == 2 and is_leap(year):
        return 29
    return _DAYS_PER_MONTH[month]


def is_reform_month(month: int, year: int) -> bool:
    return month == REFORM_MONTH and year == REFORM_YEAR


def days_of_month(month: int, year: int) -> list[int]:
    """Day numbers that appear on the page for *month* of *year*.

    September 1752 skips from the 2nd to the 14th; every other month
    runs from 1 to :func:`days_in_month`.
    """
    days = list(range(1, days_in_month(month, year) + 1))
    if is_reform_month(month, year):
        skipped = range(REFORM_FIRST_SKIPPED_DAY, REFORM_FIRST_SKIPPED_DAY + REFORM_SKIPPED_DAYS)
        days = [d for d in days if d not in skipped]
    return days


def elapsed_days(month: int, year: int) -> int:
    """Days actually elapsed in *month* of *year* (19 for September 1752)."""
    return len(days_of_month(month, year))
