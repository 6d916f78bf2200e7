"""Weekday of 1 January and of the first of any month.

The weekday of 1 January is accumulated year by year from a fixed
anchor: 1 January 1753, the first full Gregorian year, fell on a Monday.
Years after the anchor add their length, years before subtract it.
1752 lost eleven days to the reform, so it counts as 355 days; this keeps
Gregorian dates real-world correct and Julian dates consistent with the
historical calendar.
"""

from __future__ import annotations

from ptcal.domain.leap import days_in_year
from ptcal.domain.months import elapsed_days
from ptcal.domain.types import REFORM_SKIPPED_DAYS, REFORM_YEAR, Weekday

ANCHOR_YEAR = REFORM_YEAR + 1
ANCHOR_WEEKDAY = Weekday.MONDAY


def year_length(year: int) -> int:
    """Days that actually elapsed in *year*."""
    if year == REFORM_YEAR:
        return days_in_year(year) - REFORM_SKIPPED_DAYS
    return days_in_year(year)


def weekday_of_jan1(year: int) -> Weekday:
    """Weekday index of 1 January of *year* (0 = Sunday)."""
    weekday = int(ANCHOR_WEEKDAY)
    if year >= ANCHOR_YEAR:
        for y in range(ANCHOR_YEAR, year):
            weekday = (weekday + year_length(y) % 7) % 7
    else:
        for y in range(year, ANCHOR_YEAR):
            weekday = (weekday - year_length(y) % 7) % 7
    return Weekday(weekday)


def weekday_of_first(month: int, year: int) -> Weekday:
    """Weekday index of the first day of *month* in *year*."""
    weekday = int(weekday_of_jan1(year))
    for m in range(1, month):
        weekday = (weekday + elapsed_days(m, year)) % 7
    return Weekday(weekday)
