"""Calendar enums and value ranges."""

from __future__ import annotations

from enum import IntEnum, StrEnum

MIN_YEAR = 1
MAX_YEAR = 9999
MIN_MONTH = 1
MAX_MONTH = 12

# Last year of the Julian leap rule; the reform dropped 3-13 September.
REFORM_YEAR = 1752
REFORM_MONTH = 9
REFORM_FIRST_SKIPPED_DAY = 3
REFORM_SKIPPED_DAYS = 11


class Weekday(IntEnum):
    """Weekday index, Sunday first."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class RenderMode(StrEnum):
    """Which page(s) a single invocation prints."""

    MONTH = "month"
    YEAR = "year"
    CURRENT = "current"


class ErrorKind(StrEnum):
    """Argument failures reported to the user."""

    INVALID_MONTH = "INVALID_MONTH"
    INVALID_YEAR = "INVALID_YEAR"
    USAGE = "USAGE"


def is_valid_year(year: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR


def is_valid_month(month: int) -> bool:
    return MIN_MONTH <= month <= MAX_MONTH
