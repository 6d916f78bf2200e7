"""Leap-year rule with a Julian/Gregorian switch at 1752.

INVARIANT: years up to and including 1752 follow the Julian rule
(every fourth year); later years follow the Gregorian rule.
"""

from __future__ import annotations

from ptcal.domain.types import REFORM_YEAR


def is_leap(year: int) -> bool:
    """Return True if *year* has a 29 February."""
    if year <= REFORM_YEAR:
        return year % 4 == 0
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Nominal length of *year* (365 or 366), ignoring the 1752 reform gap."""
    return 366 if is_leap(year) else 365
