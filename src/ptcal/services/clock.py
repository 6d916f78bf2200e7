"""Current-date providers for the zero-argument mode."""

from __future__ import annotations

import datetime
from typing import Protocol


class Clock(Protocol):
    """Anything that can say what day it is."""

    def today(self) -> datetime.date: ...


class SystemClock:
    """Wall-clock date in the local timezone."""

    def today(self) -> datetime.date:
        return datetime.date.today()


class FixedClock:
    """Always returns the same date; used by tests and reproducible runs."""

    def __init__(self, date: datetime.date) -> None:
        self._date = date

    def today(self) -> datetime.date:
        return self._date
