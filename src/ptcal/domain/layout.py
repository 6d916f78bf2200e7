"""MonthLayout — one month's calendar page as a grid of cells.

All models use Pydantic with frozen config for immutability.

INVARIANT: ``cells`` always holds complete weeks (a multiple of 7), the
first day sits at the column of the month's first weekday, and day
numbers are strictly increasing.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ptcal.domain.months import WEEKDAY_ABBREVIATIONS, days_of_month, month_name
from ptcal.domain.weekday import weekday_of_first

DAYS_PER_WEEK = 7
WEEKDAY_HEADER = " ".join(WEEKDAY_ABBREVIATIONS)
BLANK_CELL = "  "


class MonthLayout(BaseModel):
    """Derived, non-persisted layout of a single month."""

    model_config = {"frozen": True}

    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1, le=9999)
    name: str
    first_weekday: int = Field(ge=0, le=6)
    days: tuple[int, ...]

    @classmethod
    def build(cls, month: int, year: int) -> MonthLayout:
        """Compute the layout of *month*/*year* (inputs must be validated)."""
        return cls(
            month=month,
            year=year,
            name=month_name(month),
            first_weekday=int(weekday_of_first(month, year)),
            days=tuple(days_of_month(month, year)),
        )

    @property
    def title(self) -> str:
        return f"{self.name} {self.year}"

    @property
    def cells(self) -> list[int | None]:
        """Leading blanks, the days, then trailing blanks up to a full week."""
        cells: list[int | None] = [None] * self.first_weekday
        cells.extend(self.days)
        remainder = len(cells) % DAYS_PER_WEEK
        if remainder:
            cells.extend([None] * (DAYS_PER_WEEK - remainder))
        return cells

    @property
    def weeks(self) -> list[list[int | None]]:
        cells = self.cells
        return [cells[i : i + DAYS_PER_WEEK] for i in range(0, len(cells), DAYS_PER_WEEK)]
