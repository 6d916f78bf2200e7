"""CalendarService — the argument-mode router.

Dispatch by positional argument count:

* ``[]`` — current month, from the injected :class:`Clock`.
* ``[year]`` — the whole year.
* ``[month, year]`` — a single month. The month is validated strictly
  before the year, so ``["a", "a"]`` reports the month.
* anything longer — usage error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from ptcal.domain.months import month_name
from ptcal.domain.render import render_month, render_year
from ptcal.domain.types import ErrorKind, RenderMode, is_valid_month, is_valid_year
from ptcal.services.clock import Clock, SystemClock
from ptcal.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

PROG_NAME = "Cal"
USAGE = "cal [[mes] ano]"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(token: str) -> int | None:
    """Parse an optionally signed run of ASCII digits; None if it is not one."""
    if not _INTEGER_RE.fullmatch(token):
        return None
    try:
        return int(token)
    except ValueError:
        # Beyond the interpreter's integer string conversion limit.
        return None


def _invalid(kind: ErrorKind, token: str, label: str, op: str) -> ServiceResult:
    logger.debug("Rejected %s argument %r", label, token)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=kind.value,
            message=f"{PROG_NAME}: {token}: {label} invalido.",
            detail={"token": token},
        ),
    )


def invalid_month(token: str, op: str = "render_month") -> ServiceResult:
    return _invalid(ErrorKind.INVALID_MONTH, token, "mes", op)


def invalid_year(token: str, op: str = "render_month") -> ServiceResult:
    return _invalid(ErrorKind.INVALID_YEAR, token, "ano", op)


class CalendarService:
    """Turn a positional argument list into rendered calendar lines.

    The service never touches stdout/stderr; callers consume
    ``result.data["lines"]`` or ``result.error.message``.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or SystemClock()

    def run(self, args: Sequence[str]) -> ServiceResult:
        """Dispatch on argument count."""
        if len(args) == 0:
            return self.current_month()
        if len(args) == 1:
            return self.year(args[0])
        if len(args) == 2:
            return self.month(args[0], args[1])
        logger.debug("Too many arguments: %d", len(args))
        return ServiceResult(
            ok=False,
            op="usage",
            error=ServiceError(
                code=ErrorKind.USAGE.value,
                message=f"{PROG_NAME}: uso: {USAGE}",
                detail={"args": list(args)},
            ),
        )

    def current_month(self) -> ServiceResult:
        today = self._clock.today()
        logger.debug("Rendering current month %d/%d", today.month, today.year)
        return self._month_result(
            RenderMode.CURRENT,
            today.month,
            today.year,
            op="render_current",
            today=today.day,
        )

    def year(self, year_token: str) -> ServiceResult:
        year = parse_int(year_token)
        if year is None or not is_valid_year(year):
            return invalid_year(year_token, op="render_year")
        logger.debug("Rendering year %d", year)
        return ServiceResult(
            ok=True,
            op="render_year",
            data={
                "mode": RenderMode.YEAR.value,
                "lines": render_year(year),
                "months": [_month_info(m, year) for m in range(1, 13)],
            },
        )

    def month(self, month_token: str, year_token: str) -> ServiceResult:
        month = parse_int(month_token)
        if month is None or not is_valid_month(month):
            return invalid_month(month_token)
        year = parse_int(year_token)
        if year is None or not is_valid_year(year):
            return invalid_year(year_token)
        logger.debug("Rendering month %d/%d", month, year)
        return self._month_result(RenderMode.MONTH, month, year, op="render_month")

    def _month_result(
        self,
        mode: RenderMode,
        month: int,
        year: int,
        *,
        op: str,
        today: int | None = None,
    ) -> ServiceResult:
        data = {
            "mode": mode.value,
            "lines": render_month(month, year),
            "months": [_month_info(month, year)],
        }
        if today is not None:
            data["today"] = today
        return ServiceResult(ok=True, op=op, data=data)


def _month_info(month: int, year: int) -> dict[str, int | str]:
    return {"month": month, "year": year, "name": month_name(month)}
