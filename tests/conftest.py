"""Shared pytest fixtures and test helpers for ptcal tests."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from ptcal.services.calendar import CalendarService
from ptcal.services.clock import FixedClock

# The month used by the zero-argument tests.
FIXED_TODAY = datetime.date(2024, 5, 15)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_clock() -> FixedClock:
    """A clock frozen on 15 May 2024."""
    return FixedClock(FIXED_TODAY)


@pytest.fixture
def service(fixed_clock: FixedClock) -> CalendarService:
    """CalendarService wired to the fixed clock."""
    return CalendarService(fixed_clock)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI reconfigures logging on every invocation.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    cal = logging.getLogger("ptcal")
    cal_level = cal.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    cal.setLevel(cal_level)
