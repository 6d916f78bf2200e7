"""ptcal — the classic ``cal`` calendar, with Portuguese month and weekday names."""

__version__ = "0.1.0"
