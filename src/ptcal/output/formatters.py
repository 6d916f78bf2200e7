"""Plain-text/JSON output helpers.

The CLI renders ServiceResult for humans (the calendar page itself, or
the bare diagnostic line) or machines (--json). The formatter layer
adapts ServiceResult to the requested output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from ptcal.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Presentation flags relevant to formatting."""

    model_config = {"frozen": True}

    json_output: bool = False
    highlight_today: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Human mode returns the page lines on success and the diagnostic line
    alone on failure, so nothing but the message reaches stderr.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        if settings.highlight_today and result.data.get("today"):
            from ptcal.output.console import render_highlighted

            return render_highlighted(result.data["lines"], result.data["today"])
        return "\n".join(result.data.get("lines", []))
    return result.error.message if result.error else f"{result.op}: unknown error"
