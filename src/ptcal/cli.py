"""Root ``cal`` command: ``cal``, ``cal <ano>``, or ``cal <mes> <ano>``."""

from __future__ import annotations

import click

from ptcal import __version__
from ptcal.config.settings import CalSettings
from ptcal.context import AppContext

EXAMPLES = """\
\b
Examples:
  cal              Current month
  cal 2024         Every month of 2024
  cal 1 2024       January 2024
  cal 9 1752       The month of the calendar reform
"""


@click.command(
    context_settings={"ignore_unknown_options": True},
    epilog=EXAMPLES,
)
@click.version_option(version=__version__, prog_name="cal")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--highlight", "highlight_today", is_flag=True, help="Highlight today in the current month."
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED, metavar="[[MES] ANO]")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    highlight_today: bool,
    args: tuple[str, ...],
) -> None:
    """Display a calendar for [[MES] ANO], defaulting to the current month.

    \b
    Years run from 1 to 9999. Up to 1752 the Julian leap rule applies;
    September 1752 drops the 3rd to the 13th.
    """
    settings = CalSettings.from_cli(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        highlight_today=highlight_today,
    )
    ctx.ensure_object(dict)
    app = AppContext(settings, clock=ctx.obj.get("clock"))
    app.emit(app.service.run(list(args)))


def main() -> None:
    cli(prog_name="cal")
