"""Working Days CLI."""

import logging
import sys

import click

from . import __version__
from .adapters.clock import SystemClock
from .config import DEFAULTS
from .core.days import enumerate_days
from .core.errors import ArgumentError
from .core.formatting import render_lines
from .core.params import resolve_parameters, usage
from .ports.clock import Clock

logger = logging.getLogger(__name__)


class UsageCommand(click.Command):
    """Command whose usage line lists every accepted token.

    Click errors raised before a context is attached (such as an option
    missing its value) get the context here, so they show the usage too.
    """

    def format_usage(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        formatter.write(f"{usage(DEFAULTS.min_year)}\n")

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            if e.ctx is None:
                e.ctx = ctx
            raise


@click.command(cls=UsageCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--year", "-y", default=None, metavar="YEAR",
              help=f"Year, {DEFAULTS.min_year} or later (default: current year)")
@click.option("--month", "-m", default=None, metavar="MONTH",
              help="English month name or CURRENT, any case (default: CURRENT)")
@click.option("--format-mode", "-f", default=None, metavar="RO_AGENDA|EN_AGENDA|YYYY",
              help=f"Output style (default: {DEFAULTS.format_mode.name})")
@click.option("--working-day-mode", "-w", default=None, metavar="WORKING_DAYS|ALL_DAYS",
              help=f"Skip weekends or not (default: {DEFAULTS.working_day_mode.name})")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__)
@click.pass_context
def main(
    ctx: click.Context,
    year: str | None,
    month: str | None,
    format_mode: str | None,
    working_day_mode: str | None,
    debug: bool,
):
    """Print the days of a month, one per line."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    clock: Clock = ctx.obj or SystemClock()
    today = clock.today()

    try:
        params = resolve_parameters(
            year,
            month,
            format_mode,
            working_day_mode,
            today,
            min_year=DEFAULTS.min_year,
            default_format_mode=DEFAULTS.format_mode,
            default_working_day_mode=DEFAULTS.working_day_mode,
        )
    except ArgumentError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo(usage(DEFAULTS.min_year), err=True)
        sys.exit(1)

    logger.debug(f"Resolved {params} (today is {today})")

    days = enumerate_days(params.year, params.month, params.working_day_mode)
    for line in render_lines(days, params.format_mode):
        click.echo(line)

    logger.debug(f"Wrote {len(days)} dates for {params.month.name} {params.year}")
