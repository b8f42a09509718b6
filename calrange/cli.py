"""CLI entry point for calrange."""

import logging

import typer

from calrange.commands.admin import init_command
from calrange.commands.calendars import calendars_command, convert_command
from calrange.commands.ranges import contains_command, count_command, list_command, load_settings_or_exit
from calrange.config import DEFAULT_LOG_LEVEL
from calrange.logs import configure_logging

app = typer.Typer(
    name="calrange",
    help="Inclusive date ranges over pluggable calendars",
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Inclusive date ranges over pluggable calendars."""
    if verbose:
        level: int | str = logging.DEBUG
    elif ctx.invoked_subcommand == "init":
        # init rewrites the config, so a broken one must not block it
        level = DEFAULT_LOG_LEVEL
    else:
        level = load_settings_or_exit().log_level
    configure_logging(level=level, force=True)


@app.command(name="list")
def list_dates(
    first: str,
    last: str,
    calendar: str = typer.Option(None, "--calendar", "-c", help="Calendar of both dates (default: from config)"),
    limit: int = typer.Option(None, "--limit", "-n", min=1, help="Maximum dates to show (default: from config)"),
    all: bool = typer.Option(False, "--all", "-a", help="Show every date in the range"),
) -> None:
    """List the dates from FIRST to LAST, in either direction."""
    list_command(first, last, calendar, limit, all)


@app.command()
def count(
    first: str,
    last: str,
    calendar: str = typer.Option(None, "--calendar", "-c", help="Calendar of both dates (default: from config)"),
) -> None:
    """Count the dates from FIRST to LAST inclusive."""
    count_command(first, last, calendar)


@app.command()
def contains(
    first: str,
    last: str,
    date: str,
    calendar: str = typer.Option(None, "--calendar", "-c", help="Calendar of the range (default: from config)"),
    date_calendar: str = typer.Option(None, "--date-calendar", help="Calendar of DATE (default: range calendar)"),
) -> None:
    """Check whether DATE lies between FIRST and LAST."""
    contains_command(first, last, date, calendar, date_calendar)


@app.command()
def convert(
    date: str,
    from_calendar: str = typer.Option("iso", "--from", help="Calendar of DATE"),
    to_calendar: str = typer.Option("julian", "--to", help="Calendar to convert into"),
) -> None:
    """Convert DATE from one calendar to another."""
    convert_command(date, from_calendar, to_calendar)


@app.command()
def calendars() -> None:
    """List the available calendars."""
    calendars_command()


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize calrange configuration."""
    init_command(force)


if __name__ == "__main__":
    app()
