"""Range commands: list, count and membership checks."""

import logging
import sys

from rich.console import Console
from rich.table import Table

from calrange.config import Settings, load_settings
from calrange.dates import format_date, parse_date
from calrange.domain.calendars import get_calendar, to_rata_die
from calrange.domain.errors import CalendarMismatchError, InvalidDateError
from calrange.domain.models import Calendar, Date
from calrange.domain.ranges import DateRange, date_range

console = Console()
logger = logging.getLogger(__name__)


def load_settings_or_exit() -> Settings:
    """Load settings, exiting with a message if the config file is broken."""
    try:
        return load_settings()
    except ValueError as e:
        console.print(f"[red]Config error: {e}[/red]", style="bold")
        sys.exit(1)


def resolve_calendar(name: str) -> Calendar:
    """Look up a calendar by name, exiting with a message if unknown."""
    try:
        return get_calendar(name)
    except KeyError as e:
        console.print(f"[red]{e.args[0]}[/red]", style="bold")
        sys.exit(1)


def parse_date_or_exit(text: str, calendar: Calendar) -> Date:
    """Parse a date argument, exiting with a message if invalid."""
    try:
        return parse_date(text, calendar)
    except InvalidDateError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)


def build_range(first: str, last: str, calendar: Calendar) -> DateRange:
    """Parse both endpoints in one calendar and build the range."""
    try:
        return date_range(parse_date_or_exit(first, calendar), parse_date_or_exit(last, calendar))
    except CalendarMismatchError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)


def list_command(
    first: str,
    last: str,
    calendar_name: str | None = None,
    limit: int | None = None,
    all: bool = False,
) -> None:
    """List the dates of a range, stopping after the limit."""
    settings = load_settings_or_exit()
    calendar = resolve_calendar(calendar_name or settings.calendar)
    dates = build_range(first, last, calendar)

    actual_limit = None if all else (limit or settings.limit)
    total = len(dates)
    direction = "ascending" if dates.ascending else "descending"

    table = Table(title=f"{dates} ({calendar.name}, {direction})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Day count", justify="right")

    traversal = iter(dates)
    shown = 0
    for index, day in enumerate(traversal, start=1):
        table.add_row(str(index), format_date(day), str(to_rata_die(day)))
        shown = index
        if actual_limit is not None and index >= actual_limit and traversal.has_next():
            traversal.halt()

    logger.debug("Listed %d of %d dates, traversal %s", shown, total, traversal.state.value)
    console.print(table)
    if shown < total:
        console.print(f"[dim]Showing {shown} of {total} dates (use --all to show everything)[/dim]")


def count_command(first: str, last: str, calendar_name: str | None = None) -> None:
    """Print the number of dates in a range."""
    settings = load_settings_or_exit()
    calendar = resolve_calendar(calendar_name or settings.calendar)
    dates = build_range(first, last, calendar)

    total = len(dates)
    noun = "date" if total == 1 else "dates"
    console.print(f"[cyan]{dates}[/cyan] contains [bold]{total}[/bold] {noun}")


def contains_command(
    first: str,
    last: str,
    candidate: str,
    calendar_name: str | None = None,
    date_calendar_name: str | None = None,
) -> None:
    """Report whether a date lies inside a range."""
    settings = load_settings_or_exit()
    calendar = resolve_calendar(calendar_name or settings.calendar)
    dates = build_range(first, last, calendar)

    candidate_calendar = resolve_calendar(date_calendar_name) if date_calendar_name else calendar
    day = parse_date_or_exit(candidate, candidate_calendar)
    label = format_date(day, with_calendar=candidate_calendar != calendar)

    if day in dates:
        console.print(f"[green]✓[/green] {label} is in {dates}")
    else:
        console.print(f"[yellow]✗[/yellow] {label} is not in {dates}")
