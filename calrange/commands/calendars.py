"""Calendar commands for listing calendars and converting dates."""

from rich.console import Console
from rich.table import Table

from calrange.commands.ranges import parse_date_or_exit, resolve_calendar
from calrange.dates import format_date
from calrange.domain.calendars import available_calendars, convert_date, from_rata_die, get_calendar, to_rata_die

console = Console()

UNIX_EPOCH_RATA_DIE = 719528


def calendars_command() -> None:
    """List registered calendars."""
    table = Table(title="Calendars")
    table.add_column("Name", style="cyan")
    table.add_column("Implementation", style="dim")
    table.add_column("1970-01-01 (iso)", justify="right")

    for name in available_calendars():
        calendar = get_calendar(name)
        epoch = from_rata_die(UNIX_EPOCH_RATA_DIE, calendar)
        table.add_row(name, type(calendar).__name__, format_date(epoch))

    console.print(table)


def convert_command(date_text: str, from_name: str, to_name: str) -> None:
    """Convert a date between calendars through its day count."""
    source = resolve_calendar(from_name)
    target = resolve_calendar(to_name)
    day = parse_date_or_exit(date_text, source)

    converted = convert_date(day, target)
    console.print(
        f"{format_date(day, with_calendar=True)} → [green]{format_date(converted, with_calendar=True)}[/green]"
    )
    console.print(f"[dim]Day count: {to_rata_die(day)}[/dim]")
