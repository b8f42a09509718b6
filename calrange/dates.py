"""Date utilities for calrange.

Pure functions for parsing and formatting dates as text.
"""

import re

from calrange.domain.calendars import ISO, new_date
from calrange.domain.errors import InvalidDateError
from calrange.domain.models import Calendar, Date

_DATE_PATTERN = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2})$")


def parse_date(text: str, calendar: Calendar = ISO) -> Date:
    """Parse a date in [-]YYYY-MM-DD format.

    Args:
        text: Date text, e.g. "2025-01-31" or "-0044-03-15".
        calendar: Calendar the fields belong to.

    Returns:
        Validated Date in the given calendar.

    Raises:
        InvalidDateError: If the text is malformed or the date does not exist.
    """
    match = _DATE_PATTERN.match(text.strip())
    if not match:
        raise InvalidDateError(f"Invalid date format: {text!r} (expected YYYY-MM-DD)")
    year, month, day = (int(group) for group in match.groups())
    return new_date(year, month, day, calendar)


def format_date(date: Date, with_calendar: bool = False) -> str:
    """Format a date as [-]YYYY-MM-DD.

    Args:
        date: Date to format.
        with_calendar: Append the calendar name, e.g. "1582-10-05 (julian)".

    Returns:
        Formatted date string.
    """
    text = str(date)
    if with_calendar:
        return f"{text} ({date.calendar.name})"
    return text
