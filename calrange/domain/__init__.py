"""Domain models and the functional core for calrange.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Calendars, date ranges and their traversal
"""

from calrange.domain.calendars import (
    ISO,
    JULIAN,
    ISOCalendar,
    JulianCalendar,
    available_calendars,
    convert_date,
    from_rata_die,
    get_calendar,
    new_date,
    register_calendar,
    to_rata_die,
)
from calrange.domain.errors import CalendarMismatchError, InvalidDateError
from calrange.domain.models import Calendar, Date, DateTriple, RataDie
from calrange.domain.ranges import DateRange, contains, count, date_range, iterate
from calrange.domain.traversal import (
    Continuation,
    Cursor,
    Directive,
    Done,
    Halted,
    Suspended,
    Traversal,
    TraversalState,
    reduce_range,
)

__all__ = [
    # Models
    "Calendar",
    "Date",
    "DateTriple",
    "RataDie",
    # Errors
    "CalendarMismatchError",
    "InvalidDateError",
    # Calendars
    "ISO",
    "JULIAN",
    "ISOCalendar",
    "JulianCalendar",
    "available_calendars",
    "convert_date",
    "from_rata_die",
    "get_calendar",
    "new_date",
    "register_calendar",
    "to_rata_die",
    # Ranges
    "DateRange",
    "contains",
    "count",
    "date_range",
    "iterate",
    # Traversal
    "Continuation",
    "Cursor",
    "Directive",
    "Done",
    "Halted",
    "Suspended",
    "Traversal",
    "TraversalState",
    "reduce_range",
]
