"""Exceptions raised by the calrange functional core."""


class CalendarMismatchError(ValueError):
    """Raised when a range is built from dates of different calendars."""


class InvalidDateError(ValueError):
    """Raised when a year/month/day triple does not exist in its calendar."""
