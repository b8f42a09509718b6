"""Calendar systems mapped onto the shared linear day axis.

This module contains the functional core for calendar arithmetic:
- Pure conversions between year/month/day and rata die day counts
- No I/O operations
- Every calendar shares one axis, so day counts compare across calendars

Day 0 of the axis is 0000-01-01 in the proleptic Gregorian calendar.
Years use astronomical numbering: 1 BC is year 0, 2 BC is year -1.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

from calrange.domain.errors import InvalidDateError
from calrange.domain.models import Calendar, Date, DateTriple, RataDie

logger = logging.getLogger(__name__)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Offsets from the March-based era arithmetic to day 0 of the axis
_GREGORIAN_EPOCH_OFFSET = 60
_JULIAN_EPOCH_OFFSET = 58

_DAYS_PER_400_YEARS = 146097
_DAYS_PER_4_YEARS = 1461


def _day_of_march_year(month: int, day: int) -> int:
    """Day index within a year that starts on March 1st."""
    shifted_month = month - 3 if month > 2 else month + 9
    return (153 * shifted_month + 2) // 5 + day - 1


def _month_day_from_march_year(day_of_year: int) -> tuple[int, int]:
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    return month, day


@dataclass(frozen=True)
class ISOCalendar:
    """Proleptic Gregorian calendar as used by ISO 8601."""

    name: ClassVar[str] = "iso"

    def leap_year(self, year: int) -> bool:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def days_in_month(self, year: int, month: int) -> int:
        if month == 2 and self.leap_year(year):
            return 29
        return _DAYS_IN_MONTH[month - 1]

    def valid_date(self, year: int, month: int, day: int) -> bool:
        return 1 <= month <= 12 and 1 <= day <= self.days_in_month(year, month)

    def date_to_rata_die(self, year: int, month: int, day: int) -> RataDie:
        """Convert a Gregorian date to its day count.

        Args:
            year: Astronomical year.
            month: Month (1-12).
            day: Day of month.

        Returns:
            Days since 0000-01-01.
        """
        march_year = year - 1 if month <= 2 else year
        era = march_year // 400
        year_of_era = march_year - era * 400
        day_of_era = (
            year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + _day_of_march_year(month, day)
        )
        return RataDie(era * _DAYS_PER_400_YEARS + day_of_era + _GREGORIAN_EPOCH_OFFSET)

    def date_from_rata_die(self, days: int) -> DateTriple:
        """Convert a day count back to a Gregorian (year, month, day)."""
        shifted = days - _GREGORIAN_EPOCH_OFFSET
        era = shifted // _DAYS_PER_400_YEARS
        day_of_era = shifted - era * _DAYS_PER_400_YEARS
        year_of_era = (
            day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // (_DAYS_PER_400_YEARS - 1)
        ) // 365
        day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
        month, day = _month_day_from_march_year(day_of_year)
        year = year_of_era + era * 400 + (1 if month <= 2 else 0)
        return (year, month, day)


@dataclass(frozen=True)
class JulianCalendar:
    """Proleptic Julian calendar (leap year every fourth year)."""

    name: ClassVar[str] = "julian"

    def leap_year(self, year: int) -> bool:
        return year % 4 == 0

    def days_in_month(self, year: int, month: int) -> int:
        if month == 2 and self.leap_year(year):
            return 29
        return _DAYS_IN_MONTH[month - 1]

    def valid_date(self, year: int, month: int, day: int) -> bool:
        return 1 <= month <= 12 and 1 <= day <= self.days_in_month(year, month)

    def date_to_rata_die(self, year: int, month: int, day: int) -> RataDie:
        march_year = year - 1 if month <= 2 else year
        cycle = march_year // 4
        year_of_cycle = march_year - cycle * 4
        day_of_cycle = year_of_cycle * 365 + _day_of_march_year(month, day)
        return RataDie(cycle * _DAYS_PER_4_YEARS + day_of_cycle + _JULIAN_EPOCH_OFFSET)

    def date_from_rata_die(self, days: int) -> DateTriple:
        shifted = days - _JULIAN_EPOCH_OFFSET
        cycle = shifted // _DAYS_PER_4_YEARS
        day_of_cycle = shifted - cycle * _DAYS_PER_4_YEARS
        # The leap day is the last day of a cycle
        year_of_cycle = (day_of_cycle - day_of_cycle // (_DAYS_PER_4_YEARS - 1)) // 365
        day_of_year = day_of_cycle - 365 * year_of_cycle
        month, day = _month_day_from_march_year(day_of_year)
        year = year_of_cycle + cycle * 4 + (1 if month <= 2 else 0)
        return (year, month, day)


ISO = ISOCalendar()
JULIAN = JulianCalendar()

_REGISTRY: dict[str, Calendar] = {}


def register_calendar(calendar: Calendar) -> None:
    """Make a calendar available by name.

    Args:
        calendar: Calendar implementation. Its ``name`` is the lookup key.

    Raises:
        TypeError: If the object does not implement the Calendar protocol.
    """
    if not isinstance(calendar, Calendar):
        raise TypeError(f"{calendar!r} does not implement the Calendar protocol")
    key = calendar.name.lower()
    if key in _REGISTRY:
        logger.debug("Replacing registered calendar %s", key)
    _REGISTRY[key] = calendar


def get_calendar(name: str) -> Calendar:
    """Look up a registered calendar by name (case-insensitive).

    Raises:
        KeyError: If no calendar is registered under that name.
    """
    try:
        return _REGISTRY[name.lower()]
    except KeyError:
        known = ", ".join(available_calendars())
        raise KeyError(f"Unknown calendar '{name}' (known: {known})") from None


def available_calendars() -> list[str]:
    return sorted(_REGISTRY)


def new_date(year: int, month: int, day: int, calendar: Calendar = ISO) -> Date:
    """Build a validated date.

    Raises:
        InvalidDateError: If the date does not exist in the calendar.
    """
    if not calendar.valid_date(year, month, day):
        raise InvalidDateError(f"Invalid {calendar.name} date: {year}-{month:02d}-{day:02d}")
    return Date(year, month, day, calendar)


def to_rata_die(date: Date) -> RataDie:
    return date.calendar.date_to_rata_die(date.year, date.month, date.day)


def from_rata_die(days: int, calendar: Calendar) -> Date:
    """Build the date of a day count in the given calendar."""
    year, month, day = calendar.date_from_rata_die(days)
    return Date(year, month, day, calendar)


def convert_date(date: Date, calendar: Calendar) -> Date:
    """Express the same day in another calendar."""
    if date.calendar == calendar:
        return date
    return from_rata_die(to_rata_die(date), calendar)


register_calendar(ISO)
register_calendar(JULIAN)
