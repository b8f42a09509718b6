"""Domain type definitions for calrange.

These types provide semantic clarity and help with type checking:
- RataDie: Signed count of days on the shared linear day axis
- DateTriple: (year, month, day) with astronomical year numbering
"""

from dataclasses import dataclass
from typing import NewType, Protocol, runtime_checkable

# Day 0 is 0000-01-01 in the proleptic Gregorian calendar
RataDie = NewType("RataDie", int)

DateTriple = tuple[int, int, int]


@runtime_checkable
class Calendar(Protocol):
    """A calendar system that can be mapped onto the linear day axis.

    Both conversions must be pure and mutually inverse for every day
    reachable by a range.
    """

    name: str

    def date_to_rata_die(self, year: int, month: int, day: int) -> RataDie: ...

    def date_from_rata_die(self, days: int) -> DateTriple: ...

    def days_in_month(self, year: int, month: int) -> int: ...

    def valid_date(self, year: int, month: int, day: int) -> bool: ...


@dataclass(frozen=True)
class Date:
    """Immutable calendar date.

    Instances are trusted as given; use ``calrange.domain.calendars.new_date``
    to build a validated one.
    """

    year: int
    month: int
    day: int
    calendar: Calendar

    @property
    def triple(self) -> DateTriple:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"
