"""Inclusive ranges between two dates of the same calendar.

Pure functions and an immutable value type:
- Endpoints keep both their fields and their precomputed day counts
- Membership and size are O(1)
- Iteration is lazy and never consumes the range
"""

import logging
from dataclasses import dataclass

from calrange.domain.calendars import to_rata_die
from calrange.domain.errors import CalendarMismatchError
from calrange.domain.models import Date, RataDie
from calrange.domain.traversal import Cursor, Traversal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateRange:
    """Immutable inclusive range of dates.

    ``first`` and ``last`` are public. The rata die fields are precomputed by
    ``date_range`` and must match the endpoints exactly.
    """

    first: Date
    last: Date
    first_rata_die: RataDie
    last_rata_die: RataDie

    @property
    def ascending(self) -> bool:
        return self.first_rata_die <= self.last_rata_die

    def cursor(self) -> Cursor:
        """Fresh cursor positioned on ``first``."""
        return Cursor(self.first_rata_die, self.last_rata_die, self.ascending, self.first.calendar)

    def __contains__(self, candidate: object) -> bool:
        return contains(self, candidate)

    def __len__(self) -> int:
        return count(self)

    def __iter__(self) -> Traversal:
        return iterate(self)

    def __repr__(self) -> str:
        return f"DateRange<{self.first}, {self.last}>"

    def __str__(self) -> str:
        return f"{self.first}..{self.last}"


def date_range(first: Date, last: Date) -> DateRange:
    """Build a range from two dates of the same calendar.

    Args:
        first: First endpoint (inclusive).
        last: Last endpoint (inclusive). May be earlier than ``first``.

    Returns:
        DateRange with both day counts computed once.

    Raises:
        CalendarMismatchError: If the endpoints use different calendars.
    """
    if first.calendar != last.calendar:
        raise CalendarMismatchError(
            f"Both dates must have matching calendars, got {first.calendar.name} and {last.calendar.name}"
        )
    result = DateRange(first, last, to_rata_die(first), to_rata_die(last))
    logger.debug("Built range %r spanning %d days", result, count(result))
    return result


def contains(date_range: DateRange, candidate: object) -> bool:
    """Check whether a date lies inside the range.

    Dates of another calendar (and non-dates) are never members. Comparison
    uses field triples, which order the same way as day counts within one
    calendar.
    """
    if not isinstance(candidate, Date) or candidate.calendar != date_range.first.calendar:
        return False
    first = date_range.first.triple
    last = date_range.last.triple
    if date_range.ascending:
        return first <= candidate.triple <= last
    return last <= candidate.triple <= first


def count(date_range: DateRange) -> int:
    """Number of dates in the range, always at least 1."""
    return abs(date_range.first_rata_die - date_range.last_rata_die) + 1


def iterate(date_range: DateRange) -> Traversal:
    """Lazily produce the dates from ``first`` to ``last``."""
    return Traversal(date_range.cursor())
