"""Tests for calrange.domain.ranges pure functions."""

import pytest

from calrange.domain.calendars import ISO, JULIAN, from_rata_die, new_date
from calrange.domain.errors import CalendarMismatchError
from calrange.domain.models import Date
from calrange.domain.ranges import DateRange, contains, count, date_range, iterate


def day_range(first: int, last: int) -> DateRange:
    """Build an ISO range from two day counts."""
    return date_range(from_rata_die(first, ISO), from_rata_die(last, ISO))


def day_counts(dates: DateRange) -> list[int]:
    return [ISO.date_to_rata_die(d.year, d.month, d.day) for d in dates]


class TestDateRangeConstruction:
    """Tests for date_range."""

    def test_precomputes_day_counts(self) -> None:
        """Should store both endpoints' day counts."""
        dates = date_range(new_date(1970, 1, 1), new_date(1970, 1, 10))

        assert dates.first_rata_die == 719528
        assert dates.last_rata_die == 719537
        assert dates.first == new_date(1970, 1, 1)
        assert dates.last == new_date(1970, 1, 10)

    def test_mismatched_calendars_raise(self) -> None:
        """Should refuse endpoints from different calendars."""
        with pytest.raises(CalendarMismatchError, match="matching calendars"):
            date_range(new_date(2025, 1, 1), new_date(2025, 1, 1, JULIAN))

    def test_direction(self) -> None:
        """Should be ascending unless first comes after last."""
        assert day_range(1, 5).ascending
        assert day_range(3, 3).ascending
        assert not day_range(5, 1).ascending

    def test_is_immutable(self) -> None:
        """Should not allow fields to change."""
        dates = day_range(1, 5)
        with pytest.raises(AttributeError):
            dates.first = from_rata_die(2, ISO)  # type: ignore[misc]

    def test_rendering(self) -> None:
        """Should render endpoints for diagnostics."""
        dates = date_range(new_date(2025, 1, 1), new_date(2025, 1, 31))

        assert repr(dates) == "DateRange<2025-01-01, 2025-01-31>"
        assert str(dates) == "2025-01-01..2025-01-31"


class TestCount:
    """Tests for count."""

    def test_ascending(self) -> None:
        """Should count both endpoints."""
        assert count(day_range(1, 5)) == 5
        assert len(day_range(1, 5)) == 5

    def test_descending(self) -> None:
        """Should count the same in either direction."""
        assert count(day_range(5, 1)) == 5

    def test_single_day(self) -> None:
        """Should count a one-day range as 1."""
        assert count(day_range(3, 3)) == 1

    def test_direction_independent(self) -> None:
        """Should give the same size with swapped endpoints."""
        for first, last in [(0, 365), (-100, 100), (719528, 700000)]:
            assert count(day_range(first, last)) == count(day_range(last, first))
            assert count(day_range(first, last)) == abs(first - last) + 1

    def test_across_leap_year(self) -> None:
        """Should count February 29th."""
        assert count(date_range(new_date(2024, 2, 1), new_date(2024, 3, 1))) == 30
        assert count(date_range(new_date(2025, 2, 1), new_date(2025, 3, 1))) == 29


class TestContains:
    """Tests for contains."""

    def test_endpoints_and_middle(self) -> None:
        """Should include both endpoints and everything between."""
        dates = day_range(1, 5)
        for days in range(1, 6):
            assert contains(dates, from_rata_die(days, ISO))

    def test_outside(self) -> None:
        """Should exclude days on either side."""
        dates = day_range(1, 5)

        assert not contains(dates, from_rata_die(0, ISO))
        assert not contains(dates, from_rata_die(6, ISO))

    def test_descending(self) -> None:
        """Should find a middle day in a range and its reverse."""
        middle = from_rata_die(3, ISO)

        assert contains(day_range(5, 1), middle)
        assert contains(day_range(1, 5), middle)
        assert middle in day_range(5, 1)
        assert from_rata_die(6, ISO) not in day_range(5, 1)

    def test_other_calendar_is_not_member(self) -> None:
        """Should answer False rather than raise for another calendar."""
        dates = date_range(new_date(2025, 1, 1), new_date(2025, 1, 31))

        assert not contains(dates, new_date(2025, 1, 15, JULIAN))

    def test_non_date_is_not_member(self) -> None:
        """Should answer False for values that are not dates."""
        dates = day_range(1, 5)

        assert "0000-01-03" not in dates
        assert 3 not in dates

    def test_compares_fields_across_month_boundary(self) -> None:
        """Should order by year, then month, then day."""
        dates = date_range(new_date(2024, 12, 30), new_date(2025, 1, 2))

        assert new_date(2024, 12, 31) in dates
        assert new_date(2025, 1, 1) in dates
        assert new_date(2025, 1, 3) not in dates
        assert new_date(2024, 1, 31) not in dates

    def test_same_calendar_new_instance(self) -> None:
        """Should accept dates built with an equal calendar object."""
        dates = day_range(1, 5)

        assert Date(0, 1, 3, ISO.__class__()) in dates


class TestIterate:
    """Tests for iterate."""

    def test_ascending(self) -> None:
        """Should yield days 1 to 5 in order."""
        assert day_counts(day_range(1, 5)) == [1, 2, 3, 4, 5]

    def test_descending(self) -> None:
        """Should yield days 5 down to 1."""
        assert day_counts(day_range(5, 1)) == [5, 4, 3, 2, 1]

    def test_single_day(self) -> None:
        """Should yield exactly one date."""
        assert day_counts(day_range(3, 3)) == [3]

    def test_restartable(self) -> None:
        """Should produce identical independent sequences each time."""
        dates = day_range(10, 20)
        first_pass = iterate(dates)
        second_pass = iterate(dates)

        assert next(first_pass) == next(second_pass)
        assert list(first_pass) == list(second_pass)
        assert list(dates) == list(dates)

    def test_dates_keep_calendar(self) -> None:
        """Should emit dates in the range's calendar."""
        dates = date_range(new_date(1900, 2, 28, JULIAN), new_date(1900, 3, 1, JULIAN))

        assert [str(d) for d in dates] == ["1900-02-28", "1900-02-29", "1900-03-01"]
        assert all(d.calendar is JULIAN for d in dates)

    def test_crosses_year_boundary(self) -> None:
        """Should walk from December into January."""
        dates = date_range(new_date(2025, 1, 2), new_date(2024, 12, 30))

        assert [str(d) for d in dates] == ["2025-01-02", "2025-01-01", "2024-12-31", "2024-12-30"]

    def test_length_hint(self) -> None:
        """Should report the remaining size without materializing."""
        traversal = iterate(day_range(1, 1000))
        next(traversal)

        assert traversal.__length_hint__() == 999
