"""
Tests for DateRange — boundary modes and set operations
"""

import pytest

from jalali import CalendarDate
from jalali.util import Bound, DateRange


def d(month: int, day: int, year: int = 1403) -> CalendarDate:
    return CalendarDate.of(year, month, day)


class TestBoundaryModes:
    """Length and membership per boundary mode"""

    @pytest.mark.parametrize(
        "factory, length",
        [
            (DateRange.closed, 10),
            (DateRange.half_open, 9),
            (DateRange.open_closed, 9),
            (DateRange.open, 8),
        ],
    )
    def test_lengths(self, factory, length: int) -> None:
        r = factory(d(1, 1), d(1, 10))
        assert r.length_in_days() == length
        assert len(r) == length
        assert len(list(r)) == length

    def test_contains_respects_bounds(self) -> None:
        r = DateRange.half_open(d(1, 1), d(1, 10))
        assert r.contains(d(1, 1))
        assert d(1, 9) in r
        assert d(1, 10) not in r
        assert "1403-01-05" not in r

        r = DateRange.open_closed(d(1, 1), d(1, 10))
        assert not r.contains(d(1, 1))
        assert r.contains(d(1, 10))

    def test_first_last(self) -> None:
        r = DateRange.open(d(1, 1), d(1, 10))
        assert r.first() == d(1, 2)
        assert r.last() == d(1, 9)

    def test_across_year_boundary(self) -> None:
        r = DateRange.closed(d(12, 28), d(1, 2, year=1404))
        assert len(r) == 5
        assert list(r)[3] == d(1, 1, year=1404)

    def test_start_after_end_rejected(self) -> None:
        with pytest.raises(ValueError, match="start must be <= end"):
            DateRange.closed(d(1, 2), d(1, 1))


class TestEmpty:
    def test_half_open_single_point_is_empty(self) -> None:
        r = DateRange.half_open(d(1, 1), d(1, 1))
        assert r.is_empty()
        assert r.first() is None and r.last() is None
        assert len(r) == 0
        assert list(r) == []

    def test_closed_single_point_has_one_day(self) -> None:
        r = DateRange.closed(d(1, 1), d(1, 1))
        assert not r.is_empty()
        assert list(r) == [d(1, 1)]

    def test_open_adjacent_days_is_empty(self) -> None:
        assert DateRange.open(d(1, 1), d(1, 2)).is_empty()


class TestSetOperations:
    def test_overlaps(self) -> None:
        a = DateRange.closed(d(1, 1), d(1, 10))
        assert a.overlaps(DateRange.closed(d(1, 10), d(1, 20)))
        assert not a.overlaps(DateRange.open_closed(d(1, 10), d(1, 20)))
        assert not a.overlaps(DateRange.half_open(d(1, 5), d(1, 5)))

    def test_intersection(self) -> None:
        a = DateRange.closed(d(1, 1), d(1, 10))
        b = DateRange.half_open(d(1, 5), d(1, 20))
        assert a.intersection(b) == DateRange.closed(d(1, 5), d(1, 10))

    def test_disjoint_intersection_is_empty(self) -> None:
        a = DateRange.closed(d(1, 1), d(1, 5))
        b = DateRange.closed(d(2, 1), d(2, 5))
        assert a.intersection(b).is_empty()

    def test_union_of_touching_ranges(self) -> None:
        a = DateRange.closed(d(1, 1), d(1, 5))
        b = DateRange.closed(d(1, 6), d(1, 10))
        assert a.union_if_contiguous(b) == DateRange.closed(d(1, 1), d(1, 10))
        assert b.union_if_contiguous(a) == DateRange.closed(d(1, 1), d(1, 10))

    def test_union_across_month_end(self) -> None:
        a = DateRange.half_open(d(6, 1), d(7, 1))
        b = DateRange.closed(d(7, 1), d(7, 15))
        assert a.union_if_contiguous(b) == DateRange.closed(d(6, 1), d(7, 15))

    def test_union_with_gap_is_none(self) -> None:
        a = DateRange.closed(d(1, 1), d(1, 5))
        b = DateRange.closed(d(1, 7), d(1, 10))
        assert a.union_if_contiguous(b) is None

    def test_union_with_empty_returns_other(self) -> None:
        a = DateRange.closed(d(1, 1), d(1, 5))
        empty = DateRange.half_open(d(3, 1), d(3, 1))
        assert a.union_if_contiguous(empty) is a
        assert empty.union_if_contiguous(a) is a


class TestValueSemantics:
    def test_str(self) -> None:
        assert str(DateRange.half_open(d(1, 1), d(1, 10))) == "[1403-01-01 .. 1403-01-10)"
        assert str(DateRange.open_closed(d(1, 1), d(1, 10))) == "(1403-01-01 .. 1403-01-10]"

    def test_to_dict(self) -> None:
        r = DateRange.open(d(1, 1), d(1, 10))
        assert r.to_dict() == {
            "start": {"year": 1403, "month": 1, "day": 1},
            "start_bound": "open",
            "end": {"year": 1403, "month": 1, "day": 10},
            "end_bound": "open",
        }

    def test_hashable_and_equal(self) -> None:
        a = DateRange.closed(d(1, 1), d(1, 10))
        b = DateRange(d(1, 1), Bound.CLOSED, d(1, 10), Bound.CLOSED)
        assert a == b
        assert len({a, b}) == 1
