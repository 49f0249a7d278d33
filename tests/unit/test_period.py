"""
Tests for Period — years / months / days differences
"""

import pytest
from pydantic import ValidationError

from jalali import CalendarDate
from jalali.util import Period


class TestBetween:
    """Period.between normalization"""

    def test_borrows_preceding_month_length(self) -> None:
        start = CalendarDate.of(1400, 1, 10)
        end = CalendarDate.of(1403, 3, 5)
        p = Period.between(start, end)
        assert p == Period.of(3, 1, 26)
        assert p.add_to(start) == end
        assert p.subtract_from(end) == start

    def test_across_new_year(self) -> None:
        assert Period.between(CalendarDate.of(1402, 12, 29), CalendarDate.of(1403, 1, 1)) == Period.of(days=1)

    def test_month_borrow_into_year(self) -> None:
        p = Period.between(CalendarDate.of(1402, 11, 1), CalendarDate.of(1403, 2, 1))
        assert p == Period.of(0, 3, 0)

    def test_same_date_is_zero(self) -> None:
        d = CalendarDate.of(1403, 5, 5)
        assert Period.between(d, d).is_zero()

    def test_reversed_is_negated(self) -> None:
        start = CalendarDate.of(1400, 1, 10)
        end = CalendarDate.of(1403, 3, 5)
        p = Period.between(end, start)
        assert p == Period.of(-3, -1, -26)
        assert p.is_negative()


class TestArithmetic:
    def test_plus_minus(self) -> None:
        a = Period.of(1, 2, 3)
        b = Period.of(0, 5, 10)
        assert a.plus(b) == Period.of(1, 7, 13)
        assert a.minus(b) == Period.of(1, -3, -7)

    def test_add_to_clamps(self) -> None:
        assert Period.of(months=1).add_to(CalendarDate.of(1403, 6, 31)) == CalendarDate.of(1403, 7, 30)

    def test_sign(self) -> None:
        assert not Period.of(0, 0, 0).is_negative()
        assert not Period.of(1, -1, 0).is_negative()
        assert Period.of(0, -1, 5).is_negative()
        assert Period.of().is_zero()


class TestValueSemantics:
    def test_str(self) -> None:
        assert str(Period.of(3, 1, 26)) == "P3Y1M26D"

    def test_frozen(self) -> None:
        p = Period.of(1)
        with pytest.raises(ValidationError):
            p.years = 2

    def test_model_dump(self) -> None:
        assert Period.of(days=4).model_dump() == {"years": 0, "months": 0, "days": 4}

    @pytest.mark.parametrize("days", ["4", True, 4.0])
    def test_non_int_fields_rejected(self, days) -> None:
        with pytest.raises(ValidationError):
            Period(years=0, months=0, days=days)
