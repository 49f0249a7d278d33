"""
Period — Jalali difference in years, months, days

Immutable Pydantic model. Built on CalendarDate arithmetic only.
"""

from pydantic import BaseModel, Field, StrictInt

from jalali.core.domain.calendar_date import MONTHS_PER_YEAR, CalendarDate


class Period(BaseModel):
    """
    Signed difference in years / months / days.

    All three components share the sign of the period when produced by
    between(); of() accepts any combination.
    """

    years: StrictInt = Field(0, description="Years")
    months: StrictInt = Field(0, description="Months")
    days: StrictInt = Field(0, description="Days")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, years: int = 0, months: int = 0, days: int = 0) -> "Period":
        return cls(years=years, months=months, days=days)

    @classmethod
    def between(cls, start: CalendarDate, end: CalendarDate) -> "Period":
        """
        Normalized period from start (inclusive) to end (exclusive).

        Days borrow the length of the month preceding end; a start after end
        yields the negated period of (end, start).

        Examples:
            >>> Period.between(CalendarDate.of(1402, 12, 29), CalendarDate.of(1403, 1, 1))
            Period(years=0, months=0, days=1)
        """
        if start == end:
            return cls()

        negative = start > end
        if negative:
            start, end = end, start

        years = end.year - start.year
        months = end.month - start.month
        days = end.day - start.day

        if days < 0:
            previous = end.plus_months(-1)
            days += CalendarDate.length_of_month(previous.year, previous.month)
            months -= 1
        if months < 0:
            months += MONTHS_PER_YEAR
            years -= 1

        if negative:
            return cls(years=-years, months=-months, days=-days)
        return cls(years=years, months=months, days=days)

    def add_to(self, date: CalendarDate) -> CalendarDate:
        """Years, then months (both clamping), then days."""
        return date.plus_years(self.years).plus_months(self.months).plus_days(self.days)

    def subtract_from(self, date: CalendarDate) -> CalendarDate:
        return date.plus_years(-self.years).plus_months(-self.months).plus_days(-self.days)

    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    def is_negative(self) -> bool:
        """Sign of the first non-zero component."""
        return (self.years, self.months, self.days) < (0, 0, 0)

    def plus(self, other: "Period") -> "Period":
        return Period(
            years=self.years + other.years,
            months=self.months + other.months,
            days=self.days + other.days,
        )

    def minus(self, other: "Period") -> "Period":
        return Period(
            years=self.years - other.years,
            months=self.months - other.months,
            days=self.days - other.days,
        )

    def __str__(self) -> str:
        return f"P{self.years}Y{self.months}M{self.days}D"
