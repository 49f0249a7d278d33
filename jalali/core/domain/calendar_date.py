"""
CalendarDate — Jalali (Persian) calendar date

Immutable Pydantic model (year, month, day) validated at construction.
Composes JalaliRule + JulianBridge for the JDN and Gregorian bridges and
provides calendar arithmetic with clamping.

Month lengths:
- Farvardin..Shahrivar (1-6): 31 days
- Mehr..Bahman (7-11): 30 days
- Esfand (12): 30 days in a leap year, 29 otherwise

Arithmetic:
- plus_days: exact, via JDN
- plus_months / plus_years: day silently clamped to the target month length,
  never an error
"""

import datetime
import logging
import re
from enum import IntEnum
from typing import Any, Final

from pydantic import BaseModel, Field, StrictInt, field_validator

from jalali.core.domain.errors import InvalidDate
from jalali.core.math import jalali_rule
from jalali.core.math.jalali_rule import GREGORIAN_YEAR_OFFSET, farvardin_first_jdn
from jalali.core.math.julian_bridge import (
    ORDINAL_JDN_OFFSET,
    GregorianDate,
    gregorian_month_length,
    gregorian_to_jdn,
    iso_weekday,
    jdn_to_gregorian,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12

# Zero-based day-of-year index of 1 Mehr (6 months × 31 days)
FIRST_HALF_DAYS: Final[int] = 186

_DATE_TEXT_RE: Final[re.Pattern] = re.compile(r"^(-?\d+)([-/])(\d{1,2})\2(\d{1,2})$")


# =============================================================================
# ENUMS
# =============================================================================


class DayOfWeek(IntEnum):
    """ISO day of week (Monday-first numbering)"""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


# =============================================================================
# CALENDAR DATE MODEL
# =============================================================================


class CalendarDate(BaseModel):
    """
    Jalali calendar date.

    Immutable model (frozen=True); every arithmetic operation returns a new
    instance. Out-of-range month/day raise InvalidDate, so no invalid instance
    can exist.

    Examples:
        >>> CalendarDate.of(1403, 1, 1).to_gregorian()
        GregorianDate(year=2024, month=3, day=20)
        >>> CalendarDate.of(1402, 1, 31).plus_months(7)
        CalendarDate(year=1402, month=8, day=30)
    """

    year: StrictInt = Field(..., description="Jalali year")
    month: StrictInt = Field(..., description="Month (1-12)")
    day: StrictInt = Field(..., description="Day of month (1-29/30/31)")

    model_config = {"frozen": True}

    @field_validator("month")
    @classmethod
    def validate_month(cls, v: int) -> int:
        """Month must be 1..12"""
        if v < 1 or v > MONTHS_PER_YEAR:
            raise InvalidDate(f"Month out of range: {v}")
        return v

    @field_validator("day")
    @classmethod
    def validate_day(cls, v: int, info) -> int:
        """Day must fit the month length of the given year"""
        if "year" in info.data and "month" in info.data:
            year = info.data["year"]
            month = info.data["month"]
            length = cls.length_of_month(year, month)
            if v < 1 or v > length:
                raise InvalidDate(
                    f"Day out of range: {v} for {year}/{month} (length={length})"
                )
        return v

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "CalendarDate":
        """
        Validated factory.

        Raises:
            InvalidDate: month ∉ [1, 12] or day ∉ [1, length_of_month(year, month)]
        """
        return cls(year=year, month=month, day=day)

    @classmethod
    def from_jdn(cls, jdn: int) -> "CalendarDate":
        """
        Date for an Astronomical Julian Day Number.

        The Gregorian year of jdn gives the candidate Jalali year (gy - 621);
        if jdn falls before that year's 1 Farvardin, the previous year is used.
        """
        jalali_year = jdn_to_gregorian(jdn).year - GREGORIAN_YEAR_OFFSET
        start = farvardin_first_jdn(jalali_year)
        while jdn < start:
            jalali_year -= 1
            start = farvardin_first_jdn(jalali_year)

        index = jdn - start
        if index < FIRST_HALF_DAYS:
            month = index // 31 + 1
            day = index % 31 + 1
        else:
            index -= FIRST_HALF_DAYS
            month = index // 30 + 7
            day = index % 30 + 1
        return cls(year=jalali_year, month=month, day=day)

    @classmethod
    def from_gregorian(cls, g: Any) -> "CalendarDate":
        """
        Date for a Gregorian date.

        Args:
            g: datetime.date / datetime.datetime / GregorianDate, any object
               with year, month, day attributes, or a (year, month, day) tuple

        Raises:
            InvalidDate: month or day does not exist on the Gregorian calendar
        """
        if isinstance(g, tuple):
            year, month, day = g
        else:
            year, month, day = g.year, g.month, g.day
        if month < 1 or month > 12:
            raise InvalidDate(f"Gregorian month out of range: {month}")
        length = gregorian_month_length(year, month)
        if day < 1 or day > length:
            raise InvalidDate(
                f"Gregorian day out of range: {day} for {year}/{month} (length={length})"
            )
        return cls.from_jdn(gregorian_to_jdn(year, month, day))

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """
        Parse "YYYY-MM-DD" (or "YYYY/MM/DD").

        Raises:
            InvalidDate: text is malformed or names a non-existent date
        """
        match = _DATE_TEXT_RE.match(text.strip())
        if match is None:
            raise InvalidDate(f"Unparsable date text: {text!r}")
        year, _, month, day = match.groups()
        return cls.of(int(year), int(month), int(day))

    # -------------------------------------------------------------------------
    # Month length / leap
    # -------------------------------------------------------------------------

    @staticmethod
    def length_of_month(year: int, month: int) -> int:
        """Length of a Jalali month (never fails)."""
        if 1 <= month <= 6:
            return 31
        if 7 <= month <= 11:
            return 30
        return 30 if jalali_rule.is_leap(year) else 29

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Jalali leap year (never fails)."""
        return jalali_rule.is_leap(year)

    def is_leap(self) -> bool:
        return jalali_rule.is_leap(self.year)

    def length_of_month_value(self) -> int:
        return self.length_of_month(self.year, self.month)

    def length_of_year(self) -> int:
        return jalali_rule.length_of_year(self.year)

    def day_of_year(self) -> int:
        """1-based day of year (1 Farvardin = 1)."""
        return self._day_of_year_index() + 1

    # -------------------------------------------------------------------------
    # Bridges
    # -------------------------------------------------------------------------

    def _day_of_year_index(self) -> int:
        if self.month <= 6:
            return (self.month - 1) * 31 + (self.day - 1)
        return FIRST_HALF_DAYS + (self.month - 7) * 30 + (self.day - 1)

    def to_jdn(self) -> int:
        """Astronomical Julian Day Number of this date."""
        return farvardin_first_jdn(self.year) + self._day_of_year_index()

    def to_gregorian(self) -> GregorianDate:
        """Proleptic Gregorian date (not bounded to years 1..9999)."""
        return jdn_to_gregorian(self.to_jdn())

    def to_date(self) -> datetime.date:
        """
        Gregorian datetime.date.

        Raises:
            ValueError: Gregorian year outside datetime's 1..9999
        """
        return datetime.date.fromordinal(self.to_jdn() - ORDINAL_JDN_OFFSET)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus_days(self, days: int) -> "CalendarDate":
        if days == 0:
            return self
        return CalendarDate.from_jdn(self.to_jdn() + days)

    def minus_days(self, days: int) -> "CalendarDate":
        return self.plus_days(-days)

    def plus_months(self, months: int) -> "CalendarDate":
        """
        Add months, clamping the day to the target month length.

        The absolute month index is floor-divided, so month index -1 maps to
        Esfand of the previous year.
        """
        if months == 0:
            return self
        total = self.year * MONTHS_PER_YEAR + (self.month - 1) + months
        new_year, month_index = divmod(total, MONTHS_PER_YEAR)
        return self._clamped(new_year, month_index + 1)

    def minus_months(self, months: int) -> "CalendarDate":
        return self.plus_months(-months)

    def plus_years(self, years: int) -> "CalendarDate":
        """Add years; Esfand 30 clamps to 29 when the target year is not leap."""
        if years == 0:
            return self
        return self._clamped(self.year + years, self.month)

    def minus_years(self, years: int) -> "CalendarDate":
        return self.plus_years(-years)

    def _clamped(self, year: int, month: int) -> "CalendarDate":
        length = self.length_of_month(year, month)
        if self.day > length:
            logger.debug(
                "Clamped day %d to %d for %d/%d", self.day, length, year, month
            )
            return CalendarDate(year=year, month=month, day=length)
        return CalendarDate(year=year, month=month, day=self.day)

    # -------------------------------------------------------------------------
    # Day of week
    # -------------------------------------------------------------------------

    def day_of_week(self) -> DayOfWeek:
        """
        Day of week read from the Gregorian date (ISO, Monday-first).

        Saturday-first Iranian week numbering is left to callers.
        """
        g = self.to_gregorian()
        return DayOfWeek(iso_weekday(g.year, g.month, g.day))

    # -------------------------------------------------------------------------
    # Ordering / text
    # -------------------------------------------------------------------------

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() >= other._key()

    def isoformat(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()
