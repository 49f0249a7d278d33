"""
Helpers — day-to-day shortcuts over the core value types

Clock and timestamp access, min/max/clamp, epoch-day conversion and date
differences.
"""

import datetime
from typing import Optional

from jalali.core.domain.calendar_date import CalendarDate
from jalali.core.domain.day_time import DayTime
from jalali.core.math.julian_bridge import EPOCH_JDN
from jalali.util.period import Period


# =============================================================================
# NOW / TODAY
# =============================================================================


def today(tz: Optional[datetime.tzinfo] = None) -> CalendarDate:
    """Current Jalali date in tz (system local time if None)."""
    return CalendarDate.from_gregorian(datetime.datetime.now(tz))


def now(tz: Optional[datetime.tzinfo] = None) -> DayTime:
    """Current Jalali date-time in tz (system local time if None)."""
    return DayTime.from_gregorian_datetime(datetime.datetime.now(tz))


def jalali_year_of(timestamp: float, tz: Optional[datetime.tzinfo] = None) -> int:
    """Jalali year of a POSIX timestamp in tz (system local time if None)."""
    return DayTime.from_timestamp(timestamp, tz).year


# =============================================================================
# MIN / MAX / CLAMP
# =============================================================================


def min_date(a: CalendarDate, b: CalendarDate) -> CalendarDate:
    return a if a <= b else b


def max_date(a: CalendarDate, b: CalendarDate) -> CalendarDate:
    return a if a >= b else b


def clamp(date: CalendarDate, lo: CalendarDate, hi: CalendarDate) -> CalendarDate:
    """
    Clamp date into [lo, hi].

    Raises:
        ValueError: lo > hi
    """
    if lo > hi:
        raise ValueError(f"lo must be <= hi: {lo} > {hi}")
    if date < lo:
        return lo
    if date > hi:
        return hi
    return date


# =============================================================================
# NUMERIC CONVERSIONS
# =============================================================================


def to_epoch_day(date: CalendarDate) -> int:
    """Days since 1970-01-01 (Gregorian) = 1348-10-11 (Jalali)."""
    return date.to_jdn() - EPOCH_JDN


def from_epoch_day(epoch_day: int) -> CalendarDate:
    return CalendarDate.from_jdn(epoch_day + EPOCH_JDN)


# =============================================================================
# DIFFERENCES
# =============================================================================


def days_between(a: CalendarDate, b: CalendarDate) -> int:
    """Signed number of days from a to b (b - a)."""
    return b.to_jdn() - a.to_jdn()


def period_between(a: CalendarDate, b: CalendarDate) -> Period:
    return Period.between(a, b)
