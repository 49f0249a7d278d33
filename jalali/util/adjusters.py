"""
Adjusters — year, month, week and day-of-week boundaries

Built on CalendarDate arithmetic and its ISO day_of_week(). Weeks default to
the Iranian Saturday start.
"""

from typing import Final, Optional

from jalali.core.domain.calendar_date import CalendarDate, DayOfWeek

DAYS_PER_WEEK: Final[int] = 7


# =============================================================================
# MONTH BOUNDARIES
# =============================================================================


def first_day_of_month(date: CalendarDate) -> CalendarDate:
    return CalendarDate.of(date.year, date.month, 1)


def last_day_of_month(date: CalendarDate) -> CalendarDate:
    return CalendarDate.of(date.year, date.month, date.length_of_month_value())


def first_day_of_next_month(date: CalendarDate) -> CalendarDate:
    following = date.plus_months(1)
    return CalendarDate.of(following.year, following.month, 1)


def last_day_of_previous_month(date: CalendarDate) -> CalendarDate:
    previous = date.plus_months(-1)
    return last_day_of_month(previous)


# =============================================================================
# WEEKS
# =============================================================================


def start_of_week(date: CalendarDate, week_start: DayOfWeek = DayOfWeek.SATURDAY) -> CalendarDate:
    """
    First day of the week containing date.

    Args:
        date: Any date in the week
        week_start: Day the week begins on (SATURDAY in Iran, MONDAY for ISO)
    """
    back = (date.day_of_week() - week_start) % DAYS_PER_WEEK
    return date.minus_days(back)


def end_of_week(date: CalendarDate, week_start: DayOfWeek = DayOfWeek.SATURDAY) -> CalendarDate:
    return start_of_week(date, week_start).plus_days(DAYS_PER_WEEK - 1)


# =============================================================================
# DAY OF WEEK
# =============================================================================


def next_day_of_week(date: CalendarDate, target: DayOfWeek) -> CalendarDate:
    """Next date strictly after date falling on target."""
    diff = (target - date.day_of_week()) % DAYS_PER_WEEK
    return date.plus_days(diff or DAYS_PER_WEEK)


def next_or_same(date: CalendarDate, target: DayOfWeek) -> CalendarDate:
    if date.day_of_week() == target:
        return date
    return next_day_of_week(date, target)


def previous_day_of_week(date: CalendarDate, target: DayOfWeek) -> CalendarDate:
    """Previous date strictly before date falling on target."""
    diff = (date.day_of_week() - target) % DAYS_PER_WEEK
    return date.minus_days(diff or DAYS_PER_WEEK)


def previous_or_same(date: CalendarDate, target: DayOfWeek) -> CalendarDate:
    if date.day_of_week() == target:
        return date
    return previous_day_of_week(date, target)


def first_in_month(date: CalendarDate, target: DayOfWeek) -> CalendarDate:
    return next_or_same(first_day_of_month(date), target)


def last_in_month(date: CalendarDate, target: DayOfWeek) -> CalendarDate:
    return previous_or_same(last_day_of_month(date), target)


def nth_in_month(date: CalendarDate, target: DayOfWeek, n: int) -> Optional[CalendarDate]:
    """
    n-th (1-based) occurrence of target in the month of date.

    Returns:
        The date, or None if the month has fewer than n such days

    Raises:
        ValueError: n < 1
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    nth = first_in_month(date, target).plus_days(DAYS_PER_WEEK * (n - 1))
    if nth.year != date.year or nth.month != date.month:
        return None
    return nth


# =============================================================================
# YEAR BOUNDARIES
# =============================================================================


def first_day_of_year(date: CalendarDate) -> CalendarDate:
    """1 Farvardin of the year of date."""
    return CalendarDate.of(date.year, 1, 1)


def last_day_of_year(date: CalendarDate) -> CalendarDate:
    """Last day of Esfand (29 or 30) of the year of date."""
    return CalendarDate.of(date.year, 12, CalendarDate.length_of_month(date.year, 12))
