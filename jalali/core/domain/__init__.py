"""
Domain models and value objects.

Contains the Jalali value types CalendarDate and DayTime and their errors.
"""

from jalali.core.domain.calendar_date import (
    FIRST_HALF_DAYS,
    MONTHS_PER_YEAR,
    CalendarDate,
    DayOfWeek,
)
from jalali.core.domain.day_time import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICRO,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    DayTime,
)
from jalali.core.domain.errors import CalendarError, InvalidDate, InvalidTime

__all__ = [
    # CalendarDate
    "FIRST_HALF_DAYS",
    "MONTHS_PER_YEAR",
    "CalendarDate",
    "DayOfWeek",
    # DayTime
    "NANOS_PER_DAY",
    "NANOS_PER_HOUR",
    "NANOS_PER_MICRO",
    "NANOS_PER_MINUTE",
    "NANOS_PER_SECOND",
    "DayTime",
    # Errors
    "CalendarError",
    "InvalidDate",
    "InvalidTime",
]
