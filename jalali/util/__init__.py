"""
Convenience utilities built on the core value types.

No calendar math of their own: ranges, periods, adjusters and helpers only
call the public CalendarDate / DayTime operations.
"""

from .adjusters import (
    end_of_week,
    first_day_of_month,
    first_day_of_next_month,
    first_day_of_year,
    first_in_month,
    last_day_of_month,
    last_day_of_previous_month,
    last_day_of_year,
    last_in_month,
    next_day_of_week,
    next_or_same,
    nth_in_month,
    previous_day_of_week,
    previous_or_same,
    start_of_week,
)
from .date_range import Bound, DateRange
from .helpers import (
    clamp,
    days_between,
    from_epoch_day,
    jalali_year_of,
    max_date,
    min_date,
    now,
    period_between,
    to_epoch_day,
    today,
)
from .period import Period

__all__ = [
    # Range
    "Bound",
    "DateRange",
    # Period
    "Period",
    # Adjusters
    "end_of_week",
    "first_day_of_month",
    "first_day_of_next_month",
    "first_day_of_year",
    "first_in_month",
    "last_day_of_month",
    "last_day_of_previous_month",
    "last_day_of_year",
    "last_in_month",
    "next_day_of_week",
    "next_or_same",
    "nth_in_month",
    "previous_day_of_week",
    "previous_or_same",
    "start_of_week",
    # Helpers
    "clamp",
    "days_between",
    "from_epoch_day",
    "jalali_year_of",
    "max_date",
    "min_date",
    "now",
    "period_between",
    "to_epoch_day",
    "today",
]
