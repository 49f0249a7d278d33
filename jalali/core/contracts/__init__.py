"""
Contract Validation Module

Validation of the serialized forms of the jalali value types.
"""

from .validators import (
    CalendarDateValidator,
    ContractValidator,
    DateRangeValidator,
    DayTimeValidator,
    PeriodValidator,
    SchemaLoader,
    load_calendar_date,
    load_day_time,
    load_period,
    validate_calendar_date,
    validate_date_range,
    validate_day_time,
    validate_period,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalendarDateValidator",
    "DayTimeValidator",
    "DateRangeValidator",
    "PeriodValidator",
    # Functions
    "validate_calendar_date",
    "validate_day_time",
    "validate_date_range",
    "validate_period",
    "load_calendar_date",
    "load_day_time",
    "load_period",
]
