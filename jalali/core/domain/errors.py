"""
Calendar errors

Raised eagerly at construction of CalendarDate / DayTime. They derive from
Exception rather than ValueError so that pydantic propagates them unchanged
out of field validators instead of wrapping them into ValidationError.
"""


class CalendarError(Exception):
    """Base class for calendar value errors."""

    pass


class InvalidDate(CalendarError):
    """
    Month or day outside its valid range for the given Jalali year,
    or date text that cannot be parsed.
    """

    pass


class InvalidTime(CalendarError):
    """
    Hour / minute / second / nanosecond (or composed nano-of-day) outside
    its valid range, or time text that cannot be parsed.
    """

    pass
