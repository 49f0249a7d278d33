"""
jalali — integer-only Jalali (Persian) ⇄ Gregorian calendar engine.
"""

import logging

from jalali.core.domain import (
    CalendarDate,
    CalendarError,
    DayOfWeek,
    DayTime,
    InvalidDate,
    InvalidTime,
)
from jalali.core.math import GregorianDate

__version__ = "1.0.0"

# Library: the application decides where records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalendarDate",
    "CalendarError",
    "DayOfWeek",
    "DayTime",
    "GregorianDate",
    "InvalidDate",
    "InvalidTime",
]
