"""
DateRange — Immutable Jalali date range

Supports all four boundary modes: [a, b], [a, b), (a, b], (a, b).
Iteration is day-based through CalendarDate.plus_days.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Optional

from jalali.core.domain.calendar_date import CalendarDate

logger = logging.getLogger(__name__)


class Bound(str, Enum):
    """Range boundary mode"""

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class DateRange:
    """
    Date range with explicit boundary modes.

    start <= end is required; a range may still be empty, e.g. [a, a).
    """

    start: CalendarDate
    start_bound: Bound
    end: CalendarDate
    end_bound: Bound

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"start must be <= end: {self.start} .. {self.end}")

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def closed(cls, start: CalendarDate, end: CalendarDate) -> "DateRange":
        """[start, end]"""
        return cls(start, Bound.CLOSED, end, Bound.CLOSED)

    @classmethod
    def half_open(cls, start: CalendarDate, end: CalendarDate) -> "DateRange":
        """[start, end)"""
        return cls(start, Bound.CLOSED, end, Bound.OPEN)

    @classmethod
    def open_closed(cls, start: CalendarDate, end: CalendarDate) -> "DateRange":
        """(start, end]"""
        return cls(start, Bound.OPEN, end, Bound.CLOSED)

    @classmethod
    def open(cls, start: CalendarDate, end: CalendarDate) -> "DateRange":
        """(start, end)"""
        return cls(start, Bound.OPEN, end, Bound.OPEN)

    # -------------------------------------------------------------------------
    # Effective inclusive bounds
    # -------------------------------------------------------------------------

    def is_empty(self) -> bool:
        # (a, a] and (a, a + 1) are empty too, not only [a, a)
        return self.first() is None

    def first(self) -> Optional[CalendarDate]:
        """First contained date, None if empty."""
        first = self.start if self.start_bound == Bound.CLOSED else self.start.plus_days(1)
        last = self.end if self.end_bound == Bound.CLOSED else self.end.minus_days(1)
        return first if first <= last else None

    def last(self) -> Optional[CalendarDate]:
        """Last contained date, None if empty."""
        first = self.start if self.start_bound == Bound.CLOSED else self.start.plus_days(1)
        last = self.end if self.end_bound == Bound.CLOSED else self.end.minus_days(1)
        return last if first <= last else None

    def length_in_days(self) -> int:
        first, last = self.first(), self.last()
        if first is None or last is None:
            return 0
        return last.to_jdn() - first.to_jdn() + 1

    def __len__(self) -> int:
        return self.length_in_days()

    # -------------------------------------------------------------------------
    # Set operations
    # -------------------------------------------------------------------------

    def contains(self, date: CalendarDate) -> bool:
        if self.start_bound == Bound.CLOSED:
            left_ok = date >= self.start
        else:
            left_ok = date > self.start
        if self.end_bound == Bound.CLOSED:
            right_ok = date <= self.end
        else:
            right_ok = date < self.end
        return left_ok and right_ok

    def __contains__(self, date: object) -> bool:
        return isinstance(date, CalendarDate) and self.contains(date)

    def overlaps(self, other: "DateRange") -> bool:
        """True if the ranges share at least one date."""
        a1, b1 = self.first(), self.last()
        a2, b2 = other.first(), other.last()
        if a1 is None or b1 is None or a2 is None or b2 is None:
            return False
        return a1 <= b2 and a2 <= b1

    def intersection(self, other: "DateRange") -> "DateRange":
        """
        Common dates as a closed range.

        Disjoint or empty inputs give the empty range [start, start).
        """
        a1, b1 = self.first(), self.last()
        a2, b2 = other.first(), other.last()
        if a1 is None or b1 is None or a2 is None or b2 is None:
            return DateRange.half_open(self.start, self.start)
        lo = max(a1, a2)
        hi = min(b1, b2)
        if lo > hi:
            return DateRange.half_open(self.start, self.start)
        result = DateRange.closed(lo, hi)
        logger.debug("Intersection of %s and %s is %s", self, other, result)
        return result

    def union_if_contiguous(self, other: "DateRange") -> Optional["DateRange"]:
        """
        Closed union when the ranges overlap or touch; None if there is a gap.

        An empty operand returns the other range unchanged.
        """
        a1, b1 = self.first(), self.last()
        a2, b2 = other.first(), other.last()
        if a1 is None or b1 is None:
            return other
        if a2 is None or b2 is None:
            return self

        if a1 <= a2:
            left_end, right_start = b1, a2
        else:
            left_end, right_start = b2, a1
        if right_start.to_jdn() - left_end.to_jdn() > 1:
            return None

        result = DateRange.closed(min(a1, a2), max(b1, b2))
        logger.debug("Union of %s and %s is %s", self, other, result)
        return result

    # -------------------------------------------------------------------------
    # Iteration / serialization
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[CalendarDate]:
        current, last = self.first(), self.last()
        if current is None or last is None:
            return
        while current <= last:
            yield current
            current = current.plus_days(1)

    def to_dict(self) -> Dict[str, Any]:
        """Contract form (see date_range.json)."""
        return {
            "start": self.start.model_dump(),
            "start_bound": self.start_bound.value,
            "end": self.end.model_dump(),
            "end_bound": self.end_bound.value,
        }

    def __str__(self) -> str:
        left = "[" if self.start_bound == Bound.CLOSED else "("
        right = "]" if self.end_bound == Bound.CLOSED else ")"
        return f"{left}{self.start} .. {self.end}{right}"
