"""
DayTime — Jalali date + nanosecond-of-day

Immutable Pydantic model composed of an owned CalendarDate and an integer
nano-of-day offset. No floating point anywhere.

CARRY / BORROW:
    sum = nano_of_day + n
    day carry = floor(sum / NANOS_PER_DAY)   → CalendarDate.plus_days
    remainder = floor_mod(sum, NANOS_PER_DAY) ∈ [0, NANOS_PER_DAY)

Truncating division would leave a negative remainder for negative n; floor
semantics make -1 ns from midnight land on the last nanosecond of the previous
day.
"""

import datetime
import re
from typing import Final, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator

from jalali.core.domain.calendar_date import CalendarDate
from jalali.core.domain.errors import InvalidDate, InvalidTime

# =============================================================================
# TIME CONSTANTS
# =============================================================================

NANOS_PER_MICRO: Final[int] = 1_000
NANOS_PER_SECOND: Final[int] = 1_000_000_000
NANOS_PER_MINUTE: Final[int] = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: Final[int] = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: Final[int] = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

_DATETIME_TEXT_RE: Final[re.Pattern] = re.compile(
    r"^(?P<date>-?\d+[-/]\d{1,2}[-/]\d{1,2})"
    r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?)?$"
)

# Date part followed by a time separator: the rest must be a time
_DATE_THEN_TIME_RE: Final[re.Pattern] = re.compile(r"^-?\d+[-/]\d{1,2}[-/]\d{1,2}[T ]")


def _to_nano_of_day(hour: int, minute: int, second: int, nanosecond: int) -> int:
    """
    Compose time components into nano-of-day.

    Raises:
        InvalidTime: any component not an int or outside its natural range
    """
    components = (
        ("Hour", hour),
        ("Minute", minute),
        ("Second", second),
        ("Nanosecond", nanosecond),
    )
    for name, value in components:
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidTime(f"{name} must be an int: {value!r}")
    if hour < 0 or hour > 23:
        raise InvalidTime(f"Hour out of range: {hour}")
    if minute < 0 or minute > 59:
        raise InvalidTime(f"Minute out of range: {minute}")
    if second < 0 or second > 59:
        raise InvalidTime(f"Second out of range: {second}")
    if nanosecond < 0 or nanosecond > NANOS_PER_SECOND - 1:
        raise InvalidTime(f"Nanosecond out of range: {nanosecond}")
    return (
        hour * NANOS_PER_HOUR
        + minute * NANOS_PER_MINUTE
        + second * NANOS_PER_SECOND
        + nanosecond
    )


# =============================================================================
# DAY TIME MODEL
# =============================================================================


class DayTime(BaseModel):
    """
    Jalali date-time with nanosecond precision.

    Immutable model (frozen=True). Ordered by date first, then nano_of_day.

    Examples:
        >>> dt = DayTime.of(CalendarDate.of(1403, 1, 1), 13, 5, 9)
        >>> str(dt)
        '1403-01-01T13:05:09.000000000'
    """

    date: CalendarDate = Field(..., description="Jalali calendar date")
    nano_of_day: StrictInt = Field(..., description="Nanoseconds since midnight")

    model_config = {"frozen": True}

    @field_validator("nano_of_day")
    @classmethod
    def validate_nano_of_day(cls, v: int) -> int:
        """nano_of_day must be in [0, NANOS_PER_DAY)"""
        if v < 0 or v >= NANOS_PER_DAY:
            raise InvalidTime(f"nano_of_day out of range: {v}")
        return v

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def of(
        cls,
        date: CalendarDate,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> "DayTime":
        """
        Build from a date and time components.

        Raises:
            InvalidTime: hour ∉ [0, 23], minute/second ∉ [0, 59],
                nanosecond ∉ [0, 999_999_999]
        """
        return cls(date=date, nano_of_day=_to_nano_of_day(hour, minute, second, nanosecond))

    @classmethod
    def of_nano_of_day(cls, date: CalendarDate, nano_of_day: int) -> "DayTime":
        """
        Build from a date and a nano-of-day offset.

        Raises:
            InvalidTime: nano_of_day ∉ [0, NANOS_PER_DAY)
        """
        return cls(date=date, nano_of_day=nano_of_day)

    @classmethod
    def of_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> "DayTime":
        """Build from Jalali date fields and time components."""
        return cls.of(CalendarDate.of(year, month, day), hour, minute, second, nanosecond)

    @classmethod
    def from_gregorian_datetime(
        cls, value: datetime.datetime, tz: Optional[datetime.tzinfo] = None
    ) -> "DayTime":
        """
        Build from a Gregorian datetime.

        Without tz the wall-clock fields of value are taken as they are.
        With tz, value is first converted with astimezone(tz); a naive value
        is then read as system local time. Microseconds become
        nanoseconds × 1000.
        """
        if tz is not None:
            value = value.astimezone(tz)
        return cls.of(
            CalendarDate.from_gregorian(value),
            value.hour,
            value.minute,
            value.second,
            value.microsecond * NANOS_PER_MICRO,
        )

    @classmethod
    def from_timestamp(cls, timestamp: float, tz: Optional[datetime.tzinfo] = None) -> "DayTime":
        """
        Wall-clock Jalali date-time of a POSIX timestamp in tz.

        tz=None uses the system local zone, as datetime.fromtimestamp does.

        Examples:
            >>> str(DayTime.from_timestamp(0, datetime.timezone.utc))
            '1348-10-11T00:00:00.000000000'
        """
        return cls.from_gregorian_datetime(datetime.datetime.fromtimestamp(timestamp, tz))

    @classmethod
    def parse(cls, text: str) -> "DayTime":
        """
        Parse "YYYY-MM-DD[THH:MM[:SS[.fffffffff]]]".

        Raises:
            InvalidDate: malformed date part or non-existent date
            InvalidTime: malformed time part or time component out of range
        """
        text = text.strip()
        match = _DATETIME_TEXT_RE.match(text)
        if match is None:
            if _DATE_THEN_TIME_RE.match(text):
                raise InvalidTime(f"Unparsable time text: {text!r}")
            raise InvalidDate(f"Unparsable date-time text: {text!r}")
        date = CalendarDate.parse(match.group("date"))
        if match.group("hour") is None:
            return cls.of(date)

        fraction = match.group("fraction") or ""
        return cls.of(
            date,
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second") or 0),
            int(fraction.ljust(9, "0")) if fraction else 0,
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def hour(self) -> int:
        return self.nano_of_day // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self.nano_of_day % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self.nano_of_day % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        return self.nano_of_day % NANOS_PER_SECOND

    def to_jdn(self) -> int:
        """JDN of the date part."""
        return self.date.to_jdn()

    # -------------------------------------------------------------------------
    # Gregorian bridge
    # -------------------------------------------------------------------------

    def to_gregorian_datetime(self) -> datetime.datetime:
        """
        Naive Gregorian datetime.

        datetime resolves microseconds only, so the sub-microsecond part of
        the nanosecond is truncated.

        Raises:
            ValueError: Gregorian year outside datetime's 1..9999
        """
        g = self.date.to_date()
        return datetime.datetime(
            g.year,
            g.month,
            g.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond // NANOS_PER_MICRO,
        )

    def to_timestamp(self, tz: Optional[datetime.tzinfo] = None) -> float:
        """
        POSIX timestamp of this wall-clock time read in tz.

        tz=None reads it as system local time. Precision is that of
        to_gregorian_datetime (microseconds).
        """
        return self.to_gregorian_datetime().replace(tzinfo=tz).timestamp()

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus_nanos(self, nanos: int) -> "DayTime":
        if nanos == 0:
            return self
        carry_days, nano_of_day = divmod(self.nano_of_day + nanos, NANOS_PER_DAY)
        date = self.date.plus_days(carry_days) if carry_days else self.date
        return DayTime(date=date, nano_of_day=nano_of_day)

    def plus_seconds(self, seconds: int) -> "DayTime":
        return self.plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_minutes(self, minutes: int) -> "DayTime":
        return self.plus_nanos(minutes * NANOS_PER_MINUTE)

    def plus_hours(self, hours: int) -> "DayTime":
        return self.plus_nanos(hours * NANOS_PER_HOUR)

    def plus_days(self, days: int) -> "DayTime":
        if days == 0:
            return self
        return DayTime(date=self.date.plus_days(days), nano_of_day=self.nano_of_day)

    def minus_nanos(self, nanos: int) -> "DayTime":
        return self.plus_nanos(-nanos)

    def minus_seconds(self, seconds: int) -> "DayTime":
        return self.plus_seconds(-seconds)

    def minus_minutes(self, minutes: int) -> "DayTime":
        return self.plus_minutes(-minutes)

    def minus_hours(self, hours: int) -> "DayTime":
        return self.plus_hours(-hours)

    def minus_days(self, days: int) -> "DayTime":
        return self.plus_days(-days)

    # -------------------------------------------------------------------------
    # Ordering / text
    # -------------------------------------------------------------------------

    def _key(self) -> tuple[int, int, int, int]:
        return (self.date.year, self.date.month, self.date.day, self.nano_of_day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DayTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DayTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DayTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DayTime):
            return NotImplemented
        return self._key() >= other._key()

    def isoformat(self) -> str:
        return (
            f"{self.date.isoformat()}T{self.hour:02d}:{self.minute:02d}:"
            f"{self.second:02d}.{self.nanosecond:09d}"
        )

    def __str__(self) -> str:
        return self.isoformat()
