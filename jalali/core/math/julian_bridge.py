"""
JulianBridge — Proleptic Gregorian ⇄ Julian Day Number

Exact integer conversion between proleptic Gregorian (year, month, day) and the
Astronomical Julian Day Number (JDN).

- Astronomical year numbering: year 0 exists (= 1 BCE), year -1 = 2 BCE.
- Floor division throughout, so the formulas hold for negative years as well.
- No validation: callers are trusted to pass well-formed Gregorian triples.

INVARIANTS:
1. gregorian_to_jdn(*jdn_to_gregorian(j)) == j for every integer j
2. jdn_to_gregorian(gregorian_to_jdn(y, m, d)) == (y, m, d) for every valid date
3. Adjacent days differ by exactly 1
"""

from typing import Final, NamedTuple

# =============================================================================
# CONSTANTS
# =============================================================================

# JDN of 1970-01-01 (Unix epoch day 0)
EPOCH_JDN: Final[int] = 2_440_588

# JDN - datetime.date.toordinal() (ordinal 1 = 0001-01-01 = JDN 1721426)
ORDINAL_JDN_OFFSET: Final[int] = 1_721_425

# Days in a 400-year Gregorian cycle
DAYS_PER_400_YEARS: Final[int] = 146_097

_GREGORIAN_MONTH_DAYS: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# =============================================================================
# TYPES
# =============================================================================


class GregorianDate(NamedTuple):
    """
    Proleptic Gregorian date triple.

    Not bounded to 1..9999 like datetime.date; compares equal to a plain
    (year, month, day) tuple.
    """

    year: int
    month: int
    day: int


# =============================================================================
# CONVERSIONS
# =============================================================================


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """
    Gregorian (year, month, day) → JDN.

    The year is shifted to start in March so that the leap day is the last day
    of the shifted year.

    Args:
        year: Gregorian year (astronomical numbering)
        month: 1..12
        day: 1..31

    Returns:
        Julian Day Number

    Examples:
        >>> gregorian_to_jdn(2000, 1, 1)
        2451545
        >>> gregorian_to_jdn(1970, 1, 1)
        2440588
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_gregorian(jdn: int) -> GregorianDate:
    """
    JDN → Gregorian (year, month, day).

    Args:
        jdn: Julian Day Number (any integer)

    Returns:
        GregorianDate

    Examples:
        >>> jdn_to_gregorian(2451545)
        GregorianDate(year=2000, month=1, day=1)
    """
    a = jdn + 32044
    b = (4 * a + 3) // DAYS_PER_400_YEARS
    c = a - (DAYS_PER_400_YEARS * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return GregorianDate(year, month, day)


# =============================================================================
# HELPERS
# =============================================================================


def is_gregorian_leap(year: int) -> bool:
    """Gregorian leap year (proleptic)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_month_length(year: int, month: int) -> int:
    """
    Days in a proleptic Gregorian month.

    Raises:
        ValueError: month not in 1..12
    """
    if month < 1 or month > 12:
        raise ValueError(f"Gregorian month out of range: {month}")
    if month == 2:
        return 29 if is_gregorian_leap(year) else 28
    return _GREGORIAN_MONTH_DAYS[month - 1]


def iso_weekday(year: int, month: int, day: int) -> int:
    """
    ISO weekday of a Gregorian date: 1 = Monday … 7 = Sunday.

    JDN 0 fell on a Monday, so the weekday is read directly off the day number.
    """
    return gregorian_to_jdn(year, month, day) % 7 + 1
