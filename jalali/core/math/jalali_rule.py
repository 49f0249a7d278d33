"""
JalaliRule — Break-point driven leap rule of the Jalali calendar

Locates Jalali New Year (1 Farvardin) on the proleptic Gregorian calendar and
derives the Jalali leap years from it.

The Jalali calendar inserts 8 leap days per 33 years, but the pattern shifts
at historically observed break years. Between two break years the 33-year
cycle holds; every break resets where the cycle starts. Missing or misplacing
a break shifts every later conversion by one day.

ALGORITHM (farvardin_first):
    leap_j = Jalali leap days up to jy, summed per break block:
        whole block of length J:     (J // 33) * 8 + (J % 33) // 4
        partial block of length n:   (n // 33) * 8 + ((n % 33) + 3) // 4
        +1 if the containing block has J % 33 == 4 and J - n == 4
    leap_g = Gregorian leap days since the 1600 anchor (same reference)
    Farvardin 1 = March (20 + leap_j - leap_g) of gregorian year jy + 621

Years outside the break table extrapolate the nearest 33-year pattern, so
every function here is total over the integers.

INVARIANTS:
1. Consecutive Farvardin-1 JDNs differ by 365 or 366
2. is_leap(jy) ⇔ year length == 366
"""

from typing import Final

from jalali.core.math.julian_bridge import GregorianDate, gregorian_to_jdn

# =============================================================================
# BREAK-POINT TABLE
# =============================================================================

# Jalali years at which the 33-year leap pattern shifts (ascending, immutable)
JALALI_BREAKS: Final[tuple[int, ...]] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
    1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394,
    2456, 3178,
)

# Gregorian year of 1 Farvardin = Jalali year + 621
GREGORIAN_YEAR_OFFSET: Final[int] = 621

# Jalali leap-day count at the first break year
LEAP_J_BASE: Final[int] = -14

# Gregorian leap-day count at the 1600 anchor, on the same reference as LEAP_J_BASE
LEAP_G_AT_ANCHOR: Final[int] = 238
GREGORIAN_ANCHOR_YEAR: Final[int] = 1600

# 1 Farvardin = March (NOWRUZ_MARCH_BASE + leap_j - leap_g)
NOWRUZ_MARCH_BASE: Final[int] = 20

LEAP_YEAR_DAYS: Final[int] = 366


# =============================================================================
# LEAP-DAY COUNTS
# =============================================================================


def _jalali_leap_days(jalali_year: int) -> int:
    """Jalali leap days accumulated up to the start of jalali_year."""
    leap_j = LEAP_J_BASE
    jp = JALALI_BREAKS[0]
    jump = 0

    for jm in JALALI_BREAKS[1:]:
        jump = jm - jp
        if jalali_year < jm:
            break
        leap_j += (jump // 33) * 8 + (jump % 33) // 4
        jp = jm

    n = jalali_year - jp
    leap_j += (n // 33) * 8 + ((n % 33) + 3) // 4

    # Blocks of 33k + 4 years end in a five-year gap: the leap moves one year on
    if jump % 33 == 4 and jump - n == 4:
        leap_j += 1

    return leap_j


def _gregorian_leap_days(gregorian_year: int) -> int:
    """Gregorian leap days since the 1600 anchor, offset to the Jalali reference."""
    g = gregorian_year - GREGORIAN_ANCHOR_YEAR
    return LEAP_G_AT_ANCHOR + g // 4 - g // 100 + g // 400


# =============================================================================
# PUBLIC API
# =============================================================================


def farvardin_first(jalali_year: int) -> GregorianDate:
    """
    Gregorian date of 1 Farvardin (Jalali New Year).

    Args:
        jalali_year: Jalali year (any integer)

    Returns:
        GregorianDate(gregorian_year, 3, march_day). For years inside the
        break table march_day is 19..22; for remote extrapolated years it may
        fall outside March, but the JDN computed from it stays exact.

    Examples:
        >>> farvardin_first(1403)
        GregorianDate(year=2024, month=3, day=20)
        >>> farvardin_first(1400)
        GregorianDate(year=2021, month=3, day=21)
    """
    gregorian_year = jalali_year + GREGORIAN_YEAR_OFFSET
    march_day = (
        NOWRUZ_MARCH_BASE
        + _jalali_leap_days(jalali_year)
        - _gregorian_leap_days(gregorian_year)
    )
    return GregorianDate(gregorian_year, 3, march_day)


def farvardin_first_jdn(jalali_year: int) -> int:
    """JDN of 1 Farvardin of jalali_year."""
    gy, gm, gd = farvardin_first(jalali_year)
    return gregorian_to_jdn(gy, gm, gd)


def is_leap(jalali_year: int) -> bool:
    """
    Jalali leap year check.

    A year is leap iff the next New Year falls 366 days after this one.

    Examples:
        >>> is_leap(1403)
        True
        >>> is_leap(1404)
        False
    """
    return farvardin_first_jdn(jalali_year + 1) - farvardin_first_jdn(jalali_year) == LEAP_YEAR_DAYS


def length_of_year(jalali_year: int) -> int:
    """Number of days in jalali_year (365 or 366)."""
    return farvardin_first_jdn(jalali_year + 1) - farvardin_first_jdn(jalali_year)
