"""
Core math modules for jalali

Integer-only calendar primitives: Gregorian ⇄ JDN bridge and the Jalali
break-point leap rule.
"""

# JulianBridge
from jalali.core.math.julian_bridge import (
    DAYS_PER_400_YEARS,
    EPOCH_JDN,
    ORDINAL_JDN_OFFSET,
    GregorianDate,
    gregorian_month_length,
    gregorian_to_jdn,
    is_gregorian_leap,
    iso_weekday,
    jdn_to_gregorian,
)

# JalaliRule
from jalali.core.math.jalali_rule import (
    GREGORIAN_YEAR_OFFSET,
    JALALI_BREAKS,
    farvardin_first,
    farvardin_first_jdn,
    is_leap,
    length_of_year,
)

__all__ = [
    # JulianBridge — Constants
    "DAYS_PER_400_YEARS",
    "EPOCH_JDN",
    "ORDINAL_JDN_OFFSET",
    # JulianBridge — Types
    "GregorianDate",
    # JulianBridge — Functions
    "gregorian_month_length",
    "gregorian_to_jdn",
    "is_gregorian_leap",
    "iso_weekday",
    "jdn_to_gregorian",
    # JalaliRule — Constants
    "GREGORIAN_YEAR_OFFSET",
    "JALALI_BREAKS",
    # JalaliRule — Functions
    "farvardin_first",
    "farvardin_first_jdn",
    "is_leap",
    "length_of_year",
]
