"""Calendar utilities for dtudf.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths and conversions between
(year, month, day) and epoch days, where epoch day 0 is 1970-01-01.

This module is not part of the public API.
"""

from __future__ import annotations

from dtudf._internal.constants import DAYS_IN_MONTH, UNIX_EPOCH_ORDINAL


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (0001-01-01 is ordinal 1).

    Python's floor division makes the formula valid for years before 1.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal back to (year, month, day).

    Works for ordinals of any sign since divmod floors.
    """
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)
    # 100-year cycles within the 400
    n100, n = divmod(n, 36524)
    # 4-year cycles within the 100
    n4, n = divmod(n, 1461)
    # Years within the 4-year cycle
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01."""
    return ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day)."""
    return ordinal_to_ymd(epoch_day + UNIX_EPOCH_ORDINAL)


def epoch_day_to_day_of_week(epoch_day: int) -> int:
    """Return the ISO day of week (Monday=1, Sunday=7) for an epoch day."""
    # 1970-01-01 was a Thursday
    return (epoch_day + 3) % 7 + 1


def proleptic_month(year: int, month: int) -> int:
    """Return the month count from year 0, used for month differences."""
    return year * 12 + month - 1


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "epoch_day_to_day_of_week",
    "proleptic_month",
]
