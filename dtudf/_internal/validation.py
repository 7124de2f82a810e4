"""Field-range validators for dtudf.

Every validator raises InvalidFieldError with a message naming the field,
its valid range and the offending value.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import Any

from dtudf._internal.calendar import days_in_month
from dtudf._internal.constants import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    MAX_YEAR,
    MIN_YEAR,
)
from dtudf.errors import InvalidFieldError


def validate_integer(name: str, value: Any) -> int:
    """Validate that value is an int (bools are rejected).

    Returns:
        The value, for use in expressions.

    Raises:
        InvalidFieldError: If value is not an int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    return value


def validate_field(name: str, value: Any, min_value: int, max_value: int) -> int:
    """Validate that an integer field lies within [min_value, max_value].

    Args:
        name: Field name used in the error message.
        value: The value to check.
        min_value: Inclusive lower bound.
        max_value: Inclusive upper bound.

    Returns:
        The validated value.

    Raises:
        InvalidFieldError: If value is not an int or is out of range.

    Examples:
        >>> validate_field("hour", 25, 0, 23)
        Traceback (most recent call last):
        ...
        InvalidFieldError: hour must be between 0 and 23, got 25
    """
    validate_integer(name, value)
    if value < min_value or value > max_value:
        raise InvalidFieldError(
            f"{name} must be between {min_value} and {max_value}, got {value}"
        )
    return value


def validate_int32(name: str, value: Any) -> int:
    """Validate that value fits a signed 32-bit wire field."""
    return validate_field(name, value, INT32_MIN, INT32_MAX)


def validate_int64(name: str, value: Any) -> int:
    """Validate that value fits a signed 64-bit wire field."""
    return validate_field(name, value, INT64_MIN, INT64_MAX)


def validate_year(year: int) -> int:
    """Validate that a year is within MIN_YEAR to MAX_YEAR."""
    return validate_field("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> int:
    """Validate that a month is within 1-12."""
    return validate_field("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> int:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12), already validated.
        day: The day to validate.

    Raises:
        InvalidFieldError: If day is invalid for the month.
    """
    validate_integer("day", day)
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidFieldError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, "
            f"got {day}"
        )
    return day


__all__ = [
    "validate_integer",
    "validate_field",
    "validate_int32",
    "validate_int64",
    "validate_year",
    "validate_month",
    "validate_day",
]
