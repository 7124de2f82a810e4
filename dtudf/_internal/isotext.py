"""Shared pieces of the ISO-8601 text forms.

Regex fragments and field renderers used by the temporal types' parse and
canonical text methods. This module is not part of the public API.
"""

from __future__ import annotations

from dtudf._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

# ISO_LOCAL_DATE: four or more year digits, optionally signed
DATE_PATTERN = r"([+-]?\d{4,10})-(\d{2})-(\d{2})"

# ISO_LOCAL_TIME: seconds and fraction optional on input
TIME_PATTERN = r"(\d{2}):(\d{2})(?::(\d{2})(?:[.,](\d{1,9}))?)?"

# ISO offset: Z, +hh:mm or +hh:mm:ss
OFFSET_PATTERN = r"(Z|[+-]\d{2}:\d{2}(?::\d{2})?)"


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def trunc_mod(a: int, b: int) -> int:
    """Remainder of trunc_div; carries the sign of the dividend."""
    return a - b * trunc_div(a, b)


def parse_fraction(digits: str | None) -> int:
    """Convert fractional-second digits to nanoseconds ("5" -> 500_000_000)."""
    if not digits:
        return 0
    return int(digits.ljust(9, "0")[:9])


def format_fraction_minimal(nanos: int) -> str:
    """Render a fraction with trailing zeros stripped, or "" when zero."""
    if nanos == 0:
        return ""
    return "." + f"{nanos:09d}".rstrip("0")


def format_fraction_grouped(nanos: int) -> str:
    """Render a fraction in groups of three digits, or "" when zero."""
    if nanos == 0:
        return ""
    if nanos % NANOS_PER_MILLISECOND == 0:
        return f".{nanos // NANOS_PER_MILLISECOND:03d}"
    if nanos % NANOS_PER_MICROSECOND == 0:
        return f".{nanos // NANOS_PER_MICROSECOND:06d}"
    return f".{nanos:09d}"


def format_year(year: int) -> str:
    """Render a year with at least four digits; a sign beyond 9999."""
    if year > 9999:
        return f"+{year}"
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def format_offset_id(total_seconds: int) -> str:
    """Render an offset as Z, +hh:mm or +hh:mm:ss."""
    if total_seconds == 0:
        return "Z"
    sign = "-" if total_seconds < 0 else "+"
    remaining = abs(total_seconds)
    hours, remaining = divmod(remaining, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remaining, SECONDS_PER_MINUTE)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


__all__ = [
    "DATE_PATTERN",
    "TIME_PATTERN",
    "OFFSET_PATTERN",
    "trunc_div",
    "trunc_mod",
    "parse_fraction",
    "format_fraction_minimal",
    "format_fraction_grouped",
    "format_year",
    "format_offset_id",
]
