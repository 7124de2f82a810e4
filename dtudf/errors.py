"""dtudf exception hierarchy.

All dtudf-specific exceptions inherit from DtUdfError. Absent input is never
an error: functions return None for None input instead of raising.
"""

from __future__ import annotations


class DtUdfError(Exception):
    """Base exception for all dtudf errors."""

    pass


class InvalidFieldError(DtUdfError):
    """A field value is missing, mistyped or out of range.

    Raised by the field validators, by native constructors and by the
    record decoders.

    Examples:
        - MONTH_FIELD value outside 1-12
        - DAY_FIELD of 30 for February
        - ZoneId built from an offset string such as "+02:00"
    """

    pass


class ParseError(DtUdfError):
    """Failed to parse a text representation.

    Examples:
        - Malformed ISO-8601 duration such as "P1X"
        - Text that does not match a caller-supplied pattern
        - Zoned date-time text without a bracketed region id
    """

    pass


class PatternError(DtUdfError, ValueError):
    """A caller-supplied pattern contains an unsupported directive."""

    pass


class DivisionByZeroError(DtUdfError, ZeroDivisionError):
    """Duration division by a zero scalar or a zero duration.

    This error always propagates to the caller; it is never turned into
    an absent result.
    """

    pass


class TemporalOverflowError(DtUdfError):
    """Arithmetic produced a value outside the supported range.

    Examples:
        - Adding a period that moves past year 999999999
        - Period components exceeding the 32-bit wire range
    """

    pass


class InvalidModeError(DtUdfError):
    """Unknown chronology comparison mode.

    Chronology functions catch this error, log it and return None.
    """

    pass


class UnknownFunctionError(DtUdfError, LookupError):
    """No registered function or overload matches a call."""

    pass


__all__ = [
    "DtUdfError",
    "InvalidFieldError",
    "ParseError",
    "PatternError",
    "DivisionByZeroError",
    "TemporalOverflowError",
    "InvalidModeError",
    "UnknownFunctionError",
]
