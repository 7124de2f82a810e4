"""dtudf: temporal functions for query engines.

dtudf provides date and time functions that a query engine calls by name.
Temporal values cross the engine boundary as fixed-shape records; each
function decodes its record arguments, computes with the native types and
encodes the result.

Core Types:
    Instant: Point on the UTC time-line (seconds and nanoseconds)
    Duration: Exact amount of time
    Period: Calendar amount of time (years, months, days)
    LocalDate, LocalTime, LocalDateTime: Date and time without a zone
    ZoneOffset: Fixed offset from UTC
    ZoneId: IANA region zone such as Europe/Vienna
    OffsetDateTime, ZonedDateTime: Date-times with an offset or a zone
    SystemClock, FixedClock: Sources of the current instant

Records:
    to_record: Encode a native value as its record
    from_record: Decode a record into a native value

Functions:
    build_registry: Build the dt_* function table
    FunctionRegistry: Overload dispatch with null propagation

Exceptions:
    DtUdfError: Base exception
    InvalidFieldError: Missing, mistyped or out-of-range field
    ParseError: Text does not match the expected form
    PatternError: Unsupported pattern directive
    DivisionByZeroError: Duration divided by zero
    TemporalOverflowError: Result outside the supported range
    InvalidModeError: Unknown chronology mode
    UnknownFunctionError: No function or overload matches a call

Example:
    >>> from dtudf import FixedClock, Instant, build_registry
    >>> registry = build_registry(clock=FixedClock(Instant(86_400)))
    >>> registry.invoke("dt_localdate").to_dict()
    {'YEAR_FIELD': 1970, 'MONTH_FIELD': 1, 'DAY_FIELD': 2}
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from dtudf.core import (
    Clock,
    Duration,
    FixedClock,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    OffsetDateTime,
    Period,
    SystemClock,
    ZonedDateTime,
    ZoneId,
    ZoneOffset,
)

# Exceptions
from dtudf.errors import (
    DivisionByZeroError,
    DtUdfError,
    InvalidFieldError,
    InvalidModeError,
    ParseError,
    PatternError,
    TemporalOverflowError,
    UnknownFunctionError,
)

# Format functions
from dtudf.format import format_iso8601, format_pattern, parse_iso8601

# Records
from dtudf.records import Record, from_record, to_record

# Functions
from dtudf.functions import FunctionRegistry, build_registry

__all__: list[str] = [
    "__version__",
    # Core types
    "Clock",
    "Duration",
    "FixedClock",
    "Instant",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "OffsetDateTime",
    "Period",
    "SystemClock",
    "ZonedDateTime",
    "ZoneId",
    "ZoneOffset",
    # Exceptions
    "DtUdfError",
    "InvalidFieldError",
    "ParseError",
    "PatternError",
    "DivisionByZeroError",
    "TemporalOverflowError",
    "InvalidModeError",
    "UnknownFunctionError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
    "format_pattern",
    # Records
    "Record",
    "to_record",
    "from_record",
    # Functions
    "FunctionRegistry",
    "build_registry",
]
