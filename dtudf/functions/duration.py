"""Duration functions.

Covers dt_duration, dt_duration_plus, dt_duration_minus, dt_duration_multiply,
dt_duration_divide, dt_duration_between and dt_duration_stringify.

Dividing by a number gives a Duration; dividing by a Duration gives the whole
number of times the divisor fits. Both raise DivisionByZeroError for a zero
divisor, which is never turned into None.

Examples:
    >>> ten = {"SECONDS_FIELD": 10, "NANOS_FIELD": 0}
    >>> duration_divide(ten, 3).to_dict()
    {'SECONDS_FIELD': 3, 'NANOS_FIELD': 333333333}
    >>> duration_divide_by_duration(ten, {"SECONDS_FIELD": 5, "NANOS_FIELD": 0})
    2
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dtudf.core import (
    Clock,
    Duration,
    Instant,
    LocalDateTime,
    LocalTime,
)
from dtudf.functions.base import fold, null_propagating, resolve_clock
from dtudf.records.converters import (
    duration_from_record,
    duration_to_record,
    instant_from_record,
    local_date_time_from_record,
    local_time_from_record,
    offset_date_time_from_record,
    zoned_date_time_from_record,
)
from dtudf.records.schemas import Record

Struct = Mapping[str, Any]


# =============================================================================
# Factories
# =============================================================================


@null_propagating
def duration_zero() -> Record:
    return duration_to_record(Duration.zero())


@null_propagating
def duration_of_seconds(seconds: int, nano_adjustment: int = 0) -> Record:
    return duration_to_record(Duration.of_seconds(seconds, nano_adjustment))


@null_propagating
def duration_parse(text: str) -> Record:
    """Parse ISO-8601 duration text such as "PT1H30M" or "P2DT0.5S"."""
    return duration_to_record(Duration.parse(text))


# =============================================================================
# Arithmetic
# =============================================================================


@null_propagating
def duration_plus(duration: Struct, other: Struct) -> Record:
    return duration_to_record(
        duration_from_record(duration).plus(duration_from_record(other))
    )


@null_propagating
def duration_plus_all(duration: Struct, others: list[Struct]) -> Record:
    return duration_to_record(
        fold(
            duration_from_record(duration),
            others,
            lambda acc, item: acc.plus(duration_from_record(item)),
        )
    )


@null_propagating
def duration_minus(duration: Struct, other: Struct) -> Record:
    return duration_to_record(
        duration_from_record(duration).minus(duration_from_record(other))
    )


@null_propagating
def duration_minus_all(duration: Struct, others: list[Struct]) -> Record:
    return duration_to_record(
        fold(
            duration_from_record(duration),
            others,
            lambda acc, item: acc.minus(duration_from_record(item)),
        )
    )


@null_propagating
def duration_multiply(duration: Struct, scalar: int) -> Record:
    return duration_to_record(duration_from_record(duration).multiplied_by(scalar))


@null_propagating
def duration_divide(duration: Struct, divisor: int) -> Record:
    """Divide by a number, truncating toward zero at nanosecond resolution.

    Raises:
        DivisionByZeroError: If divisor is 0.
    """
    return duration_to_record(duration_from_record(duration).divided_by(divisor))


@null_propagating
def duration_divide_by_duration(duration: Struct, divisor: Struct) -> int:
    """Return how many whole times divisor fits into duration.

    Raises:
        DivisionByZeroError: If divisor is a zero duration.
    """
    return duration_from_record(duration).divided_by(duration_from_record(divisor))


# =============================================================================
# Between
# =============================================================================


@null_propagating
def duration_between_local_times(start: Struct, end: Struct) -> Record:
    """Negative when start is after end."""
    return duration_to_record(
        Duration.between(local_time_from_record(start), local_time_from_record(end))
    )


@null_propagating
def duration_between_local_date_times(start: Struct, end: Struct) -> Record:
    return duration_to_record(
        Duration.between(
            local_date_time_from_record(start), local_date_time_from_record(end)
        )
    )


@null_propagating
def duration_between_instants(start: Struct, end: Struct) -> Record:
    return duration_to_record(
        Duration.between(instant_from_record(start), instant_from_record(end))
    )


@null_propagating
def duration_between_offset_date_times(start: Struct, end: Struct) -> Record:
    return duration_to_record(
        Duration.between(
            offset_date_time_from_record(start), offset_date_time_from_record(end)
        )
    )


@null_propagating
def duration_between_zoned_date_times(start: Struct, end: Struct) -> Record:
    return duration_to_record(
        Duration.between(
            zoned_date_time_from_record(start), zoned_date_time_from_record(end)
        )
    )


@null_propagating
def duration_until_now_local_time(
    local_time: Struct, *, clock: Clock | None = None
) -> Record:
    """Duration from local_time to the current time of day.

    Negative when local_time is later than the clock's current time.
    """
    now = LocalTime.now(resolve_clock(clock))
    return duration_to_record(Duration.between(local_time_from_record(local_time), now))


@null_propagating
def duration_until_now_local_date_time(
    local_date_time: Struct, *, clock: Clock | None = None
) -> Record:
    now = LocalDateTime.now(resolve_clock(clock))
    return duration_to_record(
        Duration.between(local_date_time_from_record(local_date_time), now)
    )


@null_propagating
def duration_until_now_instant(instant: Struct, *, clock: Clock | None = None) -> Record:
    now = Instant.now(resolve_clock(clock))
    return duration_to_record(Duration.between(instant_from_record(instant), now))


@null_propagating
def duration_stringify(duration: Struct) -> str:
    return duration_from_record(duration).to_iso_format()


__all__ = [
    "duration_zero",
    "duration_of_seconds",
    "duration_parse",
    "duration_plus",
    "duration_plus_all",
    "duration_minus",
    "duration_minus_all",
    "duration_multiply",
    "duration_divide",
    "duration_divide_by_duration",
    "duration_between_local_times",
    "duration_between_local_date_times",
    "duration_between_instants",
    "duration_between_offset_date_times",
    "duration_between_zoned_date_times",
    "duration_until_now_local_time",
    "duration_until_now_local_date_time",
    "duration_until_now_instant",
    "duration_stringify",
]
