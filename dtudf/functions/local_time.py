"""LocalTime functions: dt_localtime, dt_localtime_plus, dt_localtime_minus,
dt_localtime_chronology and dt_localtime_format.

Time arithmetic wraps around midnight.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from dtudf.core import Clock, LocalTime
from dtudf.format.pattern import format_pattern, parse_local_time
from dtudf.functions.base import check_chronology, null_propagating, resolve_clock
from dtudf.records.converters import (
    duration_from_record,
    local_time_from_record,
    local_time_to_record,
)
from dtudf.records.schemas import Record

Struct = Mapping[str, Any]


@null_propagating
def local_time_now(*, clock: Clock | None = None) -> Record:
    return local_time_to_record(LocalTime.now(resolve_clock(clock)))


@null_propagating
def local_time_of(hour: int, minute: int, second: int, nano: int = 0) -> Record:
    return local_time_to_record(LocalTime.of(hour, minute, second, nano))


@null_propagating
def local_time_parse(text: str) -> Record:
    return local_time_to_record(LocalTime.parse(text))


@null_propagating
def local_time_parse_pattern(text: str, pattern: str) -> Record:
    return local_time_to_record(parse_local_time(text, pattern))


@null_propagating
def local_time_plus(local_time: Struct, duration: Struct) -> Record:
    return local_time_to_record(
        local_time_from_record(local_time).plus(duration_from_record(duration))
    )


@null_propagating
def local_time_plus_components(
    local_time: Struct, hours: int, minutes: int, seconds: int, nanos: int
) -> Record:
    return local_time_to_record(
        local_time_from_record(local_time)
        .plus_hours(hours)
        .plus_minutes(minutes)
        .plus_seconds(seconds)
        .plus_nanos(nanos)
    )


@null_propagating
def local_time_minus(local_time: Struct, duration: Struct) -> Record:
    return local_time_to_record(
        local_time_from_record(local_time).minus(duration_from_record(duration))
    )


@null_propagating
def local_time_minus_components(
    local_time: Struct, hours: int, minutes: int, seconds: int, nanos: int
) -> Record:
    return local_time_to_record(
        local_time_from_record(local_time)
        .plus_hours(-hours)
        .plus_minutes(-minutes)
        .plus_seconds(-seconds)
        .plus_nanos(-nanos)
    )


@null_propagating
def local_time_chronology(
    base_local_time: Struct,
    local_time: Struct,
    mode: str,
    *,
    logger: logging.Logger | None = None,
) -> bool | None:
    return check_chronology(
        local_time_from_record(base_local_time),
        local_time_from_record(local_time),
        mode,
        logger=logger,
    )


@null_propagating
def local_time_format(local_time: Struct) -> str:
    return local_time_from_record(local_time).to_iso_format()


@null_propagating
def local_time_format_pattern(local_time: Struct, pattern: str) -> str:
    return format_pattern(local_time_from_record(local_time), pattern)


__all__ = [
    "local_time_now",
    "local_time_of",
    "local_time_parse",
    "local_time_parse_pattern",
    "local_time_plus",
    "local_time_plus_components",
    "local_time_minus",
    "local_time_minus_components",
    "local_time_chronology",
    "local_time_format",
    "local_time_format_pattern",
]
