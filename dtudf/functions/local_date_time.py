"""LocalDateTime functions: dt_localdatetime, dt_localdatetime_plus,
dt_localdatetime_minus, dt_localdatetime_chronology and dt_localdatetime_format.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from dtudf.core import Clock, Instant, LocalDateTime, ZoneOffset
from dtudf.format.pattern import format_pattern, parse_local_date_time
from dtudf.functions.base import check_chronology, null_propagating, resolve_clock
from dtudf.records.converters import (
    duration_from_record,
    local_date_from_record,
    local_date_time_from_record,
    local_date_time_to_record,
    local_time_from_record,
    period_from_record,
)
from dtudf.records.schemas import Record

Struct = Mapping[str, Any]


@null_propagating
def local_date_time_now(*, clock: Clock | None = None) -> Record:
    return local_date_time_to_record(LocalDateTime.now(resolve_clock(clock)))


@null_propagating
def local_date_time_of(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    nano: int,
) -> Record:
    return local_date_time_to_record(
        LocalDateTime.of(year, month, day, hour, minute, second, nano)
    )


@null_propagating
def local_date_time_of_epoch_milli(epoch_millis: int) -> Record:
    """The UTC date-time at epoch_millis; negative values count back from 1970."""
    instant = Instant.of_epoch_milli(epoch_millis)
    return local_date_time_to_record(
        LocalDateTime.of_epoch_second(instant.epoch_second, instant.nano, ZoneOffset.UTC)
    )


@null_propagating
def local_date_time_of_date_time(local_date: Struct, local_time: Struct) -> Record:
    return local_date_time_to_record(
        LocalDateTime(local_date_from_record(local_date), local_time_from_record(local_time))
    )


@null_propagating
def local_date_time_parse(text: str) -> Record:
    return local_date_time_to_record(LocalDateTime.parse(text))


@null_propagating
def local_date_time_parse_pattern(text: str, pattern: str) -> Record:
    return local_date_time_to_record(parse_local_date_time(text, pattern))


@null_propagating
def local_date_time_plus(
    local_date_time: Struct, period: Struct, duration: Struct
) -> Record:
    """Add the period first, then the duration."""
    return local_date_time_to_record(
        local_date_time_from_record(local_date_time)
        .plus(period_from_record(period))
        .plus(duration_from_record(duration))
    )


@null_propagating
def local_date_time_plus_components(
    local_date_time: Struct,
    years: int,
    months: int,
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    nanos: int,
) -> Record:
    return local_date_time_to_record(
        local_date_time_from_record(local_date_time)
        .plus_years(years)
        .plus_months(months)
        .plus_days(days)
        .plus_hours(hours)
        .plus_minutes(minutes)
        .plus_seconds(seconds)
        .plus_nanos(nanos)
    )


@null_propagating
def local_date_time_minus(
    local_date_time: Struct, period: Struct, duration: Struct
) -> Record:
    """Subtract the period first, then the duration."""
    return local_date_time_to_record(
        local_date_time_from_record(local_date_time)
        .minus(period_from_record(period))
        .minus(duration_from_record(duration))
    )


@null_propagating
def local_date_time_minus_components(
    local_date_time: Struct,
    years: int,
    months: int,
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    nanos: int,
) -> Record:
    return local_date_time_to_record(
        local_date_time_from_record(local_date_time)
        .plus_years(-years)
        .plus_months(-months)
        .plus_days(-days)
        .plus_hours(-hours)
        .plus_minutes(-minutes)
        .plus_seconds(-seconds)
        .plus_nanos(-nanos)
    )


@null_propagating
def local_date_time_chronology(
    base_local_date_time: Struct,
    local_date_time: Struct,
    mode: str,
    *,
    logger: logging.Logger | None = None,
) -> bool | None:
    return check_chronology(
        local_date_time_from_record(base_local_date_time),
        local_date_time_from_record(local_date_time),
        mode,
        logger=logger,
    )


@null_propagating
def local_date_time_format(local_date_time: Struct) -> str:
    return local_date_time_from_record(local_date_time).to_iso_format()


@null_propagating
def local_date_time_format_pattern(local_date_time: Struct, pattern: str) -> str:
    return format_pattern(local_date_time_from_record(local_date_time), pattern)


__all__ = [
    "local_date_time_now",
    "local_date_time_of",
    "local_date_time_of_epoch_milli",
    "local_date_time_of_date_time",
    "local_date_time_parse",
    "local_date_time_parse_pattern",
    "local_date_time_plus",
    "local_date_time_plus_components",
    "local_date_time_minus",
    "local_date_time_minus_components",
    "local_date_time_chronology",
    "local_date_time_format",
    "local_date_time_format_pattern",
]
