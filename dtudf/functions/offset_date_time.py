"""OffsetDateTime functions: dt_offsetdatetime, dt_offsetdatetime_plus,
dt_offsetdatetime_minus, dt_offsetdatetime_chronology and
dt_offsetdatetime_format.

Arithmetic keeps the offset. Chronology checks compare instants, so
10:00+02:00 IS_EQUAL 08:00Z.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from dtudf.core import Clock, OffsetDateTime
from dtudf.format.pattern import format_pattern, parse_offset_date_time
from dtudf.functions.base import check_chronology, null_propagating, resolve_clock
from dtudf.records.converters import (
    duration_from_record,
    local_date_from_record,
    local_date_time_from_record,
    local_time_from_record,
    offset_date_time_from_record,
    offset_date_time_to_record,
    period_from_record,
    zone_id_from_record,
    zone_offset_from_record,
)
from dtudf.records.schemas import Record

Struct = Mapping[str, Any]


@null_propagating
def offset_date_time_now(*, clock: Clock | None = None) -> Record:
    return offset_date_time_to_record(OffsetDateTime.now(resolve_clock(clock)))


@null_propagating
def offset_date_time_now_in_zone(zone_id: Struct, *, clock: Clock | None = None) -> Record:
    return offset_date_time_to_record(
        OffsetDateTime.now(resolve_clock(clock), zone_id_from_record(zone_id))
    )


@null_propagating
def offset_date_time_of(local_date_time: Struct, zone_offset: Struct) -> Record:
    return offset_date_time_to_record(
        OffsetDateTime.of(
            local_date_time_from_record(local_date_time),
            zone_offset_from_record(zone_offset),
        )
    )


@null_propagating
def offset_date_time_of_date_time(
    local_date: Struct, local_time: Struct, zone_offset: Struct
) -> Record:
    return offset_date_time_to_record(
        OffsetDateTime.of_date_time(
            local_date_from_record(local_date),
            local_time_from_record(local_time),
            zone_offset_from_record(zone_offset),
        )
    )


@null_propagating
def offset_date_time_parse(text: str) -> Record:
    return offset_date_time_to_record(OffsetDateTime.parse(text))


@null_propagating
def offset_date_time_parse_pattern(text: str, pattern: str) -> Record:
    return offset_date_time_to_record(parse_offset_date_time(text, pattern))


@null_propagating
def offset_date_time_plus(
    offset_date_time: Struct, period: Struct, duration: Struct
) -> Record:
    return offset_date_time_to_record(
        offset_date_time_from_record(offset_date_time)
        .plus(period_from_record(period))
        .plus(duration_from_record(duration))
    )


@null_propagating
def offset_date_time_plus_components(
    offset_date_time: Struct,
    years: int,
    months: int,
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    nanos: int,
) -> Record:
    return offset_date_time_to_record(
        offset_date_time_from_record(offset_date_time)
        .plus_years(years)
        .plus_months(months)
        .plus_days(days)
        .plus_hours(hours)
        .plus_minutes(minutes)
        .plus_seconds(seconds)
        .plus_nanos(nanos)
    )


@null_propagating
def offset_date_time_minus(
    offset_date_time: Struct, period: Struct, duration: Struct
) -> Record:
    return offset_date_time_to_record(
        offset_date_time_from_record(offset_date_time)
        .minus(period_from_record(period))
        .minus(duration_from_record(duration))
    )


@null_propagating
def offset_date_time_minus_components(
    offset_date_time: Struct,
    years: int,
    months: int,
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    nanos: int,
) -> Record:
    return offset_date_time_to_record(
        offset_date_time_from_record(offset_date_time)
        .plus_years(-years)
        .plus_months(-months)
        .plus_days(-days)
        .plus_hours(-hours)
        .plus_minutes(-minutes)
        .plus_seconds(-seconds)
        .plus_nanos(-nanos)
    )


@null_propagating
def offset_date_time_chronology(
    base_offset_date_time: Struct,
    offset_date_time: Struct,
    mode: str,
    *,
    logger: logging.Logger | None = None,
) -> bool | None:
    return check_chronology(
        offset_date_time_from_record(base_offset_date_time),
        offset_date_time_from_record(offset_date_time),
        mode,
        logger=logger,
    )


@null_propagating
def offset_date_time_format(offset_date_time: Struct) -> str:
    return offset_date_time_from_record(offset_date_time).to_iso_format()


@null_propagating
def offset_date_time_format_pattern(offset_date_time: Struct, pattern: str) -> str:
    return format_pattern(offset_date_time_from_record(offset_date_time), pattern)


__all__ = [
    "offset_date_time_now",
    "offset_date_time_now_in_zone",
    "offset_date_time_of",
    "offset_date_time_of_date_time",
    "offset_date_time_parse",
    "offset_date_time_parse_pattern",
    "offset_date_time_plus",
    "offset_date_time_plus_components",
    "offset_date_time_minus",
    "offset_date_time_minus_components",
    "offset_date_time_chronology",
    "offset_date_time_format",
    "offset_date_time_format_pattern",
]
