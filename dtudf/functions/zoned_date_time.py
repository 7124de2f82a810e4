"""ZonedDateTime functions: dt_zoneddatetime, dt_zoneddatetime_plus,
dt_zoneddatetime_minus, dt_zoneddatetime_chronology and
dt_zoneddatetime_format.

Years, months and days move the local date-time and keep the current offset
where the zone still allows it. Hours and smaller units move the instant, so
adding 1 hour across a daylight-saving change always advances by 3600 s.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from dtudf.core import Clock, ZonedDateTime
from dtudf.format.pattern import format_pattern, parse_zoned_date_time
from dtudf.functions.base import check_chronology, null_propagating, resolve_clock
from dtudf.records.converters import (
    duration_from_record,
    local_date_time_from_record,
    period_from_record,
    zone_id_from_record,
    zone_offset_from_record,
    zoned_date_time_from_record,
    zoned_date_time_to_record,
)
from dtudf.records.schemas import Record

Struct = Mapping[str, Any]


@null_propagating
def zoned_date_time_now(*, clock: Clock | None = None) -> Record:
    return zoned_date_time_to_record(ZonedDateTime.now(resolve_clock(clock)))


@null_propagating
def zoned_date_time_now_in_zone(zone_id: Struct, *, clock: Clock | None = None) -> Record:
    return zoned_date_time_to_record(
        ZonedDateTime.now(resolve_clock(clock), zone_id_from_record(zone_id))
    )


@null_propagating
def zoned_date_time_of(local_date_time: Struct, zone_id: Struct) -> Record:
    """Resolve a local date-time in a zone.

    In an overlap the earlier offset wins; in a gap the time moves forward
    by the length of the gap.
    """
    return zoned_date_time_to_record(
        ZonedDateTime.of(
            local_date_time_from_record(local_date_time),
            zone_id_from_record(zone_id),
        )
    )


@null_propagating
def zoned_date_time_of_local(
    local_date_time: Struct, zone_id: Struct, preferred_offset: Struct
) -> Record:
    """Resolve a local date-time, keeping preferred_offset in an overlap."""
    return zoned_date_time_to_record(
        ZonedDateTime.of_local(
            local_date_time_from_record(local_date_time),
            zone_id_from_record(zone_id),
            zone_offset_from_record(preferred_offset),
        )
    )


@null_propagating
def zoned_date_time_parse(text: str) -> Record:
    return zoned_date_time_to_record(ZonedDateTime.parse(text))


@null_propagating
def zoned_date_time_parse_pattern(text: str, pattern: str) -> Record:
    return zoned_date_time_to_record(parse_zoned_date_time(text, pattern))


@null_propagating
def zoned_date_time_plus(
    zoned_date_time: Struct, period: Struct, duration: Struct
) -> Record:
    return zoned_date_time_to_record(
        zoned_date_time_from_record(zoned_date_time)
        .plus(period_from_record(period))
        .plus(duration_from_record(duration))
    )


@null_propagating
def zoned_date_time_plus_components(
    zoned_date_time: Struct,
    years: int,
    months: int,
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    nanos: int,
) -> Record:
    return zoned_date_time_to_record(
        zoned_date_time_from_record(zoned_date_time)
        .plus_years(years)
        .plus_months(months)
        .plus_days(days)
        .plus_hours(hours)
        .plus_minutes(minutes)
        .plus_seconds(seconds)
        .plus_nanos(nanos)
    )


@null_propagating
def zoned_date_time_minus(
    zoned_date_time: Struct, period: Struct, duration: Struct
) -> Record:
    return zoned_date_time_to_record(
        zoned_date_time_from_record(zoned_date_time)
        .minus(period_from_record(period))
        .minus(duration_from_record(duration))
    )


@null_propagating
def zoned_date_time_minus_components(
    zoned_date_time: Struct,
    years: int,
    months: int,
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    nanos: int,
) -> Record:
    return zoned_date_time_to_record(
        zoned_date_time_from_record(zoned_date_time)
        .plus_years(-years)
        .plus_months(-months)
        .plus_days(-days)
        .plus_hours(-hours)
        .plus_minutes(-minutes)
        .plus_seconds(-seconds)
        .plus_nanos(-nanos)
    )


@null_propagating
def zoned_date_time_chronology(
    base_zoned_date_time: Struct,
    zoned_date_time: Struct,
    mode: str,
    *,
    logger: logging.Logger | None = None,
) -> bool | None:
    return check_chronology(
        zoned_date_time_from_record(base_zoned_date_time),
        zoned_date_time_from_record(zoned_date_time),
        mode,
        logger=logger,
    )


@null_propagating
def zoned_date_time_format(zoned_date_time: Struct) -> str:
    return zoned_date_time_from_record(zoned_date_time).to_iso_format()


@null_propagating
def zoned_date_time_format_pattern(zoned_date_time: Struct, pattern: str) -> str:
    return format_pattern(zoned_date_time_from_record(zoned_date_time), pattern)


__all__ = [
    "zoned_date_time_now",
    "zoned_date_time_now_in_zone",
    "zoned_date_time_of",
    "zoned_date_time_of_local",
    "zoned_date_time_parse",
    "zoned_date_time_parse_pattern",
    "zoned_date_time_plus",
    "zoned_date_time_plus_components",
    "zoned_date_time_minus",
    "zoned_date_time_minus_components",
    "zoned_date_time_chronology",
    "zoned_date_time_format",
    "zoned_date_time_format_pattern",
]
