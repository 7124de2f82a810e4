"""Zone functions: dt_zoneoffset, dt_zoneoffset_stringify and dt_zoneid."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dtudf.core import Clock, ZoneId, ZoneOffset
from dtudf.functions.base import null_propagating, resolve_clock
from dtudf.records.converters import (
    zone_id_to_record,
    zone_offset_from_record,
    zone_offset_to_record,
)
from dtudf.records.schemas import Record

Struct = Mapping[str, Any]


@null_propagating
def zone_offset_of(hours: int, minutes: int, seconds: int) -> Record:
    """Build an offset from components that share one sign."""
    return zone_offset_to_record(
        ZoneOffset.of_hours_minutes_seconds(hours, minutes, seconds)
    )


@null_propagating
def zone_offset_of_total_seconds(total_seconds: int) -> Record:
    return zone_offset_to_record(ZoneOffset.of_total_seconds(total_seconds))


@null_propagating
def zone_offset_parse(text: str) -> Record:
    return zone_offset_to_record(ZoneOffset.parse(text))


@null_propagating
def zone_offset_stringify(zone_offset: Struct) -> str:
    """Return "Z", "+hh:mm" or "+hh:mm:ss"."""
    return zone_offset_from_record(zone_offset).id


@null_propagating
def zone_id_default(*, clock: Clock | None = None) -> Record:
    """The zone of the clock."""
    return zone_id_to_record(resolve_clock(clock).zone)


@null_propagating
def zone_id_of(text: str) -> Record:
    """Build a region zone such as "Europe/Berlin".

    Raises:
        InvalidFieldError: If text is an offset such as "+02:00" or names no
            known region.
    """
    return zone_id_to_record(ZoneId.of(text))


__all__ = [
    "zone_offset_of",
    "zone_offset_of_total_seconds",
    "zone_offset_parse",
    "zone_offset_stringify",
    "zone_id_default",
    "zone_id_of",
]
