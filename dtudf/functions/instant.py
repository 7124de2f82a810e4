"""Instant functions: dt_instant, dt_instant_plus, dt_instant_minus and
dt_instant_chronology."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from dtudf.core import Clock, Instant
from dtudf.functions.base import check_chronology, null_propagating, resolve_clock
from dtudf.records.converters import (
    duration_from_record,
    instant_from_record,
    instant_to_record,
)
from dtudf.records.schemas import Record

Struct = Mapping[str, Any]


@null_propagating
def instant_now(*, clock: Clock | None = None) -> Record:
    return instant_to_record(Instant.now(resolve_clock(clock)))


@null_propagating
def instant_of_epoch_milli(millis: int) -> Record:
    return instant_to_record(Instant.of_epoch_milli(millis))


@null_propagating
def instant_of_epoch_second(seconds: int, nano_adjustment: int) -> Record:
    return instant_to_record(Instant.of_epoch_second(seconds, nano_adjustment))


@null_propagating
def instant_parse(text: str) -> Record:
    """Parse text such as "2020-01-01T10:15:30.123Z"."""
    return instant_to_record(Instant.parse(text))


@null_propagating
def instant_plus(instant: Struct, duration: Struct) -> Record:
    return instant_to_record(
        instant_from_record(instant).plus(duration_from_record(duration))
    )


@null_propagating
def instant_plus_components(instant: Struct, seconds: int, nanos: int) -> Record:
    return instant_to_record(
        instant_from_record(instant).plus_seconds(seconds).plus_nanos(nanos)
    )


@null_propagating
def instant_minus(instant: Struct, duration: Struct) -> Record:
    return instant_to_record(
        instant_from_record(instant).minus(duration_from_record(duration))
    )


@null_propagating
def instant_minus_components(instant: Struct, seconds: int, nanos: int) -> Record:
    return instant_to_record(
        instant_from_record(instant).plus_seconds(-seconds).plus_nanos(-nanos)
    )


@null_propagating
def instant_chronology(
    base_instant: Struct,
    instant: Struct,
    mode: str,
    *,
    logger: logging.Logger | None = None,
) -> bool | None:
    return check_chronology(
        instant_from_record(base_instant),
        instant_from_record(instant),
        mode,
        logger=logger,
    )


__all__ = [
    "instant_now",
    "instant_of_epoch_milli",
    "instant_of_epoch_second",
    "instant_parse",
    "instant_plus",
    "instant_plus_components",
    "instant_minus",
    "instant_minus_components",
    "instant_chronology",
]
