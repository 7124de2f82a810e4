"""LocalDate functions: dt_localdate, dt_localdate_plus, dt_localdate_minus,
dt_localdate_chronology and dt_localdate_format."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from dtudf.core import Clock, LocalDate
from dtudf.format.pattern import format_pattern, parse_local_date
from dtudf.functions.base import check_chronology, null_propagating, resolve_clock
from dtudf.records.converters import (
    local_date_from_record,
    local_date_to_record,
    period_from_record,
)
from dtudf.records.schemas import Record

Struct = Mapping[str, Any]


@null_propagating
def local_date_now(*, clock: Clock | None = None) -> Record:
    """Today's date in the clock's zone."""
    return local_date_to_record(LocalDate.now(resolve_clock(clock)))


@null_propagating
def local_date_of(year: int, month: int, day: int) -> Record:
    return local_date_to_record(LocalDate.of(year, month, day))


@null_propagating
def local_date_of_epoch_day(epoch_days: int) -> Record:
    return local_date_to_record(LocalDate.of_epoch_day(epoch_days))


@null_propagating
def local_date_parse(text: str) -> Record:
    return local_date_to_record(LocalDate.parse(text))


@null_propagating
def local_date_parse_pattern(text: str, pattern: str) -> Record:
    return local_date_to_record(parse_local_date(text, pattern))


@null_propagating
def local_date_plus(local_date: Struct, period: Struct) -> Record:
    return local_date_to_record(
        local_date_from_record(local_date).plus(period_from_record(period))
    )


@null_propagating
def local_date_plus_components(
    local_date: Struct, years: int, months: int, days: int
) -> Record:
    """Add years, then months, then days."""
    return local_date_to_record(
        local_date_from_record(local_date)
        .plus_years(years)
        .plus_months(months)
        .plus_days(days)
    )


@null_propagating
def local_date_minus(local_date: Struct, period: Struct) -> Record:
    return local_date_to_record(
        local_date_from_record(local_date).minus(period_from_record(period))
    )


@null_propagating
def local_date_minus_components(
    local_date: Struct, years: int, months: int, days: int
) -> Record:
    """Subtract years, then months, then days."""
    return local_date_to_record(
        local_date_from_record(local_date)
        .plus_years(-years)
        .plus_months(-months)
        .plus_days(-days)
    )


@null_propagating
def local_date_chronology(
    base_local_date: Struct,
    local_date: Struct,
    mode: str,
    *,
    logger: logging.Logger | None = None,
) -> bool | None:
    return check_chronology(
        local_date_from_record(base_local_date),
        local_date_from_record(local_date),
        mode,
        logger=logger,
    )


@null_propagating
def local_date_format(local_date: Struct) -> str:
    return local_date_from_record(local_date).to_iso_format()


@null_propagating
def local_date_format_pattern(local_date: Struct, pattern: str) -> str:
    return format_pattern(local_date_from_record(local_date), pattern)


__all__ = [
    "local_date_now",
    "local_date_of",
    "local_date_of_epoch_day",
    "local_date_parse",
    "local_date_parse_pattern",
    "local_date_plus",
    "local_date_plus_components",
    "local_date_minus",
    "local_date_minus_components",
    "local_date_chronology",
    "local_date_format",
    "local_date_format_pattern",
]
