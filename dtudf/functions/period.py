"""Period functions.

Covers dt_period, dt_period_plus, dt_period_minus, dt_period_multiply,
dt_period_normalize, dt_period_between and dt_period_stringify.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dtudf.core import Clock, LocalDate, Period
from dtudf.functions.base import fold, null_propagating, resolve_clock
from dtudf.records.converters import (
    local_date_from_record,
    period_from_record,
    period_to_record,
)
from dtudf.records.schemas import Record

Struct = Mapping[str, Any]


@null_propagating
def period_zero() -> Record:
    return period_to_record(Period.zero())


@null_propagating
def period_of(years: int, months: int, days: int) -> Record:
    return period_to_record(Period.of(years, months, days))


@null_propagating
def period_parse(text: str) -> Record:
    """Parse ISO-8601 period text such as "P1Y2M3D" or "P2W"."""
    return period_to_record(Period.parse(text))


@null_propagating
def period_plus(period: Struct, other: Struct) -> Record:
    return period_to_record(period_from_record(period).plus(period_from_record(other)))


@null_propagating
def period_plus_all(period: Struct, others: list[Struct]) -> Record:
    return period_to_record(
        fold(
            period_from_record(period),
            others,
            lambda acc, item: acc.plus(period_from_record(item)),
        )
    )


@null_propagating
def period_minus(period: Struct, other: Struct) -> Record:
    return period_to_record(period_from_record(period).minus(period_from_record(other)))


@null_propagating
def period_minus_all(period: Struct, others: list[Struct]) -> Record:
    return period_to_record(
        fold(
            period_from_record(period),
            others,
            lambda acc, item: acc.minus(period_from_record(item)),
        )
    )


@null_propagating
def period_multiply(period: Struct, scalar: int) -> Record:
    return period_to_record(period_from_record(period).multiplied_by(scalar))


@null_propagating
def period_normalize(period: Struct) -> Record:
    """Fold months into years, e.g. P1Y15M10D becomes P2Y3M10D."""
    return period_to_record(period_from_record(period).normalized())


@null_propagating
def period_between(start: Struct, end: Struct) -> Record:
    """Period from start to end; negative when start is after end."""
    return period_to_record(
        Period.between(local_date_from_record(start), local_date_from_record(end))
    )


@null_propagating
def period_until_today(local_date: Struct, *, clock: Clock | None = None) -> Record:
    """Period from local_date to today; negative when local_date is in the future."""
    today = LocalDate.now(resolve_clock(clock))
    return period_to_record(Period.between(local_date_from_record(local_date), today))


@null_propagating
def period_stringify(period: Struct) -> str:
    return period_from_record(period).to_iso_format()


__all__ = [
    "period_zero",
    "period_of",
    "period_parse",
    "period_plus",
    "period_plus_all",
    "period_minus",
    "period_minus_all",
    "period_multiply",
    "period_normalize",
    "period_between",
    "period_until_today",
    "period_stringify",
]
