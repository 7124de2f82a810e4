"""Converters between native temporal values and records.

Every temporal type has a ``<type>_to_record`` / ``<type>_from_record`` pair.
Composite types reuse the converters of their parts. Decoding validates the
record shape first and then every field's range, so a successfully decoded
value is always valid. Converters never receive None: absent values are
handled by the function layer before conversion.

Examples:
    >>> from dtudf.core import Duration, Period
    >>> to_record(Duration(-1, 500_000_000)).to_dict()
    {'SECONDS_FIELD': -1, 'NANOS_FIELD': 500000000}
    >>> from_record({"YEARS_FIELD": 1, "MONTHS_FIELD": 0, "DAYS_FIELD": 0}, Period)
    Period(years=1, months=0, days=0)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from dtudf._internal.constants import (
    MAX_INSTANT_SECOND,
    MIN_INSTANT_SECOND,
    NANOS_PER_SECOND,
)
from dtudf._internal.validation import validate_field
from dtudf.core import (
    Duration,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    OffsetDateTime,
    Period,
    ZonedDateTime,
    ZoneId,
    ZoneOffset,
)
from dtudf.records.schemas import (
    DURATION_SCHEMA,
    INSTANT_SCHEMA,
    LOCALDATE_SCHEMA,
    LOCALDATETIME_SCHEMA,
    LOCALTIME_SCHEMA,
    OFFSETDATETIME_SCHEMA,
    PERIOD_SCHEMA,
    ZONEDDATETIME_SCHEMA,
    ZONEID_SCHEMA,
    ZONEOFFSET_SCHEMA,
    Record,
    RecordSchema,
)

T = TypeVar("T")


# =============================================================================
# Instant / Duration / Period
# =============================================================================


def instant_to_record(value: Instant) -> Record:
    return Record(
        INSTANT_SCHEMA,
        {"SECONDS_FIELD": value.epoch_second, "NANOS_FIELD": value.nano},
    )


def instant_from_record(record: Mapping[str, Any]) -> Instant:
    r = Record(INSTANT_SCHEMA, record)
    seconds = validate_field(
        "Instant.SECONDS_FIELD", r["SECONDS_FIELD"], MIN_INSTANT_SECOND, MAX_INSTANT_SECOND
    )
    nanos = validate_field("Instant.NANOS_FIELD", r["NANOS_FIELD"], 0, NANOS_PER_SECOND - 1)
    return Instant(seconds, nanos)


def duration_to_record(value: Duration) -> Record:
    return Record(
        DURATION_SCHEMA,
        {"SECONDS_FIELD": value.seconds, "NANOS_FIELD": value.nanos},
    )


def duration_from_record(record: Mapping[str, Any]) -> Duration:
    r = Record(DURATION_SCHEMA, record)
    nanos = validate_field("Duration.NANOS_FIELD", r["NANOS_FIELD"], 0, NANOS_PER_SECOND - 1)
    return Duration(r["SECONDS_FIELD"], nanos)


def period_to_record(value: Period) -> Record:
    return Record(
        PERIOD_SCHEMA,
        {
            "YEARS_FIELD": value.years,
            "MONTHS_FIELD": value.months,
            "DAYS_FIELD": value.days,
        },
    )


def period_from_record(record: Mapping[str, Any]) -> Period:
    r = Record(PERIOD_SCHEMA, record)
    return Period(r["YEARS_FIELD"], r["MONTHS_FIELD"], r["DAYS_FIELD"])


# =============================================================================
# Local date / time
# =============================================================================


def local_date_to_record(value: LocalDate) -> Record:
    return Record(
        LOCALDATE_SCHEMA,
        {"YEAR_FIELD": value.year, "MONTH_FIELD": value.month, "DAY_FIELD": value.day},
    )


def local_date_from_record(record: Mapping[str, Any]) -> LocalDate:
    r = Record(LOCALDATE_SCHEMA, record)
    return LocalDate(r["YEAR_FIELD"], r["MONTH_FIELD"], r["DAY_FIELD"])


def local_time_to_record(value: LocalTime) -> Record:
    return Record(
        LOCALTIME_SCHEMA,
        {
            "HOUR_FIELD": value.hour,
            "MINUTE_FIELD": value.minute,
            "SECOND_FIELD": value.second,
            "NANO_FIELD": value.nano,
        },
    )


def local_time_from_record(record: Mapping[str, Any]) -> LocalTime:
    r = Record(LOCALTIME_SCHEMA, record)
    return LocalTime(
        r["HOUR_FIELD"], r["MINUTE_FIELD"], r["SECOND_FIELD"], r["NANO_FIELD"]
    )


def local_date_time_to_record(value: LocalDateTime) -> Record:
    return Record(
        LOCALDATETIME_SCHEMA,
        {
            "LOCALDATE_FIELD": local_date_to_record(value.date),
            "LOCALTIME_FIELD": local_time_to_record(value.time),
        },
    )


def local_date_time_from_record(record: Mapping[str, Any]) -> LocalDateTime:
    r = Record(LOCALDATETIME_SCHEMA, record)
    return LocalDateTime(
        local_date_from_record(r["LOCALDATE_FIELD"]),
        local_time_from_record(r["LOCALTIME_FIELD"]),
    )


# =============================================================================
# Zones
# =============================================================================


def zone_offset_to_record(value: ZoneOffset) -> Record:
    return Record(ZONEOFFSET_SCHEMA, {"TOTALSECONDS_FIELD": value.total_seconds})


def zone_offset_from_record(record: Mapping[str, Any]) -> ZoneOffset:
    r = Record(ZONEOFFSET_SCHEMA, record)
    return ZoneOffset(r["TOTALSECONDS_FIELD"])


def zone_id_to_record(value: ZoneId) -> Record:
    return Record(ZONEID_SCHEMA, {"ID_FIELD": value.id})


def zone_id_from_record(record: Mapping[str, Any]) -> ZoneId:
    """Decode a ZoneId record; offset-shaped ids such as "+02:00" are rejected."""
    r = Record(ZONEID_SCHEMA, record)
    return ZoneId(r["ID_FIELD"])


# =============================================================================
# Offset / zoned date-times
# =============================================================================


def offset_date_time_to_record(value: OffsetDateTime) -> Record:
    return Record(
        OFFSETDATETIME_SCHEMA,
        {
            "DATETIME_FIELD": local_date_time_to_record(value.datetime),
            "OFFSET_FIELD": zone_offset_to_record(value.offset),
        },
    )


def offset_date_time_from_record(record: Mapping[str, Any]) -> OffsetDateTime:
    r = Record(OFFSETDATETIME_SCHEMA, record)
    return OffsetDateTime(
        local_date_time_from_record(r["DATETIME_FIELD"]),
        zone_offset_from_record(r["OFFSET_FIELD"]),
    )


def zoned_date_time_to_record(value: ZonedDateTime) -> Record:
    return Record(
        ZONEDDATETIME_SCHEMA,
        {
            "DATETIME_FIELD": local_date_time_to_record(value.datetime),
            "OFFSET_FIELD": zone_offset_to_record(value.offset),
            "ZONE_FIELD": zone_id_to_record(value.zone),
        },
    )


def zoned_date_time_from_record(record: Mapping[str, Any]) -> ZonedDateTime:
    """Decode a ZonedDateTime record.

    The offset must be one the zone actually uses at that local date-time.
    """
    r = Record(ZONEDDATETIME_SCHEMA, record)
    return ZonedDateTime(
        local_date_time_from_record(r["DATETIME_FIELD"]),
        zone_offset_from_record(r["OFFSET_FIELD"]),
        zone_id_from_record(r["ZONE_FIELD"]),
    )


# =============================================================================
# Generic dispatch
# =============================================================================


@dataclass(frozen=True)
class Converter:
    """Encoder/decoder pair for one temporal type."""

    kind: type
    schema: RecordSchema
    encode: Callable[[Any], Record]
    decode: Callable[[Mapping[str, Any]], Any]


CONVERTERS: dict[type, Converter] = {
    c.kind: c
    for c in (
        Converter(Instant, INSTANT_SCHEMA, instant_to_record, instant_from_record),
        Converter(Duration, DURATION_SCHEMA, duration_to_record, duration_from_record),
        Converter(Period, PERIOD_SCHEMA, period_to_record, period_from_record),
        Converter(LocalDate, LOCALDATE_SCHEMA, local_date_to_record, local_date_from_record),
        Converter(LocalTime, LOCALTIME_SCHEMA, local_time_to_record, local_time_from_record),
        Converter(
            LocalDateTime,
            LOCALDATETIME_SCHEMA,
            local_date_time_to_record,
            local_date_time_from_record,
        ),
        Converter(ZoneOffset, ZONEOFFSET_SCHEMA, zone_offset_to_record, zone_offset_from_record),
        Converter(ZoneId, ZONEID_SCHEMA, zone_id_to_record, zone_id_from_record),
        Converter(
            OffsetDateTime,
            OFFSETDATETIME_SCHEMA,
            offset_date_time_to_record,
            offset_date_time_from_record,
        ),
        Converter(
            ZonedDateTime,
            ZONEDDATETIME_SCHEMA,
            zoned_date_time_to_record,
            zoned_date_time_from_record,
        ),
    )
}


def to_record(value: Any) -> Record:
    """Encode any temporal value as its record.

    Raises:
        TypeError: If value is not a temporal type.
    """
    converter = CONVERTERS.get(type(value))
    if converter is None:
        raise TypeError(f"no record form for {type(value).__name__}")
    return converter.encode(value)


def from_record(record: Mapping[str, Any], kind: type[T]) -> T:
    """Decode a record into a value of the given temporal type.

    Raises:
        InvalidFieldError: If a field is missing, mistyped or out of range.
        TypeError: If kind is not a temporal type.
    """
    converter = CONVERTERS.get(kind)
    if converter is None:
        raise TypeError(f"no record form for {kind.__name__}")
    return converter.decode(record)


def schema_for(kind: type) -> RecordSchema:
    return CONVERTERS[kind].schema


__all__ = [
    "Converter",
    "CONVERTERS",
    "to_record",
    "from_record",
    "schema_for",
    "instant_to_record",
    "instant_from_record",
    "duration_to_record",
    "duration_from_record",
    "period_to_record",
    "period_from_record",
    "local_date_to_record",
    "local_date_from_record",
    "local_time_to_record",
    "local_time_from_record",
    "local_date_time_to_record",
    "local_date_time_from_record",
    "zone_offset_to_record",
    "zone_offset_from_record",
    "zone_id_to_record",
    "zone_id_from_record",
    "offset_date_time_to_record",
    "offset_date_time_from_record",
    "zoned_date_time_to_record",
    "zoned_date_time_from_record",
]
