"""Record schemas: the fixed wire shapes of the temporal types.

Each temporal type crosses the host boundary as a record with fixed,
uppercase field names. Composite types nest the records of their parts.
Schemas also render the host's type descriptor strings, e.g.
``STRUCT<SECONDS_FIELD BIGINT,NANOS_FIELD INTEGER>``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from dtudf._internal.validation import validate_int32, validate_int64
from dtudf.errors import InvalidFieldError


class FieldType(Enum):
    """Scalar wire types, valued by their host descriptor."""

    INT32 = "INTEGER"
    INT64 = "BIGINT"
    STRING = "VARCHAR"
    BOOLEAN = "BOOLEAN"

    @property
    def descriptor(self) -> str:
        return self.value

    def accepts(self, value: Any) -> bool:
        """Whether value has the right Python type (range is not checked)."""
        if self in (FieldType.INT32, FieldType.INT64):
            return isinstance(value, int) and not isinstance(value, bool)
        if self is FieldType.STRING:
            return isinstance(value, str)
        return isinstance(value, bool)

    def validate(self, name: str, value: Any) -> Any:
        """Check value's type and bit range.

        Raises:
            InvalidFieldError: If value does not fit this wire type.
        """
        if self is FieldType.INT32:
            return validate_int32(name, value)
        if self is FieldType.INT64:
            return validate_int64(name, value)
        if not self.accepts(value):
            raise InvalidFieldError(
                f"{name} must be {self.descriptor}, got {type(value).__name__}"
            )
        return value


@dataclass(frozen=True)
class Field:
    name: str
    type: Union[FieldType, "RecordSchema"]

    @property
    def descriptor(self) -> str:
        return f"{self.name} {self.type.descriptor}"


@dataclass(frozen=True)
class RecordSchema:
    """An ordered set of named, typed fields."""

    name: str
    fields: tuple[Field, ...]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def descriptor(self) -> str:
        return "STRUCT<" + ",".join(f.descriptor for f in self.fields) + ">"

    def matches(self, value: Any) -> bool:
        """Whether value is a mapping with exactly this schema's field names."""
        return isinstance(value, Mapping) and set(value.keys()) == set(self.field_names)

    def validate(self, name: str, value: Any) -> Record:
        return Record(self, value)


@dataclass(frozen=True)
class ArraySchema:
    """A list of records sharing one schema."""

    element: RecordSchema

    @property
    def name(self) -> str:
        return f"{self.element.name}[]"

    @property
    def descriptor(self) -> str:
        return f"ARRAY<{self.element.descriptor}>"

    def matches(self, value: Any) -> bool:
        return isinstance(value, (list, tuple)) and all(
            item is None or self.element.matches(item) for item in value
        )


class Record(Mapping):
    """An immutable record bound to a schema.

    Building a Record validates that every schema field is present, that no
    other fields are, and that each value has the right wire type. Nested
    mappings are converted into nested Records. A Record compares equal to a
    plain dict with the same content.

    Examples:
        >>> r = Record(DURATION_SCHEMA, {"SECONDS_FIELD": 1, "NANOS_FIELD": 0})
        >>> r["SECONDS_FIELD"]
        1
        >>> r == {"SECONDS_FIELD": 1, "NANOS_FIELD": 0}
        True
    """

    __slots__ = ("_schema", "_values")

    def __init__(self, schema: RecordSchema, values: Mapping[str, Any]) -> None:
        """Create a validated Record.

        Raises:
            InvalidFieldError: If a field is missing, unexpected, null or of
                the wrong type.
        """
        if not isinstance(values, Mapping):
            raise InvalidFieldError(
                f"{schema.name} must be a record, got {type(values).__name__}"
            )
        if isinstance(values, Record) and values._schema == schema:
            self._schema = schema
            self._values = values._values
            return

        unexpected = set(values.keys()) - set(schema.field_names)
        if unexpected:
            raise InvalidFieldError(
                f"{schema.name} record has unexpected fields: {sorted(unexpected)}"
            )
        checked: dict[str, Any] = {}
        for field in schema.fields:
            if field.name not in values:
                raise InvalidFieldError(f"{schema.name} record is missing {field.name}")
            value = values[field.name]
            if value is None:
                raise InvalidFieldError(f"{schema.name}.{field.name} must not be null")
            checked[field.name] = field.type.validate(f"{schema.name}.{field.name}", value)
        self._schema: RecordSchema = schema
        self._values: dict[str, Any] = checked

    @property
    def schema(self) -> RecordSchema:
        return self._schema

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def to_dict(self) -> dict[str, Any]:
        """Return plain nested dicts."""
        return {
            key: value.to_dict() if isinstance(value, Record) else value
            for key, value in self._values.items()
        }

    def __repr__(self) -> str:
        return f"Record({self._schema.name}, {self.to_dict()!r})"


# =============================================================================
# Schemas
# =============================================================================

INSTANT_SCHEMA = RecordSchema(
    "Instant",
    (Field("SECONDS_FIELD", FieldType.INT64), Field("NANOS_FIELD", FieldType.INT32)),
)

DURATION_SCHEMA = RecordSchema(
    "Duration",
    (Field("SECONDS_FIELD", FieldType.INT64), Field("NANOS_FIELD", FieldType.INT32)),
)

PERIOD_SCHEMA = RecordSchema(
    "Period",
    (
        Field("YEARS_FIELD", FieldType.INT32),
        Field("MONTHS_FIELD", FieldType.INT32),
        Field("DAYS_FIELD", FieldType.INT32),
    ),
)

LOCALDATE_SCHEMA = RecordSchema(
    "LocalDate",
    (
        Field("YEAR_FIELD", FieldType.INT32),
        Field("MONTH_FIELD", FieldType.INT32),
        Field("DAY_FIELD", FieldType.INT32),
    ),
)

LOCALTIME_SCHEMA = RecordSchema(
    "LocalTime",
    (
        Field("HOUR_FIELD", FieldType.INT32),
        Field("MINUTE_FIELD", FieldType.INT32),
        Field("SECOND_FIELD", FieldType.INT32),
        Field("NANO_FIELD", FieldType.INT32),
    ),
)

LOCALDATETIME_SCHEMA = RecordSchema(
    "LocalDateTime",
    (
        Field("LOCALDATE_FIELD", LOCALDATE_SCHEMA),
        Field("LOCALTIME_FIELD", LOCALTIME_SCHEMA),
    ),
)

ZONEOFFSET_SCHEMA = RecordSchema(
    "ZoneOffset", (Field("TOTALSECONDS_FIELD", FieldType.INT32),)
)

ZONEID_SCHEMA = RecordSchema("ZoneId", (Field("ID_FIELD", FieldType.STRING),))

OFFSETDATETIME_SCHEMA = RecordSchema(
    "OffsetDateTime",
    (
        Field("DATETIME_FIELD", LOCALDATETIME_SCHEMA),
        Field("OFFSET_FIELD", ZONEOFFSET_SCHEMA),
    ),
)

ZONEDDATETIME_SCHEMA = RecordSchema(
    "ZonedDateTime",
    (
        Field("DATETIME_FIELD", LOCALDATETIME_SCHEMA),
        Field("OFFSET_FIELD", ZONEOFFSET_SCHEMA),
        Field("ZONE_FIELD", ZONEID_SCHEMA),
    ),
)

DURATION_ARRAY_SCHEMA = ArraySchema(DURATION_SCHEMA)
PERIOD_ARRAY_SCHEMA = ArraySchema(PERIOD_SCHEMA)

ParamSchema = Union[FieldType, RecordSchema, ArraySchema]


__all__ = [
    "FieldType",
    "Field",
    "RecordSchema",
    "ArraySchema",
    "Record",
    "ParamSchema",
    "INSTANT_SCHEMA",
    "DURATION_SCHEMA",
    "PERIOD_SCHEMA",
    "LOCALDATE_SCHEMA",
    "LOCALTIME_SCHEMA",
    "LOCALDATETIME_SCHEMA",
    "ZONEOFFSET_SCHEMA",
    "ZONEID_SCHEMA",
    "OFFSETDATETIME_SCHEMA",
    "ZONEDDATETIME_SCHEMA",
    "DURATION_ARRAY_SCHEMA",
    "PERIOD_ARRAY_SCHEMA",
]
