"""Record schemas and converters.

Temporal values cross the host boundary as fixed-shape records. This package
defines those shapes and converts between them and the native types.
"""

from __future__ import annotations

from dtudf.records.converters import CONVERTERS, from_record, schema_for, to_record
from dtudf.records.schemas import (
    DURATION_ARRAY_SCHEMA,
    DURATION_SCHEMA,
    INSTANT_SCHEMA,
    LOCALDATE_SCHEMA,
    LOCALDATETIME_SCHEMA,
    LOCALTIME_SCHEMA,
    OFFSETDATETIME_SCHEMA,
    PERIOD_ARRAY_SCHEMA,
    PERIOD_SCHEMA,
    ZONEDDATETIME_SCHEMA,
    ZONEID_SCHEMA,
    ZONEOFFSET_SCHEMA,
    ArraySchema,
    Field,
    FieldType,
    Record,
    RecordSchema,
)

__all__: list[str] = [
    "CONVERTERS",
    "from_record",
    "schema_for",
    "to_record",
    "ArraySchema",
    "Field",
    "FieldType",
    "Record",
    "RecordSchema",
    "INSTANT_SCHEMA",
    "DURATION_SCHEMA",
    "DURATION_ARRAY_SCHEMA",
    "PERIOD_SCHEMA",
    "PERIOD_ARRAY_SCHEMA",
    "LOCALDATE_SCHEMA",
    "LOCALTIME_SCHEMA",
    "LOCALDATETIME_SCHEMA",
    "ZONEOFFSET_SCHEMA",
    "ZONEID_SCHEMA",
    "OFFSETDATETIME_SCHEMA",
    "ZONEDDATETIME_SCHEMA",
]
