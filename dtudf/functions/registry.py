"""Static registration table and overload dispatch for the dt_* functions.

The host calls functions by name with positional arguments. Each name maps
to an ordered list of overloads; a call picks the first overload whose
parameters match the arguments by count and shape:

    - record parameters match mappings with exactly the schema's field names
    - list parameters match lists whose elements match the element schema
    - integer parameters match ints (not bools), string parameters match str

Any None argument makes the call return None before anything is decoded.
Overloads that need the current time or a logger get the registry's clock
and logger passed as keyword arguments.

Examples:
    >>> from dtudf.core import FixedClock, Instant
    >>> registry = build_registry(clock=FixedClock(Instant(0)))
    >>> registry.invoke("dt_instant").to_dict()
    {'SECONDS_FIELD': 0, 'NANOS_FIELD': 0}
    >>> registry.invoke("dt_duration_divide", {"SECONDS_FIELD": 10, "NANOS_FIELD": 0}, 4)
    Record(Duration, {'SECONDS_FIELD': 2, 'NANOS_FIELD': 500000000})
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

from dtudf._internal.constants import DEFAULT_NAMESPACE
from dtudf.core.clock import Clock, SystemClock
from dtudf.errors import UnknownFunctionError
from dtudf.functions import (
    duration,
    instant,
    local_date,
    local_date_time,
    local_time,
    offset_date_time,
    period,
    zone,
    zoned_date_time,
)
from dtudf.functions.base import is_absent
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
    FieldType,
    ParamSchema,
)

logger = logging.getLogger(__name__)

INT = FieldType.INT32
LONG = FieldType.INT64
TEXT = FieldType.STRING
BOOL = FieldType.BOOLEAN

MODE_DESCRIPTION = "the chronologyMode being either: 'IS_BEFORE','IS_AFTER','IS_EQUAL'"


# =============================================================================
# Table entries
# =============================================================================


@dataclass(frozen=True)
class Param:
    """One positional parameter of an overload."""

    name: str
    schema: ParamSchema
    description: str = ""

    def accepts(self, value: Any) -> bool:
        if isinstance(self.schema, FieldType):
            return self.schema.accepts(value)
        return self.schema.matches(value)

    @property
    def descriptor(self) -> str:
        return self.schema.descriptor


@dataclass(frozen=True)
class Overload:
    """One callable signature of a registered function.

    Attributes:
        params: Positional parameters, in call order.
        returns: Schema of the result.
        impl: The operation function.
        description: Text shown to host users.
        injects: Context keywords impl needs ("clock", "logger").
    """

    params: tuple[Param, ...]
    returns: ParamSchema
    impl: Callable[..., Any]
    description: str
    injects: tuple[str, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.params)

    def accepts(self, args: tuple[Any, ...]) -> bool:
        return len(args) == self.arity and all(
            param.accepts(arg) for param, arg in zip(self.params, args)
        )

    def signature(self) -> str:
        inner = ", ".join(f"{p.name} {p.descriptor}" for p in self.params)
        return f"({inner}) -> {self.returns.descriptor}"


@dataclass(frozen=True)
class FunctionSpec:
    """A registered function: a name and its ordered overloads."""

    name: str
    description: str
    overloads: tuple[Overload, ...] = field(default_factory=tuple)


def _p(name: str, schema: ParamSchema, description: str = "") -> Param:
    return Param(name, schema, description)


def _o(
    impl: Callable[..., Any],
    returns: ParamSchema,
    description: str,
    *params: Param,
    injects: tuple[str, ...] = (),
) -> Overload:
    return Overload(tuple(params), returns, impl, description, injects)


# =============================================================================
# Registry
# =============================================================================


class FunctionRegistry:
    """Immutable map of function names to overloads, with dispatch.

    Names are matched case-insensitively.
    """

    __slots__ = ("_namespace", "_functions", "_clock", "_logger")

    def __init__(
        self,
        namespace: str,
        functions: Mapping[str, FunctionSpec],
        clock: Clock,
        logger: logging.Logger,
    ) -> None:
        self._namespace: str = namespace
        self._functions: dict[str, FunctionSpec] = {
            name.lower(): spec for name, spec in functions.items()
        }
        self._clock: Clock = clock
        self._logger: logging.Logger = logger

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def clock(self) -> Clock:
        return self._clock

    def names(self) -> list[str]:
        return sorted(spec.name for spec in self._functions.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._functions

    def __len__(self) -> int:
        return len(self._functions)

    def function(self, name: str) -> FunctionSpec:
        """Return the registered function called name.

        Raises:
            UnknownFunctionError: If no function has that name.
        """
        spec = self._functions.get(name.lower())
        if spec is None:
            raise UnknownFunctionError(f"unknown function {name!r}")
        return spec

    def resolve(self, name: str, *args: Any) -> Overload:
        """Return the first overload of name that accepts args.

        Raises:
            UnknownFunctionError: If the name is unknown or no overload
                matches the argument shapes.
        """
        spec = self.function(name)
        for overload in spec.overloads:
            if overload.accepts(args):
                return overload
        shapes = ", ".join(type(arg).__name__ for arg in args)
        raise UnknownFunctionError(f"no overload of {spec.name} accepts ({shapes})")

    def invoke(self, name: str, *args: Any) -> Any:
        """Call a registered function the way the host does.

        Returns None, without decoding anything, when any argument is None
        or a list argument contains None.

        Raises:
            UnknownFunctionError: If the call cannot be resolved.
            InvalidFieldError: If a scalar argument is outside its wire range
                or a record is malformed.
        """
        spec = self.function(name)
        if any(is_absent(arg) for arg in args):
            if not any(o.arity == len(args) for o in spec.overloads):
                raise UnknownFunctionError(
                    f"{spec.name} takes no {len(args)}-argument form"
                )
            return None
        overload = self.resolve(name, *args)
        for param, arg in zip(overload.params, args):
            if isinstance(param.schema, FieldType):
                param.schema.validate(param.name, arg)
        context = {}
        if "clock" in overload.injects:
            context["clock"] = self._clock
        if "logger" in overload.injects:
            context["logger"] = self._logger
        logger.debug("invoking %s%s", spec.name, overload.signature())
        return overload.impl(*args, **context)

    def describe(self) -> list[dict[str, Any]]:
        """Describe every function for host discovery.

        Examples:
            >>> entry = build_registry().describe()[0]
            >>> sorted(entry)
            ['description', 'name', 'overloads']
        """
        result = []
        for name in self.names():
            spec = self._functions[name.lower()]
            result.append(
                {
                    "name": spec.name,
                    "description": spec.description,
                    "overloads": [
                        {
                            "description": o.description,
                            "params": [
                                {
                                    "name": p.name,
                                    "type": p.descriptor,
                                    "description": p.description,
                                }
                                for p in o.params
                            ],
                            "returns": o.returns.descriptor,
                        }
                        for o in spec.overloads
                    ],
                }
            )
        return result

    def __repr__(self) -> str:
        return f"FunctionRegistry({self._namespace!r}, {len(self)} functions)"


# =============================================================================
# Catalog
# =============================================================================


def _date_components(verb: str) -> tuple[Param, ...]:
    return (
        _p("years", INT, f"the years to {verb}"),
        _p("months", INT, f"the months to {verb}"),
        _p("days", INT, f"the days to {verb}"),
    )


def _time_components(verb: str) -> tuple[Param, ...]:
    return (
        _p("hours", INT, f"the hours to {verb}"),
        _p("minutes", INT, f"the minutes to {verb}"),
        _p("seconds", INT, f"the seconds to {verb}"),
        _p("nanos", INT, f"the nanos to {verb}"),
    )


def _catalog() -> list[FunctionSpec]:
    specs: list[FunctionSpec] = []

    def add(name: str, description: str, *overloads: Overload) -> None:
        specs.append(FunctionSpec(name, description, tuple(overloads)))

    # -- Instant ---------------------------------------------------------------

    add(
        "instant",
        "Factory functions for Instant records",
        _o(instant.instant_now, INSTANT_SCHEMA, "the current instant", injects=("clock",)),
        _o(
            instant.instant_of_epoch_milli,
            INSTANT_SCHEMA,
            "an instant from millis since the epoch",
            _p("millis", LONG, "the number of millis since the epoch"),
        ),
        _o(
            instant.instant_of_epoch_second,
            INSTANT_SCHEMA,
            "an instant from seconds since the epoch with a nano adjustment",
            _p("seconds", LONG, "the number of seconds since the epoch"),
            _p("nanoAdjustment", LONG, "the nano seconds adjustment"),
        ),
        _o(
            instant.instant_parse,
            INSTANT_SCHEMA,
            "an instant from its ISO-8601 text",
            _p("text", TEXT, "the string representation of the instant"),
        ),
    )
    for verb, by_duration, by_components in (
        ("plus", instant.instant_plus, instant.instant_plus_components),
        ("minus", instant.instant_minus, instant.instant_minus_components),
    ):
        add(
            f"instant_{verb}",
            f"Instant {verb} durations",
            _o(
                by_duration,
                INSTANT_SCHEMA,
                f"{verb} a duration",
                _p("baseInstant", INSTANT_SCHEMA),
                _p("duration", DURATION_SCHEMA),
            ),
            _o(
                by_components,
                INSTANT_SCHEMA,
                f"{verb} seconds and nanos",
                _p("baseInstant", INSTANT_SCHEMA),
                _p("seconds", LONG),
                _p("nanos", LONG),
            ),
        )
    add(
        "instant_chronology",
        "Chronology check of instants",
        _o(
            instant.instant_chronology,
            BOOL,
            "check if an instant is before, after or equal to another instant",
            _p("baseInstant", INSTANT_SCHEMA, "the instant to check against"),
            _p("instant", INSTANT_SCHEMA, "the instant to check"),
            _p("chronologyMode", TEXT, MODE_DESCRIPTION),
            injects=("logger",),
        ),
    )

    # -- Duration --------------------------------------------------------------

    add(
        "duration",
        "Factory functions for Duration records",
        _o(duration.duration_zero, DURATION_SCHEMA, "the zero duration"),
        _o(
            duration.duration_of_seconds,
            DURATION_SCHEMA,
            "a duration of seconds",
            _p("seconds", LONG),
        ),
        _o(
            duration.duration_of_seconds,
            DURATION_SCHEMA,
            "a duration of seconds with a nano adjustment",
            _p("seconds", LONG),
            _p("nanoAdjustment", LONG),
        ),
        _o(
            duration.duration_parse,
            DURATION_SCHEMA,
            "a duration from its ISO-8601 text {PnDTnHnMn.nS}",
            _p("text", TEXT),
        ),
    )
    for verb, single, many in (
        ("plus", duration.duration_plus, duration.duration_plus_all),
        ("minus", duration.duration_minus, duration.duration_minus_all),
    ):
        add(
            f"duration_{verb}",
            f"Duration {verb} durations",
            _o(
                single,
                DURATION_SCHEMA,
                f"{verb} one duration",
                _p("baseDuration", DURATION_SCHEMA),
                _p("duration", DURATION_SCHEMA),
            ),
            _o(
                many,
                DURATION_SCHEMA,
                f"{verb} a list of durations, in list order",
                _p("baseDuration", DURATION_SCHEMA),
                _p("durations", DURATION_ARRAY_SCHEMA),
            ),
        )
    add(
        "duration_multiply",
        "Multiply a duration",
        _o(
            duration.duration_multiply,
            DURATION_SCHEMA,
            "multiply a duration by a scalar",
            _p("baseDuration", DURATION_SCHEMA),
            _p("scalar", LONG),
        ),
    )
    add(
        "duration_divide",
        "Divide a duration",
        _o(
            duration.duration_divide,
            DURATION_SCHEMA,
            "divide a duration by a scalar",
            _p("baseDuration", DURATION_SCHEMA),
            _p("divisor", LONG),
        ),
        _o(
            duration.duration_divide_by_duration,
            LONG,
            "the number of whole times the divisor occurs within the duration",
            _p("baseDuration", DURATION_SCHEMA),
            _p("divisorDuration", DURATION_SCHEMA),
        ),
    )
    add(
        "duration_between",
        "Calculate durations between temporal values",
        _o(
            duration.duration_until_now_local_time,
            DURATION_SCHEMA,
            "duration from a local time to the current local time",
            _p("localTime", LOCALTIME_SCHEMA),
            injects=("clock",),
        ),
        _o(
            duration.duration_until_now_local_date_time,
            DURATION_SCHEMA,
            "duration from a local datetime to the current local datetime",
            _p("localDateTime", LOCALDATETIME_SCHEMA),
            injects=("clock",),
        ),
        _o(
            duration.duration_until_now_instant,
            DURATION_SCHEMA,
            "duration from an instant to the current instant",
            _p("instant", INSTANT_SCHEMA),
            injects=("clock",),
        ),
        _o(
            duration.duration_between_local_times,
            DURATION_SCHEMA,
            "duration between two local times",
            _p("localTimeFrom", LOCALTIME_SCHEMA),
            _p("localTimeTo", LOCALTIME_SCHEMA),
        ),
        _o(
            duration.duration_between_local_date_times,
            DURATION_SCHEMA,
            "duration between two local datetimes",
            _p("localDateTimeFrom", LOCALDATETIME_SCHEMA),
            _p("localDateTimeTo", LOCALDATETIME_SCHEMA),
        ),
        _o(
            duration.duration_between_instants,
            DURATION_SCHEMA,
            "duration between two instants",
            _p("instantFrom", INSTANT_SCHEMA),
            _p("instantTo", INSTANT_SCHEMA),
        ),
        _o(
            duration.duration_between_offset_date_times,
            DURATION_SCHEMA,
            "duration between two offset datetimes",
            _p("offsetDateTimeFrom", OFFSETDATETIME_SCHEMA),
            _p("offsetDateTimeTo", OFFSETDATETIME_SCHEMA),
        ),
        _o(
            duration.duration_between_zoned_date_times,
            DURATION_SCHEMA,
            "duration between two zoned datetimes",
            _p("zonedDateTimeFrom", ZONEDDATETIME_SCHEMA),
            _p("zonedDateTimeTo", ZONEDDATETIME_SCHEMA),
        ),
    )
    add(
        "duration_stringify",
        "ISO-8601 text of a duration",
        _o(
            duration.duration_stringify,
            TEXT,
            "the ISO-8601 duration text",
            _p("duration", DURATION_SCHEMA),
        ),
    )

    # -- Period ----------------------------------------------------------------

    add(
        "period",
        "Factory functions for Period records",
        _o(period.period_zero, PERIOD_SCHEMA, "the zero period"),
        _o(
            period.period_of,
            PERIOD_SCHEMA,
            "a period from years, months and days",
            _p("years", INT),
            _p("months", INT),
            _p("days", INT),
        ),
        _o(
            period.period_parse,
            PERIOD_SCHEMA,
            "a period from its ISO-8601 text {PnYnMnD}",
            _p("text", TEXT),
        ),
    )
    for verb, single, many in (
        ("plus", period.period_plus, period.period_plus_all),
        ("minus", period.period_minus, period.period_minus_all),
    ):
        add(
            f"period_{verb}",
            f"Period {verb} periods",
            _o(
                single,
                PERIOD_SCHEMA,
                f"{verb} one period",
                _p("basePeriod", PERIOD_SCHEMA),
                _p("period", PERIOD_SCHEMA),
            ),
            _o(
                many,
                PERIOD_SCHEMA,
                f"{verb} a list of periods, in list order",
                _p("basePeriod", PERIOD_SCHEMA),
                _p("periods", PERIOD_ARRAY_SCHEMA),
            ),
        )
    add(
        "period_multiply",
        "Multiply a period",
        _o(
            period.period_multiply,
            PERIOD_SCHEMA,
            "multiply every component by a scalar",
            _p("basePeriod", PERIOD_SCHEMA),
            _p("scalar", INT),
        ),
    )
    add(
        "period_normalize",
        "Normalize a period",
        _o(
            period.period_normalize,
            PERIOD_SCHEMA,
            "fold months into years, leaving days untouched",
            _p("period", PERIOD_SCHEMA),
        ),
    )
    add(
        "period_between",
        "Calculate periods between local dates",
        _o(
            period.period_until_today,
            PERIOD_SCHEMA,
            "period from a local date to the current local date",
            _p("localDate", LOCALDATE_SCHEMA),
            injects=("clock",),
        ),
        _o(
            period.period_between,
            PERIOD_SCHEMA,
            "period between two local dates",
            _p("localDateFrom", LOCALDATE_SCHEMA),
            _p("localDateTo", LOCALDATE_SCHEMA),
        ),
    )
    add(
        "period_stringify",
        "ISO-8601 text of a period",
        _o(
            period.period_stringify,
            TEXT,
            "the ISO-8601 period text",
            _p("period", PERIOD_SCHEMA),
        ),
    )

    # -- LocalDate -------------------------------------------------------------

    add(
        "localdate",
        "Factory functions for LocalDate records",
        _o(local_date.local_date_now, LOCALDATE_SCHEMA, "today", injects=("clock",)),
        _o(
            local_date.local_date_of,
            LOCALDATE_SCHEMA,
            "a local date from year, month and day",
            _p("year", INT),
            _p("month", INT),
            _p("day", INT),
        ),
        _o(
            local_date.local_date_of_epoch_day,
            LOCALDATE_SCHEMA,
            "a local date from days since the epoch",
            _p("epochDays", LONG),
        ),
        _o(
            local_date.local_date_parse,
            LOCALDATE_SCHEMA,
            "a local date from its ISO-8601 text",
            _p("text", TEXT),
        ),
        _o(
            local_date.local_date_parse_pattern,
            LOCALDATE_SCHEMA,
            "a local date parsed with a pattern",
            _p("text", TEXT),
            _p("format", TEXT, "the %-directive pattern"),
        ),
    )
    for verb, by_period, by_components in (
        ("plus", local_date.local_date_plus, local_date.local_date_plus_components),
        ("minus", local_date.local_date_minus, local_date.local_date_minus_components),
    ):
        add(
            f"localdate_{verb}",
            f"LocalDate {verb} periods",
            _o(
                by_period,
                LOCALDATE_SCHEMA,
                f"{verb} a period",
                _p("baseLocalDate", LOCALDATE_SCHEMA),
                _p("period", PERIOD_SCHEMA),
            ),
            _o(
                by_components,
                LOCALDATE_SCHEMA,
                f"{verb} years, months and days",
                _p("baseLocalDate", LOCALDATE_SCHEMA),
                *_date_components(verb),
            ),
        )
    add(
        "localdate_chronology",
        "Chronology check of local dates",
        _o(
            local_date.local_date_chronology,
            BOOL,
            "check if a local date is before, after or equal to another",
            _p("baseLocalDate", LOCALDATE_SCHEMA),
            _p("localDate", LOCALDATE_SCHEMA),
            _p("chronologyMode", TEXT, MODE_DESCRIPTION),
            injects=("logger",),
        ),
    )
    add(
        "localdate_format",
        "Text of a local date",
        _o(
            local_date.local_date_format,
            TEXT,
            "ISO-8601 local date text",
            _p("localDate", LOCALDATE_SCHEMA),
        ),
        _o(
            local_date.local_date_format_pattern,
            TEXT,
            "local date text rendered with a pattern",
            _p("localDate", LOCALDATE_SCHEMA),
            _p("format", TEXT),
        ),
    )

    # -- LocalTime -------------------------------------------------------------

    add(
        "localtime",
        "Factory functions for LocalTime records",
        _o(
            local_time.local_time_now,
            LOCALTIME_SCHEMA,
            "the current time of day",
            injects=("clock",),
        ),
        _o(
            local_time.local_time_of,
            LOCALTIME_SCHEMA,
            "a local time from hour, minute and second (nano=0)",
            _p("hour", INT),
            _p("minute", INT),
            _p("second", INT),
        ),
        _o(
            local_time.local_time_of,
            LOCALTIME_SCHEMA,
            "a local time from hour, minute, second and nano",
            _p("hour", INT),
            _p("minute", INT),
            _p("second", INT),
            _p("nano", INT),
        ),
        _o(
            local_time.local_time_parse,
            LOCALTIME_SCHEMA,
            "a local time from its ISO-8601 text",
            _p("text", TEXT),
        ),
        _o(
            local_time.local_time_parse_pattern,
            LOCALTIME_SCHEMA,
            "a local time parsed with a pattern",
            _p("text", TEXT),
            _p("format", TEXT),
        ),
    )
    for verb, by_duration, by_components in (
        ("plus", local_time.local_time_plus, local_time.local_time_plus_components),
        ("minus", local_time.local_time_minus, local_time.local_time_minus_components),
    ):
        add(
            f"localtime_{verb}",
            f"LocalTime {verb} durations",
            _o(
                by_duration,
                LOCALTIME_SCHEMA,
                f"{verb} a duration",
                _p("baseLocalTime", LOCALTIME_SCHEMA),
                _p("duration", DURATION_SCHEMA),
            ),
            _o(
                by_components,
                LOCALTIME_SCHEMA,
                f"{verb} hours, minutes, seconds and nanos",
                _p("baseLocalTime", LOCALTIME_SCHEMA),
                *_time_components(verb),
            ),
        )
    add(
        "localtime_chronology",
        "Chronology check of local times",
        _o(
            local_time.local_time_chronology,
            BOOL,
            "check if a local time is before, after or equal to another",
            _p("baseLocalTime", LOCALTIME_SCHEMA),
            _p("localTime", LOCALTIME_SCHEMA),
            _p("chronologyMode", TEXT, MODE_DESCRIPTION),
            injects=("logger",),
        ),
    )
    add(
        "localtime_format",
        "Text of a local time",
        _o(
            local_time.local_time_format,
            TEXT,
            "ISO-8601 local time text",
            _p("localTime", LOCALTIME_SCHEMA),
        ),
        _o(
            local_time.local_time_format_pattern,
            TEXT,
            "local time text rendered with a pattern",
            _p("localTime", LOCALTIME_SCHEMA),
            _p("format", TEXT),
        ),
    )

    # -- LocalDateTime ---------------------------------------------------------

    add(
        "localdatetime",
        "Factory functions for LocalDateTime records",
        _o(
            local_date_time.local_date_time_now,
            LOCALDATETIME_SCHEMA,
            "the current local datetime",
            injects=("clock",),
        ),
        _o(
            local_date_time.local_date_time_of,
            LOCALDATETIME_SCHEMA,
            "a local datetime from its components",
            _p("year", INT),
            _p("month", INT),
            _p("day", INT),
            _p("hour", INT),
            _p("minute", INT),
            _p("second", INT),
            _p("nano", INT),
        ),
        _o(
            local_date_time.local_date_time_of_epoch_milli,
            LOCALDATETIME_SCHEMA,
            "the UTC local datetime at millis since the epoch",
            _p("epochMillis", LONG),
        ),
        _o(
            local_date_time.local_date_time_of_date_time,
            LOCALDATETIME_SCHEMA,
            "a local datetime from a local date and a local time",
            _p("localDate", LOCALDATE_SCHEMA),
            _p("localTime", LOCALTIME_SCHEMA),
        ),
        _o(
            local_date_time.local_date_time_parse,
            LOCALDATETIME_SCHEMA,
            "a local datetime from its ISO-8601 text",
            _p("text", TEXT),
        ),
        _o(
            local_date_time.local_date_time_parse_pattern,
            LOCALDATETIME_SCHEMA,
            "a local datetime parsed with a pattern",
            _p("text", TEXT),
            _p("format", TEXT),
        ),
    )

    # -- Zones -----------------------------------------------------------------

    add(
        "zoneoffset",
        "Factory functions for ZoneOffset records",
        _o(
            zone.zone_offset_of,
            ZONEOFFSET_SCHEMA,
            "an offset from hours, minutes and seconds",
            _p("hours", INT),
            _p("minutes", INT),
            _p("seconds", INT),
        ),
        _o(
            zone.zone_offset_of_total_seconds,
            ZONEOFFSET_SCHEMA,
            "an offset from total seconds",
            _p("totalSeconds", INT),
        ),
        _o(
            zone.zone_offset_parse,
            ZONEOFFSET_SCHEMA,
            "an offset from its id text",
            _p("text", TEXT),
        ),
    )
    add(
        "zoneoffset_stringify",
        "Id text of an offset",
        _o(
            zone.zone_offset_stringify,
            TEXT,
            "the offset id: Z, +hh:mm or +hh:mm:ss",
            _p("zoneOffset", ZONEOFFSET_SCHEMA),
        ),
    )
    add(
        "zoneid",
        "Factory functions for ZoneId records",
        _o(zone.zone_id_default, ZONEID_SCHEMA, "the clock's zone", injects=("clock",)),
        _o(
            zone.zone_id_of,
            ZONEID_SCHEMA,
            "a region zone from its id, typically {area}/{city}",
            _p("text", TEXT, "the region id; offset ids are rejected"),
        ),
    )

    # -- OffsetDateTime --------------------------------------------------------

    add(
        "offsetdatetime",
        "Factory functions for OffsetDateTime records",
        _o(
            offset_date_time.offset_date_time_now,
            OFFSETDATETIME_SCHEMA,
            "the current datetime in the clock's zone",
            injects=("clock",),
        ),
        _o(
            offset_date_time.offset_date_time_now_in_zone,
            OFFSETDATETIME_SCHEMA,
            "the current datetime in a zone",
            _p("zoneId", ZONEID_SCHEMA),
            injects=("clock",),
        ),
        _o(
            offset_date_time.offset_date_time_of,
            OFFSETDATETIME_SCHEMA,
            "an offset datetime from a local datetime and an offset",
            _p("localDateTime", LOCALDATETIME_SCHEMA),
            _p("zoneOffset", ZONEOFFSET_SCHEMA),
        ),
        _o(
            offset_date_time.offset_date_time_of_date_time,
            OFFSETDATETIME_SCHEMA,
            "an offset datetime from a local date, a local time and an offset",
            _p("localDate", LOCALDATE_SCHEMA),
            _p("localTime", LOCALTIME_SCHEMA),
            _p("zoneOffset", ZONEOFFSET_SCHEMA),
        ),
        _o(
            offset_date_time.offset_date_time_parse,
            OFFSETDATETIME_SCHEMA,
            "an offset datetime from its ISO-8601 text",
            _p("text", TEXT),
        ),
        _o(
            offset_date_time.offset_date_time_parse_pattern,
            OFFSETDATETIME_SCHEMA,
            "an offset datetime parsed with a pattern",
            _p("text", TEXT),
            _p("format", TEXT),
        ),
    )

    # -- ZonedDateTime ---------------------------------------------------------

    add(
        "zoneddatetime",
        "Factory functions for ZonedDateTime records",
        _o(
            zoned_date_time.zoned_date_time_now,
            ZONEDDATETIME_SCHEMA,
            "the current datetime in the clock's zone",
            injects=("clock",),
        ),
        _o(
            zoned_date_time.zoned_date_time_now_in_zone,
            ZONEDDATETIME_SCHEMA,
            "the current datetime in a zone",
            _p("zoneId", ZONEID_SCHEMA),
            injects=("clock",),
        ),
        _o(
            zoned_date_time.zoned_date_time_of,
            ZONEDDATETIME_SCHEMA,
            "a zoned datetime from a local datetime and a zone",
            _p("localDateTime", LOCALDATETIME_SCHEMA),
            _p("zoneId", ZONEID_SCHEMA),
        ),
        _o(
            zoned_date_time.zoned_date_time_of_local,
            ZONEDDATETIME_SCHEMA,
            "a zoned datetime keeping a preferred offset in an overlap",
            _p("localDateTime", LOCALDATETIME_SCHEMA),
            _p("zoneId", ZONEID_SCHEMA),
            _p("preferredOffset", ZONEOFFSET_SCHEMA),
        ),
        _o(
            zoned_date_time.zoned_date_time_parse,
            ZONEDDATETIME_SCHEMA,
            "a zoned datetime from its ISO-8601 text",
            _p("text", TEXT),
        ),
        _o(
            zoned_date_time.zoned_date_time_parse_pattern,
            ZONEDDATETIME_SCHEMA,
            "a zoned datetime parsed with a pattern",
            _p("text", TEXT),
            _p("format", TEXT),
        ),
    )

    # Date-times sharing the (value, period, duration) / 7-component shapes
    date_time_kinds = (
        (
            "localdatetime",
            "LocalDateTime",
            LOCALDATETIME_SCHEMA,
            local_date_time.local_date_time_plus,
            local_date_time.local_date_time_plus_components,
            local_date_time.local_date_time_minus,
            local_date_time.local_date_time_minus_components,
            local_date_time.local_date_time_chronology,
            local_date_time.local_date_time_format,
            local_date_time.local_date_time_format_pattern,
        ),
        (
            "offsetdatetime",
            "OffsetDateTime",
            OFFSETDATETIME_SCHEMA,
            offset_date_time.offset_date_time_plus,
            offset_date_time.offset_date_time_plus_components,
            offset_date_time.offset_date_time_minus,
            offset_date_time.offset_date_time_minus_components,
            offset_date_time.offset_date_time_chronology,
            offset_date_time.offset_date_time_format,
            offset_date_time.offset_date_time_format_pattern,
        ),
        (
            "zoneddatetime",
            "ZonedDateTime",
            ZONEDDATETIME_SCHEMA,
            zoned_date_time.zoned_date_time_plus,
            zoned_date_time.zoned_date_time_plus_components,
            zoned_date_time.zoned_date_time_minus,
            zoned_date_time.zoned_date_time_minus_components,
            zoned_date_time.zoned_date_time_chronology,
            zoned_date_time.zoned_date_time_format,
            zoned_date_time.zoned_date_time_format_pattern,
        ),
    )

    for (
        key,
        label,
        schema,
        plus,
        plus_components,
        minus,
        minus_components,
        chronology,
        format_iso,
        format_with_pattern,
    ) in date_time_kinds:
        base = f"base{label}"
        value_name = label[0].lower() + label[1:]
        for verb, by_amounts, by_components in (
            ("plus", plus, plus_components),
            ("minus", minus, minus_components),
        ):
            add(
                f"{key}_{verb}",
                f"{label} {verb} periods and durations",
                _o(
                    by_amounts,
                    schema,
                    f"{verb} a period, then a duration",
                    _p(base, schema),
                    _p("period", PERIOD_SCHEMA),
                    _p("duration", DURATION_SCHEMA),
                ),
                _o(
                    by_components,
                    schema,
                    f"{verb} years, months, days, hours, minutes, seconds and nanos",
                    _p(base, schema),
                    *_date_components(verb),
                    *_time_components(verb),
                ),
            )
        add(
            f"{key}_chronology",
            f"Chronology check of {label} values",
            _o(
                chronology,
                BOOL,
                "check if a value is before, after or equal to another",
                _p(base, schema),
                _p(value_name, schema),
                _p("chronologyMode", TEXT, MODE_DESCRIPTION),
                injects=("logger",),
            ),
        )
        add(
            f"{key}_format",
            f"Text of a {label}",
            _o(format_iso, TEXT, "ISO-8601 text", _p(value_name, schema)),
            _o(
                format_with_pattern,
                TEXT,
                "text rendered with a pattern",
                _p(value_name, schema),
                _p("format", TEXT),
            ),
        )

    return specs


def build_registry(
    namespace: str = DEFAULT_NAMESPACE,
    clock: Clock | None = None,
    logger: logging.Logger | None = None,
) -> FunctionRegistry:
    """Build the registry of every function under namespace.

    Args:
        namespace: Prefix of every function name ("dt" gives "dt_instant").
        clock: Source of "now" (defaults to the system clock in UTC).
        logger: Where chronology functions report unknown modes (defaults to
            the dtudf.functions logger).
    """
    functions = {
        f"{namespace}_{spec.name}": FunctionSpec(
            f"{namespace}_{spec.name}", spec.description, spec.overloads
        )
        for spec in _catalog()
    }
    return FunctionRegistry(
        namespace,
        functions,
        clock if clock is not None else SystemClock(),
        logger if logger is not None else logging.getLogger("dtudf.functions"),
    )


__all__ = [
    "FunctionRegistry",
    "FunctionSpec",
    "Overload",
    "Param",
    "build_registry",
]
