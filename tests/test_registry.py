"""Tests for the function registry: lookup, dispatch and discovery."""

import logging

import pytest

from dtudf.errors import DivisionByZeroError, InvalidFieldError, UnknownFunctionError
from dtudf.functions import build_registry
from dtudf.records import Record


class TestLookup:
    """Tests for names and function lookup."""

    def test_every_function_is_registered(self, registry) -> None:
        """The catalog has one entry per function name."""
        names = registry.names()
        assert len(registry) == len(names) == 46
        assert names == sorted(names)
        for expected in (
            "dt_instant",
            "dt_duration_between",
            "dt_period_normalize",
            "dt_localdate_format",
            "dt_localdatetime_plus",
            "dt_zoneddatetime_chronology",
            "dt_zoneid",
        ):
            assert expected in names

    def test_names_are_case_insensitive(self, registry) -> None:
        """Lookups ignore case."""
        assert "DT_LocalDate" in registry
        assert registry.function("DT_INSTANT").name == "dt_instant"

    def test_unknown_name(self, registry) -> None:
        """Unregistered names raise UnknownFunctionError."""
        assert "dt_nope" not in registry
        with pytest.raises(UnknownFunctionError, match="unknown function 'dt_nope'"):
            registry.invoke("dt_nope")

    def test_unknown_function_is_a_lookup_error(self, registry) -> None:
        """UnknownFunctionError can be caught as LookupError."""
        with pytest.raises(LookupError):
            registry.function("dt_nope")

    def test_custom_namespace(self) -> None:
        """The namespace prefixes every name."""
        registry = build_registry("temporal")
        assert registry.namespace == "temporal"
        assert all(name.startswith("temporal_") for name in registry.names())
        assert "dt_instant" not in registry

    def test_repr(self, registry) -> None:
        """The repr shows the namespace and size."""
        assert repr(registry) == "FunctionRegistry('dt', 46 functions)"


class TestDispatch:
    """Tests for choosing an overload by argument shape."""

    def test_by_arity(self, registry, records) -> None:
        """Argument count picks the factory."""
        assert registry.invoke("dt_localtime", 10, 15, 30) == records.time(10, 15, 30)
        assert registry.invoke("dt_localtime", 10, 15, 30, 5) == records.time(10, 15, 30, 5)
        assert registry.invoke("dt_duration", 5) == records.duration(5)
        assert registry.invoke("dt_duration", 5, -1) == records.duration(4, 999_999_999)

    def test_by_scalar_type(self, registry, records) -> None:
        """Integers and text select different overloads."""
        assert registry.invoke("dt_localdate", 18_428) == records.date(2020, 6, 15)
        assert registry.invoke("dt_localdate", "2020-06-15") == records.date(2020, 6, 15)
        assert registry.invoke("dt_localdate", "15 Jun 2020", "%d %b %Y") == (
            records.date(2020, 6, 15)
        )

    def test_by_record_shape(self, registry, records) -> None:
        """Record field names select between overloads of equal arity."""
        divided = registry.invoke("dt_duration_divide", records.duration(10), 4)
        assert divided == records.duration(2, 500_000_000)
        assert registry.invoke(
            "dt_duration_divide", records.duration(10), records.duration(5)
        ) == 2

    def test_by_list_shape(self, registry, records) -> None:
        """A list of records selects the folding overload."""
        assert registry.invoke(
            "dt_period_plus",
            records.period(0, 0, 0),
            [records.period(0, 6, 0), records.period(0, 7, 0)],
        ) == records.period(0, 13, 0)

    def test_results_are_records(self, registry) -> None:
        """Record results carry their schema."""
        result = registry.invoke("dt_zoneoffset", 1, 0, 0)
        assert isinstance(result, Record)
        assert result.schema.name == "ZoneOffset"

    def test_scalar_results(self, registry, records) -> None:
        """Text and booleans are returned as is."""
        assert registry.invoke("dt_duration_stringify", records.duration(90)) == "PT1M30S"
        assert registry.invoke(
            "dt_localdate_chronology",
            records.date(2020, 1, 1),
            records.date(2020, 1, 2),
            "IS_AFTER",
        ) is True

    def test_no_matching_overload(self, registry) -> None:
        """An argument of the wrong shape resolves to nothing."""
        with pytest.raises(UnknownFunctionError, match="no overload of dt_localdate"):
            registry.invoke("dt_localdate", 1.5)
        with pytest.raises(UnknownFunctionError):
            registry.invoke("dt_localdate", {"YEAR_FIELD": 2020})

    def test_bool_is_not_an_integer(self, registry) -> None:
        """Booleans never match integer parameters."""
        with pytest.raises(UnknownFunctionError):
            registry.invoke("dt_localdate", True, 1, 1)

    def test_scalar_outside_wire_range(self, registry) -> None:
        """INTEGER parameters are 32-bit."""
        with pytest.raises(InvalidFieldError, match="year must be between"):
            registry.invoke("dt_localdate", 2**31, 1, 1)

    def test_malformed_record_field(self, registry, records) -> None:
        """Record fields are validated when decoded."""
        with pytest.raises(InvalidFieldError):
            registry.invoke("dt_localdate_format", records.date(2021, 2, 29))

    def test_resolve(self, registry) -> None:
        """resolve exposes the chosen overload."""
        overload = registry.resolve("dt_duration_divide", {"SECONDS_FIELD": 1, "NANOS_FIELD": 0}, 2)
        assert overload.arity == 2
        assert [p.name for p in overload.params] == ["baseDuration", "divisor"]


class TestNullHandling:
    """Tests for absent arguments."""

    def test_none_argument(self, registry, records) -> None:
        """Any None argument gives None."""
        assert registry.invoke("dt_localdate", None, 1, 1) is None
        assert registry.invoke("dt_duration_plus", records.duration(1), None) is None

    def test_none_in_list(self, registry, records) -> None:
        """A list holding None gives None."""
        assert registry.invoke(
            "dt_duration_plus", records.duration(1), [records.duration(1), None]
        ) is None

    def test_none_with_impossible_arity(self, registry) -> None:
        """A call no overload could take is still an error."""
        with pytest.raises(UnknownFunctionError, match="takes no 5-argument form"):
            registry.invoke("dt_localdate", None, None, None, None, None)


class TestErrors:
    """Tests for errors that reach the caller and modes that are logged."""

    def test_division_by_zero_propagates(self, registry, records) -> None:
        """Division by zero is raised, not turned into None."""
        with pytest.raises(DivisionByZeroError):
            registry.invoke("dt_duration_divide", records.duration(10), 0)
        with pytest.raises(ZeroDivisionError):
            registry.invoke("dt_duration_divide", records.duration(10), records.duration(0))

    def test_invalid_mode_is_logged(self, registry, records, caplog) -> None:
        """An unknown chronology mode logs an error and gives None."""
        with caplog.at_level(logging.ERROR, logger="dtudf.functions"):
            result = registry.invoke(
                "dt_localdate_chronology",
                records.date(2020, 1, 1),
                records.date(2020, 1, 2),
                "BOGUS",
            )
        assert result is None
        [record] = [r for r in caplog.records if r.name == "dtudf.functions"]
        assert record.levelno == logging.ERROR
        assert record.getMessage() == (
            "chronologyMode 'BOGUS' is invalid - must be one of: "
            "'IS_BEFORE','IS_AFTER','IS_EQUAL'"
        )

    def test_custom_logger(self, fixed_clock, records, caplog) -> None:
        """The registry's logger receives mode errors."""
        registry = build_registry(clock=fixed_clock, logger=logging.getLogger("tests.udf"))
        with caplog.at_level(logging.ERROR, logger="tests.udf"):
            registry.invoke(
                "dt_instant_chronology", records.instant(0), records.instant(1), "AFTER"
            )
        assert [r.name for r in caplog.records] == ["tests.udf"]

    def test_offset_is_not_a_zone_id(self, registry) -> None:
        """dt_zoneid rejects offsets."""
        with pytest.raises(InvalidFieldError, match="must name a region"):
            registry.invoke("dt_zoneid", "+02:00")


class TestClockInjection:
    """Tests for the functions that read the current time."""

    def test_now(self, registry, records) -> None:
        """Zero-argument factories read the registry's clock."""
        assert registry.clock.instant().epoch_second == 1_592_217_000
        assert registry.invoke("dt_instant") == records.instant(1_592_217_000)
        assert registry.invoke("dt_localdate") == records.date(2020, 6, 15)
        assert registry.invoke("dt_localtime") == records.time(10, 30)
        assert registry.invoke("dt_zoneid") == records.zone("UTC")

    def test_now_in_zone(self, registry, records) -> None:
        """A zone argument moves now into that zone."""
        assert registry.invoke("dt_zoneddatetime", records.zone("Europe/Vienna")) == records.zdt(
            records.datetime(2020, 6, 15, 12, 30), 7200, "Europe/Vienna"
        )

    def test_until_now(self, registry, records) -> None:
        """One-argument between forms measure up to now."""
        assert registry.invoke("dt_duration_between", records.time(10, 0)) == (
            records.duration(1800)
        )
        assert registry.invoke("dt_period_between", records.date(2020, 1, 15)) == (
            records.period(0, 5, 0)
        )

    def test_between_two_values(self, registry, records) -> None:
        """Two-argument between forms ignore the clock."""
        assert registry.invoke(
            "dt_duration_between", records.instant(0), records.instant(60)
        ) == records.duration(60)

    def test_vienna_clock(self, vienna_clock, records) -> None:
        """The clock's zone decides local now."""
        registry = build_registry(clock=vienna_clock)
        assert registry.invoke("dt_localdatetime") == records.datetime(2020, 6, 15, 12, 30)
        assert registry.invoke("dt_zoneid") == records.zone("Europe/Vienna")


class TestDescribe:
    """Tests for host discovery."""

    def test_entries_are_sorted(self, registry) -> None:
        """One entry per name, in name order."""
        described = registry.describe()
        assert [entry["name"] for entry in described] == registry.names()

    def test_overload_descriptors(self, registry) -> None:
        """Parameters and results are described with wire types."""
        [entry] = [e for e in registry.describe() if e["name"] == "dt_duration_divide"]
        by_scalar, by_duration = entry["overloads"]
        assert by_scalar["params"][0] == {
            "name": "baseDuration",
            "type": "STRUCT<SECONDS_FIELD BIGINT,NANOS_FIELD INTEGER>",
            "description": "",
        }
        assert by_scalar["params"][1]["type"] == "BIGINT"
        assert by_scalar["returns"] == "STRUCT<SECONDS_FIELD BIGINT,NANOS_FIELD INTEGER>"
        assert by_duration["returns"] == "BIGINT"

    def test_mode_parameter_is_documented(self, registry) -> None:
        """Chronology functions list the accepted modes."""
        [entry] = [e for e in registry.describe() if e["name"] == "dt_localtime_chronology"]
        mode = entry["overloads"][0]["params"][-1]
        assert mode["name"] == "chronologyMode"
        assert mode["type"] == "VARCHAR"
        assert "'IS_BEFORE','IS_AFTER','IS_EQUAL'" in mode["description"]
