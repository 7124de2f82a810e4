"""Tests for ISO-8601 text dispatch and caller-pattern formatting/parsing."""

import pytest

from dtudf.core import (
    Duration,
    LocalDate,
    LocalDateTime,
    LocalTime,
    OffsetDateTime,
    Period,
    ZonedDateTime,
    ZoneId,
    ZoneOffset,
)
from dtudf.errors import InvalidFieldError, ParseError, PatternError
from dtudf.format import (
    format_iso8601,
    format_pattern,
    parse_iso8601,
    parse_local_date,
    parse_local_date_time,
    parse_local_time,
    parse_offset_date_time,
    parse_zoned_date_time,
)


# =============================================================================
# ISO-8601
# =============================================================================


class TestIso8601:
    """Tests for parse_iso8601 and format_iso8601."""

    def test_parse_by_target(self) -> None:
        """The target type selects the canonical form."""
        assert parse_iso8601("PT1.5S", Duration) == Duration(1, 500_000_000)
        assert parse_iso8601("P1Y2M3D", Period) == Period(1, 2, 3)
        assert parse_iso8601("Z", ZoneOffset) == ZoneOffset.UTC
        assert parse_iso8601(" Europe/Vienna ", ZoneId) == ZoneId("Europe/Vienna")

    def test_parse_zone_id_rejects_offsets(self) -> None:
        """An offset is not a zone id."""
        with pytest.raises(InvalidFieldError):
            parse_iso8601("+02:00", ZoneId)

    def test_parse_wrong_form(self) -> None:
        """Text in another type's form does not parse."""
        with pytest.raises(ParseError):
            parse_iso8601("2020-01-01", LocalTime)

    def test_unsupported_types(self) -> None:
        """Only temporal types have canonical forms."""
        with pytest.raises(TypeError, match="cannot parse text into int"):
            parse_iso8601("1", int)
        with pytest.raises(TypeError, match="cannot format int"):
            format_iso8601(1)

    def test_format(self) -> None:
        """Formatting gives each type's canonical text."""
        assert format_iso8601(Duration(90)) == "PT1M30S"
        assert format_iso8601(ZoneOffset(0)) == "Z"
        assert format_iso8601(LocalDate(2020, 1, 1)) == "2020-01-01"


# =============================================================================
# Pattern formatting
# =============================================================================


class TestFormatPattern:
    """Tests for format_pattern."""

    def test_date_names(self) -> None:
        """Month and weekday names are English."""
        assert format_pattern(LocalDate(2024, 1, 15), "%a, %d %B %Y") == (
            "Mon, 15 January 2024"
        )
        assert format_pattern(LocalDate(2024, 1, 15), "%A %b %y") == "Monday Jan 24"

    def test_day_of_year(self) -> None:
        """%j counts from January 1st."""
        assert format_pattern(LocalDate(2024, 3, 1), "%Y-%j") == "2024-061"

    def test_twelve_hour_clock(self) -> None:
        """Noon and midnight are 12 on the 12-hour clock."""
        assert format_pattern(LocalTime(14, 5), "%I:%M %p") == "02:05 PM"
        assert format_pattern(LocalTime(0, 0), "%I %p") == "12 AM"
        assert format_pattern(LocalTime(12, 0), "%I %p") == "12 PM"

    def test_fractions(self) -> None:
        """%f is microseconds and %N nanoseconds."""
        ldt = LocalDateTime.of(2024, 1, 15, 14, 5, 9, 123_456_789)
        assert format_pattern(ldt, "%Y-%m-%dT%H:%M:%S.%N") == "2024-01-15T14:05:09.123456789"
        assert format_pattern(ldt, "%S.%f") == "09.123456"

    def test_offsets(self) -> None:
        """Compact and colon offset forms."""
        odt = OffsetDateTime(LocalDateTime.of(2024, 1, 15, 14, 5), ZoneOffset(19_800))
        assert format_pattern(odt, "%H:%M%z") == "14:05+0530"
        assert format_pattern(odt, "%H:%M%:z") == "14:05+05:30"
        assert format_pattern(odt, "%Z") == "+05:30"

    def test_zone_name(self) -> None:
        """%Z is the region id for zoned values."""
        zdt = ZonedDateTime.parse("2021-06-01T12:00:00+02:00[Europe/Vienna]")
        assert format_pattern(zdt, "%H:%M %Z (%:z)") == "12:00 Europe/Vienna (+02:00)"

    def test_literal_percent(self) -> None:
        """%% is a literal percent sign."""
        assert format_pattern(LocalDate(2024, 1, 15), "100%% %d") == "100% 15"

    def test_missing_component(self) -> None:
        """A date has no hour."""
        with pytest.raises(PatternError, match="needs a time"):
            format_pattern(LocalDate(2024, 1, 15), "%H")

    def test_unsupported_directive(self) -> None:
        """Unknown directives are rejected and PatternError is a ValueError."""
        with pytest.raises(ValueError, match="unsupported pattern directive: '%Q'"):
            format_pattern(LocalDate(2024, 1, 15), "%Q")

    def test_unsupported_value(self) -> None:
        """Durations are not formatted with patterns."""
        with pytest.raises(TypeError):
            format_pattern(Duration(1), "%H")


# =============================================================================
# Pattern parsing
# =============================================================================


class TestParsePattern:
    """Tests for the pattern parsers."""

    def test_parse_local_date(self) -> None:
        """Abbreviated month names."""
        assert parse_local_date("15 Jan 2024", "%d %b %Y") == LocalDate(2024, 1, 15)

    def test_parse_local_date_day_of_year(self) -> None:
        """A year plus day of year is a complete date."""
        assert parse_local_date("2024-061", "%Y-%j") == LocalDate(2024, 3, 1)
        with pytest.raises(ParseError, match="invalid date"):
            parse_local_date("2023-366", "%Y-%j")

    def test_parse_weekday_must_agree(self) -> None:
        """A weekday that contradicts the date is rejected."""
        with pytest.raises(ParseError, match="does not match"):
            parse_local_date("Tue, 15 January 2024", "%a, %d %B %Y")

    def test_parse_invalid_date(self) -> None:
        """February 30 is rejected."""
        with pytest.raises(ParseError, match="invalid date"):
            parse_local_date("30/02/2024", "%d/%m/%Y")

    def test_parse_mismatch(self) -> None:
        """Text in another shape does not match."""
        with pytest.raises(ParseError, match="does not match pattern"):
            parse_local_date("2024-01-15", "%d/%m/%Y")

    def test_parse_local_time_twelve_hour(self) -> None:
        """AM/PM resolves the hour."""
        assert parse_local_time("02:05 PM", "%I:%M %p") == LocalTime(14, 5)
        assert parse_local_time("12:00 am", "%I:%M %p") == LocalTime(0, 0)
        with pytest.raises(ParseError, match="without AM/PM"):
            parse_local_time("02:05", "%I:%M")

    def test_parse_local_date_time(self) -> None:
        """Microseconds become nanoseconds."""
        ldt = parse_local_date_time("2024/01/15 14:05:09.123456", "%Y/%m/%d %H:%M:%S.%f")
        assert ldt == LocalDateTime.of(2024, 1, 15, 14, 5, 9, 123_456_000)

    def test_parse_offset_date_time(self) -> None:
        """Explicit offsets are used as given."""
        odt = parse_offset_date_time("2024-01-15 14:05 +0530", "%Y-%m-%d %H:%M %z")
        assert odt.offset == ZoneOffset(19_800)
        assert odt.datetime == LocalDateTime.of(2024, 1, 15, 14, 5)

    def test_parse_offset_date_time_from_region(self) -> None:
        """A region supplies the offset valid at that local time."""
        odt = parse_offset_date_time("2021-06-01 12:00 Europe/Vienna", "%Y-%m-%d %H:%M %Z")
        assert odt.to_iso_format() == "2021-06-01T12:00:00+02:00"

    def test_parse_offset_date_time_without_offset(self) -> None:
        """An offset or region is required."""
        with pytest.raises(ParseError, match="has no offset"):
            parse_offset_date_time("2021-06-01 12:00", "%Y-%m-%d %H:%M")

    def test_parse_zoned_date_time_in_gap(self) -> None:
        """Local times in a gap move forward."""
        zdt = parse_zoned_date_time("2021-03-28 02:30 Europe/Vienna", "%Y-%m-%d %H:%M %Z")
        assert str(zdt) == "2021-03-28T03:30:00+02:00[Europe/Vienna]"

    def test_parse_zoned_date_time_with_offset(self) -> None:
        """An explicit offset fixes the instant."""
        zdt = parse_zoned_date_time(
            "2020-06-01 10:00 +0100 Europe/Vienna", "%Y-%m-%d %H:%M %z %Z"
        )
        assert str(zdt) == "2020-06-01T11:00:00+02:00[Europe/Vienna]"

    def test_parse_zoned_date_time_needs_region(self) -> None:
        """An offset alone does not name a zone."""
        with pytest.raises(ParseError, match="no region zone id"):
            parse_zoned_date_time("2021-06-01 12:00 +02:00", "%Y-%m-%d %H:%M %Z")
