"""Tests for OffsetDateTime and ZonedDateTime.

Daylight-saving cases use Europe/Vienna, which moved from +01:00 to +02:00
at 2021-03-28T02:00 and back at 2021-10-31T03:00.
"""

import pytest

from dtudf.core import (
    Duration,
    LocalDateTime,
    OffsetDateTime,
    Period,
    ZonedDateTime,
    ZoneId,
    ZoneOffset,
)
from dtudf.errors import InvalidFieldError, ParseError

VIENNA = ZoneId("Europe/Vienna")


# =============================================================================
# OffsetDateTime
# =============================================================================


class TestOffsetDateTime:
    """Tests for OffsetDateTime."""

    def test_parse_and_format(self) -> None:
        """The offset is kept in the text."""
        odt = OffsetDateTime.parse("2020-06-01T10:00:00+02:00")
        assert odt.datetime == LocalDateTime.of(2020, 6, 1, 10, 0)
        assert odt.offset == ZoneOffset(7200)
        assert odt.to_iso_format() == "2020-06-01T10:00:00+02:00"

    def test_is_equal_compares_instants(self) -> None:
        """Different offsets can describe the same instant."""
        a = OffsetDateTime.parse("2020-06-01T10:00:00+02:00")
        b = OffsetDateTime.parse("2020-06-01T08:00:00Z")
        assert a.is_equal(b)
        assert a != b
        assert not a.is_before(b)
        assert not a.is_after(b)

    def test_arithmetic_keeps_offset(self) -> None:
        """Adding moves the local date-time and keeps the offset."""
        odt = OffsetDateTime.parse("2020-01-31T23:00:00+01:00")
        result = odt.plus(Period(0, 1, 0)).plus(Duration(3600))
        assert result.to_iso_format() == "2020-03-01T00:00:00+01:00"

    def test_now_in_zone(self, fixed_clock) -> None:
        """The offset comes from the zone at the clock's instant."""
        odt = OffsetDateTime.now(fixed_clock, VIENNA)
        assert odt.to_iso_format() == "2020-06-15T12:30:00+02:00"

    def test_to_instant(self) -> None:
        """The instant accounts for the offset."""
        odt = OffsetDateTime.parse("1970-01-01T01:00:00+01:00")
        assert odt.to_instant().epoch_second == 0

    def test_parse_requires_offset(self) -> None:
        """Text without an offset is rejected."""
        with pytest.raises(ParseError):
            OffsetDateTime.parse("2020-06-01T10:00:00")


# =============================================================================
# ZonedDateTime
# =============================================================================


class TestZonedDateTimeResolution:
    """Tests for resolving local date-times in a zone."""

    def test_normal_time(self) -> None:
        """Outside transitions there is exactly one offset."""
        zdt = ZonedDateTime.of(LocalDateTime.of(2021, 6, 1, 12, 0), VIENNA)
        assert zdt.offset == ZoneOffset(7200)

    def test_gap_moves_forward(self) -> None:
        """A local time in the spring gap moves forward by the gap length."""
        zdt = ZonedDateTime.of(LocalDateTime.of(2021, 3, 28, 2, 30), VIENNA)
        assert str(zdt) == "2021-03-28T03:30:00+02:00[Europe/Vienna]"

    def test_overlap_takes_earlier_offset(self) -> None:
        """In the autumn overlap the summer offset wins by default."""
        zdt = ZonedDateTime.of(LocalDateTime.of(2021, 10, 31, 2, 30), VIENNA)
        assert zdt.offset == ZoneOffset(7200)

    def test_overlap_keeps_preferred_offset(self) -> None:
        """A valid preferred offset is kept in an overlap."""
        ldt = LocalDateTime.of(2021, 10, 31, 2, 30)
        zdt = ZonedDateTime.of_local(ldt, VIENNA, ZoneOffset(3600))
        assert zdt.offset == ZoneOffset(3600)

    def test_preferred_offset_ignored_outside_overlap(self) -> None:
        """A preferred offset that is not valid is ignored."""
        ldt = LocalDateTime.of(2021, 6, 1, 12, 0)
        zdt = ZonedDateTime.of_local(ldt, VIENNA, ZoneOffset(3600))
        assert zdt.offset == ZoneOffset(7200)

    def test_constructor_checks_offset(self) -> None:
        """The strict constructor rejects an offset the zone does not use."""
        with pytest.raises(InvalidFieldError, match="is not valid"):
            ZonedDateTime(LocalDateTime.of(2021, 6, 1, 12, 0), ZoneOffset(3600), VIENNA)


class TestZonedDateTimeArithmetic:
    """Tests for ZonedDateTime arithmetic across transitions."""

    def test_plus_hours_uses_the_instant(self) -> None:
        """One hour after 01:30+01:00 on the spring change is 03:30+02:00."""
        zdt = ZonedDateTime.parse("2021-03-28T01:30:00+01:00[Europe/Vienna]")
        assert str(zdt.plus_hours(1)) == "2021-03-28T03:30:00+02:00[Europe/Vienna]"

    def test_plus_days_keeps_local_time(self) -> None:
        """A day later keeps the wall-clock time and picks up the new offset."""
        zdt = ZonedDateTime.parse("2021-03-27T12:00:00+01:00[Europe/Vienna]")
        assert str(zdt.plus_days(1)) == "2021-03-28T12:00:00+02:00[Europe/Vienna]"

    def test_plus_duration_across_autumn_change(self) -> None:
        """A duration crosses the repeated hour on the instant time-line."""
        zdt = ZonedDateTime.parse("2021-10-31T02:30:00+02:00[Europe/Vienna]")
        later = zdt.plus(Duration(3600))
        assert str(later) == "2021-10-31T02:30:00+01:00[Europe/Vienna]"

    def test_is_equal_across_offsets(self) -> None:
        """Equality in time ignores the offset and zone."""
        a = ZonedDateTime.parse("2021-06-01T12:00:00+02:00[Europe/Vienna]")
        b = ZonedDateTime.parse("2021-06-01T11:00:00+01:00[Europe/London]")
        assert a.is_equal(b)
        assert a != b


class TestZonedDateTimeText:
    """Tests for ZonedDateTime text."""

    def test_parse_shows_instant_in_zone(self) -> None:
        """The offset fixes the instant, which is then shown in the zone."""
        zdt = ZonedDateTime.parse("2020-06-01T10:00:00+01:00[Europe/Vienna]")
        assert zdt.to_iso_format() == "2020-06-01T11:00:00+02:00[Europe/Vienna]"

    def test_parse_requires_region(self) -> None:
        """The bracketed region id is mandatory."""
        with pytest.raises(ParseError, match="Invalid zoned date-time format"):
            ZonedDateTime.parse("2020-06-01T10:00:00+02:00")

    def test_parse_unknown_region(self) -> None:
        """An unknown region is a parse failure."""
        with pytest.raises(ParseError, match="Invalid zone"):
            ZonedDateTime.parse("2020-06-01T10:00:00+02:00[Mars/Olympus_Mons]")

    def test_repr(self) -> None:
        """The repr can be evaluated back."""
        zdt = ZonedDateTime.parse("2020-06-01T10:00:00+02:00[Europe/Vienna]")
        assert repr(zdt) == "ZonedDateTime.parse('2020-06-01T10:00:00+02:00[Europe/Vienna]')"

    def test_now(self, vienna_clock) -> None:
        """Now is shown in the clock's zone."""
        assert str(ZonedDateTime.now(vienna_clock)) == (
            "2020-06-15T12:30:00+02:00[Europe/Vienna]"
        )
