"""Tests for the LocalTime class."""

import pytest

from dtudf.core import Duration, LocalTime
from dtudf.errors import InvalidFieldError, ParseError


class TestLocalTimeConstruction:
    """Tests for LocalTime construction."""

    def test_components(self) -> None:
        """Test basic construction."""
        t = LocalTime(14, 30, 45, 123)
        assert (t.hour, t.minute, t.second, t.nano) == (14, 30, 45, 123)

    def test_defaults(self) -> None:
        """Missing components default to zero."""
        assert LocalTime() == LocalTime.midnight()

    @pytest.mark.parametrize(
        "args,field",
        [((24, 0), "hour"), ((0, 60), "minute"), ((0, 0, 60), "second"), ((0, 0, 0, -1), "nano")],
    )
    def test_out_of_range(self, args: tuple, field: str) -> None:
        """Each component is range-checked."""
        with pytest.raises(InvalidFieldError, match=f"{field} must be between"):
            LocalTime(*args)

    def test_now(self, vienna_clock) -> None:
        """The time of day is read in the clock's zone."""
        assert LocalTime.now(vienna_clock) == LocalTime(12, 30)


class TestLocalTimeArithmetic:
    """Tests for LocalTime arithmetic, which wraps around midnight."""

    def test_plus_hours_wraps(self) -> None:
        """23:00 plus two hours is 01:00."""
        assert LocalTime(23, 0).plus_hours(2) == LocalTime(1, 0)

    def test_minus_wraps_backwards(self) -> None:
        """00:30 minus one hour is 23:30."""
        assert LocalTime(0, 30).minus(Duration(3600)) == LocalTime(23, 30)

    def test_plus_duration_of_days(self) -> None:
        """Whole days leave the time unchanged."""
        assert LocalTime(10, 0).plus(Duration.of_days(3)) == LocalTime(10, 0)

    def test_plus_nanos_carry(self) -> None:
        """Nanos carry into seconds."""
        assert LocalTime(0, 0, 0, 999_999_999).plus_nanos(1) == LocalTime(0, 0, 1)


class TestLocalTimeText:
    """Tests for ISO-8601 text."""

    @pytest.mark.parametrize(
        "time,text",
        [
            (LocalTime(14, 30, 45), "14:30:45"),
            (LocalTime(9, 5, 0, 120_000_000), "09:05:00.12"),
            (LocalTime(0, 0, 0, 1), "00:00:00.000000001"),
        ],
    )
    def test_to_iso_format(self, time: LocalTime, text: str) -> None:
        """Seconds are always printed; the fraction is minimal."""
        assert time.to_iso_format() == text

    def test_parse_forms(self) -> None:
        """Minutes-only, seconds and fractions are accepted."""
        assert LocalTime.parse("10:15") == LocalTime(10, 15)
        assert LocalTime.parse("10:15:30") == LocalTime(10, 15, 30)
        assert LocalTime.parse("10:15:30.25").nano == 250_000_000

    def test_parse_out_of_range(self) -> None:
        """Well-formed text with a bad field."""
        with pytest.raises(ParseError, match="Invalid time"):
            LocalTime.parse("25:00")

    def test_parse_malformed(self) -> None:
        """Text that is not a time."""
        with pytest.raises(ParseError, match="Invalid time format"):
            LocalTime.parse("noon")
