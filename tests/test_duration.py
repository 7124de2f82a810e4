"""Tests for the Duration class.

This module tests Duration construction, arithmetic, division, measuring
between values, and the ISO-8601 text form.
"""

import pytest

from dtudf.core import Duration, Instant, LocalDateTime, LocalTime, ZonedDateTime
from dtudf.errors import DivisionByZeroError, ParseError


# =============================================================================
# Construction Tests
# =============================================================================


class TestDurationConstruction:
    """Tests for Duration construction."""

    def test_default_is_zero(self) -> None:
        """A default Duration has zero length."""
        d = Duration()
        assert d.seconds == 0
        assert d.nanos == 0
        assert d.is_zero()

    def test_nanos_are_normalized(self) -> None:
        """A negative nano adjustment borrows from the seconds."""
        d = Duration.of_seconds(3, -1)
        assert d.seconds == 2
        assert d.nanos == 999_999_999

    def test_negative_half_second(self) -> None:
        """The seconds carry the sign and nanos stay non-negative."""
        d = Duration.of_nanos(-500_000_000)
        assert (d.seconds, d.nanos) == (-1, 500_000_000)
        assert d.is_negative()

    def test_unit_factories(self) -> None:
        """Factories for minutes, hours, days and millis."""
        assert Duration.of_minutes(2) == Duration(120)
        assert Duration.of_hours(1) == Duration(3600)
        assert Duration.of_days(1) == Duration(86_400)
        assert Duration.of_millis(1_500) == Duration(1, 500_000_000)


# =============================================================================
# Arithmetic Tests
# =============================================================================


class TestDurationArithmetic:
    """Tests for adding, subtracting and multiplying durations."""

    def test_plus_carries_nanos(self) -> None:
        """Nanos that overflow a second carry into the seconds."""
        assert Duration(1, 600_000_000).plus(Duration(0, 600_000_000)) == Duration(
            2, 200_000_000
        )

    def test_minus(self) -> None:
        """Subtracting a larger duration gives a negative one."""
        assert Duration(1).minus(Duration(3)) == Duration(-2)

    def test_operators(self) -> None:
        """The operators mirror the named methods."""
        assert Duration(1) + Duration(2) == Duration(3)
        assert Duration(5) - Duration(2) == Duration(3)
        assert Duration(2) * 3 == Duration(6)
        assert -Duration(2) == Duration(-2)

    def test_multiplied_by(self) -> None:
        """Multiplication works on the full nanosecond count."""
        assert Duration(1, 500_000_000).multiplied_by(3) == Duration(4, 500_000_000)

    def test_ordering(self) -> None:
        """Durations are ordered by length."""
        assert Duration(-1, 500_000_000) < Duration(0)
        assert Duration(2) > Duration(1, 999_999_999)


class TestDurationDivision:
    """Tests for division by a scalar or a duration."""

    def test_divide_by_scalar(self) -> None:
        """Division by an integer keeps nanosecond precision."""
        assert Duration(10).divided_by(3) == Duration(3, 333_333_333)

    def test_divide_negative_truncates_toward_zero(self) -> None:
        """-7s / 2 is -3.5s."""
        assert Duration(-7).divided_by(2) == Duration(-4, 500_000_000)

    def test_divide_by_duration(self) -> None:
        """Dividing by a duration counts whole occurrences."""
        assert Duration(10).divided_by(Duration(3)) == 3
        assert Duration(10).divided_by(Duration(-3)) == -3

    def test_divide_by_zero_scalar(self) -> None:
        """A zero divisor raises."""
        with pytest.raises(DivisionByZeroError, match="Cannot divide by zero"):
            Duration(10).divided_by(0)

    def test_divide_by_zero_duration(self) -> None:
        """A zero duration divisor raises and is a ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            Duration(10).divided_by(Duration.zero())


class TestDurationBetween:
    """Tests for Duration.between."""

    def test_between_local_times(self) -> None:
        """The result is negative when the end comes first."""
        assert Duration.between(LocalTime(10, 0), LocalTime(9, 30)) == Duration(-1800)

    def test_between_local_date_times(self) -> None:
        """Local date-times are measured across midnight."""
        start = LocalDateTime.of(2020, 1, 1, 23, 0)
        end = LocalDateTime.of(2020, 1, 2, 1, 0)
        assert Duration.between(start, end) == Duration(7200)

    def test_between_instants(self) -> None:
        """Instants are measured to the nanosecond."""
        assert Duration.between(Instant(0), Instant(1, 5)) == Duration(1, 5)

    def test_between_zoned_across_dst(self) -> None:
        """Zoned values are measured on the instant time-line."""
        start = ZonedDateTime.parse("2021-03-28T01:00:00+01:00[Europe/Vienna]")
        end = ZonedDateTime.parse("2021-03-28T04:00:00+02:00[Europe/Vienna]")
        assert Duration.between(start, end) == Duration(7200)

    def test_between_mixed_types(self) -> None:
        """Different types cannot be measured against each other."""
        with pytest.raises(TypeError, match="cannot measure between"):
            Duration.between(LocalTime(10, 0), Instant(0))


# =============================================================================
# Text Tests
# =============================================================================


class TestDurationText:
    """Tests for ISO-8601 formatting and parsing."""

    @pytest.mark.parametrize(
        "duration,text",
        [
            (Duration(0), "PT0S"),
            (Duration(90, 500_000_000), "PT1M30.5S"),
            (Duration(90_000), "PT25H"),
            (Duration(-1, 500_000_000), "PT-0.5S"),
            (Duration(-90), "PT-1M-30S"),
            (Duration(3600, 1), "PT1H0.000000001S"),
        ],
    )
    def test_to_iso_format(self, duration: Duration, text: str) -> None:
        """Hours are never folded into days."""
        assert duration.to_iso_format() == text
        assert str(duration) == text

    def test_parse_full(self) -> None:
        """Hours, minutes and fractional seconds."""
        assert Duration.parse("PT8H6M12.345S") == Duration(29_172, 345_000_000)

    def test_parse_days(self) -> None:
        """A day is exactly 24 hours."""
        assert Duration.parse("P2DT3H") == Duration(183_600)

    def test_parse_is_case_insensitive(self) -> None:
        """Lowercase designators are accepted."""
        assert Duration.parse("pt1.5s") == Duration(1, 500_000_000)

    def test_parse_component_signs(self) -> None:
        """Each component may carry its own sign."""
        assert Duration.parse("PT-6H3M") == Duration(-21_420)
        assert Duration.parse("-PT6H3M") == Duration(-21_780)

    def test_parse_negative_fraction(self) -> None:
        """The fraction takes the sign of the seconds."""
        assert Duration.parse("PT-0.5S") == Duration(-1, 500_000_000)

    @pytest.mark.parametrize("text", ["P1X", "PT", "P", "", "1H"])
    def test_parse_invalid(self, text: str) -> None:
        """Malformed text raises ParseError."""
        with pytest.raises(ParseError, match="Invalid duration format"):
            Duration.parse(text)
