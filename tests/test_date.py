"""Tests for the LocalDate class."""

import pytest

from dtudf.core import LocalDate, Period
from dtudf._internal.constants import MAX_YEAR
from dtudf.errors import InvalidFieldError, ParseError, TemporalOverflowError


class TestLocalDateConstruction:
    """Tests for LocalDate construction."""

    def test_valid_date(self) -> None:
        """Test basic construction."""
        d = LocalDate(2024, 2, 29)
        assert (d.year, d.month, d.day) == (2024, 2, 29)

    def test_invalid_day(self) -> None:
        """February 30 does not exist."""
        with pytest.raises(InvalidFieldError, match="day must be between 1 and 29"):
            LocalDate(2020, 2, 30)

    def test_invalid_month(self) -> None:
        """Months run from 1 to 12."""
        with pytest.raises(InvalidFieldError, match="month must be between 1 and 12"):
            LocalDate(2020, 13, 1)

    def test_of_epoch_day(self) -> None:
        """Epoch day 0 is 1970-01-01."""
        assert LocalDate.of_epoch_day(0) == LocalDate(1970, 1, 1)
        assert LocalDate.of_epoch_day(-1) == LocalDate(1969, 12, 31)
        assert LocalDate(2000, 3, 1).to_epoch_day() == 11017

    def test_now(self, fixed_clock) -> None:
        """Today comes from the clock."""
        assert LocalDate.now(fixed_clock) == LocalDate(2020, 6, 15)

    def test_properties(self) -> None:
        """Day of week, day of year and lengths."""
        d = LocalDate(2024, 1, 15)
        assert d.day_of_week == 1
        assert d.day_of_year == 15
        assert d.length_of_month() == 31
        assert d.is_leap_year()


class TestLocalDateArithmetic:
    """Tests for LocalDate arithmetic."""

    def test_plus_months_clamps(self) -> None:
        """The day is clamped to the end of the target month."""
        assert LocalDate(2024, 1, 31).plus_months(1) == LocalDate(2024, 2, 29)
        assert LocalDate(2021, 3, 31).plus_months(-1) == LocalDate(2021, 2, 28)

    def test_plus_years_from_leap_day(self) -> None:
        """Feb 29 becomes Feb 28 in a common year."""
        assert LocalDate(2020, 2, 29).plus_years(1) == LocalDate(2021, 2, 28)

    def test_plus_period(self) -> None:
        """Years and months move together, then days are added."""
        assert LocalDate(2020, 1, 31).plus(Period(1, 1, 1)) == LocalDate(2021, 3, 1)

    def test_minus_period(self) -> None:
        """Subtraction mirrors addition."""
        assert LocalDate(2021, 3, 1).minus(Period(1, 1, 1)) == LocalDate(2020, 1, 31)

    def test_plus_days_across_year(self) -> None:
        """Days roll over into the next year."""
        assert LocalDate(2020, 12, 31).plus_days(1) == LocalDate(2021, 1, 1)

    def test_overflow(self) -> None:
        """Moving past the last supported year raises."""
        with pytest.raises(TemporalOverflowError):
            LocalDate(MAX_YEAR, 12, 31).plus_days(1)

    def test_comparison(self) -> None:
        """Dates are ordered chronologically."""
        assert LocalDate(2020, 1, 1).is_before(LocalDate(2020, 1, 2))
        assert LocalDate(2020, 1, 2).is_after(LocalDate(2020, 1, 1))
        assert LocalDate(2019, 12, 31) < LocalDate(2020, 1, 1)


class TestLocalDateText:
    """Tests for ISO-8601 text."""

    @pytest.mark.parametrize(
        "date,text",
        [
            (LocalDate(2020, 2, 29), "2020-02-29"),
            (LocalDate(12345, 1, 1), "+12345-01-01"),
            (LocalDate(-44, 3, 15), "-0044-03-15"),
            (LocalDate(0, 1, 1), "0000-01-01"),
        ],
    )
    def test_format_and_parse(self, date: LocalDate, text: str) -> None:
        """Years beyond four digits carry a sign."""
        assert date.to_iso_format() == text
        assert LocalDate.parse(text) == date

    def test_parse_invalid_date(self) -> None:
        """Well-formed text naming a non-existent date."""
        with pytest.raises(ParseError, match="Invalid date"):
            LocalDate.parse("2021-02-29")

    def test_parse_malformed(self) -> None:
        """Single-digit months are not ISO-8601."""
        with pytest.raises(ParseError, match="Invalid date format"):
            LocalDate.parse("2020-1-1")

    def test_repr(self) -> None:
        """The repr is constructor-shaped."""
        assert repr(LocalDate(2020, 1, 2)) == "LocalDate(2020, 1, 2)"
