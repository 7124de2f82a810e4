"""LocalDate class representing a calendar date.

This module provides the LocalDate class for dates in the proleptic
Gregorian calendar, without time or zone.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from dtudf._internal.calendar import (
    days_in_month,
    days_in_year,
    days_before_month,
    epoch_day_to_day_of_week,
    epoch_day_to_ymd,
    is_leap_year,
    proleptic_month,
    ymd_to_epoch_day,
)
from dtudf._internal.constants import DAYS_PER_WEEK, MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR
from dtudf._internal.isotext import DATE_PATTERN, format_year
from dtudf._internal.validation import validate_day, validate_month, validate_year
from dtudf.errors import InvalidFieldError, ParseError, TemporalOverflowError

if TYPE_CHECKING:
    from dtudf.core.clock import Clock
    from dtudf.core.period import Period


_DATE_RE = re.compile(DATE_PATTERN)


def _check_year(year: int) -> int:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise TemporalOverflowError(
            f"year {year} is outside the supported range {MIN_YEAR}..{MAX_YEAR}"
        )
    return year


class LocalDate:
    """A date in the proleptic Gregorian calendar.

    Attributes:
        year: The year (-999999999 to 999999999, 0 is 1 BCE).
        month: The month (1-12).
        day: The day of month (1-31).

    Examples:
        >>> d = LocalDate(2024, 1, 31)
        >>> str(d.plus_months(1))
        '2024-02-29'
        >>> LocalDate.of_epoch_day(0)
        LocalDate(1970, 1, 1)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a LocalDate.

        Raises:
            InvalidFieldError: If the year, month or day is invalid.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)
        self._year: int = year
        self._month: int = month
        self._day: int = day

    @classmethod
    def _unchecked(cls, year: int, month: int, day: int) -> LocalDate:
        instance = object.__new__(cls)
        instance._year = year
        instance._month = month
        instance._day = day
        return instance

    @classmethod
    def of(cls, year: int, month: int, day: int) -> LocalDate:
        return cls(year, month, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a LocalDate from days since 1970-01-01.

        Raises:
            InvalidFieldError: If the date falls outside the supported years.
        """
        year, month, day = epoch_day_to_ymd(epoch_day)
        validate_year(year)
        return cls._unchecked(year, month, day)

    @classmethod
    def now(cls, clock: Clock) -> LocalDate:
        """Return today's date in the clock's zone."""
        from dtudf.core.datetime import LocalDateTime

        return LocalDateTime.now(clock).date

    @classmethod
    def parse(cls, text: str) -> LocalDate:
        """Parse an ISO-8601 local date such as "2020-02-29" or "+12345-01-01".

        Raises:
            ParseError: If the text is malformed or names an invalid date.
        """
        match = _DATE_RE.fullmatch(text.strip())
        if match is None:
            raise ParseError(f"Invalid date format: {text!r}")
        return cls._from_match_groups(text, *match.groups())

    @classmethod
    def _from_match_groups(
        cls, text: str, year: str, month: str, day: str
    ) -> LocalDate:
        try:
            return cls(int(year), int(month), int(day))
        except InvalidFieldError as e:
            raise ParseError(f"Invalid date {text!r}: {e}") from e

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def day_of_week(self) -> int:
        """ISO day of week, Monday=1 through Sunday=7."""
        return epoch_day_to_day_of_week(self.to_epoch_day())

    @property
    def day_of_year(self) -> int:
        return days_before_month(self._year, self._month) + self._day

    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    def length_of_year(self) -> int:
        return days_in_year(self._year)

    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def to_epoch_day(self) -> int:
        """Days since 1970-01-01 (negative before)."""
        return ymd_to_epoch_day(self._year, self._month, self._day)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus_years(self, years: int) -> LocalDate:
        """Add years, clamping Feb 29 to Feb 28 in non-leap years."""
        if years == 0:
            return self
        year = _check_year(self._year + years)
        day = min(self._day, days_in_month(year, self._month))
        return LocalDate._unchecked(year, self._month, day)

    def plus_months(self, months: int) -> LocalDate:
        """Add months, clamping the day to the last day of the target month.

        Examples:
            >>> LocalDate(2021, 3, 31).plus_months(-1)
            LocalDate(2021, 2, 28)
        """
        if months == 0:
            return self
        total = proleptic_month(self._year, self._month) + months
        year, month_index = divmod(total, MONTHS_PER_YEAR)
        _check_year(year)
        month = month_index + 1
        day = min(self._day, days_in_month(year, month))
        return LocalDate._unchecked(year, month, day)

    def plus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_days(weeks * DAYS_PER_WEEK)

    def plus_days(self, days: int) -> LocalDate:
        if days == 0:
            return self
        year, month, day = epoch_day_to_ymd(self.to_epoch_day() + days)
        _check_year(year)
        return LocalDate._unchecked(year, month, day)

    def plus(self, period: Period) -> LocalDate:
        """Add a Period.

        When both years and months are set they are applied together as a
        single month count, then the days are added.

        Examples:
            >>> from dtudf.core.period import Period
            >>> LocalDate(2020, 1, 31).plus(Period(1, 1, 1))
            LocalDate(2021, 3, 1)
        """
        result = self
        if period.years != 0 and period.months != 0:
            result = result.plus_months(period.total_months)
        elif period.years != 0:
            result = result.plus_years(period.years)
        elif period.months != 0:
            result = result.plus_months(period.months)
        return result.plus_days(period.days)

    def minus(self, period: Period) -> LocalDate:
        """Subtract a Period, mirroring plus()."""
        result = self
        if period.years != 0 and period.months != 0:
            result = result.plus_months(-period.total_months)
        elif period.years != 0:
            result = result.plus_years(-period.years)
        elif period.months != 0:
            result = result.plus_months(-period.months)
        return result.plus_days(-period.days)

    # =========================================================================
    # Comparison
    # =========================================================================

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def is_before(self, other: LocalDate) -> bool:
        return self._key() < other._key()

    def is_after(self, other: LocalDate) -> bool:
        return self._key() > other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((LocalDate,) + self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() >= other._key()

    # =========================================================================
    # String representation
    # =========================================================================

    def to_iso_format(self) -> str:
        """Return YYYY-MM-DD; years beyond four digits carry a sign."""
        return f"{format_year(self._year)}-{self._month:02d}-{self._day:02d}"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __repr__(self) -> str:
        return f"LocalDate({self._year}, {self._month}, {self._day})"


__all__ = ["LocalDate"]
