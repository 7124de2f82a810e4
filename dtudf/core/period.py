"""Period class representing calendar-based amounts of time.

This module provides the Period class for amounts expressed in years, months
and days, as opposed to exact time spans (Duration).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from dtudf._internal.calendar import days_in_month, proleptic_month
from dtudf._internal.constants import (
    DAYS_PER_WEEK,
    INT32_MAX,
    INT32_MIN,
    MONTHS_PER_YEAR,
)
from dtudf._internal.isotext import trunc_div, trunc_mod
from dtudf.errors import ParseError, TemporalOverflowError

if TYPE_CHECKING:
    from dtudf.core.date import LocalDate


_PERIOD_PATTERN = re.compile(
    r"([-+]?)P(?:([-+]?\d+)Y)?(?:([-+]?\d+)M)?(?:([-+]?\d+)W)?(?:([-+]?\d+)D)?",
    re.IGNORECASE,
)


def _check_int32(name: str, value: int) -> int:
    if value < INT32_MIN or value > INT32_MAX:
        raise TemporalOverflowError(f"period {name} exceeds 32-bit range: {value}")
    return value


class Period:
    """A calendar-based amount of time in years, months and days.

    Unlike Duration (which is exact), a Period means different exact lengths
    depending on the date it is applied to: adding one month to Jan 31 yields
    the last day of February.

    Components are stored as given. Period(0, 14, 0) stays 14 months until
    normalized() is called, and days are never folded into months.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        days: Number of days (can be negative).

    Examples:
        >>> Period(1, 15, 10).normalized()
        Period(years=2, months=3, days=10)
        >>> str(Period(0, 0, 0))
        'P0D'
    """

    __slots__ = ("_years", "_months", "_days")

    def __init__(self, years: int = 0, months: int = 0, days: int = 0) -> None:
        """Create a Period from component parts.

        Raises:
            TemporalOverflowError: If a component does not fit 32 bits.
        """
        self._years: int = _check_int32("years", years)
        self._months: int = _check_int32("months", months)
        self._days: int = _check_int32("days", days)

    @classmethod
    def zero(cls) -> Period:
        return cls(0, 0, 0)

    @classmethod
    def of(cls, years: int, months: int, days: int) -> Period:
        return cls(years, months, days)

    @classmethod
    def parse(cls, text: str) -> Period:
        """Parse an ISO-8601 period such as "P1Y2M3D" or "P2W".

        Weeks are converted to days (x7). Each component may carry its own
        sign and a leading "-" negates every component.

        Raises:
            ParseError: If the text is not a valid ISO-8601 period.

        Examples:
            >>> Period.parse("P1Y2W")
            Period(years=1, months=0, days=14)
            >>> Period.parse("-P1Y-2M")
            Period(years=-1, months=2, days=0)
        """
        match = _PERIOD_PATTERN.fullmatch(text.strip())
        if match is None:
            raise ParseError(f"Invalid period format: {text!r}")

        sign, years, months, weeks, days = match.groups()
        if years is None and months is None and weeks is None and days is None:
            raise ParseError(f"Invalid period format: {text!r}")

        factor = -1 if sign == "-" else 1
        try:
            return cls(
                int(years or 0) * factor,
                int(months or 0) * factor,
                (int(weeks or 0) * DAYS_PER_WEEK + int(days or 0)) * factor,
            )
        except TemporalOverflowError as e:
            raise ParseError(f"Period out of range: {text!r}") from e

    @classmethod
    def between(cls, start: LocalDate, end: LocalDate) -> Period:
        """Return the calendar period from start (inclusive) to end (exclusive).

        Whole months are counted first and the remaining days second; years
        and months share a sign. The result is negative when start follows
        end.

        Examples:
            >>> from dtudf.core.date import LocalDate
            >>> Period.between(LocalDate(2020, 1, 15), LocalDate(2021, 3, 10))
            Period(years=1, months=1, days=23)
            >>> Period.between(LocalDate(2020, 3, 1), LocalDate(2020, 1, 1))
            Period(years=0, months=-2, days=0)
        """
        total_months = proleptic_month(end.year, end.month) - proleptic_month(
            start.year, start.month
        )
        days = end.day - start.day
        if total_months > 0 and days < 0:
            total_months -= 1
            anchor = start.plus_months(total_months)
            days = end.to_epoch_day() - anchor.to_epoch_day()
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= days_in_month(end.year, end.month)
        return cls(
            trunc_div(total_months, MONTHS_PER_YEAR),
            trunc_mod(total_months, MONTHS_PER_YEAR),
            days,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def total_months(self) -> int:
        """Years and months combined as a month count (days ignored)."""
        return self._years * MONTHS_PER_YEAR + self._months

    def is_zero(self) -> bool:
        return self._years == 0 and self._months == 0 and self._days == 0

    def is_negative(self) -> bool:
        return self._years < 0 or self._months < 0 or self._days < 0

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus(self, other: Period) -> Period:
        """Add component-wise; no normalization happens."""
        return Period(
            self._years + other._years,
            self._months + other._months,
            self._days + other._days,
        )

    def minus(self, other: Period) -> Period:
        return Period(
            self._years - other._years,
            self._months - other._months,
            self._days - other._days,
        )

    def multiplied_by(self, scalar: int) -> Period:
        """Multiply every component by scalar."""
        return Period(self._years * scalar, self._months * scalar, self._days * scalar)

    def negated(self) -> Period:
        return self.multiplied_by(-1)

    def normalized(self) -> Period:
        """Fold whole multiples of 12 months into years; days stay as-is.

        Division truncates toward zero, so years and months never end up
        with opposite signs.

        Examples:
            >>> Period(1, -25, 0).normalized()
            Period(years=-1, months=-1, days=0)
        """
        total = self.total_months
        return Period(
            trunc_div(total, MONTHS_PER_YEAR),
            trunc_mod(total, MONTHS_PER_YEAR),
            self._days,
        )

    def __add__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: object) -> Period:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    __rmul__ = __mul__

    def __neg__(self) -> Period:
        return self.negated()

    # =========================================================================
    # Comparison and representation
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        """Periods are equal when every component is equal (P12M != P1Y)."""
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._days == other._days
        )

    def __hash__(self) -> int:
        return hash((Period, self._years, self._months, self._days))

    def to_iso_format(self) -> str:
        """Return "P0D" for zero, else PnYnMnD with zero components omitted."""
        if self.is_zero():
            return "P0D"
        parts = ["P"]
        if self._years != 0:
            parts.append(f"{self._years}Y")
        if self._months != 0:
            parts.append(f"{self._months}M")
        if self._days != 0:
            parts.append(f"{self._days}D")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_iso_format()

    def __repr__(self) -> str:
        return f"Period(years={self._years}, months={self._months}, days={self._days})"


__all__ = ["Period"]
