"""LocalDateTime class combining a date and a time of day.

This module provides the LocalDateTime class: a LocalDate plus a LocalTime,
without any zone or offset.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from dtudf._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from dtudf._internal.isotext import DATE_PATTERN, TIME_PATTERN
from dtudf.core.date import LocalDate
from dtudf.core.duration import Duration
from dtudf.core.period import Period
from dtudf.core.time import LocalTime
from dtudf.errors import ParseError

if TYPE_CHECKING:
    from dtudf.core.clock import Clock
    from dtudf.core.zone import ZoneOffset


_DATETIME_RE = re.compile(DATE_PATTERN + "T" + TIME_PATTERN)


class LocalDateTime:
    """A date-time without a zone, such as 2020-12-24T18:30.

    Date-based arithmetic (years, months, weeks, days, Period) acts on the
    date and keeps the time. Time-based arithmetic (hours down to nanos,
    Duration) carries any overflow into the date.

    Attributes:
        date: The LocalDate part.
        time: The LocalTime part.

    Examples:
        >>> ldt = LocalDateTime.of(2020, 12, 31, 23, 30)
        >>> str(ldt.plus_hours(1))
        '2021-01-01T00:30:00'
    """

    __slots__ = ("_date", "_time")

    def __init__(self, date: LocalDate, time: LocalTime) -> None:
        self._date: LocalDate = date
        self._time: LocalTime = time

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> LocalDateTime:
        """Create a LocalDateTime from components.

        Raises:
            InvalidFieldError: If any component is out of range.
        """
        return cls(LocalDate(year, month, day), LocalTime(hour, minute, second, nano))

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, nano: int, offset: ZoneOffset
    ) -> LocalDateTime:
        """Create the local date-time seen at an instant under an offset.

        Examples:
            >>> from dtudf.core.zone import ZoneOffset
            >>> LocalDateTime.of_epoch_second(0, 0, ZoneOffset.of_total_seconds(3600))
            LocalDateTime.of(1970, 1, 1, 1, 0, 0, 0)
        """
        local_second = epoch_second + offset.total_seconds
        epoch_day, second_of_day = divmod(local_second, SECONDS_PER_DAY)
        return cls(
            LocalDate.of_epoch_day(epoch_day),
            LocalTime.of_nano_of_day(second_of_day * NANOS_PER_SECOND + nano),
        )

    @classmethod
    def now(cls, clock: Clock) -> LocalDateTime:
        """Return the current local date-time in the clock's zone."""
        instant = clock.instant()
        offset = clock.zone.offset_at(instant)
        return cls.of_epoch_second(instant.epoch_second, instant.nano, offset)

    @classmethod
    def parse(cls, text: str) -> LocalDateTime:
        """Parse an ISO-8601 local date-time such as "2020-01-01T10:15:30".

        Raises:
            ParseError: If the text is malformed or a field is out of range.
        """
        match = _DATETIME_RE.fullmatch(text.strip())
        if match is None:
            raise ParseError(f"Invalid date-time format: {text!r}")
        return cls._from_match_groups(text, match.groups())

    @classmethod
    def _from_match_groups(cls, text: str, groups: tuple) -> LocalDateTime:
        year, month, day, hour, minute, second, fraction = groups
        return cls(
            LocalDate._from_match_groups(text, year, month, day),
            LocalTime._from_match_groups(text, hour, minute, second, fraction),
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def date(self) -> LocalDate:
        return self._date

    @property
    def time(self) -> LocalTime:
        return self._time

    def to_epoch_second(self, offset: ZoneOffset) -> int:
        """Seconds since 1970-01-01T00:00Z for this date-time at an offset."""
        return (
            self._date.to_epoch_day() * SECONDS_PER_DAY
            + self._time.to_second_of_day()
            - offset.total_seconds
        )

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def _with_date(self, date: LocalDate) -> LocalDateTime:
        if date is self._date:
            return self
        return LocalDateTime(date, self._time)

    def plus_years(self, years: int) -> LocalDateTime:
        return self._with_date(self._date.plus_years(years))

    def plus_months(self, months: int) -> LocalDateTime:
        return self._with_date(self._date.plus_months(months))

    def plus_weeks(self, weeks: int) -> LocalDateTime:
        return self._with_date(self._date.plus_weeks(weeks))

    def plus_days(self, days: int) -> LocalDateTime:
        return self._with_date(self._date.plus_days(days))

    def plus_nanos(self, nanos: int) -> LocalDateTime:
        """Add nanoseconds, carrying whole days into the date."""
        if nanos == 0:
            return self
        days, nano_of_day = divmod(self._time.to_nano_of_day() + nanos, NANOS_PER_DAY)
        return LocalDateTime(
            self._date.plus_days(days), LocalTime._from_nanos(nano_of_day)
        )

    def plus_seconds(self, seconds: int) -> LocalDateTime:
        return self.plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_minutes(self, minutes: int) -> LocalDateTime:
        return self.plus_nanos(minutes * NANOS_PER_MINUTE)

    def plus_hours(self, hours: int) -> LocalDateTime:
        return self.plus_nanos(hours * NANOS_PER_HOUR)

    def plus(self, amount: Period | Duration) -> LocalDateTime:
        """Add a Period (to the date) or a Duration (carrying into the date)."""
        if isinstance(amount, Period):
            return self._with_date(self._date.plus(amount))
        if isinstance(amount, Duration):
            return self.plus_nanos(amount.total_nanos)
        raise TypeError(f"cannot add {type(amount).__name__} to LocalDateTime")

    def minus(self, amount: Period | Duration) -> LocalDateTime:
        if isinstance(amount, Period):
            return self._with_date(self._date.minus(amount))
        if isinstance(amount, Duration):
            return self.plus_nanos(-amount.total_nanos)
        raise TypeError(f"cannot subtract {type(amount).__name__} from LocalDateTime")

    # =========================================================================
    # Comparison
    # =========================================================================

    def _key(self) -> tuple[int, int]:
        return (self._date.to_epoch_day(), self._time.to_nano_of_day())

    def is_before(self, other: LocalDateTime) -> bool:
        return self._key() < other._key()

    def is_after(self, other: LocalDateTime) -> bool:
        return self._key() > other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __hash__(self) -> int:
        return hash((LocalDateTime, self._date, self._time))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() >= other._key()

    # =========================================================================
    # String representation
    # =========================================================================

    def to_iso_format(self) -> str:
        return f"{self._date.to_iso_format()}T{self._time.to_iso_format()}"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __repr__(self) -> str:
        d, t = self._date, self._time
        return (
            f"LocalDateTime.of({d.year}, {d.month}, {d.day}, "
            f"{t.hour}, {t.minute}, {t.second}, {t.nano})"
        )


__all__ = ["LocalDateTime"]
