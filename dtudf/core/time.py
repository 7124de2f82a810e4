"""LocalTime class representing a time of day.

This module provides the LocalTime class for time-of-day values with
nanosecond precision and no date or zone.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from dtudf._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from dtudf._internal.isotext import TIME_PATTERN, format_fraction_minimal, parse_fraction
from dtudf._internal.validation import validate_field
from dtudf.errors import InvalidFieldError, ParseError

if TYPE_CHECKING:
    from dtudf.core.clock import Clock
    from dtudf.core.duration import Duration


_TIME_RE = re.compile(TIME_PATTERN)


class LocalTime:
    """A time of day with nanosecond precision.

    LocalTime runs from midnight (00:00:00) to 23:59:59.999999999. Arithmetic
    wraps around midnight.

    The internal representation stores the total nanoseconds since midnight
    in a single `_nanos` slot.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nano: The nanosecond component (0-999999999).

    Examples:
        >>> t = LocalTime(14, 30, 45)
        >>> str(t)
        '14:30:45'
        >>> str(LocalTime(23, 0).plus_hours(2))
        '01:00:00'
    """

    __slots__ = ("_nanos",)

    def __init__(
        self, hour: int = 0, minute: int = 0, second: int = 0, nano: int = 0
    ) -> None:
        """Create a LocalTime from component parts.

        Raises:
            InvalidFieldError: If any component is out of range.
        """
        validate_field("hour", hour, 0, 23)
        validate_field("minute", minute, 0, 59)
        validate_field("second", second, 0, 59)
        validate_field("nano", nano, 0, NANOS_PER_SECOND - 1)
        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nano
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> LocalTime:
        """Create a LocalTime from nanoseconds since midnight, unvalidated."""
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def of(
        cls, hour: int, minute: int, second: int = 0, nano: int = 0
    ) -> LocalTime:
        return cls(hour, minute, second, nano)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        """Create a LocalTime from nanoseconds since midnight.

        Raises:
            InvalidFieldError: If nano_of_day is outside one day.
        """
        validate_field("nano_of_day", nano_of_day, 0, NANOS_PER_DAY - 1)
        return cls._from_nanos(nano_of_day)

    @classmethod
    def midnight(cls) -> LocalTime:
        return cls._from_nanos(0)

    @classmethod
    def now(cls, clock: Clock) -> LocalTime:
        """Return the current time of day in the clock's zone."""
        from dtudf.core.datetime import LocalDateTime

        return LocalDateTime.now(clock).time

    @classmethod
    def parse(cls, text: str) -> LocalTime:
        """Parse an ISO-8601 local time: HH:MM, HH:MM:SS or HH:MM:SS.fffffffff.

        Raises:
            ParseError: If the text is malformed or a field is out of range.

        Examples:
            >>> LocalTime.parse("10:15")
            LocalTime(10, 15, 0, 0)
            >>> LocalTime.parse("10:15:30.25").nano
            250000000
        """
        match = _TIME_RE.fullmatch(text.strip())
        if match is None:
            raise ParseError(f"Invalid time format: {text!r}")
        return cls._from_match_groups(text, *match.groups())

    @classmethod
    def _from_match_groups(
        cls,
        text: str,
        hour: str,
        minute: str,
        second: str | None,
        fraction: str | None,
    ) -> LocalTime:
        try:
            return cls(int(hour), int(minute), int(second or 0), parse_fraction(fraction))
        except InvalidFieldError as e:
            raise ParseError(f"Invalid time {text!r}: {e}") from e

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nano(self) -> int:
        return self._nanos % NANOS_PER_SECOND

    def to_nano_of_day(self) -> int:
        return self._nanos

    def to_second_of_day(self) -> int:
        return self._nanos // NANOS_PER_SECOND

    # =========================================================================
    # Arithmetic (wrapping around midnight)
    # =========================================================================

    def plus_nanos(self, nanos: int) -> LocalTime:
        return LocalTime._from_nanos((self._nanos + nanos) % NANOS_PER_DAY)

    def plus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_nanos(minutes * NANOS_PER_MINUTE)

    def plus_hours(self, hours: int) -> LocalTime:
        return self.plus_nanos(hours * NANOS_PER_HOUR)

    def plus(self, duration: Duration) -> LocalTime:
        """Add a Duration, wrapping around midnight."""
        return self.plus_nanos(duration.total_nanos)

    def minus(self, duration: Duration) -> LocalTime:
        """Subtract a Duration, wrapping around midnight."""
        return self.plus_nanos(-duration.total_nanos)

    # =========================================================================
    # Comparison
    # =========================================================================

    def is_before(self, other: LocalTime) -> bool:
        return self._nanos < other._nanos

    def is_after(self, other: LocalTime) -> bool:
        return self._nanos > other._nanos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos == other._nanos

    def __hash__(self) -> int:
        return hash((LocalTime, self._nanos))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos >= other._nanos

    # =========================================================================
    # String representation
    # =========================================================================

    def to_iso_format(self) -> str:
        """Return HH:MM:SS with the fraction's trailing zeros stripped.

        Examples:
            >>> LocalTime(9, 5, 0, 120_000_000).to_iso_format()
            '09:05:00.12'
        """
        return (
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            f"{format_fraction_minimal(self.nano)}"
        )

    def __str__(self) -> str:
        return self.to_iso_format()

    def __repr__(self) -> str:
        return f"LocalTime({self.hour}, {self.minute}, {self.second}, {self.nano})"


__all__ = ["LocalTime"]
