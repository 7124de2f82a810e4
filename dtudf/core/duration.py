"""Duration class representing an exact amount of time.

This module provides the Duration class: a signed span of seconds and
nanoseconds, independent of any calendar.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Union

from dtudf._internal.constants import (
    INT64_MAX,
    INT64_MIN,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from dtudf._internal.isotext import parse_fraction, trunc_div, trunc_mod
from dtudf.errors import DivisionByZeroError, ParseError, TemporalOverflowError

if TYPE_CHECKING:
    from dtudf.core.datetime import LocalDateTime
    from dtudf.core.instant import Instant
    from dtudf.core.offset_datetime import OffsetDateTime
    from dtudf.core.time import LocalTime
    from dtudf.core.zoned_datetime import ZonedDateTime

    TimelineValue = Union[
        LocalTime, LocalDateTime, Instant, OffsetDateTime, ZonedDateTime
    ]


_DURATION_PATTERN = re.compile(
    r"([-+]?)P(?:([-+]?\d+)D)?"
    r"(T(?:([-+]?\d+)H)?(?:([-+]?\d+)M)?(?:([-+]?\d+)(?:[.,](\d{0,9}))?S)?)?",
    re.IGNORECASE,
)


class Duration:
    """A signed, exact amount of time with nanosecond precision.

    The value is held as whole seconds plus a nanosecond adjustment that is
    always in [0, 999_999_999]. The seconds component carries the sign, so
    minus half a second is stored as seconds=-1, nanos=500_000_000.

    Attributes:
        seconds: Whole seconds, sign-bearing.
        nanos: Nanosecond adjustment (0-999999999).

    Examples:
        >>> d = Duration(90, 500_000_000)
        >>> str(d)
        'PT1M30.5S'

        >>> Duration.of_nanos(-500_000_000).seconds
        -1
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(self, seconds: int = 0, nanos: int = 0) -> None:
        """Create a Duration, normalizing nanos into [0, 1e9).

        Args:
            seconds: Whole seconds.
            nanos: Nanosecond adjustment, may be any size or sign.

        Raises:
            TemporalOverflowError: If the seconds do not fit 64 bits.
        """
        extra, nanos = divmod(nanos, NANOS_PER_SECOND)
        seconds += extra
        if seconds < INT64_MIN or seconds > INT64_MAX:
            raise TemporalOverflowError(
                f"duration exceeds 64-bit seconds range: {seconds}"
            )
        self._seconds: int = seconds
        self._nanos: int = nanos

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def zero(cls) -> Duration:
        """Return a zero-length duration."""
        return cls(0, 0)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a Duration from seconds plus a nanosecond adjustment.

        The adjustment may be negative or exceed one second.

        Examples:
            >>> Duration.of_seconds(3, -1)
            Duration(seconds=2, nanos=999999999)
        """
        return cls(seconds, nano_adjustment)

    @classmethod
    def of_nanos(cls, nanos: int) -> Duration:
        """Create a Duration from a total count of nanoseconds."""
        return cls(0, nanos)

    @classmethod
    def of_millis(cls, millis: int) -> Duration:
        """Create a Duration from milliseconds."""
        return cls(0, millis * NANOS_PER_MILLISECOND)

    @classmethod
    def of_minutes(cls, minutes: int) -> Duration:
        return cls(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def of_hours(cls, hours: int) -> Duration:
        return cls(hours * SECONDS_PER_HOUR)

    @classmethod
    def of_days(cls, days: int) -> Duration:
        return cls(days * SECONDS_PER_DAY)

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse an ISO-8601 duration such as "PT8H6M12.345S" or "P2DT3H".

        Days are exactly 24 hours. Each component may carry its own sign and
        a leading sign negates the whole value. The fraction takes the sign
        of the seconds component.

        Args:
            text: The text to parse (case-insensitive).

        Returns:
            The parsed Duration.

        Raises:
            ParseError: If the text is not a valid ISO-8601 duration.

        Examples:
            >>> Duration.parse("PT-0.5S")
            Duration(seconds=-1, nanos=500000000)
            >>> Duration.parse("-PT6H3M")
            Duration(seconds=-21780, nanos=0)
        """
        match = _DURATION_PATTERN.fullmatch(text.strip())
        if match is None:
            raise ParseError(f"Invalid duration format: {text!r}")

        sign, days, t_part, hours, minutes, seconds, fraction = match.groups()
        if days is None and hours is None and minutes is None and seconds is None:
            raise ParseError(f"Invalid duration format: {text!r}")
        if t_part is not None and hours is None and minutes is None and seconds is None:
            raise ParseError(f"Invalid duration format: {text!r}")

        total_nanos = (
            int(days or 0) * NANOS_PER_DAY
            + int(hours or 0) * NANOS_PER_HOUR
            + int(minutes or 0) * NANOS_PER_MINUTE
            + int(seconds or 0) * NANOS_PER_SECOND
        )
        fraction_nanos = parse_fraction(fraction)
        if seconds is not None and seconds.startswith("-"):
            fraction_nanos = -fraction_nanos
        total_nanos += fraction_nanos

        if sign == "-":
            total_nanos = -total_nanos
        try:
            return cls.of_nanos(total_nanos)
        except TemporalOverflowError as e:
            raise ParseError(f"Duration out of range: {text!r}") from e

    @classmethod
    def between(cls, start: TimelineValue, end: TimelineValue) -> Duration:
        """Return the signed duration from start to end.

        Both values must be of the same type: LocalTime, LocalDateTime,
        Instant, OffsetDateTime or ZonedDateTime. Offset and zoned values are
        measured on the instant time-line. The result is negative when end
        is before start.

        Raises:
            TypeError: If the values are of different or unsupported types.

        Examples:
            >>> from dtudf.core.time import LocalTime
            >>> Duration.between(LocalTime(10, 0), LocalTime(9, 30))
            Duration(seconds=-1800, nanos=0)
        """
        if type(start) is not type(end):
            raise TypeError(
                f"cannot measure between {type(start).__name__} "
                f"and {type(end).__name__}"
            )
        return cls.of_nanos(_timeline_nanos(end) - _timeline_nanos(start))

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def seconds(self) -> int:
        """Whole seconds, sign-bearing."""
        return self._seconds

    @property
    def nanos(self) -> int:
        """Nanosecond adjustment (0-999999999)."""
        return self._nanos

    @property
    def total_nanos(self) -> int:
        """The whole duration as a signed count of nanoseconds."""
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def is_zero(self) -> bool:
        return self._seconds == 0 and self._nanos == 0

    def is_negative(self) -> bool:
        return self._seconds < 0

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus(self, other: Duration) -> Duration:
        """Return this duration plus another."""
        return Duration(self._seconds + other._seconds, self._nanos + other._nanos)

    def minus(self, other: Duration) -> Duration:
        """Return this duration minus another."""
        return Duration(self._seconds - other._seconds, self._nanos - other._nanos)

    def multiplied_by(self, scalar: int) -> Duration:
        """Return this duration multiplied by an integer scalar.

        Examples:
            >>> Duration(1, 500_000_000).multiplied_by(3)
            Duration(seconds=4, nanos=500000000)
        """
        return Duration.of_nanos(self.total_nanos * scalar)

    def divided_by(self, divisor: int | Duration) -> Duration | int:
        """Divide by an integer scalar or by another duration.

        Dividing by an integer yields a Duration truncated toward zero at
        nanosecond resolution. Dividing by a Duration yields how many whole
        times the divisor fits, truncated toward zero.

        Args:
            divisor: Integer scalar or Duration.

        Returns:
            A Duration for a scalar divisor, an int for a Duration divisor.

        Raises:
            DivisionByZeroError: If the divisor is zero.

        Examples:
            >>> Duration(10).divided_by(3)
            Duration(seconds=3, nanos=333333333)
            >>> Duration(10).divided_by(Duration(3))
            3
        """
        if isinstance(divisor, Duration):
            if divisor.is_zero():
                raise DivisionByZeroError("Cannot divide by a zero duration")
            return trunc_div(self.total_nanos, divisor.total_nanos)
        if divisor == 0:
            raise DivisionByZeroError("Cannot divide by zero")
        return Duration.of_nanos(trunc_div(self.total_nanos, divisor))

    def negated(self) -> Duration:
        return Duration.of_nanos(-self.total_nanos)

    def abs(self) -> Duration:
        return self.negated() if self.is_negative() else self

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    __rmul__ = __mul__

    def __neg__(self) -> Duration:
        return self.negated()

    def __abs__(self) -> Duration:
        return self.abs()

    # =========================================================================
    # Comparison
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __hash__(self) -> int:
        return hash((Duration, self._seconds, self._nanos))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanos < other.total_nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanos <= other.total_nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanos > other.total_nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanos >= other.total_nanos

    # =========================================================================
    # String representation
    # =========================================================================

    def to_iso_format(self) -> str:
        """Return the ISO-8601 text form using hours, minutes and seconds.

        Hours are not folded into days. A negative value with a fraction
        prints the fraction with the sign of the seconds.

        Examples:
            >>> Duration(0).to_iso_format()
            'PT0S'
            >>> Duration(90000).to_iso_format()
            'PT25H'
            >>> Duration(-1, 500_000_000).to_iso_format()
            'PT-0.5S'
        """
        if self.is_zero():
            return "PT0S"

        effective_total = self._seconds
        if self._seconds < 0 and self._nanos > 0:
            effective_total += 1
        hours = trunc_div(effective_total, SECONDS_PER_HOUR)
        minutes = trunc_div(trunc_mod(effective_total, SECONDS_PER_HOUR), SECONDS_PER_MINUTE)
        secs = trunc_mod(effective_total, SECONDS_PER_MINUTE)

        parts = ["PT"]
        if hours != 0:
            parts.append(f"{hours}H")
        if minutes != 0:
            parts.append(f"{minutes}M")
        if secs == 0 and self._nanos == 0 and len(parts) > 1:
            return "".join(parts)

        if self._seconds < 0 and self._nanos > 0 and secs == 0:
            parts.append("-0")
        else:
            parts.append(str(secs))
        if self._nanos > 0:
            if self._seconds < 0:
                fraction = NANOS_PER_SECOND - self._nanos
            else:
                fraction = self._nanos
            parts.append("." + f"{fraction:09d}".rstrip("0"))
        parts.append("S")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_iso_format()

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanos={self._nanos})"


def _timeline_nanos(value: Any) -> int:
    from dtudf.core.datetime import LocalDateTime
    from dtudf.core.instant import Instant
    from dtudf.core.offset_datetime import OffsetDateTime
    from dtudf.core.time import LocalTime
    from dtudf.core.zoned_datetime import ZonedDateTime

    if isinstance(value, LocalTime):
        return value.to_nano_of_day()
    if isinstance(value, LocalDateTime):
        return value.date.to_epoch_day() * NANOS_PER_DAY + value.time.to_nano_of_day()
    if isinstance(value, (OffsetDateTime, ZonedDateTime)):
        value = value.to_instant()
    if isinstance(value, Instant):
        return value.epoch_second * NANOS_PER_SECOND + value.nano
    raise TypeError(f"cannot measure a duration on {type(value).__name__}")


__all__ = ["Duration"]
