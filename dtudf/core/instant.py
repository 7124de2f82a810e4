"""Instant class representing a point on the UTC time-line.

This module provides the Instant class: seconds and nanoseconds since
1970-01-01T00:00:00Z.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from dtudf._internal.calendar import epoch_day_to_ymd
from dtudf._internal.constants import (
    MAX_INSTANT_SECOND,
    MILLIS_PER_SECOND,
    MIN_INSTANT_SECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from dtudf._internal.isotext import (
    DATE_PATTERN,
    OFFSET_PATTERN,
    TIME_PATTERN,
    format_fraction_grouped,
    format_year,
)
from dtudf.errors import ParseError, TemporalOverflowError

if TYPE_CHECKING:
    from dtudf.core.clock import Clock
    from dtudf.core.duration import Duration


_INSTANT_RE = re.compile(DATE_PATTERN + "T" + TIME_PATTERN + OFFSET_PATTERN)


class Instant:
    """An instantaneous point on the time-line with nanosecond precision.

    Attributes:
        epoch_second: Seconds since the epoch (negative before 1970).
        nano: Nanoseconds within the second (0-999999999).

    Examples:
        >>> str(Instant.of_epoch_milli(1_500))
        '1970-01-01T00:00:01.500Z'
        >>> Instant.of_epoch_second(0, -1)
        Instant(epoch_second=-1, nano=999999999)
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(self, epoch_second: int = 0, nano: int = 0) -> None:
        """Create an Instant; nano may be any adjustment and is normalized.

        Raises:
            TemporalOverflowError: If the instant is outside the supported range.
        """
        extra, nano = divmod(nano, NANOS_PER_SECOND)
        epoch_second += extra
        if epoch_second < MIN_INSTANT_SECOND or epoch_second > MAX_INSTANT_SECOND:
            raise TemporalOverflowError(
                f"instant exceeds supported range: epoch second {epoch_second}"
            )
        self._seconds: int = epoch_second
        self._nanos: int = nano

    @classmethod
    def epoch(cls) -> Instant:
        return cls(0, 0)

    @classmethod
    def of_epoch_second(cls, epoch_second: int, nano_adjustment: int = 0) -> Instant:
        return cls(epoch_second, nano_adjustment)

    @classmethod
    def of_epoch_milli(cls, epoch_milli: int) -> Instant:
        seconds, millis = divmod(epoch_milli, MILLIS_PER_SECOND)
        return cls(seconds, millis * NANOS_PER_MILLISECOND)

    @classmethod
    def now(cls, clock: Clock) -> Instant:
        return clock.instant()

    @classmethod
    def parse(cls, text: str) -> Instant:
        """Parse an ISO-8601 instant such as "2020-01-01T10:15:30Z".

        An explicit offset ("+01:00") is accepted and applied.

        Raises:
            ParseError: If the text is malformed or out of range.
        """
        from dtudf.core.datetime import LocalDateTime
        from dtudf.core.zone import ZoneOffset

        match = _INSTANT_RE.fullmatch(text.strip())
        if match is None:
            raise ParseError(f"Invalid instant format: {text!r}")
        groups = match.groups()
        ldt = LocalDateTime._from_match_groups(text, groups[:7])
        offset = ZoneOffset.parse(groups[7])
        try:
            return cls(ldt.to_epoch_second(offset), ldt.time.nano)
        except TemporalOverflowError as e:
            raise ParseError(f"Instant out of range: {text!r}") from e

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def epoch_second(self) -> int:
        return self._seconds

    @property
    def nano(self) -> int:
        return self._nanos

    def to_epoch_milli(self) -> int:
        """Milliseconds since the epoch, flooring sub-millisecond precision."""
        return self._seconds * MILLIS_PER_SECOND + self._nanos // NANOS_PER_MILLISECOND

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus_seconds(self, seconds: int) -> Instant:
        return Instant(self._seconds + seconds, self._nanos)

    def plus_nanos(self, nanos: int) -> Instant:
        return Instant(self._seconds, self._nanos + nanos)

    def plus_millis(self, millis: int) -> Instant:
        return self.plus_nanos(millis * NANOS_PER_MILLISECOND)

    def plus(self, duration: Duration) -> Instant:
        return Instant(self._seconds + duration.seconds, self._nanos + duration.nanos)

    def minus(self, duration: Duration) -> Instant:
        return Instant(self._seconds - duration.seconds, self._nanos - duration.nanos)

    # =========================================================================
    # Comparison
    # =========================================================================

    def _key(self) -> tuple[int, int]:
        return (self._seconds, self._nanos)

    def is_before(self, other: Instant) -> bool:
        return self._key() < other._key()

    def is_after(self, other: Instant) -> bool:
        return self._key() > other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((Instant,) + self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() >= other._key()

    # =========================================================================
    # String representation
    # =========================================================================

    def to_iso_format(self) -> str:
        """Return the UTC form, e.g. 2020-01-01T10:15:30.123Z.

        Seconds are always printed; the fraction is printed in groups of
        three digits.
        """
        epoch_day, second_of_day = divmod(self._seconds, SECONDS_PER_DAY)
        year, month, day = epoch_day_to_ymd(epoch_day)
        hour, rem = divmod(second_of_day, SECONDS_PER_HOUR)
        minute, second = divmod(rem, SECONDS_PER_MINUTE)
        return (
            f"{format_year(year)}-{month:02d}-{day:02d}"
            f"T{hour:02d}:{minute:02d}:{second:02d}"
            f"{format_fraction_grouped(self._nanos)}Z"
        )

    def __str__(self) -> str:
        return self.to_iso_format()

    def __repr__(self) -> str:
        return f"Instant(epoch_second={self._seconds}, nano={self._nanos})"


__all__ = ["Instant"]
