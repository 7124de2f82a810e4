"""OffsetDateTime class: a local date-time at a fixed UTC offset."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from dtudf._internal.isotext import DATE_PATTERN, OFFSET_PATTERN, TIME_PATTERN
from dtudf.core.datetime import LocalDateTime
from dtudf.core.duration import Duration
from dtudf.core.instant import Instant
from dtudf.core.period import Period
from dtudf.core.zone import ZoneId, ZoneOffset
from dtudf.errors import ParseError

if TYPE_CHECKING:
    from dtudf.core.clock import Clock
    from dtudf.core.date import LocalDate
    from dtudf.core.time import LocalTime


_OFFSET_DATETIME_RE = re.compile(DATE_PATTERN + "T" + TIME_PATTERN + OFFSET_PATTERN)


class OffsetDateTime:
    """A date-time with a fixed offset from UTC, such as 2020-06-01T10:00+02:00.

    Arithmetic acts on the local date-time and keeps the offset. Ordering and
    is_before / is_after / is_equal compare the instants, so two values with
    different offsets can be "equal in time" without being equal objects.

    Examples:
        >>> a = OffsetDateTime.parse("2020-06-01T10:00:00+02:00")
        >>> b = OffsetDateTime.parse("2020-06-01T08:00:00Z")
        >>> a.is_equal(b), a == b
        (True, False)
    """

    __slots__ = ("_datetime", "_offset")

    def __init__(self, datetime: LocalDateTime, offset: ZoneOffset) -> None:
        self._datetime: LocalDateTime = datetime
        self._offset: ZoneOffset = offset

    @classmethod
    def of(cls, datetime: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
        return cls(datetime, offset)

    @classmethod
    def of_date_time(
        cls, date: LocalDate, time: LocalTime, offset: ZoneOffset
    ) -> OffsetDateTime:
        return cls(LocalDateTime(date, time), offset)

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId | ZoneOffset) -> OffsetDateTime:
        """Return the date-time seen at an instant in a zone or at an offset."""
        offset = zone if isinstance(zone, ZoneOffset) else zone.offset_at(instant)
        return cls(
            LocalDateTime.of_epoch_second(instant.epoch_second, instant.nano, offset),
            offset,
        )

    @classmethod
    def now(cls, clock: Clock, zone: ZoneId | None = None) -> OffsetDateTime:
        """Return the current date-time in zone, or in the clock's zone."""
        return cls.of_instant(clock.instant(), zone if zone is not None else clock.zone)

    @classmethod
    def parse(cls, text: str) -> OffsetDateTime:
        """Parse an ISO-8601 offset date-time such as "2020-01-01T10:00:00+01:00".

        Raises:
            ParseError: If the text is malformed or a field is out of range.
        """
        match = _OFFSET_DATETIME_RE.fullmatch(text.strip())
        if match is None:
            raise ParseError(f"Invalid offset date-time format: {text!r}")
        groups = match.groups()
        return cls(
            LocalDateTime._from_match_groups(text, groups[:7]),
            ZoneOffset.parse(groups[7]),
        )

    @property
    def datetime(self) -> LocalDateTime:
        return self._datetime

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    @property
    def date(self) -> LocalDate:
        return self._datetime.date

    @property
    def time(self) -> LocalTime:
        return self._datetime.time

    def to_epoch_second(self) -> int:
        return self._datetime.to_epoch_second(self._offset)

    def to_instant(self) -> Instant:
        return Instant(self.to_epoch_second(), self._datetime.time.nano)

    # =========================================================================
    # Arithmetic (on the local date-time, keeping the offset)
    # =========================================================================

    def _with_datetime(self, datetime: LocalDateTime) -> OffsetDateTime:
        return OffsetDateTime(datetime, self._offset)

    def plus(self, amount: Period | Duration) -> OffsetDateTime:
        return self._with_datetime(self._datetime.plus(amount))

    def minus(self, amount: Period | Duration) -> OffsetDateTime:
        return self._with_datetime(self._datetime.minus(amount))

    def plus_years(self, years: int) -> OffsetDateTime:
        return self._with_datetime(self._datetime.plus_years(years))

    def plus_months(self, months: int) -> OffsetDateTime:
        return self._with_datetime(self._datetime.plus_months(months))

    def plus_days(self, days: int) -> OffsetDateTime:
        return self._with_datetime(self._datetime.plus_days(days))

    def plus_hours(self, hours: int) -> OffsetDateTime:
        return self._with_datetime(self._datetime.plus_hours(hours))

    def plus_minutes(self, minutes: int) -> OffsetDateTime:
        return self._with_datetime(self._datetime.plus_minutes(minutes))

    def plus_seconds(self, seconds: int) -> OffsetDateTime:
        return self._with_datetime(self._datetime.plus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> OffsetDateTime:
        return self._with_datetime(self._datetime.plus_nanos(nanos))

    # =========================================================================
    # Comparison
    # =========================================================================

    def _instant_key(self) -> tuple[int, int]:
        return (self.to_epoch_second(), self._datetime.time.nano)

    def is_before(self, other: OffsetDateTime) -> bool:
        return self._instant_key() < other._instant_key()

    def is_after(self, other: OffsetDateTime) -> bool:
        return self._instant_key() > other._instant_key()

    def is_equal(self, other: OffsetDateTime) -> bool:
        """True when both denote the same instant, whatever their offsets."""
        return self._instant_key() == other._instant_key()

    def _key(self) -> tuple:
        return (self._instant_key(), self._datetime._key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._datetime == other._datetime and self._offset == other._offset

    def __hash__(self) -> int:
        return hash((OffsetDateTime, self._datetime, self._offset))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def to_iso_format(self) -> str:
        return f"{self._datetime.to_iso_format()}{self._offset.id}"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __repr__(self) -> str:
        return f"OffsetDateTime.parse({self.to_iso_format()!r})"


__all__ = ["OffsetDateTime"]
