"""ZonedDateTime class: a local date-time in a region time zone.

A ZonedDateTime keeps three parts: the local date-time, the offset in effect
and the region zone whose rules produced that offset. Turning a local
date-time into a zoned one has to deal with daylight-saving transitions:

- In an overlap (clocks set back) the local time exists twice. The earlier
  offset is used unless a preferred offset is given and valid.
- In a gap (clocks set forward) the local time does not exist. It is moved
  forward by the length of the gap and the later offset is used.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from dtudf._internal.isotext import DATE_PATTERN, OFFSET_PATTERN, TIME_PATTERN
from dtudf.core.datetime import LocalDateTime
from dtudf.core.duration import Duration
from dtudf.core.instant import Instant
from dtudf.core.offset_datetime import OffsetDateTime
from dtudf.core.period import Period
from dtudf.core.zone import ZoneId, ZoneOffset
from dtudf.errors import InvalidFieldError, ParseError

if TYPE_CHECKING:
    from dtudf.core.clock import Clock
    from dtudf.core.date import LocalDate
    from dtudf.core.time import LocalTime


_ZONED_DATETIME_RE = re.compile(
    DATE_PATTERN + "T" + TIME_PATTERN + OFFSET_PATTERN + r"\[([^\]]+)\]"
)


class ZonedDateTime:
    """A date-time with an offset and a region zone.

    Date-based arithmetic (years, months, weeks, days, Period) works on the
    local date-time and then re-resolves it in the zone, keeping the current
    offset when it is still valid. Time-based arithmetic (hours down to
    nanos, Duration) works on the instant time-line.

    Examples:
        >>> vienna = ZoneId("Europe/Vienna")
        >>> z = ZonedDateTime.of(LocalDateTime.of(2021, 3, 28, 2, 30), vienna)
        >>> str(z)
        '2021-03-28T03:30:00+02:00[Europe/Vienna]'
    """

    __slots__ = ("_datetime", "_offset", "_zone")

    def __init__(
        self, datetime: LocalDateTime, offset: ZoneOffset, zone: ZoneId
    ) -> None:
        """Create a ZonedDateTime from parts that must agree.

        Raises:
            InvalidFieldError: If offset is not valid in zone at datetime.
        """
        if offset not in zone.valid_offsets(datetime):
            raise InvalidFieldError(
                f"offset {offset.id} is not valid for {datetime} in {zone.id}"
            )
        self._datetime: LocalDateTime = datetime
        self._offset: ZoneOffset = offset
        self._zone: ZoneId = zone

    @classmethod
    def _create(
        cls, datetime: LocalDateTime, offset: ZoneOffset, zone: ZoneId
    ) -> ZonedDateTime:
        instance = object.__new__(cls)
        instance._datetime = datetime
        instance._offset = offset
        instance._zone = zone
        return instance

    @classmethod
    def of(cls, datetime: LocalDateTime, zone: ZoneId) -> ZonedDateTime:
        """Resolve a local date-time in a zone (earlier offset in overlaps)."""
        return cls.of_local(datetime, zone, None)

    @classmethod
    def of_date_time(
        cls, date: LocalDate, time: LocalTime, zone: ZoneId
    ) -> ZonedDateTime:
        return cls.of_local(LocalDateTime(date, time), zone, None)

    @classmethod
    def of_local(
        cls,
        datetime: LocalDateTime,
        zone: ZoneId,
        preferred_offset: ZoneOffset | None,
    ) -> ZonedDateTime:
        """Resolve a local date-time in a zone, preferring an offset.

        Args:
            datetime: The local date-time.
            zone: The region zone.
            preferred_offset: Offset to keep in an overlap, if valid there.

        Examples:
            >>> vienna = ZoneId("Europe/Vienna")
            >>> ldt = LocalDateTime.of(2021, 10, 31, 2, 30)
            >>> ZonedDateTime.of_local(ldt, vienna, ZoneOffset(3600)).offset
            ZoneOffset(3600)
        """
        valid = zone.valid_offsets(datetime)
        if len(valid) == 1:
            offset = valid[0]
        elif not valid:
            gap_seconds, offset = zone.gap_transition(datetime)
            datetime = datetime.plus_seconds(gap_seconds)
        elif preferred_offset is not None and preferred_offset in valid:
            offset = preferred_offset
        else:
            offset = valid[0]
        return cls._create(datetime, offset, zone)

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> ZonedDateTime:
        offset = zone.offset_at(instant)
        return cls._create(
            LocalDateTime.of_epoch_second(instant.epoch_second, instant.nano, offset),
            offset,
            zone,
        )

    @classmethod
    def now(cls, clock: Clock, zone: ZoneId | None = None) -> ZonedDateTime:
        return cls.of_instant(clock.instant(), zone if zone is not None else clock.zone)

    @classmethod
    def parse(cls, text: str) -> ZonedDateTime:
        """Parse "2020-01-01T10:00:00+01:00[Europe/Vienna]".

        The offset and local date-time fix the instant, which is then shown
        in the bracketed region zone.

        Raises:
            ParseError: If the text is malformed, lacks a region id or names
                an unknown zone.
        """
        match = _ZONED_DATETIME_RE.fullmatch(text.strip())
        if match is None:
            raise ParseError(f"Invalid zoned date-time format: {text!r}")
        groups = match.groups()
        datetime = LocalDateTime._from_match_groups(text, groups[:7])
        offset = ZoneOffset.parse(groups[7])
        try:
            zone = ZoneId(groups[8])
        except InvalidFieldError as e:
            raise ParseError(f"Invalid zone in {text!r}: {e}") from e
        return cls.of_instant(
            Instant(datetime.to_epoch_second(offset), datetime.time.nano), zone
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def datetime(self) -> LocalDateTime:
        return self._datetime

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    @property
    def zone(self) -> ZoneId:
        return self._zone

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

    def to_offset_date_time(self) -> OffsetDateTime:
        return OffsetDateTime(self._datetime, self._offset)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def _resolve_local(self, datetime: LocalDateTime) -> ZonedDateTime:
        return ZonedDateTime.of_local(datetime, self._zone, self._offset)

    def _resolve_instant(self, datetime: LocalDateTime) -> ZonedDateTime:
        instant = Instant(datetime.to_epoch_second(self._offset), datetime.time.nano)
        return ZonedDateTime.of_instant(instant, self._zone)

    def plus(self, amount: Period | Duration) -> ZonedDateTime:
        if isinstance(amount, Period):
            return self._resolve_local(self._datetime.plus(amount))
        if isinstance(amount, Duration):
            return self._resolve_instant(self._datetime.plus(amount))
        raise TypeError(f"cannot add {type(amount).__name__} to ZonedDateTime")

    def minus(self, amount: Period | Duration) -> ZonedDateTime:
        if isinstance(amount, Period):
            return self._resolve_local(self._datetime.minus(amount))
        if isinstance(amount, Duration):
            return self._resolve_instant(self._datetime.minus(amount))
        raise TypeError(f"cannot subtract {type(amount).__name__} from ZonedDateTime")

    def plus_years(self, years: int) -> ZonedDateTime:
        return self._resolve_local(self._datetime.plus_years(years))

    def plus_months(self, months: int) -> ZonedDateTime:
        return self._resolve_local(self._datetime.plus_months(months))

    def plus_days(self, days: int) -> ZonedDateTime:
        return self._resolve_local(self._datetime.plus_days(days))

    def plus_hours(self, hours: int) -> ZonedDateTime:
        return self._resolve_instant(self._datetime.plus_hours(hours))

    def plus_minutes(self, minutes: int) -> ZonedDateTime:
        return self._resolve_instant(self._datetime.plus_minutes(minutes))

    def plus_seconds(self, seconds: int) -> ZonedDateTime:
        return self._resolve_instant(self._datetime.plus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> ZonedDateTime:
        return self._resolve_instant(self._datetime.plus_nanos(nanos))

    # =========================================================================
    # Comparison
    # =========================================================================

    def _instant_key(self) -> tuple[int, int]:
        return (self.to_epoch_second(), self._datetime.time.nano)

    def is_before(self, other: ZonedDateTime) -> bool:
        return self._instant_key() < other._instant_key()

    def is_after(self, other: ZonedDateTime) -> bool:
        return self._instant_key() > other._instant_key()

    def is_equal(self, other: ZonedDateTime) -> bool:
        """True when both denote the same instant, whatever their zones."""
        return self._instant_key() == other._instant_key()

    def _key(self) -> tuple:
        return (self._instant_key(), self._datetime._key(), self._zone.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return (
            self._datetime == other._datetime
            and self._offset == other._offset
            and self._zone == other._zone
        )

    def __hash__(self) -> int:
        return hash((ZonedDateTime, self._datetime, self._offset, self._zone))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def to_iso_format(self) -> str:
        return (
            f"{self._datetime.to_iso_format()}{self._offset.id}[{self._zone.id}]"
        )

    def __str__(self) -> str:
        return self.to_iso_format()

    def __repr__(self) -> str:
        return f"ZonedDateTime.parse({self.to_iso_format()!r})"


__all__ = ["ZonedDateTime"]
