"""Zone offsets and region zone ids.

ZoneOffset is a fixed amount of time ahead of or behind UTC. ZoneId names an
IANA region whose offset rules come from the standard-library zoneinfo
database (backed by the tzdata package where the host has none).
"""

from __future__ import annotations

import datetime as _datetime
import re
import zoneinfo
from typing import TYPE_CHECKING, ClassVar

from dtudf._internal.constants import (
    MAX_OFFSET_SECONDS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from dtudf._internal.isotext import format_offset_id
from dtudf._internal.validation import validate_field
from dtudf.errors import InvalidFieldError, ParseError

if TYPE_CHECKING:
    from dtudf.core.datetime import LocalDateTime
    from dtudf.core.instant import Instant


_OFFSET_FORMS = (
    re.compile(r"([+-])(\d{1,2})"),
    re.compile(r"([+-])(\d{2}):(\d{2})"),
    re.compile(r"([+-])(\d{2})(\d{2})"),
    re.compile(r"([+-])(\d{2}):(\d{2}):(\d{2})"),
    re.compile(r"([+-])(\d{2})(\d{2})(\d{2})"),
)


class ZoneOffset:
    """A fixed offset from UTC, between -18:00 and +18:00.

    Attributes:
        total_seconds: Offset in seconds, positive east of UTC.
        id: Canonical text form: "Z", "+hh:mm" or "+hh:mm:ss".

    Examples:
        >>> ZoneOffset.parse("+0530").total_seconds
        19800
        >>> ZoneOffset.of_hours_minutes_seconds(-1, -30).id
        '-01:30'
    """

    __slots__ = ("_total_seconds",)

    UTC: ClassVar[ZoneOffset]

    def __init__(self, total_seconds: int) -> None:
        """Create a ZoneOffset.

        Raises:
            InvalidFieldError: If the offset is outside +/-18 hours.
        """
        validate_field(
            "total_seconds", total_seconds, -MAX_OFFSET_SECONDS, MAX_OFFSET_SECONDS
        )
        self._total_seconds: int = total_seconds

    @classmethod
    def of_total_seconds(cls, total_seconds: int) -> ZoneOffset:
        return cls(total_seconds)

    @classmethod
    def of_hours_minutes_seconds(
        cls, hours: int, minutes: int = 0, seconds: int = 0
    ) -> ZoneOffset:
        """Create a ZoneOffset from components that all share one sign.

        Raises:
            InvalidFieldError: If a component is out of range or the signs
                disagree.
        """
        validate_field("hours", hours, -18, 18)
        validate_field("minutes", minutes, -59, 59)
        validate_field("seconds", seconds, -59, 59)
        if hours > 0:
            if minutes < 0 or seconds < 0:
                raise InvalidFieldError(
                    "offset minutes and seconds must be positive because hours is positive"
                )
        elif hours < 0:
            if minutes > 0 or seconds > 0:
                raise InvalidFieldError(
                    "offset minutes and seconds must be negative because hours is negative"
                )
        elif (minutes > 0 and seconds < 0) or (minutes < 0 and seconds > 0):
            raise InvalidFieldError("offset minutes and seconds must have the same sign")
        if abs(hours) == 18 and (minutes != 0 or seconds != 0):
            raise InvalidFieldError("offset must be between -18:00 and +18:00")
        return cls(
            hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        )

    @classmethod
    def parse(cls, text: str) -> ZoneOffset:
        """Parse "Z", "+h", "+hh", "+hh:mm", "+hhmm", "+hh:mm:ss" or "+hhmmss".

        Raises:
            ParseError: If the text is malformed or out of range.
        """
        if text == "Z":
            return cls.UTC
        for form in _OFFSET_FORMS:
            match = form.fullmatch(text)
            if match is not None:
                break
        else:
            raise ParseError(f"Invalid offset format: {text!r}")

        sign, *fields = match.groups()
        hours, minutes, seconds = (int(f) for f in fields + ["0"] * (3 - len(fields)))
        factor = -1 if sign == "-" else 1
        try:
            return cls.of_hours_minutes_seconds(
                hours * factor, minutes * factor, seconds * factor
            )
        except InvalidFieldError as e:
            raise ParseError(f"Invalid offset {text!r}: {e}") from e

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def id(self) -> str:
        return format_offset_id(self._total_seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds == other._total_seconds

    def __hash__(self) -> int:
        return hash((ZoneOffset, self._total_seconds))

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"ZoneOffset({self._total_seconds})"


ZoneOffset.UTC = ZoneOffset(0)


# Python datetime only covers years 1-9999. Outside that window offsets are
# looked up 400 Gregorian years closer, where calendar and rules repeat.
_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)
_SAFE_MIN_SECOND = -62_135_596_800 + 2 * SECONDS_PER_DAY
_SAFE_MAX_SECOND = 253_402_300_799 - 2 * SECONDS_PER_DAY
_CYCLE_YEARS = 400
_CYCLE_SECONDS = 146_097 * SECONDS_PER_DAY


def _shift_epoch_second(epoch_second: int) -> int:
    if epoch_second > _SAFE_MAX_SECOND:
        cycles = (epoch_second - _SAFE_MAX_SECOND) // _CYCLE_SECONDS + 1
        return epoch_second - cycles * _CYCLE_SECONDS
    if epoch_second < _SAFE_MIN_SECOND:
        cycles = -((epoch_second - _SAFE_MIN_SECOND) // _CYCLE_SECONDS)
        return epoch_second + cycles * _CYCLE_SECONDS
    return epoch_second


def _shift_year(year: int) -> int:
    if year > 9990:
        return year - ((year - 9990) // _CYCLE_YEARS + 1) * _CYCLE_YEARS
    if year < 10:
        return year + ((10 - year) // _CYCLE_YEARS + 1) * _CYCLE_YEARS
    return year


def _is_offset_form(text: str) -> bool:
    return text in ("Z", "z") or text[:1] in ("+", "-")


class ZoneId:
    """An IANA region time zone such as "Europe/Vienna".

    Offset-style ids ("Z", "+02:00") are not zone ids here; use ZoneOffset
    for those.

    Examples:
        >>> ZoneId("Europe/Vienna").id
        'Europe/Vienna'
        >>> ZoneId("+02:00")
        Traceback (most recent call last):
        ...
        InvalidFieldError: zone id must name a region, got offset '+02:00'
    """

    __slots__ = ("_id", "_tz")

    def __init__(self, zone_id: str) -> None:
        """Create a ZoneId for an IANA region.

        Raises:
            InvalidFieldError: If zone_id is empty, offset-shaped or unknown.
        """
        if not isinstance(zone_id, str) or not zone_id:
            raise InvalidFieldError(f"zone id must be a non-empty string, got {zone_id!r}")
        if _is_offset_form(zone_id):
            raise InvalidFieldError(
                f"zone id must name a region, got offset {zone_id!r}"
            )
        try:
            tz = zoneinfo.ZoneInfo(zone_id)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise InvalidFieldError(f"unknown zone id {zone_id!r}") from e
        self._id: str = zone_id
        self._tz: zoneinfo.ZoneInfo = tz

    @classmethod
    def of(cls, zone_id: str) -> ZoneId:
        return cls(zone_id)

    @property
    def id(self) -> str:
        return self._id

    @property
    def tzinfo(self) -> zoneinfo.ZoneInfo:
        return self._tz

    def offset_at(self, instant: Instant) -> ZoneOffset:
        """Return the offset in effect at an instant."""
        utc = _EPOCH + _datetime.timedelta(
            seconds=_shift_epoch_second(instant.epoch_second)
        )
        local = utc.astimezone(self._tz)
        return ZoneOffset(int(local.utcoffset().total_seconds()))

    def _fold_offsets(self, local: LocalDateTime) -> tuple[int, int]:
        date, time = local.date, local.time
        naive = _datetime.datetime(
            _shift_year(date.year),
            date.month,
            date.day,
            time.hour,
            time.minute,
            time.second,
        )
        before = naive.replace(tzinfo=self._tz, fold=0).utcoffset()
        after = naive.replace(tzinfo=self._tz, fold=1).utcoffset()
        return int(before.total_seconds()), int(after.total_seconds())

    def valid_offsets(self, local: LocalDateTime) -> list[ZoneOffset]:
        """Return the offsets under which a local date-time exists.

        One offset normally, two in an overlap (earlier offset first) and
        none in a gap.
        """
        before, after = self._fold_offsets(local)
        if before == after:
            return [ZoneOffset(before)]
        if before > after:
            return [ZoneOffset(before), ZoneOffset(after)]
        return []

    def gap_transition(self, local: LocalDateTime) -> tuple[int, ZoneOffset] | None:
        """For a local date-time inside a gap, return (gap seconds, offset after).

        Returns None when the local date-time is not in a gap.
        """
        before, after = self._fold_offsets(local)
        if before < after:
            return after - before, ZoneOffset(after)
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneId):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((ZoneId, self._id))

    def __str__(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"ZoneId({self._id!r})"


__all__ = ["ZoneOffset", "ZoneId"]
