"""Caller-pattern formatting and parsing.

Patterns use %-directives. Month names, weekday names and the AM/PM marker
are always English, whatever the host locale is.

Supported Directives:
    %Y - Year, at least 4 digits (e.g., 2024, +12345, -0044)
    %y - 2-digit year (parsed as 2000-2099)
    %m - 2-digit month (01-12)
    %d - 2-digit day of month (01-31)
    %j - 3-digit day of year (001-366)
    %B - Full month name (January)
    %b - Abbreviated month name (Jan)
    %A - Full weekday name (Monday)
    %a - Abbreviated weekday name (Mon)
    %H - 2-digit hour, 24-hour clock (00-23)
    %I - 2-digit hour, 12-hour clock (01-12)
    %p - AM or PM
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %f - 6-digit microsecond (000000-999999)
    %N - 9-digit nanosecond (000000000-999999999)
    %z - Offset as +HHMM, or +HHMMSS when seconds are present
    %:z - Offset as +HH:MM, or +HH:MM:SS when seconds are present
    %Z - Zone id (Europe/Vienna) for zoned values, offset id (Z, +01:00) otherwise
    %% - Literal %

Functions:
    format_pattern: Render a temporal value with a pattern.
    parse_local_date, parse_local_time, parse_local_date_time,
    parse_offset_date_time, parse_zoned_date_time: Parse text with a pattern.

Examples:
    >>> from dtudf.core import LocalDate
    >>> format_pattern(LocalDate(2024, 1, 15), "%a, %d %B %Y")
    'Mon, 15 January 2024'
    >>> parse_local_date("15 Jan 2024", "%d %b %Y")
    LocalDate(2024, 1, 15)
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Union

from dtudf._internal.calendar import epoch_day_to_ymd, ymd_to_epoch_day
from dtudf._internal.constants import DAY_NAMES, MONTH_NAMES, NANOS_PER_MICROSECOND
from dtudf._internal.isotext import format_year
from dtudf.errors import InvalidFieldError, ParseError, PatternError, TemporalOverflowError

if TYPE_CHECKING:
    from dtudf.core.date import LocalDate
    from dtudf.core.datetime import LocalDateTime
    from dtudf.core.offset_datetime import OffsetDateTime
    from dtudf.core.time import LocalTime
    from dtudf.core.zoned_datetime import ZonedDateTime

    TemporalValue = Union[
        LocalDate, LocalTime, LocalDateTime, OffsetDateTime, ZonedDateTime
    ]


# Group name and regex for each parse directive
_PARSE_PATTERNS: dict[str, tuple[str, str]] = {
    "%Y": ("year", r"[+-]?\d{4,10}"),
    "%y": ("year2", r"\d{2}"),
    "%m": ("month", r"\d{2}"),
    "%d": ("day", r"\d{2}"),
    "%j": ("day_of_year", r"\d{3}"),
    "%B": ("month_name", r"[A-Za-z]+"),
    "%b": ("month_abbr", r"[A-Za-z]{3}"),
    "%A": ("weekday_name", r"[A-Za-z]+"),
    "%a": ("weekday_abbr", r"[A-Za-z]{3}"),
    "%H": ("hour", r"\d{2}"),
    "%I": ("hour12", r"\d{2}"),
    "%p": ("ampm", r"[AaPp][Mm]"),
    "%M": ("minute", r"\d{2}"),
    "%S": ("second", r"\d{2}"),
    "%f": ("microsecond", r"\d{6}"),
    "%N": ("nanosecond", r"\d{9}"),
    "%z": ("offset_compact", r"Z|[+-]\d{4}(?:\d{2})?"),
    "%:z": ("offset_colon", r"Z|[+-]\d{2}:\d{2}(?::\d{2})?"),
    "%Z": (
        "zone",
        r"Z|[+-]\d{2}:\d{2}(?::\d{2})?|[A-Za-z][A-Za-z0-9_+\-]*(?:/[A-Za-z0-9_+\-]+)*",
    ),
}

_SUPPORTED = ", ".join(list(_PARSE_PATTERNS) + ["%%"])


def _tokenize(pattern: str) -> list[tuple[bool, str]]:
    """Split a pattern into (is_directive, text) tokens.

    Raises:
        PatternError: If the pattern contains an unsupported directive.
    """
    tokens: list[tuple[bool, str]] = []
    i = 0
    while i < len(pattern):
        if pattern[i] != "%":
            tokens.append((False, pattern[i]))
            i += 1
            continue
        directive = pattern[i : i + 3] if pattern[i + 1 : i + 2] == ":" else pattern[i : i + 2]
        if directive == "%%":
            tokens.append((False, "%"))
        elif directive in _PARSE_PATTERNS:
            tokens.append((True, directive))
        else:
            raise PatternError(
                f"unsupported pattern directive: {directive!r}. Supported: {_SUPPORTED}"
            )
        i += len(directive)
    return tokens


# =============================================================================
# Formatting
# =============================================================================


def _components(value: Any) -> dict[str, Any]:
    from dtudf.core.date import LocalDate
    from dtudf.core.datetime import LocalDateTime
    from dtudf.core.offset_datetime import OffsetDateTime
    from dtudf.core.time import LocalTime
    from dtudf.core.zoned_datetime import ZonedDateTime

    parts: dict[str, Any] = {}
    if isinstance(value, (OffsetDateTime, ZonedDateTime)):
        parts["offset"] = value.offset
        parts["zone_text"] = (
            value.zone.id if isinstance(value, ZonedDateTime) else value.offset.id
        )
        value = value.datetime
    if isinstance(value, LocalDateTime):
        parts["date"] = value.date
        parts["time"] = value.time
    elif isinstance(value, LocalDate):
        parts["date"] = value
    elif isinstance(value, LocalTime):
        parts["time"] = value
    else:
        raise TypeError(f"cannot format {type(value).__name__} with a pattern")
    return parts


def _require(parts: dict[str, Any], key: str, directive: str, value: Any) -> Any:
    if key not in parts:
        raise PatternError(
            f"pattern directive {directive} needs a {key}, "
            f"but {type(value).__name__} has none"
        )
    return parts[key]


def _format_offset(total_seconds: int, separator: str) -> str:
    sign = "-" if total_seconds < 0 else "+"
    hours, rem = divmod(abs(total_seconds), 3600)
    minutes, seconds = divmod(rem, 60)
    text = f"{sign}{hours:02d}{separator}{minutes:02d}"
    if seconds:
        text += f"{separator}{seconds:02d}"
    return text


def _format_directive(value: Any, parts: dict[str, Any], directive: str) -> str:
    if directive in ("%Y", "%y", "%m", "%d", "%j", "%B", "%b", "%A", "%a"):
        date = _require(parts, "date", directive, value)
        if directive == "%Y":
            return format_year(date.year)
        if directive == "%y":
            return f"{date.year % 100:02d}"
        if directive == "%m":
            return f"{date.month:02d}"
        if directive == "%d":
            return f"{date.day:02d}"
        if directive == "%j":
            return f"{date.day_of_year:03d}"
        if directive == "%B":
            return MONTH_NAMES[date.month - 1]
        if directive == "%b":
            return MONTH_NAMES[date.month - 1][:3]
        if directive == "%A":
            return DAY_NAMES[date.day_of_week - 1]
        return DAY_NAMES[date.day_of_week - 1][:3]

    if directive in ("%z", "%:z", "%Z"):
        offset = _require(parts, "offset", directive, value)
        if directive == "%z":
            return _format_offset(offset.total_seconds, "")
        if directive == "%:z":
            return _format_offset(offset.total_seconds, ":")
        return parts["zone_text"]

    time = _require(parts, "time", directive, value)
    if directive == "%H":
        return f"{time.hour:02d}"
    if directive == "%I":
        return f"{time.hour % 12 or 12:02d}"
    if directive == "%p":
        return "AM" if time.hour < 12 else "PM"
    if directive == "%M":
        return f"{time.minute:02d}"
    if directive == "%S":
        return f"{time.second:02d}"
    if directive == "%f":
        return f"{time.nano // NANOS_PER_MICROSECOND:06d}"
    return f"{time.nano:09d}"


def format_pattern(value: TemporalValue, pattern: str) -> str:
    """Format a temporal value using a %-directive pattern.

    Args:
        value: A LocalDate, LocalTime, LocalDateTime, OffsetDateTime or
            ZonedDateTime.
        pattern: Pattern string with %-directives.

    Returns:
        Formatted string.

    Raises:
        PatternError: If the pattern has an unsupported directive or one the
            value cannot supply (e.g. %H for a LocalDate).
        TypeError: If value is not a supported temporal type.

    Examples:
        >>> from dtudf.core import LocalTime
        >>> format_pattern(LocalTime(14, 5), "%I:%M %p")
        '02:05 PM'
    """
    parts = _components(value)
    result = []
    for is_directive, text in _tokenize(pattern):
        result.append(_format_directive(value, parts, text) if is_directive else text)
    return "".join(result)


# =============================================================================
# Parsing
# =============================================================================


def _pattern_to_regex(pattern: str) -> re.Pattern[str]:
    """Convert a pattern into an anchored regex with one named group per field.

    A directive used twice must match the same text both times.
    """
    result = []
    seen: set[str] = set()
    for is_directive, text in _tokenize(pattern):
        if not is_directive:
            result.append(re.escape(text))
            continue
        name, regex = _PARSE_PATTERNS[text]
        if name in seen:
            result.append(f"(?P={name})")
        else:
            seen.add(name)
            result.append(f"(?P<{name}>{regex})")
    return re.compile("".join(result))


def _lookup_name(text: str, names: tuple[str, ...], abbreviated: bool) -> int:
    for index, name in enumerate(names):
        candidate = name[:3] if abbreviated else name
        if candidate.lower() == text.lower():
            return index + 1
    raise ParseError(f"unknown name {text!r}")


def _match(text: str, pattern: str) -> dict[str, str]:
    match = _pattern_to_regex(pattern).fullmatch(text)
    if match is None:
        raise ParseError(f"text {text!r} does not match pattern {pattern!r}")
    return {key: value for key, value in match.groupdict().items() if value is not None}


def _resolve_date(fields: dict[str, str], text: str) -> LocalDate:
    from dtudf.core.date import LocalDate

    if "year" in fields:
        year = int(fields["year"])
    elif "year2" in fields:
        year = 2000 + int(fields["year2"])
    else:
        raise ParseError(f"text {text!r} has no year")

    if "month" in fields:
        month = int(fields["month"])
    elif "month_name" in fields:
        month = _lookup_name(fields["month_name"], MONTH_NAMES, False)
    elif "month_abbr" in fields:
        month = _lookup_name(fields["month_abbr"], MONTH_NAMES, True)
    else:
        month = None

    try:
        if month is not None and "day" in fields:
            date = LocalDate(year, month, int(fields["day"]))
        elif "day_of_year" in fields:
            day_of_year = int(fields["day_of_year"])
            first = ymd_to_epoch_day(year, 1, 1)
            if day_of_year < 1 or epoch_day_to_ymd(first + day_of_year - 1)[0] != year:
                raise InvalidFieldError(f"day of year {day_of_year} is invalid for {year}")
            date = LocalDate.of_epoch_day(first + day_of_year - 1)
        else:
            raise ParseError(f"text {text!r} has no complete date")
    except InvalidFieldError as e:
        raise ParseError(f"invalid date in {text!r}: {e}") from e

    for key, abbreviated in (("weekday_name", False), ("weekday_abbr", True)):
        if key in fields:
            weekday = _lookup_name(fields[key], DAY_NAMES, abbreviated)
            if weekday != date.day_of_week:
                raise ParseError(
                    f"weekday {fields[key]!r} does not match {date} in {text!r}"
                )
    return date


def _resolve_time(fields: dict[str, str], text: str) -> LocalTime:
    from dtudf.core.time import LocalTime

    if "hour" in fields:
        hour = int(fields["hour"])
    elif "hour12" in fields:
        if "ampm" not in fields:
            raise ParseError(f"text {text!r} has a 12-hour clock value without AM/PM")
        hour12 = int(fields["hour12"])
        if hour12 < 1 or hour12 > 12:
            raise ParseError(f"12-hour clock value must be 01-12 in {text!r}")
        hour = hour12 % 12 + (12 if fields["ampm"].upper() == "PM" else 0)
    else:
        raise ParseError(f"text {text!r} has no hour")

    if "nanosecond" in fields:
        nano = int(fields["nanosecond"])
    else:
        nano = int(fields.get("microsecond", 0)) * NANOS_PER_MICROSECOND
    try:
        return LocalTime(
            hour, int(fields.get("minute", 0)), int(fields.get("second", 0)), nano
        )
    except InvalidFieldError as e:
        raise ParseError(f"invalid time in {text!r}: {e}") from e


def _resolve_offset(fields: dict[str, str], text: str):
    from dtudf.core.zone import ZoneOffset

    for key in ("offset_colon", "offset_compact"):
        if key in fields:
            return ZoneOffset.parse(fields[key])
    zone = fields.get("zone")
    if zone is not None and (zone == "Z" or zone[0] in "+-"):
        return ZoneOffset.parse(zone)
    return None


def _resolve_zone(fields: dict[str, str], text: str):
    from dtudf.core.zone import ZoneId

    zone = fields.get("zone")
    if zone is None or zone == "Z" or zone[0] in "+-":
        raise ParseError(f"text {text!r} has no region zone id")
    try:
        return ZoneId(zone)
    except InvalidFieldError as e:
        raise ParseError(f"invalid zone in {text!r}: {e}") from e


def parse_local_date(text: str, pattern: str) -> LocalDate:
    """Parse a LocalDate; needs a year plus month and day, or a day of year."""
    return _resolve_date(_match(text, pattern), text)


def parse_local_time(text: str, pattern: str) -> LocalTime:
    """Parse a LocalTime; needs an hour, other fields default to zero."""
    return _resolve_time(_match(text, pattern), text)


def parse_local_date_time(text: str, pattern: str) -> LocalDateTime:
    """Parse a LocalDateTime; needs a full date and an hour."""
    from dtudf.core.datetime import LocalDateTime

    fields = _match(text, pattern)
    return LocalDateTime(_resolve_date(fields, text), _resolve_time(fields, text))


def parse_offset_date_time(text: str, pattern: str) -> OffsetDateTime:
    """Parse an OffsetDateTime; needs a date, an hour and an offset.

    When only a region zone is given, the offset valid in that zone at the
    local date-time is used (earlier offset in an overlap).
    """
    from dtudf.core.datetime import LocalDateTime
    from dtudf.core.offset_datetime import OffsetDateTime
    from dtudf.core.zoned_datetime import ZonedDateTime

    fields = _match(text, pattern)
    datetime = LocalDateTime(_resolve_date(fields, text), _resolve_time(fields, text))
    offset = _resolve_offset(fields, text)
    if offset is None:
        if "zone" not in fields:
            raise ParseError(f"text {text!r} has no offset")
        return ZonedDateTime.of(datetime, _resolve_zone(fields, text)).to_offset_date_time()
    return OffsetDateTime(datetime, offset)


def parse_zoned_date_time(text: str, pattern: str) -> ZonedDateTime:
    """Parse a ZonedDateTime; needs a date, an hour and a region zone id.

    With an explicit offset too, the instant is fixed by local date-time and
    offset. Without one, the local date-time is resolved in the zone.
    """
    from dtudf.core.datetime import LocalDateTime
    from dtudf.core.instant import Instant
    from dtudf.core.zoned_datetime import ZonedDateTime

    fields = _match(text, pattern)
    datetime = LocalDateTime(_resolve_date(fields, text), _resolve_time(fields, text))
    zone = _resolve_zone(fields, text)
    offset = _resolve_offset(fields, text)
    if offset is None:
        return ZonedDateTime.of(datetime, zone)
    try:
        instant = Instant(datetime.to_epoch_second(offset), datetime.time.nano)
    except TemporalOverflowError as e:
        raise ParseError(f"instant out of range in {text!r}") from e
    return ZonedDateTime.of_instant(instant, zone)


__all__ = [
    "format_pattern",
    "parse_local_date",
    "parse_local_time",
    "parse_local_date_time",
    "parse_offset_date_time",
    "parse_zoned_date_time",
]
