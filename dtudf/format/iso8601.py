"""ISO-8601 canonical text forms.

Each temporal type owns its canonical form (``to_iso_format`` / ``parse``);
this module dispatches to them by type.

Canonical forms:
    Instant         2020-01-01T10:15:30.123Z
    Duration        PT25H3M0.5S
    Period          P1Y2M3D
    LocalDate       2020-01-01, +12345-01-01, -0044-03-15
    LocalTime       10:15:30, 10:15:30.25
    LocalDateTime   2020-01-01T10:15:30
    ZoneOffset      Z, +01:00, -03:30:15
    ZoneId          Europe/Vienna
    OffsetDateTime  2020-01-01T10:15:30+01:00
    ZonedDateTime   2020-01-01T10:15:30+01:00[Europe/Vienna]

Examples:
    >>> from dtudf.core import Duration
    >>> parse_iso8601("PT1.5S", Duration)
    Duration(seconds=1, nanos=500000000)
    >>> format_iso8601(Duration(90))
    'PT1M30S'
"""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


def _text_types() -> tuple[type, ...]:
    from dtudf.core import (
        Duration,
        Instant,
        LocalDate,
        LocalDateTime,
        LocalTime,
        OffsetDateTime,
        Period,
        ZonedDateTime,
        ZoneId,
        ZoneOffset,
    )

    return (
        Instant,
        Duration,
        Period,
        LocalDate,
        LocalTime,
        LocalDateTime,
        ZoneOffset,
        ZoneId,
        OffsetDateTime,
        ZonedDateTime,
    )


def parse_iso8601(text: str, target: type[T]) -> T:
    """Parse canonical text into a value of the target type.

    Args:
        text: The text to parse.
        target: One of the temporal types.

    Returns:
        The parsed value.

    Raises:
        ParseError: If the text is not in the target's canonical form.
        InvalidFieldError: For a ZoneId whose text is offset-shaped or unknown.
        TypeError: If target is not a temporal type.
    """
    from dtudf.core import ZoneId

    if target not in _text_types():
        raise TypeError(f"cannot parse text into {target.__name__}")
    if target is ZoneId:
        return ZoneId(text.strip())
    return target.parse(text)


def format_iso8601(value: Any) -> str:
    """Return the canonical text form of a temporal value.

    Raises:
        TypeError: If value is not a temporal type.
    """
    if not isinstance(value, _text_types()):
        raise TypeError(f"cannot format {type(value).__name__} as ISO-8601")
    return str(value)


__all__ = ["parse_iso8601", "format_iso8601"]
