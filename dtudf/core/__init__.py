"""Core temporal types.

This module provides the native temporal values the functions operate on:
    - Instant: Point on the UTC time-line
    - Duration: Exact amount of time (seconds and nanoseconds)
    - Period: Calendar amount of time (years, months, days)
    - LocalDate, LocalTime, LocalDateTime: Zone-less date and time values
    - ZoneOffset, ZoneId: Fixed offsets and IANA region zones
    - OffsetDateTime, ZonedDateTime: Date-times anchored to an offset or zone
    - Clock, SystemClock, FixedClock: Sources of "now"
"""

from __future__ import annotations

from dtudf.core.clock import Clock, FixedClock, SystemClock
from dtudf.core.date import LocalDate
from dtudf.core.datetime import LocalDateTime
from dtudf.core.duration import Duration
from dtudf.core.instant import Instant
from dtudf.core.offset_datetime import OffsetDateTime
from dtudf.core.period import Period
from dtudf.core.time import LocalTime
from dtudf.core.zone import ZoneId, ZoneOffset
from dtudf.core.zoned_datetime import ZonedDateTime

__all__: list[str] = [
    "Clock",
    "Duration",
    "FixedClock",
    "Instant",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "OffsetDateTime",
    "Period",
    "SystemClock",
    "ZoneId",
    "ZoneOffset",
    "ZonedDateTime",
]
