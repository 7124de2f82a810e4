"""Clocks supply the current instant and the default zone.

Factories that mean "now" take a Clock so that callers control the time
source. SystemClock reads the wall clock; FixedClock always returns the same
instant and is what tests use.
"""

from __future__ import annotations

import time

from dtudf._internal.constants import DEFAULT_ZONE_ID, NANOS_PER_SECOND
from dtudf.core.instant import Instant
from dtudf.core.zone import ZoneId


class Clock:
    """Base class for clocks.

    Attributes:
        zone: The zone used when a local "now" is requested without one.
    """

    __slots__ = ("_zone",)

    def __init__(self, zone: ZoneId | None = None) -> None:
        self._zone: ZoneId = zone if zone is not None else ZoneId(DEFAULT_ZONE_ID)

    @property
    def zone(self) -> ZoneId:
        return self._zone

    def instant(self) -> Instant:
        raise NotImplementedError

    def with_zone(self, zone: ZoneId) -> Clock:
        raise NotImplementedError


class SystemClock(Clock):
    """A clock backed by the operating system's wall clock."""

    __slots__ = ()

    def instant(self) -> Instant:
        seconds, nanos = divmod(time.time_ns(), NANOS_PER_SECOND)
        return Instant(seconds, nanos)

    def with_zone(self, zone: ZoneId) -> SystemClock:
        return SystemClock(zone)

    def __repr__(self) -> str:
        return f"SystemClock({self._zone.id!r})"


class FixedClock(Clock):
    """A clock that always reports the same instant.

    Examples:
        >>> clock = FixedClock(Instant(0), ZoneId("Europe/Vienna"))
        >>> clock.instant()
        Instant(epoch_second=0, nano=0)
    """

    __slots__ = ("_instant",)

    def __init__(self, instant: Instant, zone: ZoneId | None = None) -> None:
        super().__init__(zone)
        self._instant: Instant = instant

    def instant(self) -> Instant:
        return self._instant

    def with_zone(self, zone: ZoneId) -> FixedClock:
        return FixedClock(self._instant, zone)

    def __repr__(self) -> str:
        return f"FixedClock({self._instant}, {self._zone.id!r})"


__all__ = ["Clock", "SystemClock", "FixedClock"]
