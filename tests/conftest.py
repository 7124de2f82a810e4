"""Pytest configuration and fixtures for dtudf tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so dtudf can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from dtudf.core import FixedClock, Instant, ZoneId  # noqa: E402
from dtudf.functions import build_registry  # noqa: E402

# 2020-06-15T10:30:00Z
FIXED_EPOCH_SECOND = 1_592_217_000


class Records:
    """Builders for the plain dicts a host passes in."""

    @staticmethod
    def instant(seconds: int, nanos: int = 0) -> dict:
        return {"SECONDS_FIELD": seconds, "NANOS_FIELD": nanos}

    @staticmethod
    def duration(seconds: int, nanos: int = 0) -> dict:
        return {"SECONDS_FIELD": seconds, "NANOS_FIELD": nanos}

    @staticmethod
    def period(years: int, months: int, days: int) -> dict:
        return {"YEARS_FIELD": years, "MONTHS_FIELD": months, "DAYS_FIELD": days}

    @staticmethod
    def date(year: int, month: int, day: int) -> dict:
        return {"YEAR_FIELD": year, "MONTH_FIELD": month, "DAY_FIELD": day}

    @staticmethod
    def time(hour: int, minute: int, second: int = 0, nano: int = 0) -> dict:
        return {
            "HOUR_FIELD": hour,
            "MINUTE_FIELD": minute,
            "SECOND_FIELD": second,
            "NANO_FIELD": nano,
        }

    @staticmethod
    def datetime(
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> dict:
        return {
            "LOCALDATE_FIELD": Records.date(year, month, day),
            "LOCALTIME_FIELD": Records.time(hour, minute, second, nano),
        }

    @staticmethod
    def offset(total_seconds: int) -> dict:
        return {"TOTALSECONDS_FIELD": total_seconds}

    @staticmethod
    def zone(zone_id: str) -> dict:
        return {"ID_FIELD": zone_id}

    @staticmethod
    def odt(datetime: dict, total_seconds: int) -> dict:
        return {"DATETIME_FIELD": datetime, "OFFSET_FIELD": Records.offset(total_seconds)}

    @staticmethod
    def zdt(datetime: dict, total_seconds: int, zone_id: str) -> dict:
        return {
            "DATETIME_FIELD": datetime,
            "OFFSET_FIELD": Records.offset(total_seconds),
            "ZONE_FIELD": Records.zone(zone_id),
        }


@pytest.fixture
def records() -> type[Records]:
    return Records


@pytest.fixture
def fixed_clock() -> FixedClock:
    """A clock stopped at 2020-06-15T10:30:00Z, in UTC."""
    return FixedClock(Instant(FIXED_EPOCH_SECOND))


@pytest.fixture
def vienna_clock() -> FixedClock:
    """The same instant seen from Europe/Vienna (12:30 local, +02:00)."""
    return FixedClock(Instant(FIXED_EPOCH_SECOND), ZoneId("Europe/Vienna"))


@pytest.fixture
def registry(fixed_clock):
    return build_registry(clock=fixed_clock)
