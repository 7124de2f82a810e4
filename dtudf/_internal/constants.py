"""Internal constants for dtudf.

These constants define the limits, wire bounds and configuration defaults
used throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

MILLIS_PER_SECOND: int = 1_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

# Year limits
MIN_YEAR: int = -999_999_999
MAX_YEAR: int = 999_999_999

# Instant limits: -1000000000-01-01T00:00Z .. 1000000000-12-31T23:59:59.999999999Z
MIN_INSTANT_SECOND: int = -31_557_014_167_219_200
MAX_INSTANT_SECOND: int = 31_556_889_864_403_199

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal (days since 0001-01-01, which is 1) of 1970-01-01
UNIX_EPOCH_ORDINAL: int = 719_163

# Zone offset limits (in seconds)
MAX_OFFSET_SECONDS: int = 18 * SECONDS_PER_HOUR  # +/- 18 hours

# Wire integer bounds
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Configuration defaults
DEFAULT_NAMESPACE: str = "dt"
REFERENCE_LOCALE: str = "en"
DEFAULT_ZONE_ID: str = "UTC"

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "MILLIS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_INSTANT_SECOND",
    "MAX_INSTANT_SECOND",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "MAX_OFFSET_SECONDS",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "DEFAULT_NAMESPACE",
    "REFERENCE_LOCALE",
    "DEFAULT_ZONE_ID",
    "MONTH_NAMES",
    "DAY_NAMES",
]
