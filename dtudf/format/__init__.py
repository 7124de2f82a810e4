"""Temporal formatting and parsing.

This module provides functions for converting temporal values to and from
text:
    - ISO-8601 canonical forms
    - Caller-supplied %-directive patterns (English names)

Functions:
    parse_iso8601: Parse canonical text into a given temporal type.
    format_iso8601: Render a temporal value in its canonical form.
    format_pattern: Render a temporal value with a pattern.
    parse_local_date, parse_local_time, parse_local_date_time,
    parse_offset_date_time, parse_zoned_date_time: Parse text with a pattern.
"""

from __future__ import annotations

from dtudf.format.iso8601 import format_iso8601, parse_iso8601
from dtudf.format.pattern import (
    format_pattern,
    parse_local_date,
    parse_local_date_time,
    parse_local_time,
    parse_offset_date_time,
    parse_zoned_date_time,
)

__all__: list[str] = [
    # ISO-8601
    "parse_iso8601",
    "format_iso8601",
    # Patterns
    "format_pattern",
    "parse_local_date",
    "parse_local_time",
    "parse_local_date_time",
    "parse_offset_date_time",
    "parse_zoned_date_time",
]
