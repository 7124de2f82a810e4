"""Shared plumbing for the operation functions.

This module provides:
    - @null_propagating: return None when any argument is absent
    - ChronologyMode: the before / after / equal selector
    - check_chronology: mode-driven comparison that logs unknown modes
    - resolve_clock, fold: small helpers used by every function module

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum
from typing import Any, Callable, Iterable, Optional, ParamSpec, TypeVar

from dtudf.core.clock import Clock, SystemClock
from dtudf.errors import InvalidModeError

_logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")
V = TypeVar("V")

# Keyword arguments supplied by the caller's context rather than the host
CONTEXT_PARAMETERS = frozenset({"clock", "logger"})


def is_absent(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple)):
        return any(item is None for item in value)
    return False


def null_propagating(func: Callable[P, T]) -> Callable[P, Optional[T]]:
    """Return None instead of calling func when any argument is absent.

    An argument is absent when it is None, or when it is a list holding a
    None element. Context keywords (clock, logger) are not checked.

    Examples:
        >>> @null_propagating
        ... def add(a: int, b: int) -> int:
        ...     return a + b
        >>> add(1, None) is None
        True
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Optional[T]:
        if any(is_absent(arg) for arg in args):
            return None
        if any(
            is_absent(value)
            for name, value in kwargs.items()
            if name not in CONTEXT_PARAMETERS
        ):
            return None
        return func(*args, **kwargs)

    wrapper._null_propagating = True  # type: ignore[attr-defined]
    return wrapper


def resolve_clock(clock: Clock | None) -> Clock:
    """Return clock, or a system clock in UTC when none is given."""
    return clock if clock is not None else SystemClock()


def fold(start: V, items: Iterable[T], step: Callable[[V, T], V]) -> V:
    """Apply step to start and each item, left to right in list order."""
    return functools.reduce(step, items, start)


# =============================================================================
# Chronology
# =============================================================================


class ChronologyMode(Enum):
    """How the comparison value relates to the base value."""

    IS_BEFORE = "IS_BEFORE"
    IS_AFTER = "IS_AFTER"
    IS_EQUAL = "IS_EQUAL"

    @classmethod
    def parse(cls, text: str) -> ChronologyMode:
        """Look up a mode by its exact name.

        Raises:
            InvalidModeError: If text is not one of the mode names.
        """
        try:
            return cls[text]
        except KeyError:
            raise InvalidModeError(f"unknown chronology mode {text!r}") from None

    @classmethod
    def choices(cls) -> str:
        return ",".join(f"'{mode.name}'" for mode in cls)


def _is_equal(value: Any, base: Any) -> bool:
    # Offset and zoned date-times are equal in time when their instants match
    is_equal = getattr(value, "is_equal", None)
    if is_equal is not None:
        return is_equal(base)
    return value == base


def check_chronology(
    base: Any,
    value: Any,
    mode: str,
    *,
    logger: logging.Logger | None = None,
) -> bool | None:
    """Whether value is before, after or equal to base, as selected by mode.

    An unknown mode is not an error for the caller: it is logged at ERROR
    level and None is returned.

    Args:
        base: The value to compare against.
        value: The value being checked.
        mode: "IS_BEFORE", "IS_AFTER" or "IS_EQUAL".
        logger: Where to report an unknown mode (defaults to this module's).

    Examples:
        >>> from dtudf.core import LocalDate
        >>> check_chronology(LocalDate(2020, 1, 1), LocalDate(2020, 1, 2), "IS_AFTER")
        True
    """
    log = logger if logger is not None else _logger
    try:
        chronology = ChronologyMode.parse(mode)
    except InvalidModeError:
        log.error(
            "chronologyMode '%s' is invalid - must be one of: %s",
            mode,
            ChronologyMode.choices(),
            exc_info=True,
        )
        return None
    if chronology is ChronologyMode.IS_BEFORE:
        return value.is_before(base)
    if chronology is ChronologyMode.IS_AFTER:
        return value.is_after(base)
    return _is_equal(value, base)


__all__ = [
    "CONTEXT_PARAMETERS",
    "ChronologyMode",
    "check_chronology",
    "fold",
    "is_absent",
    "null_propagating",
    "resolve_clock",
]
