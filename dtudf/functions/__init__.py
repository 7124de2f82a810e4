"""Operation functions and their registry.

Functions are grouped by temporal type, one module per type. Each takes and
returns records (or scalars and strings), returns None for absent input and
is registered under a dt_* name by build_registry.
"""

from __future__ import annotations

from dtudf.functions.base import ChronologyMode, check_chronology, null_propagating
from dtudf.functions.registry import (
    FunctionRegistry,
    FunctionSpec,
    Overload,
    Param,
    build_registry,
)

__all__: list[str] = [
    "ChronologyMode",
    "check_chronology",
    "null_propagating",
    "FunctionRegistry",
    "FunctionSpec",
    "Overload",
    "Param",
    "build_registry",
]
