"""Diagnostics and debugging utilities for nrsolve."""

from .core import (
    assert_symmetric,
    condition_number,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    get_symmetry_atol,
    is_debug_enabled,
    set_debug_enabled,
    set_symmetry_atol,
)

__all__ = [
    "is_symmetric",
    "assert_symmetric",
    "condition_number",
    "is_debug_enabled",
    "set_debug_enabled",
    "get_symmetry_atol",
    "set_symmetry_atol",
    "debug_context",
]
