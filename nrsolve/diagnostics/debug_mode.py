"""Debug mode switch for nrsolve.

When enabled, the Newton step checks every Hessian it receives for
symmetry and logs its condition number. The tolerance used for the symmetry
check is part of the debug configuration. Neither setting changes the
result of a step.

Environment variables read at import:

- ``NRSOLVE_DEBUG``: truthy values (``1``, ``true``, ``yes``, ``on``) enable
  debug mode.
- ``NRSOLVE_SYMMETRY_ATOL``: absolute tolerance for the Hessian symmetry
  check (default ``1e-8``).
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "NRSOLVE_DEBUG"
_SYMMETRY_ATOL_ENV_VAR = "NRSOLVE_SYMMETRY_ATOL"
_TRUTHY = ("1", "true", "yes", "on")
_DEFAULT_SYMMETRY_ATOL = 1e-8


def _validated_atol(atol: float) -> float:
    atol = float(atol)
    if not atol >= 0.0:
        raise ValueError(f"symmetry tolerance must be >= 0, got {atol}")
    return atol


_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in _TRUTHY
_symmetry_atol: float = _validated_atol(
    os.getenv(_SYMMETRY_ATOL_ENV_VAR, str(_DEFAULT_SYMMETRY_ATOL))
)


def is_debug_enabled() -> bool:
    """Return whether Hessian checks run on every Newton step."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable the per-step Hessian checks."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


def get_symmetry_atol() -> float:
    """Return the absolute tolerance of the debug-mode symmetry check."""
    return _symmetry_atol


def set_symmetry_atol(atol: float) -> None:
    """
    Set the absolute tolerance of the debug-mode symmetry check.

    Hessians assembled from finite differences are rarely exactly
    symmetric; raise the tolerance to silence warnings about such noise.

    Raises
    ------
    ValueError
        If ``atol`` is negative or NaN.
    """
    global _symmetry_atol
    _symmetry_atol = _validated_atol(atol)


@contextmanager
def debug_context(enabled: bool = True, symmetry_atol: Optional[float] = None) -> Iterator[None]:
    """
    Temporarily set debug mode, restoring the previous settings on exit.

    Parameters
    ----------
    enabled:
        Whether to run the Hessian checks inside the block.
    symmetry_atol:
        Symmetry tolerance to use inside the block. ``None`` keeps the
        current one.

    Example
    -------
    >>> with debug_context(True, symmetry_atol=1e-6):
    ...     status = newton_raphson_step(df, ddf, x)  # doctest: +SKIP
    """
    global _debug_enabled, _symmetry_atol
    prev_enabled, prev_atol = _debug_enabled, _symmetry_atol
    new_atol = prev_atol if symmetry_atol is None else _validated_atol(symmetry_atol)
    _debug_enabled = bool(enabled)
    _symmetry_atol = new_atol
    try:
        yield
    finally:
        _debug_enabled = prev_enabled
        _symmetry_atol = prev_atol


__all__ = [
    "is_debug_enabled",
    "set_debug_enabled",
    "get_symmetry_atol",
    "set_symmetry_atol",
    "debug_context",
]
