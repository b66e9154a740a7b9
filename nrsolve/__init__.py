"""nrsolve - Newton-Raphson steps toward stationary points of scalar functions."""

__version__ = "0.1.0"

from .diagnostics import (
    assert_symmetric,
    condition_number,
    debug_context,
    get_symmetry_atol,
    is_debug_enabled,
    is_symmetric,
    set_debug_enabled,
    set_symmetry_atol,
)
from .logging import configure_logging, get_logger, set_log_level
from .optimize import (
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Function,
    Gradient,
    Hessian,
    NewtonResult,
    Status,
    check_convergence,
    newton_raphson,
    newton_raphson_step,
    residual_norm,
)

__all__ = [
    "__version__",
    # Solver
    "Status",
    "NewtonResult",
    "Function",
    "Gradient",
    "Hessian",
    "DEFAULT_TOL",
    "DEFAULT_MAXITER",
    "check_convergence",
    "newton_raphson",
    "newton_raphson_step",
    "residual_norm",
    # Diagnostics
    "is_symmetric",
    "assert_symmetric",
    "condition_number",
    "is_debug_enabled",
    "set_debug_enabled",
    "get_symmetry_atol",
    "set_symmetry_atol",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
