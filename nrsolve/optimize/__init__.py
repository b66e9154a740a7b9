"""Newton-Raphson search for stationary points.

Example
-------
>>> import numpy as np
>>> from nrsolve.optimize import Status, newton_raphson_step
>>> def df(x):
...     return np.array([2 * x[0] + 2, 2 * x[1] + 8])
>>> def ddf(x):
...     return np.array([[2.0, 0.0], [0.0, 2.0]])
>>> x = np.array([-3.0, -2.0])
>>> newton_raphson_step(df, ddf, x) is Status.SUCCESS
True
>>> x.tolist()
[-1.0, -4.0]
"""

from .core import (
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Function,
    Gradient,
    Hessian,
    NewtonResult,
    Status,
    check_convergence,
)
from .newton import newton_raphson, newton_raphson_step, residual_norm

__all__ = [
    "DEFAULT_MAXITER",
    "DEFAULT_TOL",
    "Function",
    "Gradient",
    "Hessian",
    "NewtonResult",
    "Status",
    "check_convergence",
    "newton_raphson",
    "newton_raphson_step",
    "residual_norm",
]
