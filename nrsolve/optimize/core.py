"""Core interfaces shared by the Newton-Raphson step and its driver loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Union

import numpy as np
import torch

Vector = Union[np.ndarray, torch.Tensor]
Function = Callable[[Vector], Vector]
Gradient = Function
Hessian = Function

DEFAULT_TOL = 1e-3
DEFAULT_MAXITER = 100


class Status(Enum):
    """Outcome of a single Newton-Raphson step."""

    SUCCESS = "success"
    SINGULAR_HESSIAN = "singular_hessian"
    NON_FINITE = "non_finite"


@dataclass
class NewtonResult:
    """
    Result of running Newton-Raphson steps until convergence.

    Attributes:
        x: Final parameter vector. Only a refined estimate when ``status`` is
            ``Status.SUCCESS``.
        status: Status returned by the last step taken (``SUCCESS`` when no
            step was needed).
        nit: Number of steps taken.
        converged: True when the gradient norm dropped to ``tol``.
        grad_norm: Gradient norm at ``x``.
        message: Human-readable description of why the loop stopped.
        njev: Gradient evaluations, including the loop's residual checks.
        nhev: Hessian evaluations.
        history: Copies of the iterates, when requested.
    """

    x: Vector
    status: Status
    nit: int
    converged: bool
    grad_norm: float
    message: str
    njev: int = 0
    nhev: int = 0
    history: List[Vector] = field(default_factory=list)


def check_convergence(grad_norm: float, tol: float) -> bool:
    """Return True if gradient norm satisfies tolerance."""
    return grad_norm <= tol


__all__ = [
    "Vector",
    "Function",
    "Gradient",
    "Hessian",
    "Status",
    "NewtonResult",
    "check_convergence",
    "DEFAULT_TOL",
    "DEFAULT_MAXITER",
]
