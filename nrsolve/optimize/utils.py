"""Linear-algebra glue between the Newton step and its numeric container.

The step works on either ``numpy.ndarray`` or ``torch.Tensor`` parameter
vectors. These helpers hide the few places where the two differ: shape and
dtype handling, finiteness checks, the degeneracy test, the linear solve and
the in-place update.
"""

from __future__ import annotations

import numpy as np
import torch

from .core import Vector

LINALG_ERRORS = (np.linalg.LinAlgError, torch.linalg.LinAlgError)


def ensure_float_vector(x: Vector) -> None:
    """Raise ``TypeError`` unless ``x`` is a floating-point array or tensor.

    The step updates ``x`` in place, so lists, integer arrays and scalars are
    rejected instead of being silently copied.
    """
    if isinstance(x, torch.Tensor):
        if not x.is_floating_point():
            raise TypeError(f"x must have a floating-point dtype, got {x.dtype}")
        return
    if not isinstance(x, np.ndarray):
        raise TypeError(
            f"x must be a numpy.ndarray or torch.Tensor, got {type(x).__name__}"
        )
    if not np.issubdtype(x.dtype, np.floating):
        raise TypeError(f"x must have a floating-point dtype, got {x.dtype}")


def copy_vector(x0) -> Vector:
    """Return a float copy of ``x0`` that the caller's loop can own."""
    if isinstance(x0, torch.Tensor):
        x = x0.detach().clone()
        return x if x.is_floating_point() else x.to(torch.float64)
    x = np.array(x0, copy=True)
    if not np.issubdtype(x.dtype, np.floating):
        x = x.astype(float)
    return x


def like(value, x: Vector) -> Vector:
    """Convert a callable's return value to the container type of ``x``."""
    if isinstance(x, torch.Tensor):
        if isinstance(value, torch.Tensor):
            return value if value.is_floating_point() else value.to(x.dtype)
        return torch.as_tensor(np.asarray(value), dtype=x.dtype, device=x.device)
    if isinstance(value, torch.Tensor):
        return value.detach().cpu().numpy()
    return np.asarray(value)


def all_finite(arr: Vector) -> bool:
    """Return True if every entry of ``arr`` is finite."""
    if isinstance(arr, torch.Tensor):
        return bool(torch.isfinite(arr).all())
    return bool(np.all(np.isfinite(arr)))


def vector_norm(v: Vector) -> float:
    """Euclidean norm of a vector (or column matrix) as a Python float."""
    if isinstance(v, torch.Tensor):
        return float(torch.linalg.vector_norm(v))
    return float(np.linalg.norm(np.ravel(v)))


def check_newton_shapes(grad: Vector, hess: Vector, n: int) -> None:
    """Validate gradient and Hessian shapes against a dimension ``n``.

    Raises
    ------
    ValueError
        If the gradient does not hold ``n`` entries or the Hessian is not
        ``n x n``.
    """
    grad_size = grad.numel() if isinstance(grad, torch.Tensor) else np.size(grad)
    if grad_size != n:
        raise ValueError(
            f"Gradient has {grad_size} entries but the parameter vector has {n}."
        )
    if tuple(hess.shape) != (n, n):
        raise ValueError(
            f"Hessian must have shape ({n}, {n}), got {tuple(hess.shape)}."
        )


def is_degenerate(hess: Vector) -> bool:
    """
    Return True if ``hess`` is numerically rank deficient.

    Uses the SVD rank with the usual ``sigma_max * n * eps`` threshold, so
    exactly singular and badly ill-conditioned Hessians are both caught.
    """
    n = hess.shape[0]
    if n == 0:
        return False
    if isinstance(hess, torch.Tensor):
        return int(torch.linalg.matrix_rank(hess)) < n
    return int(np.linalg.matrix_rank(hess)) < n


def solve_newton_system(hess: Vector, grad: Vector) -> Vector:
    """
    Solve ``hess @ dx = -grad`` for the Newton step.

    Returns a flat step with ``n`` entries.

    Raises
    ------
    numpy.linalg.LinAlgError, torch.linalg.LinAlgError
        If the Hessian is degenerate or the LU factorization hits a zero
        pivot.
    """
    n = hess.shape[0]
    if is_degenerate(hess):
        raise np.linalg.LinAlgError("Hessian is singular to working precision")
    if isinstance(hess, torch.Tensor):
        rhs = -grad.reshape(n).to(dtype=hess.dtype, device=hess.device)
        step, info = torch.linalg.solve_ex(hess, rhs)
        if int(info) != 0:
            raise torch.linalg.LinAlgError(f"LU pivot {int(info)} is exactly zero")
        return step
    rhs = -np.asarray(grad).reshape(n)
    return np.linalg.solve(hess, rhs)


def apply_step(x: Vector, step: Vector) -> None:
    """Add ``step`` to ``x`` in place, keeping the shape and dtype of ``x``."""
    if isinstance(x, torch.Tensor):
        with torch.no_grad():
            x.add_(step.reshape(x.shape).to(dtype=x.dtype, device=x.device))
        return
    x += np.asarray(step).reshape(x.shape).astype(x.dtype, copy=False)


__all__ = [
    "LINALG_ERRORS",
    "ensure_float_vector",
    "copy_vector",
    "like",
    "all_finite",
    "vector_norm",
    "check_newton_shapes",
    "is_degenerate",
    "solve_newton_system",
    "apply_step",
]
