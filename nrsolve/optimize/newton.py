"""Newton-Raphson iteration for stationary points of a scalar function."""

from __future__ import annotations

from typing import Callable, Optional

from ..diagnostics import condition_number, get_symmetry_atol, is_debug_enabled, is_symmetric
from ..logging import get_logger
from .core import (
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Gradient,
    Hessian,
    NewtonResult,
    Status,
    Vector,
    check_convergence,
)
from .utils import (
    LINALG_ERRORS,
    all_finite,
    apply_step,
    check_newton_shapes,
    copy_vector,
    ensure_float_vector,
    like,
    solve_newton_system,
    vector_norm,
)

logger = get_logger(__name__)


def _debug_report(hess: Vector) -> None:
    if not is_symmetric(hess, atol=get_symmetry_atol()):
        logger.warning("Hessian is not symmetric; the Newton step may be meaningless.")
    logger.debug("Hessian condition number: %.3e", condition_number(hess))


def newton_raphson_step(df: Gradient, ddf: Hessian, x: Vector) -> Status:
    """
    Perform one Newton-Raphson iteration, updating ``x`` in place.

    Evaluates ``g = df(x)`` and ``H = ddf(x)`` once each, solves
    ``H @ dx = -g`` and adds ``dx`` to ``x``. For a quadratic objective a
    single step lands on the stationary point.

    Numerical failures are reported through the returned status, never by
    raising: ``Status.SINGULAR_HESSIAN`` when ``H`` cannot be solved
    reliably and ``Status.NON_FINITE`` when ``g``, ``H`` or the step contain
    NaN or inf. ``x`` is only modified when ``Status.SUCCESS`` is returned,
    but callers should treat ``x`` as meaningless after any failure.

    Parameters
    ----------
    df:
        Gradient callable, returning ``n`` entries (shape ``(n,)`` or
        ``(n, 1)``).
    ddf:
        Hessian callable, returning an ``(n, n)`` matrix.
    x:
        Floating-point ``numpy.ndarray`` or ``torch.Tensor`` with ``n``
        entries. Its shape, dtype and identity are preserved.

    Raises
    ------
    TypeError
        If ``x`` is not a floating-point array or tensor.
    ValueError
        If the gradient or Hessian shapes do not match ``x``.
    """
    ensure_float_vector(x)
    n = x.numel() if hasattr(x, "numel") else x.size

    grad = like(df(x), x)
    hess = like(ddf(x), x)
    check_newton_shapes(grad, hess, n)
    if not (all_finite(grad) and all_finite(hess)):
        logger.debug("Non-finite gradient or Hessian at x=%s", x)
        return Status.NON_FINITE

    if is_debug_enabled():
        _debug_report(hess)

    try:
        step = solve_newton_system(hess, grad)
    except LINALG_ERRORS as exc:
        logger.debug("Hessian solve failed: %s", exc)
        return Status.SINGULAR_HESSIAN
    if not all_finite(step):
        logger.debug("Newton step overflowed")
        return Status.NON_FINITE

    apply_step(x, step)
    logger.debug("Newton step |dx|=%.3e", vector_norm(step))
    return Status.SUCCESS


def residual_norm(df: Gradient, x: Vector) -> float:
    """Return the Euclidean norm of the gradient at ``x``."""
    return vector_norm(like(df(x), x))


def newton_raphson(
    df: Gradient,
    ddf: Hessian,
    x0: Vector,
    tol: float = DEFAULT_TOL,
    maxiter: int = DEFAULT_MAXITER,
    history: bool = False,
    callback: Optional[Callable[[Vector, int], None]] = None,
) -> NewtonResult:
    """Step from ``x0`` until the gradient norm is at most ``tol``.

    The loop owns the convergence test: it recomputes the gradient norm
    itself before every step and stops on convergence, on the first
    non-success status, or after ``maxiter`` steps. ``x0`` is copied, not
    mutated.
    """
    if tol <= 0:
        raise ValueError(f"tol must be > 0, got {tol}")
    if maxiter < 0:
        raise ValueError(f"maxiter must be >= 0, got {maxiter}")

    x = copy_vector(x0)
    hist: list[Vector] = []
    if history:
        hist.append(copy_vector(x))
    status = Status.SUCCESS
    nit = 0
    njev = 0
    nhev = 0

    grad_norm = residual_norm(df, x)
    njev += 1
    converged = check_convergence(grad_norm, tol)
    while not converged and nit < maxiter:
        status = newton_raphson_step(df, ddf, x)
        njev += 1
        nhev += 1
        if status is not Status.SUCCESS:
            break
        nit += 1
        if history:
            hist.append(copy_vector(x))
        if callback is not None:
            callback(copy_vector(x), nit)
        grad_norm = residual_norm(df, x)
        njev += 1
        converged = check_convergence(grad_norm, tol)

    if converged:
        message = "Gradient tolerance satisfied."
        logger.info("Converged in %d step(s), |grad|=%.3e", nit, grad_norm)
    elif status is Status.SINGULAR_HESSIAN:
        message = "Hessian is singular or ill-conditioned."
        logger.warning("Stopped after %d step(s): %s", nit, message)
    elif status is Status.NON_FINITE:
        message = "Non-finite gradient, Hessian or step encountered."
        logger.warning("Stopped after %d step(s): %s", nit, message)
    else:
        message = "Maximum iterations reached."
        logger.info("No convergence after %d step(s), |grad|=%.3e", nit, grad_norm)

    return NewtonResult(
        x=x,
        status=status,
        nit=nit,
        converged=converged,
        grad_norm=grad_norm,
        message=message,
        njev=njev,
        nhev=nhev,
        history=hist,
    )


__all__ = ["newton_raphson_step", "newton_raphson", "residual_norm"]
