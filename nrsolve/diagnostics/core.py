"""Diagnostic checks for Hessian matrices."""

from __future__ import annotations

from typing import Union

import numpy as np
import torch

Matrix = Union[np.ndarray, torch.Tensor]


def _as_array(mat: Matrix) -> np.ndarray:
    if isinstance(mat, torch.Tensor):
        return mat.detach().cpu().numpy()
    return np.asarray(mat)


def is_symmetric(
    mat: Matrix,
    atol: float = 1e-8,
) -> bool:
    """
    Check whether a matrix is symmetric within an absolute tolerance.

    Parameters
    ----------
    mat:
        Real array or tensor with shape (n, n).
    atol:
        Absolute tolerance on ``|mat - mat.T|``.

    Returns
    -------
    bool
        True if mat is square, finite and symmetric within the tolerance.
    """
    arr = _as_array(mat)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        return False
    if arr.size == 0:
        return True

    max_dev = np.max(np.abs(arr - arr.T))
    if not np.isfinite(max_dev):
        return False
    return bool(max_dev <= atol)


def assert_symmetric(
    mat: Matrix,
    atol: float = 1e-8,
) -> None:
    """
    Assert that a Hessian is symmetric.

    Raises
    ------
    ValueError
        If the matrix is not square or not symmetric within the tolerance.
    """
    if not is_symmetric(mat, atol=atol):
        arr = _as_array(mat)
        raise ValueError(
            f"Matrix of shape {arr.shape} is not symmetric within tolerance {atol}."
        )


def condition_number(mat: Matrix) -> float:
    """
    Return the 2-norm condition number of a square matrix.

    Singular matrices give ``inf``.
    """
    arr = np.asarray(_as_array(mat), dtype=float)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"condition_number expects a square matrix, got shape {arr.shape}.")
    if arr.size == 0:
        return 1.0
    svals = np.linalg.svd(arr, compute_uv=False)
    if svals[-1] == 0.0:
        return float("inf")
    return float(svals[0] / svals[-1])


__all__ = ["is_symmetric", "assert_symmetric", "condition_number"]
