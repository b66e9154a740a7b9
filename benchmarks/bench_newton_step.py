"""Benchmark a single Newton-Raphson step as the dimension grows."""

import time
from typing import Dict

import numpy as np
import torch

from nrsolve import Status, newton_raphson_step


def benchmark_newton_step(
    dim: int,
    n_repeats: int = 100,
    backend: str = "numpy",
) -> Dict[str, float]:
    """Benchmark one step on a random strictly convex quadratic.

    Args:
        dim: Number of parameters.
        n_repeats: Number of timed steps.
        backend: ``"numpy"`` or ``"torch"``.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(0)
    a = rng.standard_normal((dim, dim))
    hess_np = a @ a.T + dim * np.eye(dim)
    b_np = rng.standard_normal(dim)

    if backend == "torch":
        hess = torch.from_numpy(hess_np)
        b = torch.from_numpy(b_np)
        x = torch.zeros(dim, dtype=torch.float64)
    else:
        hess, b, x = hess_np, b_np, np.zeros(dim)

    def df(p):
        return hess @ p - b

    def ddf(_):
        return hess

    # Warmup
    for _ in range(5):
        newton_raphson_step(df, ddf, x)

    start = time.perf_counter()
    for _ in range(n_repeats):
        status = newton_raphson_step(df, ddf, x)
    end = time.perf_counter()
    assert status is Status.SUCCESS

    total_time = end - start
    return {
        "dim": dim,
        "total_time_sec": total_time,
        "time_per_step_sec": total_time / n_repeats,
        "steps_per_sec": n_repeats / total_time,
    }


if __name__ == "__main__":
    print("Benchmarking Newton-Raphson step...")
    for backend in ("numpy", "torch"):
        for dim in (10, 100, 400):
            results = benchmark_newton_step(dim, n_repeats=20, backend=backend)
            print(f"{backend} (dim={dim}):")
            print(f"  Time per step: {results['time_per_step_sec']*1e3:.3f} ms")
