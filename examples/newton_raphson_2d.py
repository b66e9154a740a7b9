"""
Example: locating the minimum of a two-dimensional quadratic with Newton-Raphson.

The objective is

    f(x, y) = x^2 + y^2 + 2x + 8y

with gradient (2x + 2, 2y + 8) and constant Hessian [[2, 0], [0, 2]]. Its
global minimum is at (-1, -4). Because the Hessian is exact and constant,
a single Newton step lands on the minimum from any starting point.
"""

import numpy as np

from nrsolve import Status, newton_raphson, newton_raphson_step, residual_norm


def df(x: np.ndarray) -> np.ndarray:
    """Gradient of the quadratic."""
    return np.array([2.0 * x[0] + 2.0, 2.0 * x[1] + 8.0])


def ddf(x: np.ndarray) -> np.ndarray:
    """Hessian of the quadratic (constant)."""
    return np.array([[2.0, 0.0], [0.0, 2.0]])


def example_manual_loop():
    """Drive the step by hand, checking the residual before every step."""
    print("=" * 60)
    print("Manual loop")
    print("=" * 60)

    x = np.array([-3.0, -2.0])
    status = Status.SUCCESS
    while status is Status.SUCCESS and residual_norm(df, x) > 0.001:
        status = newton_raphson_step(df, ddf, x)
        print(f"Parameters: {x} Error: {residual_norm(df, x):.6f}")

    assert abs(x[0] - (-1.0)) < 0.001
    assert abs(x[1] - (-4.0)) < 0.001
    print()


def example_driver():
    """Let newton_raphson own the loop."""
    print("=" * 60)
    print("Driver")
    print("=" * 60)

    result = newton_raphson(df, ddf, np.array([-3.0, -2.0]), tol=1e-3)
    print(f"Status: {result.status.value}")
    print(f"Minimum found at: {result.x}")
    print(f"Steps: {result.nit}")
    print()


def example_singular_hessian():
    """A zero Hessian is reported as a status, not an exception."""
    print("=" * 60)
    print("Singular Hessian")
    print("=" * 60)

    x = np.array([-3.0, -2.0])
    status = newton_raphson_step(df, lambda _: np.zeros((2, 2)), x)
    print(f"Status: {status.value}")
    print()


if __name__ == "__main__":
    example_manual_loop()
    example_driver()
    example_singular_hessian()
    print("Newton-Raphson example finished")
