"""Newton steps on torch.Tensor parameter vectors."""

import numpy as np
import pytest
import torch

from nrsolve.optimize import Status, newton_raphson, newton_raphson_step


def quad_grad(x: torch.Tensor) -> torch.Tensor:
    return torch.stack([2.0 * x[0] + 2.0, 2.0 * x[1] + 8.0])


def quad_hess(x: torch.Tensor) -> torch.Tensor:
    return 2.0 * torch.eye(2, dtype=x.dtype)


@pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
def test_tensor_step_updates_in_place(dtype: torch.dtype) -> None:
    x = torch.tensor([-3.0, -2.0], dtype=dtype)
    ptr = x.data_ptr()
    status = newton_raphson_step(quad_grad, quad_hess, x)
    assert status is Status.SUCCESS
    assert x.data_ptr() == ptr
    assert x.dtype == dtype
    assert torch.allclose(x, torch.tensor([-1.0, -4.0], dtype=dtype))


def test_tensor_requiring_grad_is_updated() -> None:
    x = torch.tensor([-3.0, -2.0], dtype=torch.float64, requires_grad=True)
    assert newton_raphson_step(quad_grad, quad_hess, x) is Status.SUCCESS
    assert torch.allclose(x.detach(), torch.tensor([-1.0, -4.0], dtype=torch.float64))


def test_tensor_random_starts(torch_rng: torch.Generator) -> None:
    starts = torch.rand((10, 2), generator=torch_rng, dtype=torch.float64) * 200 - 100
    for start in starts:
        x = start.clone()
        assert newton_raphson_step(quad_grad, quad_hess, x) is Status.SUCCESS
        assert torch.allclose(x, torch.tensor([-1.0, -4.0], dtype=torch.float64))


def test_tensor_singular_hessian() -> None:
    x = torch.tensor([-3.0, -2.0], dtype=torch.float64)
    status = newton_raphson_step(quad_grad, lambda p: torch.zeros((2, 2), dtype=p.dtype), x)
    assert status is Status.SINGULAR_HESSIAN
    assert torch.equal(x, torch.tensor([-3.0, -2.0], dtype=torch.float64))


def test_tensor_non_finite_gradient() -> None:
    x = torch.zeros(2, dtype=torch.float64)
    status = newton_raphson_step(
        lambda p: torch.tensor([float("nan"), 0.0], dtype=p.dtype), quad_hess, x
    )
    assert status is Status.NON_FINITE


def test_tensor_with_numpy_callables() -> None:
    x = torch.tensor([-3.0, -2.0], dtype=torch.float64)
    status = newton_raphson_step(
        lambda p: np.array([2.0 * float(p[0]) + 2.0, 2.0 * float(p[1]) + 8.0]),
        lambda _: np.array([[2.0, 0.0], [0.0, 2.0]]),
        x,
    )
    assert status is Status.SUCCESS
    assert torch.allclose(x, torch.tensor([-1.0, -4.0], dtype=torch.float64))


def test_integer_tensor_raises() -> None:
    with pytest.raises(TypeError):
        newton_raphson_step(quad_grad, quad_hess, torch.tensor([1, 2]))


def test_loop_on_tensor_start() -> None:
    x0 = torch.tensor([-3.0, -2.0], dtype=torch.float64)
    res = newton_raphson(quad_grad, quad_hess, x0)
    assert res.converged
    assert res.nit == 1
    assert isinstance(res.x, torch.Tensor)
    assert torch.equal(x0, torch.tensor([-3.0, -2.0], dtype=torch.float64))
