"""Pytest configuration and shared fixtures for nrsolve tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Debug mode reset around every test
"""

import os

import numpy as np
import pytest
import torch

from nrsolve.diagnostics import get_symmetry_atol, set_debug_enabled, set_symmetry_atol


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch RNG for tests."""
    generator = torch.Generator(device="cpu")
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the global numpy and torch RNGs before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture(scope="function", autouse=True)
def debug_mode_off():
    """Run every test with debug mode disabled unless it opts in."""
    atol = get_symmetry_atol()
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)
    set_symmetry_atol(atol)
