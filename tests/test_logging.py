"""Tests for logging utilities."""

import logging
from io import StringIO

import numpy as np

from nrsolve.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)
from nrsolve.optimize import newton_raphson


def test_get_logger_returns_namespaced_logger():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "nrsolve.test_module"


def test_get_logger_accepts_module_name():
    assert get_logger("nrsolve.optimize.newton") is get_logger("optimize.newton")
    assert get_logger().name == "nrsolve"


def test_get_logger_caching():
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_set_log_level():
    logger = get_logger("test_module")
    try:
        set_log_level(logging.INFO)
        assert logger.level == logging.INFO
        set_log_level("debug")
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_custom_format():
    logger = get_logger("test_module")
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, format_string="%(levelname)s|%(message)s", stream=stream)
        logger.debug("Debug message")
        assert "DEBUG|Debug message" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_solver_loop_reports_convergence_at_info():
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, stream=stream)
        newton_raphson(
            lambda x: np.array([2 * x[0] + 2, 2 * x[1] + 8]),
            lambda _: 2.0 * np.eye(2),
            np.array([-3.0, -2.0]),
        )
        output = stream.getvalue()
        assert "Converged in 1 step(s)" in output
        assert "nrsolve.optimize.newton" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_solver_loop_warns_on_singular_hessian():
    stream = StringIO()
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        newton_raphson(
            lambda x: np.array([2 * x[0] + 2, 2 * x[1] + 8]),
            lambda _: np.zeros((2, 2)),
            np.array([-3.0, -2.0]),
        )
        assert "[WARNING]" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)
