"""Logging helpers for nrsolve.

Every module obtains its logger through :func:`get_logger` so that solver
output can be silenced or raised in one place.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _make_handler(level: int, stream: Optional[object] = None, fmt: str = _DEFAULT_FORMAT) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached logger for ``name``, creating it on first use.

    Names are placed under the ``nrsolve`` namespace, so passing
    ``__name__`` from inside the package and passing a bare suffix give the
    same logger.

    Args:
        name: Logger name (typically ``__name__``). ``None`` gives the package
            logger.

    Example:
        >>> from nrsolve.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Newton step accepted")
    """
    if name is None:
        name = "nrsolve"
    logger_name = name if name == "nrsolve" or name.startswith("nrsolve.") else f"nrsolve.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every nrsolve logger, and of loggers created later.

    Args:
        level: A ``logging`` level constant or its name (``"DEBUG"``, ...).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Replace the handlers of all nrsolve loggers.

    Typically called once by an application that wants solver traces, e.g.
    ``configure_logging(level="DEBUG")`` to see every Newton step.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    fmt = _DEFAULT_FORMAT if format_string is None else format_string
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(level, stream, fmt))
    _DEFAULT_LEVEL = level


__all__ = ["get_logger", "set_log_level", "configure_logging"]
