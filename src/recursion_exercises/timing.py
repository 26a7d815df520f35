"""Decorator that logs how long a function call took.

Usage::

    from recursion_exercises.timing import timed

    @timed
    def compute():
        ...

The elapsed time is written to this module's logger at DEBUG level, and
only while ``timing.enabled`` is true in the configuration.  Precision
comes from ``timing.precision``.
"""

import functools
import logging
import time
from typing import Any, Callable, TypeVar

from .config import get_config

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Measure execution time of *func*.

    The wrapped function returns its original result and re-raises any
    exception unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        config = get_config()
        if not config.get('timing.enabled', False):
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start
            precision = int(config.get('timing.precision', 6))
            logger.debug(f"{func.__name__} executed in {elapsed:.{precision}f}s")

    return wrapper  # type: ignore[return-value]


__all__ = ["timed"]
