"""Fibonacci numbers by naive double recursion.

The sequence is defined as::

    F(0) = 0
    F(1) = 1
    F(n) = F(n-1) + F(n-2) for n >= 2

:func:`fibonacci` follows the definition literally and recomputes every
subproblem, so it runs in O(2^n) time with O(n) stack depth.  Results are
not cached.

Example
-------
>>> fibonacci(6)
8
>>> fibonacci_sequence(7)
[0, 1, 1, 2, 3, 5, 8]
"""

from __future__ import annotations

from typing import List

from .errors import InvalidArgumentError

__all__ = ["fibonacci", "fibonacci_sequence"]


def _require_index(value: int, name: str) -> None:
    # bool is an int subclass but True/False are not indices
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative")


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number.

    Parameters
    ----------
    n : int
        Zero-based index into the sequence. Must be non-negative.

    Returns
    -------
    int
        The value of ``F(n)``.

    Raises
    ------
    InvalidArgumentError
        If ``n`` is negative or not an integer.
    """
    _require_index(n, "n")
    return _fib(n)


def _fib(n: int) -> int:
    if n == 0 or n == 1:
        return n
    return _fib(n - 1) + _fib(n - 2)


def fibonacci_sequence(count: int) -> List[int]:
    """Return the first ``count`` Fibonacci numbers, starting at ``F(0)``."""
    _require_index(count, "count")
    return [fibonacci(i) for i in range(count)]
