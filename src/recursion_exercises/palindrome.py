"""Palindrome check using a recursive two-pointer shrink.

Two cursors start at opposite ends of the sequence and move inward.  The
check stops with ``True`` once they meet or cross and with ``False`` at the
first mismatching pair.

Example
-------
>>> is_palindrome("1221")
True
>>> is_palindrome("1234")
False
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

from .errors import InvalidArgumentError

__all__ = ["is_palindrome", "check_palindrome"]


def is_palindrome(s: Sequence[Any]) -> bool:
    """Return ``True`` if *s* reads the same forwards and backwards.

    The empty sequence and single-element sequences are palindromes.
    *s* is never modified.
    """
    return check_palindrome(s)


def check_palindrome(s: Sequence[Any], start: int = 0, end: Optional[int] = None) -> bool:
    """Check whether the window ``s[start..end]`` (inclusive) is a palindrome.

    Parameters
    ----------
    s : Sequence
        Any randomly indexable sequence (``str``, ``list``, ``tuple``...).
    start : int
        Left cursor, defaults to the first element.
    end : int, optional
        Right cursor, defaults to the last element.

    Raises
    ------
    InvalidArgumentError
        If *s* does not support ``len()`` and indexing, or a cursor
        falls outside it. Crossed cursors (``start > end``) are an empty
        window and always pass.
    """
    if not isinstance(s, Sequence):
        raise InvalidArgumentError(
            f"expected an indexable sequence, got {type(s).__name__}"
        )
    if end is None:
        end = len(s) - 1
    _check_cursors(start, end, len(s))
    return _shrink(s, start, end)


def _check_cursors(start: int, end: int, length: int) -> None:
    for name, value in (('start', start), ('end', end)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    # negative indices would silently wrap around
    if start < 0 or end >= length:
        raise InvalidArgumentError(
            f"window [{start}, {end}] is outside a sequence of length {length}"
        )


def _shrink(s: Sequence[Any], start: int, end: int) -> bool:
    if start >= end:
        return True
    if s[start] != s[end]:
        return False
    return _shrink(s, start + 1, end - 1)
