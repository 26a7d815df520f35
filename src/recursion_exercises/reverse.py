"""In-place sequence reversal using a recursive two-pointer swap.

:func:`reverse_sequence` mutates the caller's sequence and hands back the
same object, so ``reverse_sequence(items) is items`` always holds.  No new
list is allocated.

Example
-------
>>> items = [1, 2, 3, 4]
>>> reverse_sequence(items)
[4, 3, 2, 1]
>>> items
[4, 3, 2, 1]
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Optional, TypeVar

from .errors import InvalidArgumentError

__all__ = ["reverse_sequence", "reverse"]

T = TypeVar("T")


def reverse_sequence(arr: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse *arr* in place and return it.

    Elements can be of any type; they are only moved, never compared.
    """
    return reverse(arr)


def reverse(
    arr: MutableSequence[T], start: int = 0, end: Optional[int] = None
) -> MutableSequence[T]:
    """Reverse the window ``arr[start..end]`` (inclusive) in place.

    Parameters
    ----------
    arr : MutableSequence
        Sequence to modify, e.g. a ``list``.
    start : int
        Left cursor, defaults to the first element.
    end : int, optional
        Right cursor, defaults to the last element.

    Returns
    -------
    MutableSequence
        *arr* itself.

    Raises
    ------
    InvalidArgumentError
        If *arr* is immutable (``str``, ``tuple``) or not indexable, or a
        cursor falls outside it. Crossed cursors leave *arr* unchanged.
    """
    if not isinstance(arr, MutableSequence):
        raise InvalidArgumentError(
            f"expected a mutable sequence, got {type(arr).__name__}"
        )
    if end is None:
        end = len(arr) - 1
    _check_cursors(start, end, len(arr))
    return _swap(arr, start, end)


def _check_cursors(start: int, end: int, length: int) -> None:
    for name, value in (('start', start), ('end', end)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    if start < 0 or end >= length:
        raise InvalidArgumentError(
            f"window [{start}, {end}] is outside a sequence of length {length}"
        )


def _swap(arr: MutableSequence[T], start: int, end: int) -> MutableSequence[T]:
    if start >= end:
        return arr
    arr[start], arr[end] = arr[end], arr[start]
    return _swap(arr, start + 1, end - 1)
