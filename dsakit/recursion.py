"""Recursive algorithms: sorting, searching, arithmetic and digit spelling."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from functools import lru_cache
from itertools import pairwise

NOT_FOUND = -1
DIGIT_WORDS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _require_non_negative(n: int, name: str = "n") -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative")


def bubble_sort_recursive(arr: MutableSequence) -> None:
    """Sort ``arr`` ascending in place, one recursive call per pass."""

    def sort_prefix(size: int) -> None:
        if size <= 1:
            return
        for j in range(size - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
        sort_prefix(size - 1)

    sort_prefix(len(arr))


def bubble_sort_stepwise(arr: MutableSequence) -> None:
    """Sort ``arr`` ascending in place, one comparison per step."""
    size, j = len(arr), 0
    while size > 1:
        if j == size - 1:
            size, j = size - 1, 0
            continue
        if arr[j] > arr[j + 1]:
            arr[j], arr[j + 1] = arr[j + 1], arr[j]
        j += 1


def factorial(n: int) -> int:
    """Return ``n!``."""
    _require_non_negative(n)
    if n == 0:
        return 1
    return n * factorial(n - 1)


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n in (0, 1):
        return n
    return _fib(n - 1) + _fib(n - 2)


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fib(0) == 0``."""
    _require_non_negative(n)
    return _fib(n)


def decreasing(n: int) -> list[int]:
    """Return ``n, n-1, ..., 1``."""
    _require_non_negative(n)
    if n == 0:
        return []
    return [n, *decreasing(n - 1)]


def increasing(n: int) -> list[int]:
    """Return ``1, 2, ..., n``."""
    _require_non_negative(n)
    if n == 0:
        return []
    return [*increasing(n - 1), n]


def power(a: int, n: int) -> int:
    """Return ``a ** n`` by ``n`` multiplications."""
    _require_non_negative(n)
    if n == 0:
        return 1
    return a * power(a, n - 1)


def fast_power(a: int, n: int) -> int:
    """Return ``a ** n`` by repeated squaring."""
    _require_non_negative(n)
    if n == 0:
        return 1
    half = fast_power(a, n // 2)
    square = half * half
    return a * square if n & 1 else square


def first_occurrence(arr: Sequence, key) -> int:
    """Return the first index of ``key`` in ``arr``, or -1."""

    def search(start: int) -> int:
        if start == len(arr):
            return NOT_FOUND
        if arr[start] == key:
            return start
        return search(start + 1)

    return search(0)


def last_occurrence(arr: Sequence, key) -> int:
    """Return the last index of ``key`` in ``arr``, or -1."""

    def search(start: int) -> int:
        if start == len(arr):
            return NOT_FOUND
        later = search(start + 1)
        if later != NOT_FOUND:
            return later
        return start if arr[start] == key else NOT_FOUND

    return search(0)


def is_sorted(arr: Sequence) -> bool:
    """Return whether ``arr`` is strictly increasing."""
    return all(a < b for a, b in pairwise(arr))


def spell(n: int) -> str:
    """Spell the decimal digits of ``n`` as words; 0 gives an empty string."""
    _require_non_negative(n)
    if n == 0:
        return ""
    head = spell(n // 10)
    word = DIGIT_WORDS[n % 10]
    return f"{head} {word}" if head else word