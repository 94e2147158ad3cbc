"""Array searches, subarray sums and small array utilities."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from itertools import accumulate, chain, count, islice

NOT_FOUND = -1
TAX_RATE = 0.10


def two_sum(arr: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return the pairs of elements that add up to ``target``.

    Each element is used at most once. Pairs come in ascending order of
    their smaller element. When no pair exists, ``[(-1, -1)]`` is returned.
    The input is left untouched.
    """
    values = sorted(arr)
    pairs: list[tuple[int, int]] = []
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total == target:
            pairs.append((values[low], values[high]))
            low += 1
            high -= 1
        elif total > target:
            high -= 1
        else:
            low += 1
    return pairs or [(-1, -1)]


def linear_search(arr: Sequence, key) -> int:
    """Return the index of the first element equal to ``key``, or -1."""
    return next((index for index, value in enumerate(arr) if value == key), NOT_FOUND)


def binary_search(arr: Sequence, key) -> int:
    """Return an index of ``key`` in the ascending sequence ``arr``, or -1."""
    start, end = 0, len(arr) - 1
    while start <= end:
        mid = (start + end) // 2
        if arr[mid] == key:
            return mid
        if arr[mid] > key:
            end = mid - 1
        else:
            start = mid + 1
    return NOT_FOUND


def subarrays(arr: Sequence) -> Iterator[list]:
    """Yield every contiguous subarray, grouped by starting position."""
    size = len(arr)
    for start in range(size):
        for end in range(start + 1, size + 1):
            yield list(arr[start:end])


def largest_subarray_sum_brute(arr: Sequence[int]) -> int:
    """Largest subarray sum by summing every subarray; never below 0."""
    return max(chain([0], map(sum, subarrays(arr))))


def largest_subarray_sum_prefix(arr: Sequence[int]) -> int:
    """Largest subarray sum using prefix sums; never below 0."""
    prefix = [0, *accumulate(arr)]
    size = len(arr)
    return max(
        chain(
            [0],
            (prefix[end + 1] - prefix[start] for start in range(size) for end in range(start, size)),
        )
    )


def max_subarray_sum(arr: Sequence[int]) -> int:
    """Largest subarray sum by Kadane's algorithm; never below 0."""
    current = largest = 0
    for value in arr:
        current = max(current + value, 0)
        largest = max(largest, current)
    return largest


def reverse_array(arr: MutableSequence) -> None:
    """Reverse ``arr`` in place."""
    arr[:] = arr[::-1]


def create_2d_array(rows: int, cols: int) -> list[list[int]]:
    """Return a ``rows`` x ``cols`` grid filled row by row with 0, 1, 2, ..."""
    if rows < 0 or cols < 0:
        raise ValueError("rows and cols must not be negative")
    numbers = count()
    return [list(islice(numbers, cols)) for _ in range(rows)]


def apply_tax(money: int) -> int:
    """Deduct a 10% tax from ``money``, truncating to a whole amount."""
    return int(money - money * TAX_RATE)