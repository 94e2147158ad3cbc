"""Searching and ranking helpers for lists of values and records."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

NOT_FOUND = -1
SUBJECTS = 3


def find_index(arr: Sequence, key) -> int:
    """Return the index of the first element equal to ``key``, or -1."""
    try:
        return list(arr).index(key)
    except ValueError:
        return NOT_FOUND


def sort_fruits_by_price(fruits: Iterable[tuple[str, int]]) -> list[tuple[str, int]]:
    """Return ``(name, price)`` pairs ordered from most to least expensive."""
    return sorted(fruits, key=lambda fruit: fruit[1], reverse=True)


def total_marks(marks: Sequence[int]) -> int:
    """Return the sum of the first three marks."""
    if len(marks) < SUBJECTS:
        raise ValueError(f"expected at least {SUBJECTS} marks")
    return sum(marks[:SUBJECTS])


def sort_students_by_total(
    students: Iterable[tuple[str, Sequence[int]]],
) -> list[tuple[str, Sequence[int]]]:
    """Return ``(name, marks)`` pairs ordered by total marks, highest first."""
    return sorted(students, key=lambda student: total_marks(student[1]), reverse=True)