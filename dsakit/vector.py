"""Growable array that doubles its capacity when full."""

from __future__ import annotations

from typing import Any


class Vector:
    """Dynamic array with explicit capacity doubling."""

    def __init__(self, max_size: int = 1) -> None:
        if max_size < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * max_size
        self._size = 0

    def push_back(self, data: Any) -> None:
        """Append ``data``, doubling the capacity when the array is full."""
        if self._size == len(self._slots):
            self._slots.extend([None] * len(self._slots))
        self._slots[self._size] = data
        self._size += 1

    def pop_back(self) -> None:
        """Remove the last element."""
        if self._size == 0:
            raise IndexError("pop from an empty vector")
        self._size -= 1
        self._slots[self._size] = None

    def is_empty(self) -> bool:
        """Return whether the vector holds no elements."""
        return self._size == 0

    def front(self) -> Any:
        """Return the first element."""
        return self.at(0)

    def back(self) -> Any:
        """Return the last element."""
        return self.at(self._size - 1)

    def at(self, i: int) -> Any:
        """Return the element at index ``i``."""
        if not 0 <= i < self._size:
            raise IndexError(f"index {i} is out of range")
        return self._slots[i]

    def size(self) -> int:
        """Return the number of elements."""
        return self._size

    def capacity(self) -> int:
        """Return how many elements fit before the next growth."""
        return len(self._slots)

    def __getitem__(self, i: int) -> Any:
        return self.at(i)

    def __len__(self) -> int:
        return self._size