"""Binary min-heap of comparable values."""

from __future__ import annotations

from typing import Any


class MinHeap:
    """Min-heap; ``top`` gives the smallest element."""

    def __init__(self, default_size: int = 10) -> None:
        if default_size < 0:
            raise ValueError("size must not be negative")
        self._items: list[Any] = []

    def _sift_down(self, index: int) -> None:
        items = self._items
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < len(items) and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def push(self, data: Any) -> None:
        """Add ``data`` to the heap."""
        items = self._items
        items.append(data)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not items[index] < items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def top(self) -> Any:
        """Return the smallest element."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def pop(self) -> None:
        """Remove the smallest element."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        items.pop()
        self._sift_down(0)

    def empty(self) -> bool:
        """Return whether the heap holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)