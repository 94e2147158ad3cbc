"""Fixed-capacity circular queue."""

from __future__ import annotations

from typing import Any


class CircularQueue:
    """Queue backed by a fixed ring buffer.

    Pushing onto a full queue and popping from an empty one do nothing.
    """

    def __init__(self, default_size: int = 5) -> None:
        if default_size < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * default_size
        self._count = 0
        self._front = 0

    def full(self) -> bool:
        """Return whether the queue is at capacity."""
        return self._count == len(self._slots)

    def empty(self) -> bool:
        """Return whether the queue holds nothing."""
        return self._count == 0

    def push(self, data: Any) -> None:
        """Add ``data`` at the rear unless the queue is full."""
        if self.full():
            return
        rear = (self._front + self._count) % len(self._slots)
        self._slots[rear] = data
        self._count += 1

    def pop(self) -> None:
        """Drop the front element unless the queue is empty."""
        if self.empty():
            return
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._count -= 1

    def front(self) -> Any:
        """Return the front element."""
        if self.empty():
            raise IndexError("front of an empty queue")
        return self._slots[self._front]