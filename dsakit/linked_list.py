"""Singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

NOT_FOUND = -1


@dataclass(slots=True)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list with head and tail references."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def push_front(self, data: Any) -> None:
        """Add ``data`` at the front."""
        self._head = _Node(data, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Add ``data`` at the back."""
        node = _Node(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert(self, data: Any, pos: int) -> None:
        """Insert ``data`` so that it ends up at index ``pos``."""
        if not 0 <= pos <= self._size:
            raise IndexError(f"position {pos} is outside the list")
        if pos == 0:
            self.push_front(data)
            return
        if pos == self._size:
            self.push_back(data)
            return
        before = self._head
        for _ in range(pos - 1):
            before = before.next
        before.next = _Node(data, before.next)
        self._size += 1

    def search(self, key: Any) -> int:
        """Return the index of the first node holding ``key``, or -1."""
        return next((i for i, value in enumerate(self) if value == key), NOT_FOUND)

    def recursive_search(self, key: Any) -> int:
        """Return the index of the first node holding ``key``, or -1, recursively."""

        def search_from(node: _Node | None) -> int:
            if node is None:
                return NOT_FOUND
            if node.data == key:
                return 0
            rest = search_from(node.next)
            return NOT_FOUND if rest == NOT_FOUND else rest + 1

        return search_from(self._head)

    def pop_front(self) -> None:
        """Remove the first node."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size