"""Stacks backed by a linked list, a Python list and a pair of queues."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Protocol


class StackLike(Protocol):
    """Anything with the push/pop/top/empty stack operations."""

    def push(self, data: Any) -> None: ...

    def pop(self) -> None: ...

    def top(self) -> Any: ...

    def empty(self) -> bool: ...


@dataclass(slots=True)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedStack:
    """Stack stored as a chain of nodes; popping an empty stack does nothing."""

    def __init__(self) -> None:
        self._head: _Node | None = None

    def push(self, data: Any) -> None:
        """Put ``data`` on top."""
        self._head = _Node(data, self._head)

    def pop(self) -> None:
        """Remove the top element, if there is one."""
        if self._head is not None:
            self._head = self._head.next

    def top(self) -> Any:
        """Return the top element."""
        if self._head is None:
            raise IndexError("top of an empty stack")
        return self._head.data

    def empty(self) -> bool:
        """Return whether the stack holds nothing."""
        return self._head is None


class ListStack:
    """Stack stored in a Python list."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        """Put ``data`` on top."""
        self._items.append(data)

    def pop(self) -> None:
        """Remove the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        self._items.pop()

    def top(self) -> Any:
        """Return the top element."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        """Return whether the stack holds nothing."""
        return not self._items


class QueueStack:
    """Stack built from two FIFO queues; popping an empty stack does nothing."""

    def __init__(self) -> None:
        self._first: deque[Any] = deque()
        self._second: deque[Any] = deque()

    def _queues(self) -> tuple[deque[Any], deque[Any]]:
        if self._first:
            return self._first, self._second
        return self._second, self._first

    def push(self, data: Any) -> None:
        """Put ``data`` on top."""
        active, _ = self._queues()
        active.append(data)

    def pop(self) -> None:
        """Remove the top element, if there is one."""
        active, spare = self._queues()
        if not active:
            return
        while len(active) > 1:
            spare.append(active.popleft())
        active.popleft()

    def top(self) -> Any:
        """Return the top element."""
        active, spare = self._queues()
        if not active:
            raise IndexError("top of an empty stack")
        while active:
            front = active.popleft()
            spare.append(front)
        return front

    def empty(self) -> bool:
        """Return whether the stack holds nothing."""
        return not self._first and not self._second


def insert_at_bottom(stack: StackLike, data: Any) -> None:
    """Place ``data`` beneath every element already on ``stack``."""
    if stack.empty():
        stack.push(data)
        return
    top = stack.top()
    stack.pop()
    insert_at_bottom(stack, data)
    stack.push(top)


def reverse_stack(stack: StackLike) -> None:
    """Reverse the order of the elements on ``stack`` in place."""
    if stack.empty():
        return
    top = stack.top()
    stack.pop()
    reverse_stack(stack)
    insert_at_bottom(stack, top)