"""Separate-chaining hash table keyed by strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MAX_LOAD_FACTOR = 0.7
HASH_BASE = 29


@dataclass
class _Entry:
    key: str
    value: Any


class Hashtable:
    """Hash table with string keys, chained buckets and automatic growth.

    New entries go to the head of their bucket; ``insert`` does not replace an
    existing key, so the newest entry for a key is the one found.
    """

    def __init__(self, default_size: int = 7) -> None:
        if default_size < 1:
            raise ValueError("table size must be positive")
        self._buckets: list[list[_Entry]] = [[] for _ in range(default_size)]
        self._count = 0

    def _hash(self, key: str) -> int:
        size = len(self._buckets)
        index, power = 0, 1
        for ch in key:
            index = (index + ord(ch) * power) % size
            power = (power * HASH_BASE) % size
        return index

    def _rehash(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(2 * len(old) + 1)]
        self._count = 0
        for bucket in old:
            for entry in bucket:
                self.insert(entry.key, entry.value)

    def _find(self, key: str) -> _Entry | None:
        return next((e for e in self._buckets[self._hash(key)] if e.key == key), None)

    def insert(self, key: str, value: Any) -> None:
        """Add ``key`` with ``value``, growing the table when it gets too full."""
        self._buckets[self._hash(key)].insert(0, _Entry(key, value))
        self._count += 1
        if self._count / len(self._buckets) > MAX_LOAD_FACTOR:
            self._rehash()

    def search(self, key: str) -> Any:
        """Return the value stored for ``key``, or None if it is absent."""
        entry = self._find(key)
        return None if entry is None else entry.value

    def __getitem__(self, key: str) -> Any:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: str, value: Any) -> None:
        entry = self._find(key)
        if entry is None:
            self.insert(key, value)
        else:
            entry.value = value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __len__(self) -> int:
        return self._count

    def format_buckets(self) -> str:
        """Return one ``Bucket i->key->key->`` line per bucket."""
        return "".join(
            f"Bucket {i}->{''.join(f'{e.key}->' for e in bucket)}\n"
            for i, bucket in enumerate(self._buckets)
        )