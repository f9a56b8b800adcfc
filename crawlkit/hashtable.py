"""Separate-chaining hash table that grows when its buckets fill up."""

from __future__ import annotations

from typing import Any, Hashable

from crawlkit.linkedlist import LinkedList

_LOAD_LIMIT = 70.0


class HashTable:
    """Hash table of linked-list buckets keyed by ints or strings.

    ``current`` counts occupied buckets; when more than 70 percent of the
    buckets are occupied the table doubles in size before the next insert.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self.current = 0
        self.buckets: list[LinkedList] = [LinkedList() for _ in range(size)]

    def key_index(self, key: Hashable) -> int:
        """Bucket index of ``key``: ints by value, strings by character sum."""
        if isinstance(key, int):
            return key % self.size
        if isinstance(key, str):
            return sum(ord(ch) for ch in key) % self.size
        raise TypeError(f"unsupported key type: {type(key).__name__}")

    def _place(self, value: Any, key: Hashable) -> None:
        bucket = self.buckets[self.key_index(key)]
        if bucket.is_empty():
            self.current += 1
        bucket.insert_at_end(value, key)

    def insert(self, value: Any, key: Hashable) -> None:
        """Add ``value`` under ``key``, growing the table first if needed."""
        if self.current / self.size * 100 > _LOAD_LIMIT:
            self.resize()
        self._place(value, key)

    def traverse(self, key: Hashable) -> None:
        """Print every entry stored under ``key``."""
        self.buckets[self.key_index(key)].show(key)

    def print_all(self) -> None:
        """Print the entries of every occupied bucket."""
        for index, bucket in enumerate(self.buckets):
            if bucket.is_empty():
                continue
            print(f"Index {index}:")
            for node in bucket:
                print(f"  Key: {node.key}, Value: {node.value}")

    def resize(self) -> None:
        """Double the number of buckets and rehash every entry."""
        old_buckets = self.buckets
        self.size *= 2
        self.buckets = [LinkedList() for _ in range(self.size)]
        self.current = 0
        for bucket in old_buckets:
            for node in bucket:
                self._place(node.value, node.key)