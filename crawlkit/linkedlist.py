"""Singly linked list of key/value nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Node(Generic[K, V]):
    """A single entry of a linked list."""

    value: V
    key: K
    next: Optional["Node[K, V]"] = None


class LinkedList(Generic[K, V]):
    """A singly linked list whose nodes carry a key and a value."""

    def __init__(self) -> None:
        self.head: Optional[Node[K, V]] = None

    def __iter__(self) -> Iterator[Node[K, V]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def is_empty(self) -> bool:
        return self.head is None

    def insert_at_front(self, value: V, key: K) -> None:
        """Put a new node before the current head."""
        self.head = Node(value, key, self.head)

    def insert_at_end(self, value: V, key: K) -> None:
        """Append a new node after the last one."""
        new_node = Node(value, key)
        if self.head is None:
            self.head = new_node
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = new_node

    def delete_first(self) -> None:
        """Remove the head node; does nothing on an empty list."""
        if self.head is not None:
            self.head = self.head.next

    def delete_at(self, index: int) -> None:
        """Remove the node at ``index``; an index past the end is ignored.

        Raises IndexError for a negative index or an empty list.
        """
        if index < 0:
            raise IndexError("index must not be negative")
        if self.head is None:
            raise IndexError("delete from empty list")
        if index == 0:
            self.head = self.head.next
            return
        previous = self.head
        current = self.head.next
        position = 1
        while current is not None and position < index:
            previous, current = current, current.next
            position += 1
        if current is not None:
            previous.next = current.next

    def show(self, key: Any) -> None:
        """Print every node whose key equals ``key``."""
        for node in self:
            if node.key == key:
                print(f"key: {node.key}  value: {node.value}")