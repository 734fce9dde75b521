"""A doubly linked list with insertion by position and removal by value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["DoublyLinkedList"]


@dataclass(eq=False)
class _Node:
    value: Any
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """Values linked in both directions; iteration runs from head to tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def append(self, value: Any) -> None:
        """Put ``value`` at the tail."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_left(self, index: int, value: Any) -> None:
        """Insert ``value`` just left of the node at position ``index + 1``.

        In an empty list ``value`` simply becomes the only element. Otherwise a
        node must exist at ``index + 1``, or ``IndexError`` is raised.
        """
        if self._head is None:
            self.append(value)
            return
        if index < 0 or index + 1 >= self._size:
            raise IndexError(f"no node to the right of position {index}")
        target = self._head
        for _ in range(index + 1):
            target = target.next
        node = _Node(value, prev=target.prev, next=target)
        target.prev.next = node
        target.prev = node
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``; ``ValueError`` if there is none."""
        for node in self._nodes():
            if node.value == value:
                break
        else:
            raise ValueError(f"{value!r} not in list")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def backwards(self) -> Iterator[Any]:
        """Values from tail to head, following the back links."""
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev