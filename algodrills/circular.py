"""A circular singly linked list addressed through its last node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["CircularList"]


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class CircularList:
    """A ring of nodes; the last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._last: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        if self._last is None:
            return
        node = self._last.next
        while True:
            yield node
            if node is self._last:
                return
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node; it becomes the new last node."""
        node = _Node(value)
        if self._last is None:
            node.next = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._last = node
        self._size += 1

    def reverse(self) -> None:
        """Reverse the direction of the ring in place."""
        if self._size < 2:
            return
        head = self._last.next
        previous = self._last
        node = head
        for _ in range(self._size):
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._last = head

    def swap_ends(self) -> None:
        """Exchange the first and last values; ``ValueError`` on an empty list."""
        if self._last is None:
            raise ValueError("cannot swap the ends of an empty list")
        head = self._last.next
        head.value, self._last.value = self._last.value, head.value