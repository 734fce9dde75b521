"""A singly linked list with the classic textbook operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    value: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList:
    """A singly linked list; iteration yields the stored values from the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def prepend(self, value: Any) -> None:
        """Put ``value`` at the head."""
        self.head = Node(value, self.head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Put ``value`` at the tail."""
        node = Node(value)
        if self.head is None:
            self.head = node
        else:
            last = self.head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index`` (from 0).

        ``index`` may range from 0 to the length; anything else raises ``IndexError``.
        """
        if not 0 <= index <= self._size:
            raise IndexError(f"insert index {index} out of range")
        if index == 0:
            self.prepend(value)
            return
        before = self.head
        for _ in range(index - 1):
            before = before.next
        before.next = Node(value, before.next)
        self._size += 1

    def delete(self, index: int) -> Any:
        """Remove the ``index``-th node, counting from 1, and return its value."""
        if not 1 <= index <= self._size:
            raise IndexError(f"delete index {index} out of range")
        if index == 1:
            removed = self.head
            self.head = removed.next
        else:
            before = self.head
            for _ in range(index - 2):
                before = before.next
            removed = before.next
            before.next = removed.next
        self._size -= 1
        return removed.value

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Node | None = None
        node = self.head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self.head = previous

    def sort(self) -> None:
        """Arrange the values in ascending order, keeping the nodes where they are."""
        ordered = sorted(self)
        for node, value in zip(self._nodes(), ordered):
            node.value = value

    def total(self) -> Any:
        """Sum of the values; 0 for an empty list."""
        return sum(self)

    def maximum(self) -> Any:
        """Largest value; raises ``ValueError`` when the list is empty."""
        if self.head is None:
            raise ValueError("maximum of an empty list")
        return max(self)

    def minimum(self) -> Any:
        """Smallest value; raises ``ValueError`` when the list is empty."""
        if self.head is None:
            raise ValueError("minimum of an empty list")
        return min(self)

    def search(self, value: Any) -> Node | None:
        """First node holding ``value``, or ``None``."""
        return next((node for node in self._nodes() if node.value == value), None)

    def search_move_to_front(self, value: Any) -> Node | None:
        """Find the first node holding ``value`` and move it to the head."""
        previous: Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is not None:
                    previous.next = node.next
                    node.next = self.head
                    self.head = node
                return node
            previous = node
        return None

    def reverse_k_group(self, k: int) -> None:
        """Reverse each complete run of ``k`` nodes; a shorter remainder stays as it is."""
        if k <= 0:
            raise ValueError("group size must be positive")
        groups = self._size // k
        node = self.head
        joined_tail: Node | None = None
        for _ in range(groups):
            group_first = node
            previous: Node | None = None
            for _ in range(k):
                following = node.next
                node.next = previous
                previous = node
                node = following
            if joined_tail is None:
                self.head = previous
            else:
                joined_tail.next = previous
            joined_tail = group_first
        if joined_tail is not None:
            joined_tail.next = node

    def is_palindrome(self) -> bool:
        """Tell whether the values read the same from either end."""
        values = list(self)
        return values == values[::-1]