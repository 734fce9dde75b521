"""A binary search tree of unique keys with insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["BinarySearchTree"]


@dataclass
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Unique ordered keys; iteration yields them in ascending order."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Add ``key``; return ``False`` if it was already present."""
        if self._root is None:
            self._root = _Node(key)
            self._size = 1
            return True
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key)
                    break
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def delete(self, key: Any) -> bool:
        """Remove ``key``; return ``False`` if it was not present.

        A node with two children takes the key of its in-order successor.
        """
        parent: _Node | None = None
        node = self._root
        while node is not None:
            if key < node.key:
                parent, node = node, node.left
            elif key > node.key:
                parent, node = node, node.right
            else:
                break
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.key = succ.key
            parent, node = succ_parent, succ
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1
        return True

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size