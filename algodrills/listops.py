"""Operations that combine two singly linked lists."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain
from typing import Any

from algodrills.linkedlist import LinkedList

__all__ = ["concatenate", "merge_sorted"]

_END = object()


def concatenate(first: Iterable[Any], second: Iterable[Any]) -> LinkedList:
    """A new list holding the values of ``first`` followed by those of ``second``."""
    return LinkedList(chain(first, second))


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> LinkedList:
    """Merge two ascending sequences into one ascending linked list.

    On equal values the one from ``first`` comes first.
    """
    left, right = iter(first), iter(second)
    a = next(left, _END)
    b = next(right, _END)
    merged: list[Any] = []
    while a is not _END and b is not _END:
        if a <= b:
            merged.append(a)
            a = next(left, _END)
        else:
            merged.append(b)
            b = next(right, _END)
    if a is not _END:
        merged.append(a)
        merged.extend(left)
    if b is not _END:
        merged.append(b)
        merged.extend(right)
    return LinkedList(merged)