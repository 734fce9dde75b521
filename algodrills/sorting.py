"""Merge sort and quick sort returning new sorted lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["merge_sort", "quick_sort"]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a stably sorted list of ``items`` using top-down merge sort."""
    data = list(items)
    if len(data) <= 1:
        return data
    mid = (len(data) - 1) // 2 + 1
    return _merge(merge_sort(data[:mid]), merge_sort(data[mid:]))


def _partition(arr: list[Any], low: int, high: int) -> int:
    pivot = arr[low]
    i, j = low, high
    while i < j:
        while i < high and arr[i] <= pivot:
            i += 1
        while j > low and arr[j] > pivot:
            j -= 1
        if i < j:
            arr[i], arr[j] = arr[j], arr[i]
    arr[low], arr[j] = arr[j], arr[low]
    return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted list of ``items`` using quick sort with the first element as pivot."""
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(data, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return data