"""0/1 knapsack in three styles and the longest increasing subsequence."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

__all__ = [
    "knapsack_recursive",
    "knapsack_memo",
    "knapsack_table",
    "longest_increasing_subsequence",
]


def _check(weights: Sequence[int], values: Sequence[int], capacity: int) -> None:
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def knapsack_recursive(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value within ``capacity`` by plain include/exclude recursion."""
    _check(weights, values, capacity)

    def solve(room: int, n: int) -> int:
        if n == 0 or room == 0:
            return 0
        skip = solve(room, n - 1)
        if weights[n - 1] <= room:
            return max(values[n - 1] + solve(room - weights[n - 1], n - 1), skip)
        return skip

    return solve(capacity, len(weights))


def knapsack_memo(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value within ``capacity`` by memoised recursion."""
    _check(weights, values, capacity)

    @lru_cache(maxsize=None)
    def solve(room: int, n: int) -> int:
        if n == 0 or room == 0:
            return 0
        skip = solve(room, n - 1)
        if weights[n - 1] <= room:
            return max(values[n - 1] + solve(room - weights[n - 1], n - 1), skip)
        return skip

    return solve(capacity, len(weights))


def knapsack_table(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value within ``capacity`` by a bottom-up table."""
    _check(weights, values, capacity)
    previous = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        current = [0] * (capacity + 1)
        for room in range(1, capacity + 1):
            if weight <= room:
                current[room] = max(value + previous[room - weight], previous[room])
            else:
                current[room] = previous[room]
        previous = current
    return previous[capacity]


def longest_increasing_subsequence(items: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence; 0 for no items."""
    lengths: list[int] = []
    for i, item in enumerate(items):
        best = 1
        for earlier, length in zip(items[:i], lengths):
            if earlier < item:
                best = max(best, length + 1)
        lengths.append(best)
    return max(lengths, default=0)