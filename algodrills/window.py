"""Sliding-window first negatives and a prime search by common remainder."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from math import isqrt

__all__ = ["first_negatives", "is_prime", "smallest_prime_with_remainder"]

_SEARCH_LIMIT = 10_000_000_000


def first_negatives(items: Sequence[int], k: int) -> list[int]:
    """First negative number of each window of size ``k``, or 0 where there is none."""
    if k <= 0:
        raise ValueError("window size must be positive")
    negatives: deque[int] = deque()
    result: list[int] = []
    for end, item in enumerate(items):
        if item < 0:
            negatives.append(item)
        start = end - k + 1
        if start < 0:
            continue
        result.append(negatives[0] if negatives else 0)
        if items[start] < 0:
            negatives.popleft()
    return result


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime by trial division."""
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    return all(n % d for d in range(3, isqrt(n) + 1, 2))


def smallest_prime_with_remainder(numbers: Sequence[int]) -> int | None:
    """Smallest prime above the least number that leaves it as remainder for every other number.

    Returns ``None`` when no such prime exists below ten billion.
    """
    if not numbers:
        raise ValueError("at least one number is required")
    least = min(numbers)
    divisors = [num for num in numbers if num != least]
    for candidate in range(least + 1, _SEARCH_LIMIT):
        if is_prime(candidate) and all(candidate % num == least for num in divisors):
            return candidate
    return None