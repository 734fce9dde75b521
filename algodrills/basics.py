"""Small numeric and string exercises: base conversion, recursion, powers."""

from __future__ import annotations

from functools import lru_cache

__all__ = [
    "binary_to_decimal",
    "factorial",
    "fibonacci",
    "power",
    "is_palindrome",
]


def binary_to_decimal(s: str) -> int:
    """Return the value of the binary digit string ``s``.

    An empty string is worth 0. Any character other than ``0`` or ``1``
    raises ``ValueError``.
    """
    value = 0
    for position, char in enumerate(s):
        if char not in "01":
            raise ValueError(f"not a binary digit at position {position}: {char!r}")
        value = value * 2 + (char == "1")
    return value


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer ``n``."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` up to 1 return ``n``."""
    if n <= 1:
        return n
    return _fib(n)


def power(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring.

    Negative exponents invert ``x`` first; ``x == 0`` with a negative
    exponent raises ``ZeroDivisionError``.
    """
    if n == 0:
        return 1.0
    if n < 0:
        x = 1 / x
        n = -n
    result = 1.0
    base = float(x)
    while n:
        if n & 1:
            result *= base
        base *= base
        n >>= 1
    return result


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters of ``s`` read the same both ways, ignoring case."""
    letters = [c.lower() for c in s if c.isascii() and c.isalpha()]
    return letters == letters[::-1]