"""Arithmetic on lists: long-number addition by digits and polynomial addition."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import zip_longest

__all__ = ["Term", "digits_of", "add_long_numbers", "add_polynomials", "format_polynomial"]

_END = object()


@dataclass(frozen=True)
class Term:
    """One polynomial term ``coeff * x ** power``."""

    coeff: int
    power: int


def digits_of(number: int) -> list[int]:
    """Decimal digits of ``number``, least significant first; 0 gives no digits."""
    if number < 0:
        raise ValueError("number must not be negative")
    digits = []
    while number > 0:
        number, digit = divmod(number, 10)
        digits.append(digit)
    return digits


def add_long_numbers(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Add two numbers given as digits, least significant first.

    The sum comes back most significant digit first; two empty inputs give ``[0]``.
    """
    for digit in (*first, *second):
        if not 0 <= digit <= 9:
            raise ValueError(f"not a decimal digit: {digit!r}")
    if not first and not second:
        return [0]
    result: list[int] = []
    carry = 0
    for a, b in zip_longest(first, second, fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    result.reverse()
    return result


def add_polynomials(first: Iterable[Term], second: Iterable[Term]) -> list[Term]:
    """Add two polynomials whose terms run in descending power.

    Terms of equal power are combined; all terms are kept, even zero ones.
    """
    left, right = iter(first), iter(second)
    p = next(left, _END)
    q = next(right, _END)
    result: list[Term] = []
    while p is not _END and q is not _END:
        if p.power == q.power:
            result.append(Term(p.coeff + q.coeff, p.power))
            p = next(left, _END)
            q = next(right, _END)
        elif p.power > q.power:
            result.append(p)
            p = next(left, _END)
        else:
            result.append(q)
            q = next(right, _END)
    if p is not _END:
        result.append(p)
        result.extend(left)
    if q is not _END:
        result.append(q)
        result.extend(right)
    return result


def format_polynomial(terms: Iterable[Term]) -> str:
    """Render terms as ``3x^2+5x^1``; no terms render as ``0``."""
    text = "+".join(f"{t.coeff}x^{t.power}" for t in terms)
    return text or "0"