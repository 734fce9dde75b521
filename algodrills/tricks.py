"""Puzzles: counting without an explicit loop, and one block taking both branches."""

from __future__ import annotations

from typing import ClassVar

__all__ = ["Ticker", "count_up", "if_else_lines"]


class Ticker:
    """Each new instance advances a counter shared by the whole class."""

    count: ClassVar[int] = 0

    def __init__(self) -> None:
        Ticker.count += 1
        self.number = Ticker.count

    @classmethod
    def _reset(cls) -> None:
        cls.count = 0


def count_up(limit: int) -> list[int]:
    """Numbers 1 to ``limit``, each produced by creating a fresh ``Ticker``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    Ticker._reset()
    return [ticker.number for ticker in map(lambda _: Ticker(), range(limit))]


def if_else_lines(start: int = 5) -> list[str]:
    """Lines printed as a counter falls from ``start``: the if branch above 3, else below."""
    lines = []
    x = start
    while x > 0:
        x -= 1
        lines.append("If Printed" if x > 3 else "Else Printed")
    return lines