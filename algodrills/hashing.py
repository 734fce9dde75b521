"""A hash table resolving collisions by sorted chains."""

from __future__ import annotations

from bisect import bisect_left, insort_left

__all__ = ["hash_key", "ChainedHashTable"]

_DEFAULT_SIZE = 10


def hash_key(key: int) -> int:
    """Bucket of ``key`` in a table of the default size of ten."""
    return key % _DEFAULT_SIZE


class ChainedHashTable:
    """Integer keys hashed by remainder into buckets kept in ascending order."""

    def __init__(self, size: int = _DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _index(self, key: int) -> int:
        return key % self.size

    def insert(self, key: int) -> None:
        """Add ``key`` to its chain, keeping the chain sorted; duplicates are kept."""
        insort_left(self._buckets[self._index(key)], key)

    def search(self, key: int) -> int | None:
        """Return the stored key equal to ``key``, or ``None`` if absent."""
        chain = self._buckets[self._index(key)]
        pos = bisect_left(chain, key)
        if pos < len(chain) and chain[pos] == key:
            return chain[pos]
        return None

    def bucket(self, index: int) -> tuple[int, ...]:
        """Keys in the chain at ``index``, in ascending order."""
        return tuple(self._buckets[index])

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None