"""Rooted-tree precomputation: subtree sums, even counts, depths and heights."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["SubtreeStats", "TreeShape", "subtree_stats", "tree_shape"]


@dataclass(frozen=True)
class SubtreeStats:
    """Per-vertex sum of the subtree's vertices and count of its even vertices."""

    sums: dict[int, int]
    even_counts: dict[int, int]


@dataclass(frozen=True)
class TreeShape:
    """Per-vertex depth below the root and height above the deepest leaf."""

    depth: dict[int, int]
    height: dict[int, int]


def _walk(edges: Iterable[tuple[int, int]], root: int) -> tuple[list[int], dict[int, int | None]]:
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    parent: dict[int, int | None] = {root: None}
    order: list[int] = []
    stack = [root]
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        for child in adjacency[vertex]:
            if child == parent[vertex]:
                continue
            if child in parent:
                raise ValueError("edges do not form a tree")
            parent[child] = vertex
            stack.append(child)
    return order, parent


def subtree_stats(edges: Iterable[tuple[int, int]], root: int = 1) -> SubtreeStats:
    """Subtree sums and even-vertex counts for every vertex reachable from ``root``."""
    order, parent = _walk(edges, root)
    sums = {v: v for v in order}
    evens = {v: int(v % 2 == 0) for v in order}
    for vertex in reversed(order):
        up = parent[vertex]
        if up is not None:
            sums[up] += sums[vertex]
            evens[up] += evens[vertex]
    return SubtreeStats(sums=sums, even_counts=evens)


def tree_shape(edges: Iterable[tuple[int, int]], root: int = 1) -> TreeShape:
    """Depth and height of every vertex reachable from ``root``."""
    order, parent = _walk(edges, root)
    depth = {root: 0}
    for vertex in order[1:]:
        depth[vertex] = depth[parent[vertex]] + 1
    height = {v: 0 for v in order}
    for vertex in reversed(order):
        up = parent[vertex]
        if up is not None:
            height[up] = max(height[up], height[vertex] + 1)
    return TreeShape(depth=depth, height=height)