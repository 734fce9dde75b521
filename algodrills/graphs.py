"""Undirected graphs: breadth-first and depth-first walks, cycles, components."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Hashable, Iterable

__all__ = ["Graph"]

_NO_PARENT = object()


class Graph:
    """An undirected graph kept as adjacency lists in edge insertion order."""

    def __init__(self, edges: Iterable[tuple[Hashable, Hashable]] = ()) -> None:
        self._adjacency: defaultdict[Hashable, list[Hashable]] = defaultdict(list)
        for u, v in edges:
            self.add_edge(u, v)

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """Join ``u`` and ``v`` in both directions."""
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbours(self, vertex: Hashable) -> list[Hashable]:
        """Neighbours of ``vertex`` in the order their edges were added."""
        return list(self._adjacency.get(vertex, ()))

    def _children(self, vertex: Hashable) -> list[Hashable]:
        return self._adjacency.get(vertex, [])

    def bfs(
        self, start: Hashable, visited: set[Hashable] | None = None
    ) -> list[tuple[Hashable, Hashable]]:
        """Breadth-first walk from ``start``, returning (parent, child) tree edges.

        ``visited`` is updated in place when given, so several walks can share it.
        """
        if visited is None:
            visited = set()
        visited.add(start)
        queue = deque([start])
        tree: list[tuple[Hashable, Hashable]] = []
        while queue:
            current = queue.popleft()
            for child in self._children(current):
                if child not in visited:
                    visited.add(child)
                    tree.append((current, child))
                    queue.append(child)
        return tree

    def bfs_forest(
        self, vertices: Iterable[Hashable]
    ) -> list[tuple[Hashable, list[tuple[Hashable, Hashable]]]]:
        """Start a breadth-first walk at each vertex not yet reached.

        Returns one ``(source, tree_edges)`` pair per walk.
        """
        visited: set[Hashable] = set()
        forest = []
        for vertex in vertices:
            if vertex not in visited:
                forest.append((vertex, self.bfs(vertex, visited)))
        return forest

    def _preorder(self, start: Hashable, visited: set[Hashable]) -> list[Hashable]:
        visited.add(start)
        order = [start]
        stack = [iter(self._children(start))]
        while stack:
            for child in stack[-1]:
                if child not in visited:
                    visited.add(child)
                    order.append(child)
                    stack.append(iter(self._children(child)))
                    break
            else:
                stack.pop()
        return order

    def dfs(self, start: Hashable) -> list[Hashable]:
        """Vertices reached from ``start`` in depth-first order of entry."""
        return self._preorder(start, set())

    def _cycle_from(self, root: Hashable, visited: set[Hashable]) -> bool:
        visited.add(root)
        stack = [(root, _NO_PARENT, iter(self._children(root)))]
        while stack:
            vertex, parent, children = stack[-1]
            for child in children:
                if child == parent:
                    continue
                if child in visited:
                    return True
                visited.add(child)
                stack.append((child, vertex, iter(self._children(child))))
                break
            else:
                stack.pop()
        return False

    def has_cycle(self, vertices: Iterable[Hashable]) -> bool:
        """Tell whether any component holding one of ``vertices`` has a cycle."""
        visited: set[Hashable] = set()
        for vertex in vertices:
            if vertex not in visited and self._cycle_from(vertex, visited):
                return True
        return False

    def connected_components(self, vertices: Iterable[Hashable]) -> list[list[Hashable]]:
        """Components reached from ``vertices``, each in depth-first order."""
        visited: set[Hashable] = set()
        components = []
        for vertex in vertices:
            if vertex not in visited:
                components.append(self._preorder(vertex, visited))
        return components