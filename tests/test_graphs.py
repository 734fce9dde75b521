import pytest

from algodrills.graphs import Graph

SOURCE_TREE = [(0, 1), (0, 2), (1, 3), (2, 4)]


def test_neighbours_are_undirected_and_ordered():
    g = Graph([(1, 2), (1, 3)])
    assert g.neighbours(1) == [2, 3]
    assert g.neighbours(2) == [1]
    assert g.neighbours(99) == []


def test_add_edge_extends_both_sides():
    g = Graph()
    g.add_edge("a", "b")
    assert g.neighbours("a") == ["b"]
    assert g.neighbours("b") == ["a"]


def test_bfs_source_example():
    g = Graph(SOURCE_TREE)
    assert g.bfs(0) == [(0, 1), (0, 2), (1, 3), (2, 4)]


def test_bfs_reaches_each_vertex_once():
    g = Graph([(0, 1), (1, 2), (2, 0), (2, 3), (5, 6)])
    visited = set()
    tree = g.bfs(0, visited)
    children = [child for _, child in tree]
    assert len(children) == len(set(children))
    assert set(children) == {1, 2, 3}
    assert visited == {0, 1, 2, 3}


def test_bfs_parent_seen_before_child():
    g = Graph([(0, 1), (1, 2), (2, 3), (0, 4), (4, 3)])
    seen = {0}
    for parent, child in g.bfs(0):
        assert parent in seen
        seen.add(child)


def test_bfs_forest_starts_new_walks():
    g = Graph([(0, 2), (2, 1), (4, 3)])
    forest = g.bfs_forest(range(5))
    assert [source for source, _ in forest] == [0, 3]
    covered = {source for source, _ in forest}
    for _, edges in forest:
        covered.update(child for _, child in edges)
    assert covered == set(range(5))


def test_dfs_source_example():
    g = Graph(SOURCE_TREE)
    assert g.dfs(0) == [0, 1, 3, 2, 4]


def test_dfs_each_vertex_follows_a_neighbour():
    g = Graph([(0, 1), (1, 2), (0, 3), (3, 4), (4, 1), (7, 8)])
    order = g.dfs(0)
    assert order[0] == 0
    assert set(order) == {0, 1, 2, 3, 4}
    for i, vertex in enumerate(order[1:], start=1):
        assert any(n in order[:i] for n in g.neighbours(vertex))


def test_dfs_handles_long_paths():
    g = Graph((i, i + 1) for i in range(5000))
    assert g.dfs(0) == list(range(5001))


@pytest.mark.parametrize(
    "edges, expected",
    [
        ([(1, 2), (2, 3), (3, 1)], True),
        ([(1, 2), (2, 3), (3, 4)], False),
        ([(1, 2), (3, 4), (4, 5), (5, 3)], True),
        ([(1, 1)], True),
        ([], False),
    ],
)
def test_has_cycle(edges, expected):
    g = Graph(edges)
    assert g.has_cycle(range(1, 6)) is expected


def test_connected_components_partition():
    g = Graph([(1, 2), (3, 4), (2, 5), (6, 7)])
    components = g.connected_components(range(1, 9))
    flat = [v for comp in components for v in comp]
    assert sorted(flat) == list(range(1, 9))
    assert len(components) == 4
    for comp in components:
        assert set(g.dfs(comp[0])) == set(comp)