import pytest

from algodrills.trees import subtree_stats, tree_shape

TREE = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (6, 7), (6, 8)]
VERTICES = range(1, 9)


def _children(edges, root):
    shape = tree_shape(edges, root)
    result = {v: [] for v in shape.depth}
    for u, v in edges:
        if shape.depth[u] < shape.depth[v]:
            result[u].append(v)
        else:
            result[v].append(u)
    return result


def test_root_sum_covers_whole_tree():
    stats = subtree_stats(TREE)
    assert stats.sums[1] == sum(VERTICES)
    assert stats.even_counts[1] == len([v for v in VERTICES if v % 2 == 0])


def test_sum_is_vertex_plus_children():
    stats = subtree_stats(TREE)
    for vertex, kids in _children(TREE, 1).items():
        assert stats.sums[vertex] == vertex + sum(stats.sums[k] for k in kids)
        assert stats.even_counts[vertex] == (vertex % 2 == 0) + sum(
            stats.even_counts[k] for k in kids
        )


def test_leaves_hold_only_themselves():
    stats = subtree_stats(TREE)
    for leaf in (4, 5, 7, 8):
        assert stats.sums[leaf] == leaf
        assert stats.even_counts[leaf] == (leaf % 2 == 0)


def test_path_shape():
    shape = tree_shape([(1, 2), (2, 3)])
    assert shape.depth == {1: 0, 2: 1, 3: 2}
    assert shape.height == {1: 2, 2: 1, 3: 0}


def test_shape_invariants():
    shape = tree_shape(TREE)
    kids = _children(TREE, 1)
    assert shape.depth[1] == 0
    assert shape.height[1] == max(shape.depth.values())
    for vertex, children in kids.items():
        for child in children:
            assert shape.depth[child] == shape.depth[vertex] + 1
        expected = max((shape.height[c] + 1 for c in children), default=0)
        assert shape.height[vertex] == expected


def test_other_root():
    shape = tree_shape(TREE, root=7)
    assert shape.depth[7] == 0
    assert shape.depth[1] == 3


def test_cycle_rejected():
    with pytest.raises(ValueError):
        tree_shape([(1, 2), (2, 3), (3, 1)])
    with pytest.raises(ValueError):
        subtree_stats([(1, 2), (2, 3), (3, 1)])