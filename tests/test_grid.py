import pytest

from wander.grid import GridGraph
from wander.types import LEFT, UP, RIGHT, DOWN, opposite


def test_empty_grid_defaults():
    g = GridGraph.empty(2, 3)
    assert (g.rows, g.cols) == (2, 3)
    assert all(g.node_type(c) == 0 for c in g.cells())
    assert g.weight((1, 2), LEFT) == 0.0


def test_neighbor_bounds_and_weight():
    g = GridGraph.empty(2, 2)
    g.set_edge((0, 0), (0, 1), 3.5)
    assert g.neighbor((0, 0), LEFT) is None
    assert g.neighbor((0, 0), UP) is None
    assert g.neighbor((0, 0), RIGHT) == ((0, 1), 3.5)
    assert g.neighbor((0, 0), DOWN) == ((1, 0), 0.0)


def test_set_edge_is_symmetric():
    g = GridGraph.empty(3, 3)
    g.set_edge((1, 1), (0, 1), 4.0)
    assert g.weight((1, 1), UP) == 4.0
    assert g.weight((0, 1), DOWN) == 4.0
    g.set_edge((2, 1), (2, 2), 1.5)
    assert g.weight((2, 1), RIGHT) == g.weight((2, 2), LEFT) == 1.5


def test_set_edge_rejects_non_adjacent():
    g = GridGraph.empty(3, 3)
    with pytest.raises(ValueError):
        g.set_edge((0, 0), (1, 1), 1.0)
    with pytest.raises(IndexError):
        g.set_edge((0, 0), (0, -1), 1.0)


def test_neighbors_order_and_corner():
    g = GridGraph.empty(3, 3)
    dirs = [d for d, _, _ in g.neighbors((1, 1))]
    assert dirs == [LEFT, UP, RIGHT, DOWN]
    assert [c for _, c, _ in g.neighbors((0, 0))] == [(0, 1), (1, 0)]


def test_out_of_bounds_access_raises():
    g = GridGraph.empty(2, 2)
    with pytest.raises(IndexError):
        g.node_type((2, 0))
    with pytest.raises(ValueError):
        g.set_type((0, 0), -3)


def test_random_is_seeded_and_symmetric():
    a = GridGraph.random(8, 6, seed=7)
    b = GridGraph.random(8, 6, seed=7)
    assert a.node_types == b.node_types and a.weights == b.weights
    for c in a.cells():
        for d, nb, w in a.neighbors(c):
            assert a.weight(nb, opposite(d)) == w
            assert 1.0 <= w <= 5.0
