import pytest

from wander.grid import GridGraph
from wander.loaders import (Scenario, read_nodes, read_edges, read_objectives,
                            load_scenario, save_scenario)
from wander.navigator import Objective
from wander.types import UP, DOWN, LEFT, RIGHT


def test_read_nodes_defaults_to_open():
    g = read_nodes(["3 4\n", "0 1 1\n", "2 3 5\n", "\n"])
    assert (g.rows, g.cols) == (3, 4)
    assert g.node_type((0, 1)) == 1
    assert g.node_type((2, 3)) == 5
    assert g.node_type((1, 1)) == 0


def test_read_nodes_errors():
    with pytest.raises(ValueError, match="integer"):
        read_nodes(["2 2", "0 x 1"])
    with pytest.raises(ValueError, match="outside"):
        read_nodes(["2 2", "5 0 1"])
    with pytest.raises(ValueError, match="incomplete"):
        read_nodes(["2 2", "0 0"])
    with pytest.raises(ValueError, match="size"):
        read_nodes([])


def test_read_edges_is_symmetric():
    g = GridGraph.empty(2, 2)
    read_edges(["0-0,0-1 2.5\n", "1-1,0-1 4\n", "\n"], g)
    assert g.weight((0, 0), RIGHT) == g.weight((0, 1), LEFT) == 2.5
    assert g.weight((1, 1), UP) == g.weight((0, 1), DOWN) == 4.0
    assert g.weight((0, 0), DOWN) == 0.0


def test_read_edges_errors_carry_line_numbers():
    g = GridGraph.empty(2, 2)
    with pytest.raises(ValueError, match=r"<edges>:2"):
        read_edges(["0-0,0-1 1", "0-0,1-1 1"], g)
    with pytest.raises(ValueError, match=r"<edges>:1"):
        read_edges(["0-0;0-1 1"], g)
    with pytest.raises(ValueError):
        read_edges(["0-0,0-1 abc"], g)


def test_read_objectives_with_offers():
    radius, start, objs = read_objectives(["2\n", "0 0\n", "3 4\n", "1 1 2 5\n", "\n", "0 2 7\n"])
    assert radius == 2
    assert start == (0, 0)
    assert objs == [
        Objective((3, 4), None),
        Objective((1, 1), (2, 5)),
        Objective((0, 2), (7,)),
    ]


def test_read_objectives_header_on_one_line():
    radius, start, objs = read_objectives(["3 1 2", "0 0"])
    assert (radius, start, objs) == (3, (1, 2), [Objective((0, 0))])


def test_read_objectives_errors():
    with pytest.raises(ValueError):
        read_objectives(["2"])
    with pytest.raises(ValueError, match="destX"):
        read_objectives(["2", "0 0", "4"])


def test_save_then_load(tmp_path):
    g = GridGraph.random(5, 4, seed=3)
    sc = Scenario(g, 2, (0, 0), [Objective((4, 3), (2, 3)), Objective((0, 1))])
    paths = save_scenario(sc, str(tmp_path / "sc"))
    back = load_scenario(*paths)
    assert back.grid.node_types == g.node_types
    assert back.grid.weights == g.weights
    assert (back.radius, back.start, back.objectives) == (sc.radius, sc.start, sc.objectives)
