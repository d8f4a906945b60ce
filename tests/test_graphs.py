import pytest

from dsakit.graphs import Graph, articulation_points


def _sample_graph():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(1, 2)
    g.add_edge(2, 0)
    g.add_edge(2, 3)
    g.add_edge(3, 3)
    return g


def test_bfs_sample_from_two():
    assert _sample_graph().bfs(2) == [2, 0, 3, 1]


def test_bfs_visits_each_reachable_once():
    order = _sample_graph().bfs(0)
    assert sorted(order) == [0, 1, 2, 3]
    assert order[0] == 0


def test_bfs_only_reachable_vertices():
    g = Graph(3)
    g.add_edge(1, 2)
    assert g.bfs(0) == [0]


def test_bfs_bad_start():
    with pytest.raises(IndexError):
        _sample_graph().bfs(4)


def test_add_edge_bad_vertex():
    g = Graph(2)
    with pytest.raises(IndexError):
        g.add_edge(-1, 0)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        Graph(-1)


def test_articulation_sample():
    edges = [(1, 2), (1, 3), (3, 2), (1, 4), (4, 5)]
    assert articulation_points(5, edges) == [1, 4]


def test_articulation_chain():
    assert articulation_points(3, [(1, 2), (2, 3)]) == [2]


def test_articulation_cycle_has_none():
    assert articulation_points(4, [(1, 2), (2, 3), (3, 4), (4, 1)]) == []


def test_articulation_star_centre():
    assert articulation_points(4, [(1, 2), (1, 3), (1, 4)]) == [1]


def test_articulation_no_edges():
    assert articulation_points(3, []) == []


def test_articulation_bad_edge():
    with pytest.raises(ValueError):
        articulation_points(3, [(1, 4)])