import random

import pytest

from itzamna.graph import Edge, Graph, Neighbor, SpanningForest


def _graph(n, added=None):
    g = Graph(n, False)
    for i in range(n if added is None else added):
        g.add_vertex(i, None)
    return g


def test_add_vertex_out_of_range_raises():
    g = Graph(3, False)
    with pytest.raises(IndexError):
        g.add_vertex(3, None)


def test_add_edge_needs_added_vertices():
    g = _graph(3, added=1)
    with pytest.raises(ValueError):
        g.add_edge(0, 2, 1.0)
    assert g.num_edges == 0


def test_add_edge_links_both_endpoints():
    g = _graph(3)
    edge = g.add_edge(0, 2, 2.5)
    assert edge == Edge(0, 2, 2.5)
    assert g.edges == [edge]
    assert g.neighbors(0) == (Neighbor(2, 2.5),)
    assert g.neighbors(2) == (Neighbor(0, 2.5),)
    assert g.degree(0) == 1 and g.degree(2) == 1 and g.degree(1) == 0


def test_self_loop_listed_once_counted_twice():
    g = _graph(2)
    g.add_edge(1, 1, 0.75)
    assert g.neighbors(1) == (Neighbor(1, 0.75),)
    assert g.degree(1) == 2


def test_has_vertex_and_count():
    g = _graph(4, added=2)
    assert g.has_vertex(0) and g.has_vertex(1)
    assert not g.has_vertex(3)
    assert not g.has_vertex(10)
    assert g.count_vertices() == 2


def test_readding_vertex_keeps_first_data_and_clears_neighbours():
    g = Graph(2, False)
    g.add_vertex(0, "first")
    g.add_vertex(1, None)
    g.add_edge(0, 1, 1.0)
    g.add_vertex(0, "second")
    assert g.get_vertex(0).data == "first"
    assert g.neighbors(0) == ()
    assert g.neighbors(1) == (Neighbor(0, 1.0),)


def test_get_vertex_and_degree_out_of_range():
    g = _graph(2)
    with pytest.raises(IndexError):
        g.get_vertex(2)
    with pytest.raises(IndexError):
        g.degree(-1)


def test_is_simple_detects_loops_and_parallel_edges():
    g = _graph(3)
    g.add_edge(0, 1, 1.0)
    g.add_edge(1, 2, 1.0)
    assert g.is_simple()
    g.add_edge(1, 0, 3.0)
    assert not g.is_simple()

    loop = _graph(2)
    loop.add_edge(0, 0, 1.0)
    assert not loop.is_simple()
    assert Graph(0, False).is_simple()


def test_is_complete():
    triangle = _graph(3)
    for a, b in [(0, 1), (1, 2), (2, 0)]:
        triangle.add_edge(a, b, 1.0)
    assert triangle.is_complete()

    path = _graph(3)
    path.add_edge(0, 1, 1.0)
    path.add_edge(1, 2, 1.0)
    assert not path.is_complete()
    assert Graph(0, False).is_complete()


def test_random_fill_adds_distinct_endpoint_edges():
    g = _graph(6)
    g.random_fill(25, 4.0, random.Random(7))
    assert g.num_edges == 25
    assert all(e.source != e.target for e in g.edges)
    assert all(0.0 <= e.weight <= 4.0 for e in g.edges)
    assert sum(g.degree(i) for i in range(6)) == 2 * 25


def test_random_fill_is_reproducible_with_seed():
    a, b = _graph(5), _graph(5)
    a.random_fill(10, 1.0, random.Random(42))
    b.random_fill(10, 1.0, random.Random(42))
    assert a.edges == b.edges


def test_random_fill_needs_two_vertices():
    g = _graph(1)
    with pytest.raises(ValueError):
        g.random_fill(1, 1.0, random.Random(0))


def test_add_grid_connects_right_and_down_neighbours():
    rows, cols = 2, 3
    g = _graph(rows * cols)
    g.add_grid(rows, cols, random.Random(3))
    assert g.num_edges == rows * (cols - 1) + (rows - 1) * cols
    for e in g.edges:
        assert e.target - e.source in (1, cols)
        assert 0.0 <= e.weight <= 0.99
        assert round(e.weight * 100) == pytest.approx(e.weight * 100)


def test_add_grid_too_large_raises():
    g = _graph(4)
    with pytest.raises(ValueError):
        g.add_grid(3, 3, random.Random(0))


def test_format_adjacency_lists_heads_and_neighbours():
    g = _graph(2)
    g.add_edge(0, 1, 1.5)
    assert g.format_adjacency() == (
        "{0}, 0.000000 {1}, 1.500000 \n{1}, 0.000000 {0}, 1.500000 \n"
    )


def test_format_adjacency_blank_line_for_missing_vertex():
    g = _graph(2, added=1)
    assert g.format_adjacency() == "{0}, 0.000000 \n\n"


def test_spanning_forest_collects_edges():
    weights = [0.5, 1.5, 0.25]
    forest = SpanningForest(4)
    for i, w in enumerate(weights):
        forest.add_edge(i, i + 1, w)
    assert len(forest) == len(weights)
    assert [e.weight for e in forest] == weights
    assert forest.total_weight() == pytest.approx(sum(weights))


def test_spanning_forest_rejects_too_many_edges():
    forest = SpanningForest(2)
    forest.add_edge(0, 1, 1.0)
    with pytest.raises(ValueError):
        forest.add_edge(1, 0, 1.0)
    with pytest.raises(ValueError):
        SpanningForest(0).add_edge(0, 0, 1.0)