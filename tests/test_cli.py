import pytest

from itzamna.cli import build_demo_graph, main
from itzamna.mst import boruvka, kruskal


def test_demo_graph_shape():
    graph = build_demo_graph()
    assert graph.num_vertices == 10
    assert graph.num_edges == 12
    assert graph.count_vertices() == 10


def test_demo_graph_payloads():
    graph = build_demo_graph()
    for vertex in graph.vertices:
        expected = 1 if vertex.id % 2 == 0 else 2
        assert vertex.data == expected


def test_demo_graph_degrees_match_edges():
    graph = build_demo_graph()
    assert sum(v.degree for v in graph.vertices) == 2 * graph.num_edges


def test_demo_spanning_tree_weight():
    forest = boruvka(build_demo_graph())
    assert len(forest) == 9
    assert forest.total_weight() == pytest.approx(7.1)


def test_demo_boruvka_agrees_with_kruskal():
    graph = build_demo_graph()
    assert boruvka(graph).total_weight() == pytest.approx(kruskal(graph).total_weight())


def test_main_output(capsys):
    status = main([])
    out = capsys.readouterr().out
    assert status == 0
    assert "Vertices added: 10" in out
    assert "Edges added: 0" in out
    assert "MST edges:" in out
    assert "MST total weight: 7.1" in out
    assert "Visualization successful with correct total weight." in out


def test_main_lists_nine_edges(capsys):
    main([])
    out = capsys.readouterr().out
    edge_lines = [line for line in out.splitlines() if " -- " in line]
    assert len(edge_lines) == 9


def test_main_rejects_unknown_option(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2