"""Command that builds a demonstration graph and draws its minimum spanning tree."""

from __future__ import annotations

import argparse
import math
import time
from typing import List, Optional, Sequence

from .asciiviz import render_forest
from .graph import Graph
from .mst import boruvka

DEMO_VERTICES = 10
EXPECTED_TOTAL = 7.1

_DEMO_EDGES = (
    (0, 1, 1.0),
    (1, 2, 0.5),
    (2, 3, 1.0),
    (3, 0, 1.0),
    (4, 0, 0.1),
    (5, 4, 1.0),
    (5, 7, 1.0),
    (7, 1, 1.0),
    (6, 7, 1.0),
    (6, 8, 1.0),
    (9, 8, 0.5),
    (6, 9, 1.0),
)


def _add_demo_vertices(graph: Graph) -> None:
    for vertex_id in range(DEMO_VERTICES):
        graph.add_vertex(vertex_id, 1 if vertex_id % 2 == 0 else 2)


def _add_demo_edges(graph: Graph) -> None:
    for source, target, weight in _DEMO_EDGES:
        graph.add_edge(source, target, weight)


def build_demo_graph() -> Graph:
    """Return the ten-vertex demonstration graph with all its edges added.

    Even vertices carry the payload 1, odd vertices the payload 2.
    """
    graph = Graph(DEMO_VERTICES, False)
    _add_demo_vertices(graph)
    _add_demo_edges(graph)
    return graph


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="itzamna",
        description="Build a demonstration graph and draw its minimum spanning tree.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration and return the exit status."""
    _parse_args(argv)
    graph = Graph(DEMO_VERTICES, False)
    _add_demo_vertices(graph)
    print(f"Vertices added: {graph.num_vertices}")
    print(f"Edges added: {graph.num_edges}")
    _add_demo_edges(graph)

    start = time.perf_counter()
    forest = boruvka(graph)
    elapsed = time.perf_counter() - start
    print(f"Boruvka's algorithm took {elapsed:.2f} seconds")

    output: List[str] = [render_forest(forest)]
    print("".join(output), end="")
    if math.isclose(forest.total_weight(), EXPECTED_TOTAL):
        print("Visualization successful with correct total weight.")
    else:
        print("Visualization completed but total weight mismatch.")
    print()
    return 0