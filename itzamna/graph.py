"""Undirected weighted graphs with adjacency and edge lists, and spanning forests."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple


@dataclass
class Vertex:
    """A vertex with its identifier, degree and attached payload."""

    id: int
    degree: int = 0
    data: Any = None


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertex identifiers."""

    source: int
    target: int
    weight: float


@dataclass(frozen=True)
class Neighbor:
    """An entry of an adjacency list: a neighbouring vertex and the edge weight."""

    id: int
    weight: float


class Graph:
    """A graph over a fixed number of vertex slots.

    Vertices must be added before edges can touch them. Every edge is stored
    in ``edges`` and in the adjacency lists of both endpoints; the
    ``directed`` flag is recorded but edges are always linked both ways.
    """

    def __init__(self, num_vertices: int, directed: bool = False) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self.directed = bool(directed)
        self.vertices: List[Vertex] = [Vertex(i) for i in range(num_vertices)]
        self.edges: List[Edge] = []
        self._adjacency: List[Optional[List[Neighbor]]] = [None] * num_vertices

    @property
    def num_edges(self) -> int:
        """Number of edges added so far."""
        return len(self.edges)

    def _check_index(self, vertex_id: int) -> None:
        if not 0 <= vertex_id < self.num_vertices:
            raise IndexError(f"vertex {vertex_id} is out of range")

    def add_vertex(self, vertex_id: int, data: Any = None) -> Vertex:
        """Activate a vertex slot.

        The payload is only set if the vertex has none yet. Adding a vertex
        again starts its adjacency list afresh.
        """
        self._check_index(vertex_id)
        vertex = self.vertices[vertex_id]
        if vertex.data is None:
            vertex.data = data
            vertex.id = vertex_id
        self._adjacency[vertex_id] = []
        return vertex

    def add_edge(self, source: int, target: int, weight: float) -> Edge:
        """Connect two added vertices; a self-loop is listed once but counts twice in the degree."""
        for vertex_id in (source, target):
            self._check_index(vertex_id)
            if self._adjacency[vertex_id] is None:
                raise ValueError(f"vertex {vertex_id} has not been added")
        edge = Edge(source, target, weight)
        self.edges.append(edge)
        self._adjacency[source].append(Neighbor(target, weight))
        if source != target:
            self._adjacency[target].append(Neighbor(source, weight))
        self.vertices[source].degree += 1
        self.vertices[target].degree += 1
        return edge

    def has_vertex(self, vertex_id: int) -> bool:
        """Return whether the vertex slot has been added."""
        if not 0 <= vertex_id < self.num_vertices:
            return False
        return self._adjacency[vertex_id] is not None

    def get_vertex(self, vertex_id: int) -> Vertex:
        """Return the vertex record in slot ``vertex_id``."""
        self._check_index(vertex_id)
        return self.vertices[vertex_id]

    def neighbors(self, vertex_id: int) -> Tuple[Neighbor, ...]:
        """Return the vertex's adjacency list in insertion order."""
        self._check_index(vertex_id)
        return tuple(self._adjacency[vertex_id] or ())

    def degree(self, vertex_id: int) -> int:
        """Return the number of edge endpoints at the vertex."""
        self._check_index(vertex_id)
        return self.vertices[vertex_id].degree

    def count_vertices(self) -> int:
        """Return how many vertex slots have been added."""
        return sum(1 for neighbors in self._adjacency if neighbors is not None)

    def is_simple(self) -> bool:
        """Return whether the graph has no self-loops and no parallel edges."""
        seen = set()
        for edge in self.edges:
            if edge.source == edge.target:
                return False
            pair = frozenset((edge.source, edge.target))
            if pair in seen:
                return False
            seen.add(pair)
        return True

    def is_complete(self) -> bool:
        """Return whether the graph is simple with every vertex joined to every other."""
        if self.num_vertices == 0:
            return True
        if not self.is_simple():
            return False
        return all(v.degree == self.num_vertices - 1 for v in self.vertices)

    def random_fill(
        self,
        num_edges: int,
        max_weight: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Add ``num_edges`` edges between random distinct vertices with weights in [0, max_weight]."""
        if num_edges > 0 and self.num_vertices < 2:
            raise ValueError("random edges need at least two vertices")
        source_of = rng if rng is not None else random
        added = 0
        while added < num_edges:
            source = source_of.randrange(self.num_vertices)
            target = source_of.randrange(self.num_vertices)
            if source != target:
                self.add_edge(source, target, source_of.random() * max_weight)
                added += 1

    def add_grid(
        self, rows: int, cols: int, rng: Optional[random.Random] = None
    ) -> None:
        """Join vertices laid out row by row into a grid with random weights in [0, 0.99]."""
        if rows < 0 or cols < 0 or rows * cols > self.num_vertices:
            raise ValueError("grid does not fit into the graph's vertices")
        source_of = rng if rng is not None else random
        for r in range(rows):
            for c in range(cols):
                vertex_id = r * cols + c
                if c + 1 < cols:
                    self.add_edge(vertex_id, vertex_id + 1, source_of.randrange(100) / 100.0)
                if r + 1 < rows:
                    self.add_edge(vertex_id, vertex_id + cols, source_of.randrange(100) / 100.0)

    def format_adjacency(self) -> str:
        """Render each vertex's list, headed by the vertex itself, one line per slot."""
        lines = []
        for vertex_id, neighbors in enumerate(self._adjacency):
            if neighbors is None:
                lines.append("")
                continue
            nodes = [Neighbor(vertex_id, 0.0), *neighbors]
            lines.append("".join(f"{{{n.id}}}, {n.weight:f} " for n in nodes))
        return "".join(line + "\n" for line in lines)


class SpanningForest:
    """The edges chosen by a spanning tree algorithm, at most one fewer than the vertices."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self.edges: List[Edge] = []

    @property
    def capacity(self) -> int:
        """Largest number of edges the forest can hold."""
        return max(0, self.num_vertices - 1)

    def add_edge(self, source: int, target: int, weight: float) -> Edge:
        """Append an edge to the forest."""
        if len(self.edges) >= self.capacity:
            raise ValueError(
                f"a forest over {self.num_vertices} vertices holds at most {self.capacity} edges"
            )
        edge = Edge(source, target, weight)
        self.edges.append(edge)
        return edge

    def total_weight(self) -> float:
        """Return the sum of the edge weights."""
        return sum(edge.weight for edge in self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)