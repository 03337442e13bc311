"""Minimum spanning tree algorithms over :class:`~itzamna.graph.Graph`."""

from __future__ import annotations

import math
import warnings
from typing import Dict, Iterable, List

from .graph import Edge, Graph, SpanningForest
from .minheap import MinHeap


class DisjointSet:
    """Union-find over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return whether they were separate."""
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return False
        if self.rank[a] < self.rank[b]:
            self.parent[a] = b
        elif self.rank[a] > self.rank[b]:
            self.parent[b] = a
        else:
            self.parent[b] = a
            self.rank[a] += 1
        return True


def sort_edges(edges: Iterable[Edge]) -> List[Edge]:
    """Return the edges ordered by weight; edges of equal weight keep their order."""
    return sorted(edges, key=lambda edge: edge.weight)


def kruskal(graph: Graph) -> SpanningForest:
    """Build a minimum spanning forest by taking the lightest edges that join two trees."""
    forest = SpanningForest(graph.num_vertices)
    if not graph.edges:
        return forest
    sets = DisjointSet(graph.num_vertices)
    for edge in sort_edges(graph.edges):
        if sets.union(edge.source, edge.target):
            forest.add_edge(edge.source, edge.target, edge.weight)
    return forest


def boruvka(graph: Graph) -> SpanningForest:
    """Build a minimum spanning tree by repeatedly joining each component's cheapest edge.

    Raises ValueError if the graph is not connected.
    """
    count = graph.num_vertices
    forest = SpanningForest(count)
    sets = DisjointSet(count)
    components = count
    while components > 1:
        cheapest: Dict[int, Edge] = {}
        for edge in graph.edges:
            cu = sets.find(edge.source)
            cv = sets.find(edge.target)
            if cu == cv:
                continue
            for component in (cu, cv):
                best = cheapest.get(component)
                if best is None or best.weight > edge.weight:
                    cheapest[component] = edge
        merged = False
        for vertex_id in range(count):
            edge = cheapest.get(vertex_id)
            if edge is None or sets.find(vertex_id) != vertex_id:
                continue
            if sets.union(edge.source, edge.target):
                forest.add_edge(edge.source, edge.target, edge.weight)
                components -= 1
                merged = True
        if not merged:
            raise ValueError("graph is disconnected; no spanning tree exists")
    return forest


def prim(graph: Graph) -> SpanningForest:
    """Grow a minimum spanning tree from vertex 0.

    Each reached vertex other than 0 contributes the edge ``(vertex, parent,
    weight)``, in vertex order. If some vertices cannot be reached a
    RuntimeWarning is issued and they are left out.
    """
    count = graph.num_vertices
    forest = SpanningForest(count)
    if count == 0:
        return forest
    visited = [False] * count
    parent = [0] * count
    key = [math.inf] * count
    key[0] = 0.0
    heap = MinHeap()
    heap.push(0, 0.0)
    visited_count = 0
    while visited_count < count and heap:
        u, _ = heap.pop()
        if visited[u]:
            continue
        visited[u] = True
        visited_count += 1
        for neighbor in graph.neighbors(u):
            if not visited[neighbor.id] and neighbor.weight < key[neighbor.id]:
                key[neighbor.id] = neighbor.weight
                parent[neighbor.id] = u
                heap.push(neighbor.id, neighbor.weight)
    if visited_count != count:
        warnings.warn(
            "graph is disconnected; the spanning tree is incomplete",
            RuntimeWarning,
            stacklevel=2,
        )
    for vertex_id in range(1, count):
        if visited[vertex_id]:
            forest.add_edge(vertex_id, parent[vertex_id], key[vertex_id])
    return forest