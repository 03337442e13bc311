"""Hypergraphs whose hyperedges are tagged with successive bitmasks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

_MASK64 = (1 << 64) - 1


@dataclass(frozen=True)
class _Hyperedge:
    mask: int
    vertices: Tuple[int, ...]


class Hypergraph:
    """Hyperedges over a fixed number of vertices.

    Each new hyperedge takes the current 64-bit ``bitmask``, which is then
    shifted left by one for the next. Listings run newest first.
    """

    def __init__(self, num_vertices: int, bitmask: int = 1) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self.bitmask = bitmask & _MASK64
        self._edges: List[_Hyperedge] = []
        self._incidence: List[List[int]] = [[] for _ in range(num_vertices)]

    @property
    def num_hyperedges(self) -> int:
        """Number of hyperedges added."""
        return len(self._edges)

    def add_hyperedge(self, vertex_ids: Iterable[int]) -> int:
        """Add a hyperedge over ``vertex_ids`` and return the bitmask it was given."""
        ids = tuple(vertex_ids)
        if not ids:
            raise ValueError("a hyperedge needs at least one vertex")
        for vid in ids:
            if not 0 <= vid < self.num_vertices:
                raise ValueError(f"vertex {vid} is out of range")
        mask = self.bitmask
        self._edges.append(_Hyperedge(mask, ids))
        for vid in ids:
            self._incidence[vid].append(mask)
        self.bitmask = (mask << 1) & _MASK64
        return mask

    def hyperedges(self) -> List[Tuple[int, ...]]:
        """Return the vertex tuples of all hyperedges, newest first."""
        return [edge.vertices for edge in reversed(self._edges)]

    def incident(self, vertex_id: int) -> List[int]:
        """Return the bitmasks of the hyperedges containing ``vertex_id``, newest first."""
        if not 0 <= vertex_id < self.num_vertices:
            raise IndexError(f"vertex {vertex_id} is out of range")
        return list(reversed(self._incidence[vertex_id]))

    def format(self) -> str:
        """Render a summary line followed by one line per hyperedge."""
        lines = [
            f"Hypergraph with {self.num_vertices} hypervertices "
            f"and {self.num_hyperedges} hyperedges:"
        ]
        for index, vertices in enumerate(self.hyperedges()):
            members = "".join(f"{vid} " for vid in vertices)
            lines.append(f" Hyperedge {index}: {members}")
        return "".join(line + "\n" for line in lines)