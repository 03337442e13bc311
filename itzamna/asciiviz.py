"""Text renderings of graphs and spanning forests."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Sequence, Tuple

from .graph import Edge, SpanningForest

WIDTH = 100
HEIGHT = 50
MAX_VERTICES = 100

Grid = List[List[str]]


def _blank_grid() -> Grid:
    return [[" "] * WIDTH for _ in range(HEIGHT)]


def _grid_text(grid: Grid) -> str:
    return "".join("".join(row) + "\n" for row in grid)


def draw_line(grid: Grid, x0: int, y0: int, x1: int, y1: int) -> None:
    """Trace a line into ``grid`` (indexed ``grid[y][x]``) with Bresenham's algorithm.

    Only blank cells are written. A cell in the same row or column as the end
    point gets '-', any other cell gets '/'. Cells outside the grid are skipped.
    """
    height = len(grid)
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        if 0 <= y0 < height and 0 <= x0 < len(grid[y0]) and grid[y0][x0] == " ":
            grid[y0][x0] = "-" if x0 == x1 or y0 == y1 else "/"
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _collect_vertices(pairs: Iterable[Tuple[int, int]]) -> List[int]:
    ids: List[int] = []
    seen = set()
    for pair in pairs:
        for vertex_id in pair:
            if vertex_id not in seen and len(ids) < MAX_VERTICES:
                seen.add(vertex_id)
                ids.append(vertex_id)
    return ids


def _circle_layout(ids: Sequence[int]) -> Dict[int, Tuple[int, int]]:
    cx, cy = WIDTH // 2, HEIGHT // 2
    radius = min(WIDTH, HEIGHT) // 3
    positions: Dict[int, Tuple[int, int]] = {}
    for index, vertex_id in enumerate(ids):
        angle = 2 * math.pi * index / len(ids) - math.pi / 2
        x = cx + int(radius * math.cos(angle))
        y = cy + int(radius * math.sin(angle))
        positions[vertex_id] = (min(max(x, 0), WIDTH - 1), min(max(y, 0), HEIGHT - 1))
    return positions


def _write_text(grid: Grid, x: int, y: int, text: str) -> None:
    for offset, char in enumerate(text):
        if x + offset < WIDTH:
            grid[y][x + offset] = char


def _draw_nodes(grid: Grid, ids: Sequence[int], positions: Dict[int, Tuple[int, int]]) -> None:
    for vertex_id in ids:
        x, y = positions[vertex_id]
        grid[y][x] = "O"
        _write_text(grid, x + 1, y, str(vertex_id)[:5])


def render_graph(edges: Iterable[Edge]) -> str:
    """Draw the edges' vertices on a circle joined by lines; one text line per grid row."""
    edge_list = list(edges)
    ids = _collect_vertices((edge.source, edge.target) for edge in edge_list)
    positions = _circle_layout(ids)
    grid = _blank_grid()
    for edge in edge_list:
        if edge.source in positions and edge.target in positions:
            draw_line(grid, *positions[edge.source], *positions[edge.target])
    _draw_nodes(grid, ids, positions)
    return _grid_text(grid)


def render_forest(forest: SpanningForest) -> str:
    """Draw the forest with weight labels, followed by its edge list and total weight."""
    edges = list(forest)
    ids = _collect_vertices((edge.source, edge.target) for edge in edges)
    positions = _circle_layout(ids)
    grid = _blank_grid()
    for edge in edges:
        if edge.source not in positions or edge.target not in positions:
            continue
        x1, y1 = positions[edge.source]
        x2, y2 = positions[edge.target]
        draw_line(grid, x1, y1, x2, y2)
        mx, my = (x1 + x2) // 2, (y1 + y2) // 2
        if mx + 1 < WIDTH:
            mx += 1
        if my + 1 < HEIGHT:
            my += 1
        _write_text(grid, mx, my, f"{edge.weight:.1f}"[:15])
    _draw_nodes(grid, ids, positions)
    lines = [_grid_text(grid), "\nMST edges:\n"]
    lines.extend(f"{e.source} -- {e.target} ({e.weight:.1f})\n" for e in edges)
    lines.append(f"MST total weight: {forest.total_weight():.1f}\n")
    return "".join(lines)


def render_forest_grid(forest: SpanningForest, rows: int, cols: int) -> str:
    """Draw a forest over vertices laid out row by row as a rows x cols lattice.

    Nodes are '+', horizontal edges '-' and vertical edges 'I'. Edges that
    join neither a row nor a column are not drawn.
    """
    if rows < 1 or cols < 1 or rows * cols != forest.num_vertices:
        raise ValueError("grid size does not match the forest's vertices")
    height, width = rows * 2 - 1, cols * 2 - 1
    grid = [[" "] * width for _ in range(height)]
    for r in range(rows):
        for c in range(cols):
            grid[r * 2][c * 2] = "+"
    for edge in forest:
        u, v = edge.source, edge.target
        if not (0 <= u < forest.num_vertices and 0 <= v < forest.num_vertices):
            continue
        ur, uc = divmod(u, cols)
        vr, vc = divmod(v, cols)
        if ur == vr:
            column = min(uc, vc) * 2 + 1
            if column < width:
                grid[ur * 2][column] = "-"
        elif uc == vc:
            row = min(ur, vr) * 2 + 1
            if row < height:
                grid[row][uc * 2] = "I"
    return _grid_text(grid)