# itzamna

A small toolkit of engine building blocks written in plain Python, with no
third-party dependencies.

## What is in it

### Fast approximate math

- `itzamna.trig` – `fast_sin`, `fast_cos`, `fast_tan`, `fast_asin`,
  `fast_acos`, `fast_atan`, `fast_atan2` and `fast_fabs`. The sine is a
  corrected parabola; its argument is wrapped once into [-pi, pi], so it is
  accurate within one period of that range. `fast_asin` clamps its input to
  [-1, 1]. The constants `PI`, `PI_2` and `INV_PI` are defined here too.
- `itzamna.vec3` – the immutable dataclass `Vec3` with `+`, `-`, `scale`,
  `dot`, `cross`, `inv_length` and `normalized` (the zero vector stays zero),
  plus `fast_rsqrt`, the bit-level inverse square root with one Newton step.
- `itzamna.mat4` – the immutable `Mat4` with the constructors `identity`,
  `translate`, `scale`, `rotate_x`, `rotate_y` and `rotate_z`, matrix product
  with `@`, and indexing as `m[i][j]` or `m[i, j]`. The translation sits in
  row 3; rotations use the fast sine and cosine.

### Software rendering

- `itzamna.framebuffer.Framebuffer` – a `width` x `height` grid of packed
  `0xAARRGGBB` pixels kept row by row in `pixels`. It offers `resize`,
  `clear`, `draw_test_pattern` (an XOR pattern in the blue channel),
  `rotate` (about the centre, uncovered pixels become `0xFF202020`), `shade`
  (per-channel multiply), `gaussian_blur`, `bilinear_scale` and `pixel(x, y)`.
- `itzamna.raster` – `put_pixel`, `draw_line` (Bresenham), `draw_rect`
  (outline), `solid_rectangle`, `solid_triangle`, `triangle_wire`,
  `draw_circle` and `fill_circle` (midpoint algorithm). Drawing is clipped to
  the framebuffer.
- `itzamna.zbuffer.ZBuffer` – a depth grid with `resize` (keeps the leading
  values, new cells are zero), `clear` and `depth(x, y)`.

### Utilities

- `itzamna.dynarray.DynamicArray` – a growable array whose `capacity` starts
  at 16 on the first push and doubles when full. `pop` and `get` raise
  `IndexError` when there is nothing to return; `clear` drops the items and
  the capacity.
- `itzamna.hashing.hash_string` – 32-bit FNV-1a over bytes, or over text
  encoded as UTF-8. `hash_string("hello")` is `0x4F9F2CAB`.
- `itzamna.arena.Arena` – a bump allocator over one byte buffer. `alloc`
  returns the aligned offset of the reserved bytes and raises
  `ArenaExhausted` (a `MemoryError`) when they do not fit; `reset` frees
  everything at once; `view` gives a writable `memoryview` of a range.

### Graphs

- `itzamna.graph` – `Graph` over a fixed number of vertex slots. Vertices
  are activated with `add_vertex` before `add_edge` may touch them; every
  edge is kept in `edges` and in both endpoints' adjacency lists
  (`neighbors`). It also has `has_vertex`, `get_vertex`, `degree`,
  `count_vertices`, `is_simple`, `is_complete`, `random_fill`, `add_grid`
  and `format_adjacency`. `SpanningForest` holds at most one edge fewer than
  there are vertices and reports `total_weight`. `Vertex`, `Edge` and
  `Neighbor` are the record types.
- `itzamna.hypergraph.Hypergraph` – hyperedges tagged with successive 64-bit
  bitmasks; `add_hyperedge`, `hyperedges`, `incident` and `format` (listings
  run newest first).
- `itzamna.minheap.MinHeap` – a binary min-heap of `(node, key)` pairs.
- `itzamna.mst` – `kruskal`, `boruvka` and `prim`, with `DisjointSet`
  (path compression, union by rank) and `sort_edges` (stable by weight).
  `boruvka` raises `ValueError` on a disconnected graph; `prim` grows from
  vertex 0 and issues a `RuntimeWarning`, leaving unreached vertices out.
- `itzamna.asciiviz` – `render_graph` and `render_forest` lay vertices out
  on a circle in a 100 x 50 character grid (`render_forest` adds weight
  labels, the edge list and the total weight); `render_forest_grid` draws a
  forest over a rows x cols lattice with `+`, `-` and `I`; `draw_line`
  traces a line into a character grid.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Examples

Vector and matrix math:

```python
from itzamna.vec3 import Vec3
from itzamna.mat4 import Mat4

v = Vec3(1.0, 2.0, 3.0)
n = v.normalized()          # approximately (0.267, 0.535, 0.802)
print(n.dot(n))             # close to 1.0

m = Mat4.scale(2.0, 3.0, 4.0) @ Mat4.translate(1.0, 2.0, 3.0)
print(m[3][0], m[3][1], m[3][2])   # 1.0 2.0 3.0
```

Drawing into a framebuffer:

```python
from itzamna.framebuffer import Framebuffer
from itzamna import raster

fb = Framebuffer(320, 240)
fb.clear(0xFF202020)
raster.draw_line(fb, 10.0, 10.0, 200.0, 120.0, 0xFF00FF00)
raster.fill_circle(fb, 160, 120, 40, 0xFF00FFFF)
raster.draw_rect(fb, 20, 150, 100, 60, 0xFF0000FF)
print(hex(fb.pixel(160, 120)))     # 0xff00ffff
```

Minimum spanning trees:

```python
from itzamna.cli import build_demo_graph
from itzamna.mst import kruskal
from itzamna.asciiviz import render_forest

graph = build_demo_graph()
forest = kruskal(graph)
print(len(forest), forest.total_weight())   # 9 edges, about 7.1
print(render_forest(forest))
```

## Command line

```
itzamna-mst-demo
```

builds the ten-vertex demonstration graph (the one `build_demo_graph`
returns), computes its minimum spanning tree with Borůvka's algorithm,
reports how long that took, prints the tree as ASCII art with edge weights
followed by its edge list and total weight, and says whether that total is
the expected 7.1. It takes no options besides `--help`.

## What it does not do

Everything is drawn into in-memory pixel lists and text. The package opens
no windows and presents nothing on screen, has no main loop, input handling,
audio, networking or map-file loading, and `Graph` offers no traversal or
shortest-path searches.