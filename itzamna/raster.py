"""Software rasterisation of simple shapes into a framebuffer."""

from __future__ import annotations

import math
from typing import Tuple

from .framebuffer import Framebuffer


def _bounding_box(
    fb: Framebuffer, xs: Tuple[float, ...], ys: Tuple[float, ...]
) -> Tuple[int, int, int, int]:
    min_x = int(max(0.0, math.floor(min(xs))))
    max_x = int(min(fb.width - 1.0, math.ceil(max(xs))))
    min_y = int(max(0.0, math.floor(min(ys))))
    max_y = int(min(fb.height - 1.0, math.ceil(max(ys))))
    return min_x, max_x, min_y, max_y


def _edges(x0, y0, x1, y1, x2, y2, x, y) -> Tuple[float, float, float]:
    w0 = (x1 - x0) * (y - y0) - (y1 - y0) * (x - x0)
    w1 = (x2 - x1) * (y - y1) - (y2 - y1) * (x - x1)
    w2 = (x0 - x2) * (y - y2) - (y0 - y2) * (x - x2)
    return w0, w1, w2


def solid_triangle(fb: Framebuffer, x0, y0, x1, y1, x2, y2, color: int) -> None:
    """Fill a triangle of either winding; degenerate triangles draw nothing."""
    area = (x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0)
    if area == 0.0:
        return
    min_x, max_x, min_y, max_y = _bounding_box(fb, (x0, x1, x2), (y0, y1, y2))
    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            w0, w1, w2 = _edges(x0, y0, x1, y1, x2, y2, x, y)
            if (w0 >= 0 and w1 >= 0 and w2 >= 0) or (w0 <= 0 and w1 <= 0 and w2 <= 0):
                fb.pixels[y * fb.width + x] = color


def solid_rectangle(fb: Framebuffer, x, y, width, height, color: int) -> None:
    """Fill the rectangle starting at (x, y); the far edges are exclusive."""
    left = int(max(0.0, math.floor(x)))
    top = int(max(0.0, math.floor(y)))
    right = int(min(fb.width - 1.0, math.ceil(x + width)))
    bottom = int(min(fb.height - 1.0, math.ceil(y + height)))
    for j in range(top, bottom):
        row = j * fb.width
        fb.pixels[row + left:row + max(left, right)] = [color] * max(0, right - left)


def triangle_wire(fb: Framebuffer, x0, y0, x1, y1, x2, y2, color: int) -> None:
    """Mark the pixels in the bounding box that lie exactly on a triangle edge line."""
    min_x, max_x, min_y, max_y = _bounding_box(fb, (x0, x1, x2), (y0, y1, y2))
    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            if 0 in _edges(x0, y0, x1, y1, x2, y2, x, y):
                fb.pixels[y * fb.width + x] = color


def draw_line(fb: Framebuffer, x0, y0, x1, y1, color: int) -> None:
    """Draw a line with Bresenham's algorithm, clipped to the framebuffer."""
    dx = int(abs(x1 - x0))
    dy = int(abs(y1 - y0))
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    while True:
        if 0 <= x0 < fb.width and 0 <= y0 < fb.height:
            fb.pixels[int(y0) * fb.width + int(x0)] = color
        if int(x0) == int(x1) and int(y0) == int(y1):
            break
        err2 = err * 2
        if err2 > -dy:
            err -= dy
            x0 += sx
        if err2 < dx:
            err += dx
            y0 += sy


def draw_rect(fb: Framebuffer, x: int, y: int, w: int, h: int, color: int) -> None:
    """Draw the one-pixel outline of a rectangle, clipped to the framebuffer."""
    if w <= 0 or h <= 0:
        return
    border = {(i, j) for i in range(x, x + w) for j in (y, y + h - 1)}
    border |= {(i, j) for i in (x, x + w - 1) for j in range(y, y + h)}
    for i, j in border:
        put_pixel(fb, i, j, color)


def put_pixel(fb: Framebuffer, x: int, y: int, color: int) -> None:
    """Set one pixel; coordinates outside the framebuffer are ignored."""
    if 0 <= x < fb.width and 0 <= y < fb.height:
        fb.pixels[y * fb.width + x] = color


def _midpoint_circle(radius: int):
    x, y = 0, radius
    d = 3 - 2 * radius
    while x <= y:
        yield x, y
        if d < 0:
            d += 4 * x + 6
        else:
            d += 4 * (x - y) + 10
            y -= 1
        x += 1


def draw_circle(fb: Framebuffer, cx: int, cy: int, radius: int, color: int) -> None:
    """Draw a circle outline with the midpoint algorithm."""
    for x, y in _midpoint_circle(radius):
        for px, py in (
            (cx + x, cy + y), (cx - x, cy + y), (cx + x, cy - y), (cx - x, cy - y),
            (cx + y, cy + x), (cx - y, cy + x), (cx + y, cy - x), (cx - y, cy - x),
        ):
            put_pixel(fb, px, py, color)


def fill_circle(fb: Framebuffer, cx: int, cy: int, radius: int, color: int) -> None:
    """Fill a circle with horizontal spans from the midpoint algorithm."""
    for x, y in _midpoint_circle(radius):
        for i in range(cx - x, cx + x + 1):
            put_pixel(fb, i, cy + y, color)
            put_pixel(fb, i, cy - y, color)
        for i in range(cx - y, cx + y + 1):
            put_pixel(fb, i, cy + x, color)
            put_pixel(fb, i, cy - x, color)