"""A software framebuffer of packed 0xAARRGGBB pixels."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .trig import fast_cos, fast_sin

BACKGROUND = 0xFF202020
OPAQUE = 0xFF000000


def _check_size(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError("framebuffer dimensions must not be negative")


def _channels(pixel: int) -> Tuple[int, int, int]:
    return (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF


def _to_byte(value: float) -> int:
    return min(255, max(0, int(value)))


def _pack(r: float, g: float, b: float) -> int:
    return OPAQUE | (_to_byte(r) << 16) | (_to_byte(g) << 8) | _to_byte(b)


def _blur_pass(
    src: Sequence[int],
    width: int,
    height: int,
    kernel: Sequence[float],
    radius: int,
    horizontal: bool,
) -> List[int]:
    out: List[int] = []
    for y in range(height):
        for x in range(width):
            r = g = b = 0.0
            for offset, weight in zip(range(-radius, radius + 1), kernel):
                if horizontal:
                    sx, sy = min(max(x + offset, 0), width - 1), y
                else:
                    sx, sy = x, min(max(y + offset, 0), height - 1)
                pr, pg, pb = _channels(src[sy * width + sx])
                r += pr * weight
                g += pg * weight
                b += pb * weight
            out.append(_pack(r, g, b))
    return out


class Framebuffer:
    """A width x height grid of 32-bit pixels stored row by row in ``pixels``."""

    def __init__(self, width: int, height: int) -> None:
        _check_size(width, height)
        self.width = width
        self.height = height
        self.pixels: List[int] = [0] * (width * height)

    def resize(self, width: int, height: int) -> None:
        """Replace the pixel storage with a fresh buffer of the new size."""
        _check_size(width, height)
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def clear(self, color: int) -> None:
        """Fill every pixel with ``color``."""
        self.pixels = [color] * (self.width * self.height)

    def draw_test_pattern(self) -> None:
        """Draw an XOR pattern in the blue channel with full alpha."""
        self.pixels = [
            ((x ^ y) & 0xFF) | OPAQUE
            for y in range(self.height)
            for x in range(self.width)
        ]

    def rotate(self, angle_rad: float) -> None:
        """Rotate the image about its centre; uncovered pixels get the background colour."""
        w, h = self.width, self.height
        cx, cy = w // 2, h // 2
        cos_a = fast_cos(angle_rad)
        sin_a = fast_sin(angle_rad)
        src = self.pixels
        out: List[int] = []
        for y in range(h):
            ty = y - cy
            for x in range(w):
                tx = x - cx
                rx = int(tx * cos_a - ty * sin_a) + cx
                ry = int(tx * sin_a + ty * cos_a) + cy
                if 0 <= rx < w and 0 <= ry < h:
                    out.append(src[ry * w + rx])
                else:
                    out.append(BACKGROUND)
        self.pixels = out

    def shade(self, color: int) -> None:
        """Multiply each pixel's colour channels by those of ``color``."""
        r2, g2, b2 = _channels(color)
        shaded = []
        for pixel in self.pixels:
            r1, g1, b1 = _channels(pixel)
            shaded.append(
                OPAQUE
                | ((r1 * r2) // 255) << 16
                | ((g1 * g2) // 255) << 8
                | (b1 * b2) // 255
            )
        self.pixels = shaded

    def gaussian_blur(self, sigma: float) -> None:
        """Apply a separable Gaussian blur with a kernel radius of ``3 * sigma``."""
        if sigma <= 0:
            raise ValueError("sigma must be positive")
        radius = int(sigma * 3.0)
        kernel = [
            math.exp(-(i * i) / (2 * sigma * sigma))
            for i in range(-radius, radius + 1)
        ]
        total = sum(kernel)
        kernel = [k / total for k in kernel]
        w, h = self.width, self.height
        tmp = _blur_pass(self.pixels, w, h, kernel, radius, horizontal=True)
        self.pixels = _blur_pass(tmp, w, h, kernel, radius, horizontal=False)

    def bilinear_scale(self, scale_x: float, scale_y: float) -> None:
        """Resample the image by the given factors with bilinear interpolation."""
        if scale_x <= 0 or scale_y <= 0:
            raise ValueError("scale factors must be positive")
        w, h = self.width, self.height
        new_width = int(w * scale_x)
        new_height = int(h * scale_y)
        src = self.pixels
        out: List[int] = []
        for y in range(new_height):
            src_y = y / scale_y
            y0 = int(src_y)
            y1 = min(y0 + 1, h - 1)
            dy = src_y - y0
            for x in range(new_width):
                src_x = x / scale_x
                x0 = int(src_x)
                x1 = min(x0 + 1, w - 1)
                dx = src_x - x0
                c00 = _channels(src[y0 * w + x0])
                c10 = _channels(src[y0 * w + x1])
                c01 = _channels(src[y1 * w + x0])
                c11 = _channels(src[y1 * w + x1])
                mixed = [
                    (1 - dx) * (1 - dy) * a
                    + dx * (1 - dy) * b
                    + (1 - dx) * dy * c
                    + dx * dy * d
                    for a, b, c, d in zip(c00, c10, c01, c11)
                ]
                out.append(_pack(*mixed))
        self.pixels = out
        self.width = new_width
        self.height = new_height

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside the framebuffer")
        return self.pixels[y * self.width + x]