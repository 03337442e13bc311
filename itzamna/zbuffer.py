"""A depth buffer paired with a framebuffer."""

from __future__ import annotations

from typing import List


def _check_size(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError("depth buffer dimensions must not be negative")


class ZBuffer:
    """A width x height grid of depth values stored row by row in ``depths``."""

    def __init__(self, width: int, height: int) -> None:
        _check_size(width, height)
        self.width = width
        self.height = height
        self.depths: List[float] = [0.0] * (width * height)

    def resize(self, width: int, height: int) -> None:
        """Change the size, keeping the leading values of the flat storage.

        Newly added cells are zero.
        """
        _check_size(width, height)
        count = width * height
        kept = self.depths[:count]
        self.depths = kept + [0.0] * (count - len(kept))
        self.width = width
        self.height = height

    def clear(self, depth: float) -> None:
        """Set every cell to ``depth``."""
        self.depths = [float(depth)] * (self.width * self.height)

    def depth(self, x: int, y: int) -> float:
        """Return the depth at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) lies outside the depth buffer")
        return self.depths[y * self.width + x]