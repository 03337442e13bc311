"""4x4 matrices in row-major storage with translation in the last row."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple, Union

from .trig import fast_cos, fast_sin

Row = Tuple[float, float, float, float]


def _build(overrides: Mapping[Tuple[int, int], float]) -> Tuple[Row, ...]:
    return tuple(
        tuple(overrides.get((i, j), 1.0 if i == j else 0.0) for j in range(4))
        for i in range(4)
    )


@dataclass(frozen=True)
class Mat4:
    """An immutable 4x4 matrix; index with ``m[i][j]`` or ``m[i, j]``."""

    rows: Tuple[Row, ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Mat4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def identity(cls) -> Mat4:
        """Return the identity matrix."""
        return cls(_build({}))

    @classmethod
    def translate(cls, x: float, y: float, z: float) -> Mat4:
        """Return a translation matrix."""
        return cls(_build({(3, 0): x, (3, 1): y, (3, 2): z}))

    @classmethod
    def scale(cls, x: float, y: float, z: float) -> Mat4:
        """Return a scaling matrix."""
        return cls(_build({(0, 0): x, (1, 1): y, (2, 2): z}))

    @classmethod
    def rotate_x(cls, angle_rad: float) -> Mat4:
        """Return a rotation about the X axis."""
        c, s = fast_cos(angle_rad), fast_sin(angle_rad)
        return cls(_build({(1, 1): c, (1, 2): s, (2, 1): -s, (2, 2): c}))

    @classmethod
    def rotate_y(cls, angle_rad: float) -> Mat4:
        """Return a rotation about the Y axis."""
        c, s = fast_cos(angle_rad), fast_sin(angle_rad)
        return cls(_build({(0, 0): c, (0, 2): -s, (2, 0): s, (2, 2): c}))

    @classmethod
    def rotate_z(cls, angle_rad: float) -> Mat4:
        """Return a rotation about the Z axis."""
        c, s = fast_cos(angle_rad), fast_sin(angle_rad)
        return cls(_build({(0, 0): c, (0, 1): s, (1, 0): -s, (1, 1): c}))

    def __matmul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        columns = list(zip(*other.rows))
        return Mat4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                for row in self.rows
            )
        )

    def __getitem__(self, index: Union[int, Tuple[int, int]]):
        if isinstance(index, tuple):
            i, j = index
            return self.rows[i][j]
        return self.rows[index]