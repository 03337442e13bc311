"""Three-component vectors."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

_MAGIC = 0x5F3759DF


def _to_float32_bits(x: float) -> int:
    try:
        packed = struct.pack("<f", x)
    except OverflowError:
        packed = struct.pack("<f", math.copysign(math.inf, x))
    return struct.unpack("<i", packed)[0]


def _from_float32_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<i", bits))[0]


def fast_rsqrt(x: float) -> float:
    """Approximate ``1 / sqrt(x)`` with the bit-level trick and one Newton step."""
    half = 0.5 * x
    guess = _from_float32_bits(_MAGIC - (_to_float32_bits(x) >> 1))
    return guess * (1.5 - half * guess * guess)


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> Vec3:
        """Return the vector multiplied by ``scalar``."""
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, other: Vec3) -> float:
        """Return the dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product ``self x other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def inv_length(self) -> float:
        """Approximate the reciprocal of the vector's length."""
        return fast_rsqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return an approximately unit-length vector; the zero vector stays zero."""
        if self.x == 0.0 and self.y == 0.0 and self.z == 0.0:
            return Vec3(0.0, 0.0, 0.0)
        return self.scale(self.inv_length())