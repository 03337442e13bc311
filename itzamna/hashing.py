"""32-bit FNV-1a string hashing."""

from __future__ import annotations

from typing import Union

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619


def hash_string(data: Union[str, bytes, bytearray]) -> int:
    """Return the 32-bit FNV-1a hash of ``data``; text is encoded as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    value = FNV_OFFSET_BASIS
    for byte in data:
        value ^= byte
        value = (value * FNV_PRIME) & 0xFFFFFFFF
    return value