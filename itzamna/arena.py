"""A bump allocator over a fixed block of bytes."""

from __future__ import annotations


class ArenaExhausted(MemoryError):
    """Raised when an allocation does not fit in the remaining arena space."""


class Arena:
    """A linear allocator handing out aligned offsets into one byte buffer."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("arena size must not be negative")
        self.size = size
        self.offset = 0
        self._memory = bytearray(size)

    def alloc(self, size: int, alignment: int = 1) -> int:
        """Reserve ``size`` bytes aligned to ``alignment`` and return their offset."""
        if size < 0:
            raise ValueError("allocation size must not be negative")
        if alignment <= 0 or alignment & (alignment - 1):
            raise ValueError("alignment must be a positive power of two")
        aligned = (self.offset + alignment - 1) & ~(alignment - 1)
        end = aligned + size
        if end > self.size:
            raise ArenaExhausted(
                f"cannot allocate {size} bytes at offset {aligned} in an arena of {self.size}"
            )
        self.offset = end
        return aligned

    def reset(self) -> None:
        """Release every allocation at once."""
        self.offset = 0

    def view(self, offset: int, size: int) -> memoryview:
        """Return a writable view of ``size`` bytes starting at ``offset``."""
        if offset < 0 or size < 0 or offset + size > self.size:
            raise ValueError("view lies outside the arena")
        return memoryview(self._memory)[offset:offset + size]