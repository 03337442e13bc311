"""A growable array with explicit capacity doubling."""

from __future__ import annotations

from typing import Any, Iterator, List

INITIAL_CAPACITY = 8


class DynamicArray:
    """A sequence that grows its capacity by doubling when full."""

    def __init__(self) -> None:
        self._items: List[Any] = []
        self._capacity = 0

    def push(self, item: Any) -> None:
        """Append ``item``, growing the capacity when it is exhausted."""
        if len(self._items) >= self._capacity:
            if self._capacity == 0:
                self._capacity = INITIAL_CAPACITY
            self._capacity *= 2
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the last item; the capacity is left unchanged."""
        if not self._items:
            raise IndexError("pop from an empty DynamicArray")
        return self._items.pop()

    def get(self, index: int) -> Any:
        """Return the item at ``index``; negative or out-of-range indices raise."""
        if index < 0 or index >= len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items[index]

    def clear(self) -> None:
        """Drop all items and release the capacity."""
        self._items = []
        self._capacity = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    @property
    def capacity(self) -> int:
        """Number of slots reserved."""
        return self._capacity