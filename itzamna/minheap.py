"""A binary min-heap of (node, key) pairs ordered by key."""

from __future__ import annotations

from typing import List, Tuple


class MinHeap:
    """A priority queue that pops the node with the smallest key first.

    Entries with equal keys are not reordered against each other while
    sifting, so ties come out in the order the binary heap leaves them.
    """

    def __init__(self) -> None:
        self._entries: List[Tuple[float, int]] = []

    def push(self, node: int, key: float) -> None:
        """Insert ``node`` with priority ``key``."""
        entries = self._entries
        entries.append((key, node))
        i = len(entries) - 1
        while i > 0:
            parent = (i - 1) // 2
            if entries[parent][0] <= entries[i][0]:
                break
            entries[parent], entries[i] = entries[i], entries[parent]
            i = parent

    def pop(self) -> Tuple[int, float]:
        """Remove the entry with the smallest key and return it as ``(node, key)``."""
        entries = self._entries
        if not entries:
            raise IndexError("pop from an empty MinHeap")
        key, node = entries[0]
        last = entries.pop()
        if entries:
            entries[0] = last
            self._sift_down()
        return node, key

    def _sift_down(self) -> None:
        entries = self._entries
        size = len(entries)
        i = 0
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            smallest = i
            if left < size and entries[left][0] < entries[smallest][0]:
                smallest = left
            if right < size and entries[right][0] < entries[smallest][0]:
                smallest = right
            if smallest == i:
                return
            entries[i], entries[smallest] = entries[smallest], entries[i]
            i = smallest

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)