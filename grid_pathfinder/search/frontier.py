"""Binary min-heap of pending search nodes."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import List, Tuple


class Frontier:
    """Min-priority queue of ``(total, index)`` pairs.

    Entries are immutable keys referring to slots of a
    :class:`~grid_pathfinder.search.node_state.SearchState`. Equal totals pop
    in insertion order. Duplicates are not merged.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, int]] = []  # (total, seq, index)
        self._seq = 0

    def push(self, total: int, index: int) -> None:
        heappush(self._heap, (total, self._seq, index))
        self._seq += 1

    def pop(self) -> Tuple[int, int]:
        """Remove and return the ``(total, index)`` with the lowest total."""

        if not self._heap:
            raise IndexError("pop from an empty frontier")
        total, _, index = heappop(self._heap)
        return total, index

    def is_empty(self) -> bool:
        return not self._heap

    @property
    def pushed(self) -> int:
        """Number of entries ever pushed."""
        return self._seq

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["Frontier"]
