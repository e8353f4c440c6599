"""
Open list for the A* search.

A binary min-heap keyed by total cost. Several nodes can share a cost, so
each entry carries an insertion sequence number: equal costs pop in the
order they were pushed and never collide.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable


class Frontier:
    """
    Priority queue of (total_cost, node) pairs allowing duplicate costs.

    Tracks how many entries are pending per node so membership checks
    are O(1) rather than a scan of the heap.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Hashable]] = []
        self._sequence = itertools.count()
        self._pending: dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, node: Hashable) -> bool:
        return node in self._pending

    def is_empty(self) -> bool:
        """True if no entries are left to pop."""
        return not self._heap

    def push(self, total_cost: int, node: Hashable) -> None:
        """Add a node under the given cost. Existing entries are kept."""
        heapq.heappush(self._heap, (total_cost, next(self._sequence), node))
        self._pending[node] = self._pending.get(node, 0) + 1

    def pop(self) -> tuple[int, Hashable]:
        """
        Remove and return the cheapest entry.

        Raises:
            IndexError: If the frontier is empty
        """
        if not self._heap:
            raise IndexError("pop from an empty frontier")

        total_cost, _seq, node = heapq.heappop(self._heap)
        remaining = self._pending.get(node, 0) - 1
        if remaining > 0:
            self._pending[node] = remaining
        else:
            self._pending.pop(node, None)
        return total_cost, node

    def discard(self, node: Hashable) -> None:
        """
        Forget any entries still pending for a node.

        Heap entries stay where they are; the search loop skips them once
        the node has been visited. Other nodes with the same cost are
        untouched.
        """
        self._pending.pop(node, None)

    def clear(self) -> None:
        self._heap.clear()
        self._pending.clear()
        self._sequence = itertools.count()
