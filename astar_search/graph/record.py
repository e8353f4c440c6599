"""
Per-node bookkeeping for a single search.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass


@dataclass
class SearchRecord:
    """
    Costs and back-link for one node touched by the search.

    Attributes:
        movement_cost: Steps taken from the start node, usually g(x)
        estimate_cost: Heuristic distance to the goal, usually h(x)
        parent: Predecessor on the recorded path (None for the start node)
    """

    movement_cost: int = 0
    estimate_cost: int = 0
    parent: Hashable | None = None

    @property
    def total_cost(self) -> int:
        """f(x) = g(x) + h(x), the frontier ordering key."""
        return self.movement_cost + self.estimate_cost
