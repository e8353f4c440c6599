"""
Graph-agnostic distance estimates.
"""

from __future__ import annotations

from collections.abc import Hashable


class ZeroDistance:
    """Always estimates 0, which turns A* into a breadth-first search by depth."""

    def __call__(self, current: Hashable, target: Hashable) -> int:
        return 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ConstantDistance:
    """
    Estimates the same fixed distance for every pair of nodes.

    Useful when nothing is known about the graph's geometry; the search
    then orders nodes purely by depth, ties broken by discovery order.
    """

    def __init__(self, value: int = 1) -> None:
        """
        Args:
            value: Estimate returned for every pair (must be >= 0)

        Raises:
            ValueError: If value is negative
        """
        if value < 0:
            raise ValueError(f"Distance must be non-negative, got {value}")
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __call__(self, current: Hashable, target: Hashable) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._value!r})"
