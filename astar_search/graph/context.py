"""
Search context base classes.

The pathfinder never touches graph storage directly. Callers describe
their graph through a context that answers two questions:
- which nodes can be reached from this node? (get_next)
- roughly how far is this node from that one? (get_distance_between)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable


class PathFindingContext(ABC):
    """
    Neighbour enumeration over a caller-owned directed graph.

    Nodes can be any hashable value. The same node must always be returned
    as an equal value so the search can recognise it.
    """

    @abstractmethod
    def get_next(self, current: Hashable) -> Iterable[Hashable]:
        """
        Enumerate the outgoing neighbours of a node.

        Args:
            current: Node being expanded

        Returns:
            Neighbouring nodes. Order only matters for tie-breaking.
        """
        ...


class AStarContext(PathFindingContext):
    """Neighbour enumeration plus the heuristic used to rank the frontier."""

    @abstractmethod
    def get_distance_between(self, current: Hashable, target: Hashable) -> int:
        """
        Estimate the remaining distance from current to target.

        Should be a non-negative integer. Admissibility is not checked;
        an overestimating heuristic still terminates, just not optimally.
        """
        ...


class CallableContext(AStarContext):
    """
    Context built from two plain callables instead of a subclass.

    Example:
        graph = {1: [2, 3], 2: [], 3: []}
        context = CallableContext(
            get_next=lambda node: graph.get(node, []),
            get_distance_between=ConstantDistance(1),
        )
    """

    def __init__(
        self,
        get_next: Callable[[Hashable], Iterable[Hashable]],
        get_distance_between: Callable[[Hashable, Hashable], int],
    ) -> None:
        self._get_next = get_next
        self._get_distance_between = get_distance_between

    def get_next(self, current: Hashable) -> Iterable[Hashable]:
        return self._get_next(current)

    def get_distance_between(self, current: Hashable, target: Hashable) -> int:
        return self._get_distance_between(current, target)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(get_next={self._get_next!r}, "
            f"get_distance_between={self._get_distance_between!r})"
        )
