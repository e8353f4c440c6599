"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable

import pytest

from astar_search.graph import AStarContext


class DictGraphContext(AStarContext):
    """
    Search context over a plain adjacency dict.

    Records every heuristic call so tests can check which pairs were
    estimated.
    """

    def __init__(
        self,
        adjacency: dict[Hashable, list[Hashable]],
        heuristic: Callable[[Hashable, Hashable], int] | None = None,
    ) -> None:
        self.adjacency = adjacency
        self.heuristic = heuristic or (lambda current, target: 0)
        self.distance_calls: list[tuple[Hashable, Hashable]] = []

    def get_next(self, current: Hashable) -> Iterable[Hashable]:
        return iter(self.adjacency.get(current, []))

    def get_distance_between(self, current: Hashable, target: Hashable) -> int:
        self.distance_calls.append((current, target))
        return self.heuristic(current, target)


def grid_adjacency(width: int, height: int) -> dict[tuple[int, int], list[tuple[int, int]]]:
    """4-connected grid with every cell reachable."""
    adjacency = {}
    for x in range(width):
        for y in range(height):
            adjacency[(x, y)] = [
                (nx, ny)
                for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))
                if 0 <= nx < width and 0 <= ny < height
            ]
    return adjacency


def manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@pytest.fixture
def forked_context() -> DictGraphContext:
    """Nodes 1, 2, 3 with edges 1->2 and 1->3; every estimate is 1."""
    return DictGraphContext({1: [2, 3], 2: [], 3: []}, lambda current, target: 1)


@pytest.fixture
def chain_context() -> DictGraphContext:
    """Straight line 1 -> 2 -> 3 -> 4 -> 5 with a zero heuristic."""
    return DictGraphContext({1: [2], 2: [3], 3: [4], 4: [5], 5: []})


@pytest.fixture
def grid_context() -> DictGraphContext:
    """6x6 open grid with Manhattan distance (consistent for unit steps)."""
    return DictGraphContext(grid_adjacency(6, 6), manhattan)


@pytest.fixture
def detour_context() -> DictGraphContext:
    """
    Graph where the first route found to D is longer than a later one.

    S -> A -> D -> G is the shortest route, but A's estimate makes the
    search reach D through S -> B -> C first.
    """
    adjacency = {
        "S": ["A", "B"],
        "A": ["D"],
        "B": ["C"],
        "C": ["D"],
        "D": ["G"],
        "G": [],
    }
    estimates = {"S": 0, "A": 2, "B": 0, "C": 0, "D": 0, "G": 0}
    return DictGraphContext(adjacency, lambda current, target: estimates[current])


@pytest.fixture
def restore_root_logger():
    """Put the root logger's level back after a test changes it."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)
