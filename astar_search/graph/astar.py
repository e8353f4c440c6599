"""
Step-wise A* pathfinder over a caller-supplied graph context.

The general algorithm is:
1. The start node is placed on the open list (frontier).
2. The cheapest node not already on the closed list (visited) is taken
   from the open list.
3. All of its neighbours that are neither open nor closed are costed and
   placed on the open list, remembering where they were reached from.
4. Repeat until the goal is taken from the open list or the list runs dry.
5. Following the back-links from the last node restores the path.

Known limitation: a node's costs are assigned once, the first time it is
discovered, and are never improved if a cheaper route shows up later
(there is no re-open / decrease-key step). Paths are therefore not
guaranteed optimal.

Usage:
    from astar_search.graph import PathFinder, State

    finder = PathFinder(context, start, goal)
    if finder.run() is State.GOAL_FOUND:
        print(finder.get_path())
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from enum import Enum

from astar_search.config import STEP_COST
from astar_search.graph.context import AStarContext
from astar_search.graph.frontier import Frontier
from astar_search.graph.record import SearchRecord

logger = logging.getLogger(__name__)


class State(Enum):
    """Outcome of a single search step."""

    SEARCHING = "searching"
    GOAL_FOUND = "goal_found"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not State.SEARCHING


class PathFinder:
    """
    A* search engine that can be advanced one expansion at a time.

    Stepping manually (step()) lets callers animate the search or bound
    it with their own step budget; run() simply steps until done. The
    engine is not thread-safe; use one instance per thread.
    """

    def __init__(
        self, context: AStarContext, start: Hashable, goal: Hashable
    ) -> None:
        """
        Initialize a search from start to goal.

        Args:
            context: Neighbour and distance provider for the graph
            start: Node to search from
            goal: Node to search for (may equal start)

        Raises:
            ValueError: If context is None
        """
        if context is None:
            raise ValueError("context must not be None")

        self._context = context
        self._frontier = Frontier()
        self._visited: set[Hashable] = set()
        self._records: dict[Hashable, SearchRecord] = {}

        self._current_node: Hashable | None = None
        self._goal: Hashable = goal
        self._state: State | None = None
        self._expanded = 0

        self.reset(start, goal)

    # =========================================================================
    # Search Control
    # =========================================================================

    def reset(self, start: Hashable, goal: Hashable) -> None:
        """
        Discard all search state and prepare a new search.

        Args:
            start: Node to search from
            goal: Node to search for
        """
        self._frontier.clear()
        self._visited.clear()
        self._records.clear()

        self._current_node = None
        self._goal = goal
        self._state = None
        self._expanded = 0

        # Start estimate is computed once here and never refreshed
        start_record = self._get_record(start)
        start_record.movement_cost = 0
        start_record.estimate_cost = self._context.get_distance_between(start, goal)
        self._frontier.push(start_record.total_cost, start)

        logger.info(f"Search reset: {start!r} -> {goal!r}")

    def step(self) -> State:
        """
        Expand exactly one node.

        Calling step() again after GOAL_FOUND or FAILED does not resume the
        search: it logs a warning and returns the same terminal state until
        reset() is called.

        Returns:
            SEARCHING, GOAL_FOUND or FAILED
        """
        if self._state is not None and self._state.is_terminal:
            logger.warning(
                f"step() called after search finished ({self._state.value}); "
                "call reset() to start a new search"
            )
            return self._state

        self._state = self._expand_next()
        if self._state.is_terminal:
            logger.info(
                f"Search {self._state.value} after {self._expanded} expansions "
                f"(path length {len(self.get_path())})"
            )
        return self._state

    def run(self) -> State:
        """
        Step until the goal is found or the frontier is exhausted.

        There is no iteration cap: an unbounded graph searches forever.
        Drive step() directly to impose a budget.

        Returns:
            GOAL_FOUND or FAILED
        """
        while True:
            state = self.step()
            if state.is_terminal:
                return state

    def _expand_next(self) -> State:
        while True:
            if self._frontier.is_empty():
                return State.FAILED

            _cost, self._current_node = self._frontier.pop()

            # Stale duplicate of a node that was already expanded
            if self._current_node in self._visited:
                continue

            break

        current = self._current_node
        current_record = self._get_record(current)

        self._frontier.discard(current)
        self._visited.add(current)
        self._expanded += 1

        logger.debug(
            f"Expanding {current!r} (g={current_record.movement_cost}, "
            f"h={current_record.estimate_cost}, f={current_record.total_cost})"
        )

        if current == self._goal:
            return State.GOAL_FOUND

        for child in self._context.get_next(current):
            # Costs are set once; open or closed nodes are left alone
            if child in self._frontier or child in self._visited:
                continue

            child_record = self._get_record(child)
            child_record.parent = current
            child_record.movement_cost = current_record.movement_cost + STEP_COST
            child_record.estimate_cost = self._context.get_distance_between(
                child, self._goal
            )
            self._frontier.push(child_record.total_cost, child)

            logger.debug(f"  Queued {child!r} (f={child_record.total_cost})")

        return State.SEARCHING

    # =========================================================================
    # Results
    # =========================================================================

    def get_path(self) -> list[Hashable]:
        """
        Return the path from the start node to the current node.

        Mid-search this is the partial path to whatever was expanded last,
        so incremental or animated callers can draw progress.

        Returns:
            Nodes from start to current_node, or [] if no step has run
        """
        if self._current_node is None:
            return []

        path = []
        node = self._current_node
        while node is not None:
            path.append(node)
            node = self._records[node].parent

        path.reverse()
        return path

    # =========================================================================
    # Inspection
    # =========================================================================

    @property
    def current_node(self) -> Hashable | None:
        """Most recently expanded node (None before the first step)."""
        return self._current_node

    @property
    def goal(self) -> Hashable:
        return self._goal

    @property
    def state(self) -> State | None:
        """Last state returned by step(), or None if not stepped yet."""
        return self._state

    @property
    def expanded_count(self) -> int:
        """Number of nodes expanded in the current search."""
        return self._expanded

    @property
    def frontier_size(self) -> int:
        """Entries on the open list, including stale ones."""
        return len(self._frontier)

    def get_record(self, node: Hashable) -> SearchRecord | None:
        """
        Bookkeeping for a node, or None if the search never reached it.

        The returned record is live search state; do not modify it.
        """
        return self._records.get(node)

    def is_visited(self, node: Hashable) -> bool:
        return node in self._visited

    def _get_record(self, node: Hashable) -> SearchRecord:
        """Fetch a node's record, creating an empty one on first use."""
        record = self._records.get(node)
        if record is None:
            record = SearchRecord()
            self._records[node] = record
        return record

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(goal={self._goal!r}, "
            f"state={self._state}, expanded={self._expanded})"
        )
