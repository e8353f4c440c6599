"""
Graph algorithms module.

Provides A* pathfinding over any caller-described directed graph:
- PathFinder: Step-wise A* engine
- State: Step outcome (SEARCHING, GOAL_FOUND, FAILED)
- PathFindingContext / AStarContext: Interfaces the caller implements
- CallableContext: Context assembled from two plain functions
"""

from astar_search.graph.astar import PathFinder, State
from astar_search.graph.context import AStarContext, CallableContext, PathFindingContext
from astar_search.graph.frontier import Frontier
from astar_search.graph.record import SearchRecord

__all__ = [
    "PathFinder",
    "State",
    "PathFindingContext",
    "AStarContext",
    "CallableContext",
    "Frontier",
    "SearchRecord",
]
