"""
Heuristics module.

Provides ready-made distance estimates usable as a context's
get_distance_between:
- ZeroDistance: Always 0 (breadth-first by depth)
- ConstantDistance: Fixed estimate for every pair
- EmbeddingDistance: Cosine distance between node embeddings
"""

from astar_search.heuristics.basic import ConstantDistance, ZeroDistance
from astar_search.heuristics.embedding import EmbeddingDistance

__all__ = ["ZeroDistance", "ConstantDistance", "EmbeddingDistance"]
