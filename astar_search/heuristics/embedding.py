"""
Embedding-based distance estimate for semantic graphs.

Nodes that carry a vector (e.g. article title embeddings) can be ranked by
how close their meaning is to the goal. Cosine similarity in [-1, 1] is
mapped onto an integer distance so it plugs into the integer-cost search:

    distance = round((1 - similarity) * scale), clamped to >= 0

Not admissible in general.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping

import numpy as np

from astar_search.config import EMBEDDING_DISTANCE_SCALE

logger = logging.getLogger(__name__)


class EmbeddingDistance:
    """
    Distance estimate from the cosine similarity of node embeddings.

    Nodes missing from the mapping, or with a zero vector, are treated as
    unrelated to everything and get the full scale as their distance.
    """

    def __init__(
        self,
        vectors: Mapping[Hashable, np.ndarray],
        scale: int = EMBEDDING_DISTANCE_SCALE,
    ) -> None:
        """
        Initialize from a node -> vector mapping.

        Args:
            vectors: Embedding per node; all vectors must share one dimension
            scale: Distance assigned to completely dissimilar nodes (>= 0)

        Raises:
            ValueError: If scale is negative
        """
        if scale < 0:
            raise ValueError(f"Scale must be non-negative, got {scale}")

        self._vectors = vectors
        self._scale = scale
        self._normalized: dict[Hashable, np.ndarray | None] = {}

    @property
    def scale(self) -> int:
        return self._scale

    def similarity(self, a: Hashable, b: Hashable) -> float | None:
        """
        Cosine similarity between two nodes.

        Returns None if either node has no usable embedding.
        """
        emb_a = self._get_normalized(a)
        emb_b = self._get_normalized(b)
        if emb_a is None or emb_b is None:
            return None
        return float(np.dot(emb_a, emb_b))

    def __call__(self, current: Hashable, target: Hashable) -> int:
        sim = self.similarity(current, target)
        if sim is None:
            return self._scale
        return max(0, int(round((1.0 - sim) * self._scale)))

    def _get_normalized(self, node: Hashable) -> np.ndarray | None:
        """Normalize a node's embedding to unit length, cached per node."""
        if node in self._normalized:
            return self._normalized[node]

        raw = self._vectors.get(node)
        if raw is None:
            logger.debug(f"No embedding for {node!r}")
            normalized = None
        else:
            emb = np.asarray(raw, dtype=np.float32)
            norm = np.linalg.norm(emb)
            normalized = emb / norm if norm > 0 else None

        self._normalized[node] = normalized
        return normalized

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={len(self._vectors)}, scale={self._scale})"
