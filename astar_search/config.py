"""
Configuration constants for the A* search package.

All tunable parameters are defined here. Values that can be overridden
come from environment variables (a project-level .env file is honoured).
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of astar_search/
PROJECT_ROOT = Path(__file__).parent.parent

# Optional environment overrides
ENV_PATH = PROJECT_ROOT / ".env"

load_dotenv(ENV_PATH)

# =============================================================================
# Search Configuration
# =============================================================================

# Cost of moving along any single edge (edge weights are not modelled)
STEP_COST = 1

# =============================================================================
# Heuristic Configuration
# =============================================================================

# EmbeddingDistance maps cosine similarity to an integer distance:
# distance = round((1 - similarity) * EMBEDDING_DISTANCE_SCALE)
EMBEDDING_DISTANCE_SCALE = int(os.environ.get("ASTAR_EMBEDDING_SCALE", "100"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """
    Apply the package log level to the root logger.

    Args:
        level: Level name or number; defaults to LOG_LEVEL
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
