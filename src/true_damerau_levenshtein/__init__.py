"""True Damerau–Levenshtein edit distance with a reusable workspace."""

from __future__ import annotations

from true_damerau_levenshtein.algorithm.config import (
    DEFAULT_MAX_SIZE,
    CharUnit,
    EngineConfig,
)
from true_damerau_levenshtein.algorithm.engine import DistanceEngine
from true_damerau_levenshtein.api import (
    distance,
    normalized_distance,
    normalized_similarity,
    shared_engine,
)
from true_damerau_levenshtein.cache import DistanceCache
from true_damerau_levenshtein.errors import CapacityExceededError
from true_damerau_levenshtein.protocols import DistanceMetric

__version__: str = "0.1.0"
__all__: list[str] = [
    "DEFAULT_MAX_SIZE",
    "CapacityExceededError",
    "CharUnit",
    "DistanceCache",
    "DistanceEngine",
    "DistanceMetric",
    "EngineConfig",
    "distance",
    "normalized_distance",
    "normalized_similarity",
    "shared_engine",
]
