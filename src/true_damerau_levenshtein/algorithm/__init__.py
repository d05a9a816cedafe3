"""algorithm subpackage — public API for the distance engine.

Provides the true Damerau–Levenshtein engine and its configuration.  Import
from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from true_damerau_levenshtein.algorithm import CharUnit, DistanceEngine

    engine = DistanceEngine(max_size=32, unit=CharUnit.CODE_POINT)
    engine.distance("a cat", "an act")  # 2
"""

from __future__ import annotations

from true_damerau_levenshtein.algorithm.config import (
    DEFAULT_MAX_SIZE,
    CharUnit,
    EngineConfig,
)
from true_damerau_levenshtein.algorithm.engine import DistanceEngine

__all__ = ["DEFAULT_MAX_SIZE", "CharUnit", "DistanceEngine", "EngineConfig"]
