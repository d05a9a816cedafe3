"""Public convenience functions for true-damerau-levenshtein.

``distance`` computes against one process-wide ``DistanceEngine`` that is
built lazily on first use with ``DEFAULT_MAX_SIZE`` capacity.  The shared
engine mutates its workspace on every call, so these functions are
**not safe for concurrent use**; they are meant for quick, occasional,
single-threaded calls.  Anything hotter or multi-threaded should construct
its own ``DistanceEngine`` (one per thread).
"""

from __future__ import annotations

import logging
from functools import cache
from typing import TYPE_CHECKING

from true_damerau_levenshtein.algorithm.config import DEFAULT_MAX_SIZE, CharUnit
from true_damerau_levenshtein.algorithm.engine import DistanceEngine

if TYPE_CHECKING:
    from true_damerau_levenshtein.protocols import DistanceMetric

__all__ = ["distance", "normalized_distance", "normalized_similarity", "shared_engine"]

logger = logging.getLogger(__name__)


@cache
def shared_engine() -> DistanceEngine:
    """Return the process-wide engine, building it on the first call.

    Not safe for concurrent use — see the module docstring.
    """
    logger.debug("Building shared DistanceEngine (max_size=%d)", DEFAULT_MAX_SIZE)
    return DistanceEngine(max_size=DEFAULT_MAX_SIZE)


def distance(a: str, b: str) -> int:
    """Return the true Damerau–Levenshtein distance using the shared engine.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The edit distance between ``a`` and ``b``.

    Raises:
        CapacityExceededError: If either non-empty input is longer than
            ``DEFAULT_MAX_SIZE`` characters.
    """
    return shared_engine().distance(a, b)


def normalized_distance(
    a: str,
    b: str,
    metric: DistanceMetric | None = None,
) -> float:
    """Return the distance scaled to [0.0, 1.0] by the longer input's length.

    Computed as ``distance / max(len(a), len(b))`` with lengths taken in the
    metric's unit.  Two empty strings score 0.0.

    Args:
        a: First string.
        b: Second string.
        metric: Distance calculator to use.  Defaults to the shared engine.

    Returns:
        0.0 for identical inputs, 1.0 for inputs with nothing in common.
    """
    if metric is None:
        metric = shared_engine()
    unit = getattr(metric, "unit", CharUnit.CODE_POINT)
    longest = max(_unit_length(a, unit), _unit_length(b, unit))
    if longest == 0:
        return 0.0
    return metric.distance(a, b) / longest


def normalized_similarity(
    a: str,
    b: str,
    metric: DistanceMetric | None = None,
) -> float:
    """Return ``1.0 - normalized_distance(a, b, metric)``.

    Returns:
        A float in [0.0, 1.0].  1.0 means identical.
    """
    return 1.0 - normalized_distance(a, b, metric=metric)


def _unit_length(text: str | bytes, unit: CharUnit) -> int:
    if isinstance(text, str) and unit == CharUnit.UTF8_BYTE:
        return len(text.encode("utf-8"))
    return len(text)
