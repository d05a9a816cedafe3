"""DistanceCache: LRU-backed memoizing proxy for any DistanceMetric.

Wraps any DistanceMetric-conformant object and transparently caches distance
results in memory.  Because the true Damerau–Levenshtein distance is
symmetric, ``(a, b)`` and ``(b, a)`` share one entry (pass
``symmetric=False`` for metrics without that property).  LRU eviction occurs
silently when ``max_size`` is exceeded — no error is raised.

Each ``DistanceCache`` instance maintains its own ``LRUCache`` — there is no
class-level shared state.  Like the engine it wraps, a cache is **not safe
for concurrent use**.

Example::

    from true_damerau_levenshtein import DistanceCache, DistanceEngine

    cache = DistanceCache(DistanceEngine(max_size=64), max_size=1024)

    cache.distance("kitten", "sitting")  # computed by the engine
    cache.distance("sitting", "kitten")  # served from memory
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

from true_damerau_levenshtein.algorithm.config import CharUnit

if TYPE_CHECKING:
    from true_damerau_levenshtein.protocols import DistanceMetric


class DistanceCache:
    """LRU-backed caching proxy around any DistanceMetric.

    Satisfies the ``DistanceMetric`` Protocol structurally.  Failed
    computations (e.g. ``CapacityExceededError``) propagate to the caller
    and are never cached.

    Args:
        metric: Any object with a ``distance(a, b) -> int`` method, usually a
            ``DistanceEngine``.
        max_size: Maximum number of string pairs to remember.  Defaults to
            512.  When exceeded, the least-recently-used pair is evicted.
        symmetric: Whether ``(a, b)`` and ``(b, a)`` may share an entry.
            Defaults to True; pass False for an asymmetric metric.
    """

    def __init__(
        self,
        metric: DistanceMetric,
        max_size: int = 512,
        symmetric: bool = True,
    ) -> None:
        self._metric: Any = metric
        self._symmetric = symmetric
        self._cache: LRUCache[Hashable, int] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of pairs this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of pairs stored in the cache."""
        return int(self._cache.currsize)

    @property
    def unit(self) -> CharUnit:
        """Unit the wrapped metric measures inputs in."""
        return CharUnit(getattr(self._metric, "unit", CharUnit.CODE_POINT))

    # ------------------------------------------------------------------
    # DistanceMetric Protocol surface
    # ------------------------------------------------------------------

    def distance(self, a: str | bytes, b: str | bytes) -> int:
        """Return the wrapped metric's distance, computing it at most once per pair.

        Args:
            a: First string.
            b: Second string.

        Returns:
            The distance between ``a`` and ``b``.
        """
        key = self._key(a, b)
        try:
            return self._cache[key]
        except KeyError:
            pass
        result = int(self._metric.distance(a, b))
        self._cache[key] = result
        return result

    def clear(self) -> None:
        """Drop every cached pair."""
        self._cache.clear()

    def _key(self, a: str | bytes, b: str | bytes) -> Hashable:
        # Tag with the type so str and bytes never compare or collide.
        left = (type(a).__name__, a)
        right = (type(b).__name__, b)
        if not self._symmetric:
            return left, right
        return frozenset((left, right))
