"""DistanceMetric Protocol for anything that computes an edit distance.

Any class with a conformant ``distance`` method passes ``isinstance`` checks
— no inheritance required.  ``DistanceEngine`` and ``DistanceCache`` both
satisfy it, which lets the normalized-score helpers and the cache accept
either.

Example::

    from true_damerau_levenshtein.protocols import DistanceMetric

    class Hamming:
        def distance(self, a: str, b: str) -> int:
            return sum(x != y for x, y in zip(a, b, strict=True))

    assert isinstance(Hamming(), DistanceMetric)  # True — structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DistanceMetric(Protocol):
    """Structural protocol for edit-distance calculators.

    The ``distance`` method must return a non-negative int and may raise
    ``CapacityExceededError`` for inputs it cannot handle.  It must also be
    symmetric, ``distance(a, b) == distance(b, a)``: ``DistanceCache`` stores
    both orders under one entry unless built with ``symmetric=False``.
    """

    def distance(self, a: str, b: str) -> int: ...
