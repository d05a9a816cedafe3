"""DistanceEngine: true Damerau–Levenshtein distance with a reusable workspace.

Implements the Lowrance–Wagner dynamic program, which (unlike the "optimal
string alignment" variant) lets a transposed pair take part in further
edits.  A per-character LastSeen table records where each unit of ``a`` last
occurred, so the transposition lookback costs O(1) per cell.

Matrix layout for inputs of length ``m`` and ``n``::

    D[0][*] and D[*][0]   sentinel "infinity" (m + n + 1)
    D[i + 1][j + 1]       distance between a[:i] and b[:j]

The matrix is allocated once at ``(max_size + 2) x (max_size + 2)`` and only
the top-left ``(m + 2) x (n + 2)`` block is written by a call.

Reference:
    https://en.wikipedia.org/wiki/Damerau%E2%80%93Levenshtein_distance#Distance_with_adjacent_transpositions
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

import numpy as np

from true_damerau_levenshtein.algorithm.config import (
    DEFAULT_MAX_SIZE,
    CharUnit,
    EngineConfig,
)
from true_damerau_levenshtein.errors import CapacityExceededError


class DistanceEngine:
    """Reusable true Damerau–Levenshtein calculator.

    The engine owns a preallocated cost matrix and LastSeen table and
    mutates both in place on every ``distance`` call, so repeated calls do
    not allocate.  That shared state makes an instance **not safe for
    concurrent use**: give each thread its own engine, or serialise calls
    with an external lock.

    Example::

        from true_damerau_levenshtein import DistanceEngine

        engine = DistanceEngine(max_size=64)
        engine.distance("kitten", "sitting")  # 3
        engine.distance("ab", "ba")           # 1 (one transposition)
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        unit: CharUnit | str = CharUnit.CODE_POINT,
    ) -> None:
        """Allocate the workspace for inputs up to ``max_size`` units long.

        Args:
            max_size: Capacity bound for both inputs.  Must be >= 1.
            unit: ``CharUnit.CODE_POINT`` (default) or ``CharUnit.UTF8_BYTE``.

        Raises:
            ValueError: If ``max_size`` is not a positive int or ``unit`` is
                not a known CharUnit.
        """
        self._config = EngineConfig(max_size=max_size, unit=CharUnit(unit))
        size = self._config.max_size + 2
        self._matrix = np.zeros((size, size), dtype=np.int64)
        self._last_seen: dict[Hashable, int] = {}

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> EngineConfig:
        """The engine's immutable configuration."""
        return self._config

    @property
    def max_size(self) -> int:
        """Longest input, in ``unit``, this engine accepts."""
        return self._config.max_size

    @property
    def unit(self) -> CharUnit:
        """Unit inputs are compared and measured in."""
        return self._config.unit

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def distance(self, a: str | bytes, b: str | bytes) -> int:
        """Return the true Damerau–Levenshtein distance between ``a`` and ``b``.

        Callers are responsible for any case folding, whitespace trimming or
        Unicode normalization they want applied first.

        Args:
            a: First string.  ``bytes`` are compared byte by byte.
            b: Second string.

        Returns:
            Non-negative number of insertions, deletions, substitutions and
            adjacent transpositions needed to turn ``a`` into ``b``.

        Raises:
            CapacityExceededError: If both inputs are non-empty and either is
                longer than ``max_size``.
        """
        seq_a = self._units(a)
        seq_b = self._units(b)
        len_a, len_b = len(seq_a), len(seq_b)

        # Empty inputs short-circuit before the capacity check.
        if len_a == 0:
            return len_b
        if len_b == 0:
            return len_a
        if len_a > self.max_size:
            raise CapacityExceededError(len_a, self.max_size)
        if len_b > self.max_size:
            raise CapacityExceededError(len_b, self.max_size)

        return self._compute(seq_a, seq_b)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _units(self, text: str | bytes) -> Sequence[Hashable]:
        """Split ``text`` into the comparable units selected by the config."""
        if isinstance(text, bytes):
            return text
        if not isinstance(text, str):
            msg = f"expected str or bytes, got {type(text).__name__}"
            raise TypeError(msg)
        if self.unit == CharUnit.UTF8_BYTE:
            return text.encode("utf-8")
        return text

    def _compute(self, a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
        """Fill the workspace for non-empty, in-capacity ``a`` and ``b``."""
        m = len(a)
        n = len(b)
        d = self._matrix
        last_seen = self._last_seen

        inf = m + n + 1
        d[0, 0] = inf
        for i in range(m + 1):
            d[i + 1, 1] = i
            d[i + 1, 0] = inf
        for j in range(n + 1):
            d[1, j + 1] = j
            d[0, j + 1] = inf

        # Every unit of b must resolve; units of a are overwritten row by row.
        last_seen.clear()
        for unit in (*a, *b):
            last_seen[unit] = 0

        for i in range(1, m + 1):
            ch_a = a[i - 1]
            prev_row = d[i]
            row = d[i + 1]
            db = 0
            for j in range(1, n + 1):
                ch_b = b[j - 1]
                i1 = last_seen[ch_b]
                j1 = db
                cost = 1
                if ch_a == ch_b:
                    cost = 0
                    db = j

                row[j + 1] = min(
                    prev_row[j] + cost,  # substitution
                    row[j] + 1,  # insertion
                    prev_row[j + 1] + 1,  # deletion
                    d[i1, j1] + (i - i1 - 1) + 1 + (j - j1 - 1),  # transposition
                )
            last_seen[ch_a] = i

        return int(d[m + 1, n + 1])
