"""Tests for the convenience functions in api.py.

Covers:
- distance() over the lazily built shared engine
- shared_engine() is built once and reused, with DEFAULT_MAX_SIZE capacity
- distance() raises CapacityExceededError past DEFAULT_MAX_SIZE
- normalized_distance() / normalized_similarity() ranges and edge cases
- Custom metrics (engine, cache) are honoured
"""

from __future__ import annotations

import logging

import pytest

from true_damerau_levenshtein import api
from true_damerau_levenshtein.algorithm.config import DEFAULT_MAX_SIZE, CharUnit
from true_damerau_levenshtein.algorithm.engine import DistanceEngine
from true_damerau_levenshtein.cache import DistanceCache
from true_damerau_levenshtein.errors import CapacityExceededError


class TestSharedEngine:
    def test_same_instance_every_call(self) -> None:
        assert api.shared_engine() is api.shared_engine()

    def test_default_capacity(self) -> None:
        assert api.shared_engine().max_size == DEFAULT_MAX_SIZE

    def test_built_lazily(self, caplog: pytest.LogCaptureFixture) -> None:
        api.shared_engine.cache_clear()
        with caplog.at_level(logging.DEBUG, logger="true_damerau_levenshtein.api"):
            api.distance("a", "b")
            api.distance("a", "b")
        built = [r for r in caplog.records if "Building shared" in r.getMessage()]
        assert len(built) == 1


class TestDistance:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("", "", 0),
            ("kitten", "sitting", 3),
            ("ab", "ba", 1),
            ("ca", "abc", 2),
            ("book", "back", 2),
        ],
    )
    def test_known_values(self, a: str, b: str, expected: int) -> None:
        assert api.distance(a, b) == expected

    def test_at_default_capacity(self) -> None:
        a = "a" * DEFAULT_MAX_SIZE
        assert api.distance(a, a) == 0

    def test_over_default_capacity(self) -> None:
        with pytest.raises(CapacityExceededError):
            api.distance("a" * (DEFAULT_MAX_SIZE + 1), "a")


class TestNormalized:
    def test_identical_is_zero_distance(self) -> None:
        assert api.normalized_distance("same", "same") == 0.0
        assert api.normalized_similarity("same", "same") == 1.0

    def test_both_empty(self) -> None:
        assert api.normalized_distance("", "") == 0.0
        assert api.normalized_similarity("", "") == 1.0

    def test_disjoint_is_one(self) -> None:
        assert api.normalized_distance("abc", "xyz") == 1.0

    def test_scaled_by_longer_input(self) -> None:
        assert api.normalized_distance("kitten", "sitting") == pytest.approx(3 / 7)
        assert api.normalized_similarity("ab", "ba") == pytest.approx(0.5)

    def test_custom_engine(self) -> None:
        engine = DistanceEngine(max_size=500)
        a, b = "x" * 400, "y" * 400
        assert api.normalized_distance(a, b, metric=engine) == 1.0

    def test_cache_metric(self) -> None:
        cache = DistanceCache(DistanceEngine(max_size=8))
        assert api.normalized_similarity("abcd", "abdc", metric=cache) == 0.75

    def test_byte_engine_measures_bytes(self) -> None:
        engine = DistanceEngine(max_size=8, unit=CharUnit.UTF8_BYTE)
        # two differing bytes out of five
        assert api.normalized_distance("café", "cafe", metric=engine) == pytest.approx(
            2 / 5
        )

    def test_cache_around_byte_engine_measures_bytes(self) -> None:
        engine = DistanceEngine(max_size=8, unit=CharUnit.UTF8_BYTE)
        cache = DistanceCache(DistanceEngine(max_size=8, unit=CharUnit.UTF8_BYTE))
        expected = api.normalized_distance("éa", "ea", metric=engine)
        assert expected == pytest.approx(2 / 3)
        assert api.normalized_distance("éa", "ea", metric=cache) == expected

    def test_unit_mismatch_is_not_clamped(self) -> None:
        class BytesBehindCodePoints:
            """Reports byte distances without advertising a byte unit."""

            def __init__(self) -> None:
                self.engine = DistanceEngine(max_size=8, unit=CharUnit.UTF8_BYTE)

            def distance(self, a: str, b: str) -> int:
                return self.engine.distance(a, b)

        # "é" vs "e": 2 differing bytes over 1 code point
        assert api.normalized_distance("é", "e", metric=BytesBehindCodePoints()) == 2.0
