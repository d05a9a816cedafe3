"""Deterministic string generators for performance benchmarks.

All generators produce fixed, reproducible strings.  No random values.
Three tiers matching common engine capacities: 10, 100 and 500 characters.
Each tier provides both "similar" and "dissimilar" pair generators.
"""

from __future__ import annotations

import pytest

from true_damerau_levenshtein import DistanceEngine

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def generate_word(length: int, offset: int = 0) -> str:
    """Generate a deterministic string cycling through the alphabet."""
    return "".join(ALPHABET[(i * 7 + offset) % len(ALPHABET)] for i in range(length))


def _make_similar(length: int) -> tuple[str, str]:
    """Generate a pair differing by a swap every 10 characters."""
    left = generate_word(length)
    chars = list(left)
    for k in range(0, length - 1, 10):
        chars[k], chars[k + 1] = chars[k + 1], chars[k]
    return left, "".join(chars)


def _make_dissimilar(length: int) -> tuple[str, str]:
    """Generate a pair with no shared alignment."""
    return generate_word(length), generate_word(length, offset=13)


# --- Fixtures for each size tier ---


@pytest.fixture
def engine_500() -> DistanceEngine:
    """Engine large enough for every tier."""
    return DistanceEngine(max_size=500)


@pytest.fixture
def pair_10_similar() -> tuple[str, str]:
    return _make_similar(10)


@pytest.fixture
def pair_10_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(10)


@pytest.fixture
def pair_100_similar() -> tuple[str, str]:
    return _make_similar(100)


@pytest.fixture
def pair_100_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(100)


@pytest.fixture
def pair_500_similar() -> tuple[str, str]:
    return _make_similar(500)


@pytest.fixture
def pair_500_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(500)
