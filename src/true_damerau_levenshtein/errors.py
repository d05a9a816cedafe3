"""Exceptions raised by true-damerau-levenshtein."""

from __future__ import annotations

__all__ = ["CapacityExceededError"]


class CapacityExceededError(ValueError):
    """An input is longer than the engine's preallocated workspace allows.

    Attributes:
        length: Length of the offending input, in the engine's unit.
        max_size: The engine's capacity bound.
    """

    def __init__(self, length: int, max_size: int) -> None:
        self.length = length
        self.max_size = max_size
        super().__init__(
            f"input length {length} exceeds engine capacity max_size={max_size}"
        )
