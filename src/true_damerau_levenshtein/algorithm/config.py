"""EngineConfig and CharUnit for DistanceEngine configuration.

EngineConfig is a frozen (immutable) dataclass holding the engine's
capacity bound and the unit inputs are indexed by.  CharUnit selects that
unit: Unicode code points or UTF-8 bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

DEFAULT_MAX_SIZE = 100


class CharUnit(StrEnum):
    """Unit a DistanceEngine compares, counts and bounds its inputs in.

    - CODE_POINT: One unit per Unicode code point of a ``str``.
    - UTF8_BYTE:  One unit per byte of the UTF-8 encoding.  Multi-byte
                  characters are compared byte by byte, so "é" vs "e"
                  costs differ from the code-point view.
    """

    CODE_POINT = auto()
    UTF8_BYTE = auto()


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable configuration for a DistanceEngine.

    Attributes:
        max_size: Longest input (in ``unit``) the engine's workspace can
            hold.  Must be a positive integer.
        unit: How inputs are split into comparable units.
    """

    max_size: int = DEFAULT_MAX_SIZE
    unit: CharUnit = CharUnit.CODE_POINT

    def __post_init__(self) -> None:
        if isinstance(self.max_size, bool) or not isinstance(self.max_size, int):
            msg = f"max_size must be an int, got {type(self.max_size).__name__}"
            raise ValueError(msg)
        if self.max_size < 1:
            msg = f"max_size must be >= 1, got {self.max_size}"
            raise ValueError(msg)
        try:
            unit = CharUnit(self.unit)
        except ValueError:
            msg = f"unit must be one of {[u.value for u in CharUnit]}, got {self.unit!r}"
            raise ValueError(msg) from None
        # Accept plain strings ("utf8_byte") and store the enum member.
        object.__setattr__(self, "unit", unit)
