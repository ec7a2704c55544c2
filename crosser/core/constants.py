"""Shared constants and enumerations for the crossword engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet


class PuzzleVariant(str, Enum):
    """Supported puzzle sizes. Values double as the persisted identifiers."""

    MINI = "mini"
    WEEKDAY = "weekday"
    WEEKDAY_ASYMMETRIC = "weekday_asymmetric"
    SUNDAY = "sunday"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def suffix(self) -> str:
        return "A" if self is Direction.ACROSS else "D"


class CellModifier(str, Enum):
    """Visual annotations a letter cell can carry."""

    SHADING = "SHADING"
    CIRCLE = "CIRCLE"


VARIANT_DIMENSIONS: Dict[PuzzleVariant, int] = {
    PuzzleVariant.MINI: 5,
    PuzzleVariant.WEEKDAY: 15,
    PuzzleVariant.WEEKDAY_ASYMMETRIC: 15,
    PuzzleVariant.SUNDAY: 21,
}

# Variants whose blockers are mirrored through the grid centre.
SYMMETRIC_VARIANTS: FrozenSet[PuzzleVariant] = frozenset(
    {PuzzleVariant.WEEKDAY, PuzzleVariant.SUNDAY}
)

BLOCKER_MARKER = "#"
DEFAULT_TITLE = "New Puzzle"


@dataclass(frozen=True)
class Bounds:
    """Simple square bounds helper."""

    dim: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.dim and 0 <= y < self.dim
