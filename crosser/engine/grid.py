"""Grid storage and coordinate helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..core.constants import SYMMETRIC_VARIANTS, VARIANT_DIMENSIONS, Bounds, PuzzleVariant
from ..core.models import Cell


@dataclass(frozen=True)
class GridConfig:
    """Configuration values driving the grid layout."""

    dim: int
    symmetric: bool = False

    @classmethod
    def for_variant(cls, variant: PuzzleVariant) -> "GridConfig":
        return cls(dim=VARIANT_DIMENSIONS[variant], symmetric=variant in SYMMETRIC_VARIANTS)

    def bounds(self) -> Bounds:
        return Bounds(dim=self.dim)


class PuzzleGrid:
    """Flat row-major cell store with coordinate-indexed access."""

    def __init__(self, config: GridConfig) -> None:
        self.config = config
        self.dim = config.dim
        self.bounds = config.bounds()
        self.cells: List[Cell] = [
            Cell(x=x, y=y) for y in range(self.dim) for x in range(self.dim)
        ]

    def __len__(self) -> int:
        return len(self.cells)

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------
    def index(self, x: int, y: int) -> int:
        if not self.bounds.contains(x, y):
            raise IndexError(f"Cell {(x, y)} outside {self.dim}x{self.dim} grid")
        return y * self.dim + x

    def coords(self, index: int) -> Tuple[int, int]:
        if not 0 <= index < len(self.cells):
            raise IndexError(f"Cell index {index} outside grid")
        return index % self.dim, index // self.dim

    def mirror_index(self, index: int) -> int:
        """Index of the cell rotated 180 degrees about the grid centre."""

        x, y = self.coords(index)
        return self.index(self.dim - 1 - x, self.dim - 1 - y)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def at(self, x: int, y: int) -> Cell:
        return self.cells[self.index(x, y)]

    def rows(self) -> Iterator[List[int]]:
        for y in range(self.dim):
            yield [y * self.dim + x for x in range(self.dim)]

    def columns(self) -> Iterator[List[int]]:
        for x in range(self.dim):
            yield [y * self.dim + x for y in range(self.dim)]
