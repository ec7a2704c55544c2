"""Crossword grid engine for building and solving American-style crosswords.

This package exposes the public API surface via:

- ``crosser.engine.puzzle.Puzzle``: grid state, mutations and queries.
- ``crosser.io.cro_file``: reading and writing ``.cro`` puzzle documents.
"""

from .core.constants import CellModifier, Direction, PuzzleVariant
from .engine.puzzle import Puzzle
from .io.cro_file import read_puzzle, write_puzzle

__all__ = [
    "CellModifier",
    "Direction",
    "Puzzle",
    "PuzzleVariant",
    "read_puzzle",
    "write_puzzle",
]

__version__ = "0.1.0"
