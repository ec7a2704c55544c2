"""Pretty-print helpers for puzzles."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

from ..core.constants import BLOCKER_MARKER, CellModifier

if TYPE_CHECKING:
    from ..core.models import Cell, Entry
    from ..engine.puzzle import Puzzle


MODIFIER_MARKS = {
    CellModifier.SHADING: "*",
    CellModifier.CIRCLE: "o",
}


def cell_symbol(cell: Cell) -> str:
    if cell.is_blocker():
        return BLOCKER_MARKER
    symbol = cell.letters or "."
    # Rebus cells only show their first letter in the grid view.
    return symbol[0] + MODIFIER_MARKS.get(cell.modifier, "")


def format_grid(puzzle: Puzzle) -> str:
    width = puzzle.dim
    header_cells = [f"{x:>3}" for x in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (4 * width - 1))
    for y in range(width):
        row_cells = [cell_symbol(puzzle.at(x, y)) for x in range(width)]
        row_render = " ".join(f"{symbol:>3}" for symbol in row_cells)
        lines.append(f"{y:>2} | {row_render}")
    return "\n".join(lines)


def _format_entry(puzzle: Puzzle, entry: Entry) -> str:
    return f"  {entry.heading:>4}: {entry.clue or '(no clue)'} [{puzzle.entry_answer(entry)}]"


def format_clues(puzzle: Puzzle) -> str:
    lines: List[str] = ["Across:"]
    lines.extend(_format_entry(puzzle, entry) for entry in puzzle.across_entries)
    lines.append("Down:")
    lines.extend(_format_entry(puzzle, entry) for entry in puzzle.down_entries)
    return "\n".join(lines)


def print_puzzle(puzzle: Puzzle, *, stream=None) -> None:
    """Print the grid, clue lists and solved state of ``puzzle``."""

    stream = stream or sys.stdout
    print(f"{puzzle.title} ({puzzle.variant.value}, {puzzle.dim}x{puzzle.dim})", file=stream)
    print(format_grid(puzzle), file=stream)
    print(file=stream)
    print(format_clues(puzzle), file=stream)
    if puzzle.solved_fingerprint is not None:
        print(file=stream)
        print(f"Solved: {'yes' if puzzle.is_solved() else 'no'}", file=stream)
