"""Derivation of labels, entries and intra-entry links from the blocker layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from ..core.constants import Direction
from ..core.models import Entry
from ..utils.logger import get_logger
from .grid import PuzzleGrid


LOGGER = get_logger(__name__)


@dataclass
class EntryLayout:
    """Result of a full rebuild."""

    across: List[Entry] = field(default_factory=list)
    down: List[Entry] = field(default_factory=list)


class EntryBuilder:
    """Recomputes every derived cell field from scratch.

    The build is O(dim^2) and has no incremental mode: labels shift globally
    whenever a blocker moves, so a partial update would touch most cells
    anyway.
    """

    def __init__(self, grid: PuzzleGrid) -> None:
        self.grid = grid

    def rebuild(self) -> EntryLayout:
        cells = self.grid.cells
        for cell in cells:
            cell.clear_derived()
            if cell.is_blocker():
                cell.across_clue_text = None
                cell.down_clue_text = None

        across_starts = self._mark_starts(self.grid.rows())
        down_starts = self._mark_starts(self.grid.columns())
        label_count = self._assign_labels(across_starts, down_starts)

        layout = EntryLayout()
        for line in self.grid.rows():
            layout.across.extend(self._build_line(line, Direction.ACROSS))
        for line in self.grid.columns():
            layout.down.extend(self._build_line(line, Direction.DOWN))
        # Columns are scanned left to right, so down labels come out of order.
        layout.down.sort(key=lambda entry: entry.label)

        LOGGER.debug(
            "Rebuilt entries: %s labels, %s across, %s down",
            label_count,
            len(layout.across),
            len(layout.down),
        )
        return layout

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------
    def _mark_starts(self, lines: Iterable[Sequence[int]]) -> List[bool]:
        cells = self.grid.cells
        starts = [False] * len(cells)
        for line in lines:
            was_blocker = True
            for index in line:
                if cells[index].is_blocker():
                    was_blocker = True
                    continue
                if was_blocker:
                    starts[index] = True
                was_blocker = False
        return starts

    def _assign_labels(self, across_starts: List[bool], down_starts: List[bool]) -> int:
        current = 0
        for index, cell in enumerate(self.grid.cells):
            if across_starts[index] or down_starts[index]:
                current += 1
                cell.label = current
        return current

    def _build_line(self, line: Sequence[int], direction: Direction) -> List[Entry]:
        entries: List[Entry] = []
        run: List[int] = []
        for index in line:
            if self.grid.cells[index].is_blocker():
                if run:
                    entries.append(self._build_entry(run, direction))
                    run = []
                continue
            run.append(index)
        if run:
            entries.append(self._build_entry(run, direction))
        return entries

    def _build_entry(self, run: List[int], direction: Direction) -> Entry:
        cells = self.grid.cells
        first = cells[run[0]]
        label = first.label
        assert label is not None, f"run start {run[0]} has no label"

        for position, index in enumerate(run):
            cell = cells[index]
            prev_index = run[position - 1] if position > 0 else None
            next_index = run[position + 1] if position + 1 < len(run) else None
            if direction == Direction.ACROSS:
                cell.across_entry = label
                cell.prev_across = prev_index
                cell.next_across = next_index
            else:
                cell.down_entry = label
                cell.prev_down = prev_index
                cell.next_down = next_index
            if position > 0:
                cell.set_clue_text(direction, None)

        clue = first.clue_text(direction)
        if clue is None:
            clue = ""
            first.set_clue_text(direction, clue)
        return Entry(label=label, direction=direction, member_cells=list(run), clue=clue)
