"""Puzzle state: mutation operations and queries over the grid."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from ..core.constants import DEFAULT_TITLE, CellModifier, Direction, PuzzleVariant
from ..core.exceptions import UnknownEntryError
from ..core.models import BLOCKER, Cell, Entry, TextContent
from ..utils.logger import get_logger
from .entries import EntryBuilder
from .fingerprint import grid_fingerprint
from .grid import GridConfig, PuzzleGrid


LOGGER = get_logger(__name__)

_MODIFIER_CYCLE: Dict[Optional[CellModifier], Optional[CellModifier]] = {
    None: CellModifier.SHADING,
    CellModifier.SHADING: CellModifier.CIRCLE,
    CellModifier.CIRCLE: None,
}


class Puzzle:
    """A crossword grid plus its derived entries.

    The puzzle is the single owner of its cells. Consumers mutate it through
    the methods below and read ``cells``, ``across_entries`` and
    ``down_entries`` afterwards; writing cell fields directly bypasses the
    entry rebuild. Access must be serialised by the caller.
    """

    def __init__(self, variant: PuzzleVariant, title: str = DEFAULT_TITLE) -> None:
        self.title = title
        self.variant = PuzzleVariant(variant)
        self.config = GridConfig.for_variant(self.variant)
        self.grid = PuzzleGrid(self.config)
        self.dim = self.grid.dim
        self.across_entries: List[Entry] = []
        self.down_entries: List[Entry] = []
        self.fill_only = False
        self.solved_fingerprint: Optional[int] = None
        self._builder = EntryBuilder(self.grid)
        self._entry_index: Dict[Tuple[Direction, int], Entry] = {}
        self.calculate_entries()

    @property
    def cells(self) -> List[Cell]:
        return self.grid.cells

    # ------------------------------------------------------------------
    # Grid access
    # ------------------------------------------------------------------
    def at(self, x: int, y: int) -> Cell:
        return self.grid.at(x, y)

    def calculate_entries(self) -> None:
        """Recompute labels, entries and links from the blocker layout."""

        if self.fill_only:
            LOGGER.debug("Grid is fill-only; skipping entry rebuild")
            return
        self._rebuild()

    def _rebuild(self) -> None:
        layout = self._builder.rebuild()
        self.across_entries = layout.across
        self.down_entries = layout.down
        self._entry_index = {
            (entry.direction, entry.label): entry
            for entry in (*layout.across, *layout.down)
        }

    # ------------------------------------------------------------------
    # Structural mutations
    # ------------------------------------------------------------------
    def cycle_blocker(self, x: int, y: int) -> None:
        """Toggle a cell between blocker and empty letter cell.

        Symmetric variants also toggle the cell rotated 180 degrees about the
        centre; the centre cell of an odd grid is its own mirror and flips once.
        """

        if self.fill_only:
            LOGGER.debug("Ignoring blocker toggle at %s on fill-only grid", (x, y))
            return
        index = self.grid.index(x, y)
        self._toggle_blocker(index)
        if self.config.symmetric:
            mirror = self.grid.mirror_index(index)
            if mirror != index:
                self._toggle_blocker(mirror)
        self._rebuild()

    def _toggle_blocker(self, index: int) -> None:
        cell = self.cells[index]
        if cell.is_blocker():
            cell.content = TextContent()
        else:
            cell.content = BLOCKER
            cell.across_clue_text = None
            cell.down_clue_text = None

    # ------------------------------------------------------------------
    # Cell content
    # ------------------------------------------------------------------
    def cycle_modifier(self, x: int, y: int) -> bool:
        """Advance the modifier none -> shading -> circle -> none."""

        cell = self.at(x, y)
        if self.fill_only or not isinstance(cell.content, TextContent):
            return False
        content = cell.content
        cell.content = TextContent(content.letters, _MODIFIER_CYCLE[content.modifier])
        return True

    def modify_sq_contents(self, x: int, y: int, character: str, append: bool) -> None:
        cell = self.at(x, y)
        if not isinstance(cell.content, TextContent):
            return
        content = cell.content
        letters = content.letters + character if append else character
        cell.content = TextContent(letters, content.modifier)

    def clear_sq_contents(self, x: int, y: int) -> None:
        cell = self.at(x, y)
        if isinstance(cell.content, TextContent):
            cell.content = TextContent("", cell.content.modifier)

    # ------------------------------------------------------------------
    # Clues
    # ------------------------------------------------------------------
    def find_entry(self, label: int, direction: Direction) -> Entry:
        try:
            return self._entry_index[(direction, label)]
        except KeyError:
            raise UnknownEntryError(f"No {direction.value.lower()} entry labelled {label}") from None

    def set_clue_text(self, label: int, direction: Direction, text: str) -> None:
        entry = self.find_entry(label, direction)
        if self.fill_only:
            LOGGER.debug("Ignoring clue edit for %s on fill-only grid", entry.heading)
            return
        entry.clue = text
        self.cells[entry.start].set_clue_text(direction, text)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_clue_entries(self, x: int, y: int) -> Tuple[Optional[Entry], Optional[Entry]]:
        cell = self.at(x, y)
        across = down = None
        if cell.across_entry is not None:
            across = self._entry_index[(Direction.ACROSS, cell.across_entry)]
        if cell.down_entry is not None:
            down = self._entry_index[(Direction.DOWN, cell.down_entry)]
        return across, down

    def get_square_clue_texts(self, x: int, y: int) -> Tuple[str, str]:
        across, down = self.get_clue_entries(x, y)
        return (
            f"{across.heading}: {across.clue}" if across else "",
            f"{down.heading}: {down.clue}" if down else "",
        )

    def iter_entry(self, entry: Entry) -> Iterator[int]:
        """Walk an entry from its first cell through the ``next`` links."""

        index: Optional[int] = entry.start
        while index is not None:
            yield index
            index = self.cells[index].next_index(entry.direction)

    def entry_answer(self, entry: Entry) -> str:
        """Current fill of ``entry``; empty cells read as ``_``."""

        return "".join(self.cells[index].letters or "_" for index in entry.member_cells)

    # ------------------------------------------------------------------
    # Solved state
    # ------------------------------------------------------------------
    def fingerprint(self) -> int:
        return grid_fingerprint(self.cells)

    def is_solved(self) -> bool:
        if self.solved_fingerprint is None:
            return False
        return self.fingerprint() == self.solved_fingerprint
