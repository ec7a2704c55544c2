"""Data models supporting the crossword engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .constants import CellModifier, Direction


@dataclass(frozen=True)
class Blocker:
    """Content of a cell that is not part of any word."""


@dataclass(frozen=True)
class TextContent:
    """Content of a letter cell. ``letters`` may hold a multi-character rebus."""

    letters: str = ""
    modifier: Optional[CellModifier] = None


CellContent = Union[Blocker, TextContent]

BLOCKER = Blocker()


@dataclass
class Cell:
    """Represents a grid cell with its derived entry metadata."""

    x: int
    y: int
    content: CellContent = field(default_factory=TextContent)
    label: Optional[int] = None
    across_entry: Optional[int] = None
    down_entry: Optional[int] = None
    next_across: Optional[int] = None
    prev_across: Optional[int] = None
    next_down: Optional[int] = None
    prev_down: Optional[int] = None
    across_clue_text: Optional[str] = None
    down_clue_text: Optional[str] = None

    def is_blocker(self) -> bool:
        return isinstance(self.content, Blocker)

    @property
    def letters(self) -> str:
        if isinstance(self.content, TextContent):
            return self.content.letters
        return ""

    @property
    def modifier(self) -> Optional[CellModifier]:
        if isinstance(self.content, TextContent):
            return self.content.modifier
        return None

    def entry_label(self, direction: Direction) -> Optional[int]:
        return self.across_entry if direction == Direction.ACROSS else self.down_entry

    def next_index(self, direction: Direction) -> Optional[int]:
        return self.next_across if direction == Direction.ACROSS else self.next_down

    def prev_index(self, direction: Direction) -> Optional[int]:
        return self.prev_across if direction == Direction.ACROSS else self.prev_down

    def clue_text(self, direction: Direction) -> Optional[str]:
        return self.across_clue_text if direction == Direction.ACROSS else self.down_clue_text

    def set_clue_text(self, direction: Direction, text: Optional[str]) -> None:
        if direction == Direction.ACROSS:
            self.across_clue_text = text
        else:
            self.down_clue_text = text

    def clear_derived(self) -> None:
        """Drop label, entry membership and links ahead of a rebuild."""

        self.label = None
        self.across_entry = None
        self.down_entry = None
        self.next_across = None
        self.prev_across = None
        self.next_down = None
        self.prev_down = None


@dataclass
class Entry:
    """A maximal run of letter cells along one axis."""

    label: int
    direction: Direction
    member_cells: List[int]
    clue: str = ""

    @property
    def length(self) -> int:
        return len(self.member_cells)

    @property
    def start(self) -> int:
        return self.member_cells[0]

    @property
    def heading(self) -> str:
        return f"{self.label}{self.direction.suffix}"
