"""Reading and writing ``.cro`` puzzle documents.

A ``.cro`` file is a JSON object::

    {
      "variant": "weekday",
      "squares": ["#", "AB/n", "/s", ...],
      "across_clues": {"1": "...", ...},
      "down_clues": {"1": "...", ...},
      "hash_string": "NULL"
    }

Squares are listed in row-major order. A square without a ``/`` is a
blocker; otherwise the text before the last ``/`` holds the letters and the
code after it the modifier. ``hash_string`` is ``"NULL"`` for an editable
template or the decimal fingerprint of the solution for a distributable
puzzle.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ..core.constants import BLOCKER_MARKER, CellModifier, Direction, PuzzleVariant
from ..core.exceptions import PuzzleFormatError, PuzzleIOError, UnknownEntryError
from ..core.models import BLOCKER, Cell, CellContent, TextContent
from ..engine.puzzle import Puzzle
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

NULL_HASH = "NULL"

MODIFIER_CODES: Dict[Optional[CellModifier], str] = {
    None: "n",
    CellModifier.SHADING: "s",
    CellModifier.CIRCLE: "c",
}
CODE_MODIFIERS: Dict[str, Optional[CellModifier]] = {code: mod for mod, code in MODIFIER_CODES.items()}


# ----------------------------------------------------------------------
# Encoding
# ----------------------------------------------------------------------
def encode_square(cell: Cell, strip_grid: bool = False) -> str:
    if not isinstance(cell.content, TextContent):
        return BLOCKER_MARKER
    letters = "" if strip_grid else cell.content.letters
    return f"{letters}/{MODIFIER_CODES[cell.content.modifier]}"


def puzzle_to_document(puzzle: Puzzle, strip_grid: bool = False) -> Dict[str, Any]:
    """Build the JSON-ready document for ``puzzle``.

    With ``strip_grid`` the letters are left out and the fingerprint of the
    current content is stored, producing a puzzle that can be solved and
    checked. Without it the document is an editable template.
    """

    return {
        "variant": puzzle.variant.value,
        "squares": [encode_square(cell, strip_grid) for cell in puzzle.cells],
        "across_clues": {str(entry.label): entry.clue for entry in puzzle.across_entries},
        "down_clues": {str(entry.label): entry.clue for entry in puzzle.down_entries},
        "hash_string": str(puzzle.fingerprint()) if strip_grid else NULL_HASH,
    }


def write_puzzle(puzzle: Puzzle, path: Path | str, strip_grid: bool = False) -> None:
    document = puzzle_to_document(puzzle, strip_grid=strip_grid)
    path = Path(path)
    try:
        path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")
    except OSError as exc:
        raise PuzzleIOError(f"Cannot write puzzle to {path}: {exc}") from exc
    LOGGER.info("Puzzle saved to %s (%s)", path, "solvable" if strip_grid else "template")


# ----------------------------------------------------------------------
# Decoding
# ----------------------------------------------------------------------
def decode_square(raw: Any) -> CellContent:
    if not isinstance(raw, str):
        raise PuzzleFormatError(f"Square must be a string, got {type(raw).__name__}")
    letters, separator, code = raw.rpartition("/")
    if not separator:
        return BLOCKER
    if code not in CODE_MODIFIERS:
        raise PuzzleFormatError(f"Unknown modifier code {code!r} in square {raw!r}")
    return TextContent(letters, CODE_MODIFIERS[code])


def _parse_variant(raw: Any) -> PuzzleVariant:
    try:
        return PuzzleVariant(raw)
    except ValueError:
        raise PuzzleFormatError(f"Unknown puzzle variant {raw!r}") from None


def _apply_clues(puzzle: Puzzle, raw: Any, direction: Direction) -> None:
    field_name = f"{direction.value.lower()}_clues"
    if not isinstance(raw, Mapping):
        raise PuzzleFormatError(f"'{field_name}' must be an object")
    for label_str, clue in raw.items():
        try:
            label = int(label_str)
        except ValueError:
            raise PuzzleFormatError(f"Invalid clue label {label_str!r} in '{field_name}'") from None
        if not isinstance(clue, str):
            raise PuzzleFormatError(f"Clue {label_str} in '{field_name}' must be a string")
        try:
            puzzle.set_clue_text(label, direction, clue)
        except UnknownEntryError as exc:
            raise PuzzleFormatError(str(exc)) from exc


def _parse_hash(raw: Any) -> Optional[int]:
    # Older documents predate the field.
    if raw is None or raw == NULL_HASH:
        return None
    if not isinstance(raw, str) or not (raw.isascii() and raw.isdigit()):
        raise PuzzleFormatError(f"Invalid hash_string {raw!r}")
    return int(raw)


def puzzle_from_document(document: Any) -> Puzzle:
    """Build a new puzzle from a decoded ``.cro`` document."""

    if not isinstance(document, Mapping):
        raise PuzzleFormatError("Puzzle document must be a JSON object")

    puzzle = Puzzle(_parse_variant(document.get("variant")))

    squares = document.get("squares")
    if not isinstance(squares, list):
        raise PuzzleFormatError("'squares' must be an array")
    if len(squares) != len(puzzle.cells):
        raise PuzzleFormatError(
            f"Expected {len(puzzle.cells)} squares for {puzzle.variant.value}, got {len(squares)}"
        )
    contents: List[CellContent] = [decode_square(raw) for raw in squares]
    for cell, content in zip(puzzle.cells, contents):
        cell.content = content
    puzzle.calculate_entries()

    _apply_clues(puzzle, document.get("across_clues"), Direction.ACROSS)
    _apply_clues(puzzle, document.get("down_clues"), Direction.DOWN)

    solved_fingerprint = _parse_hash(document.get("hash_string"))
    if solved_fingerprint is not None:
        puzzle.solved_fingerprint = solved_fingerprint
        puzzle.fill_only = True
    return puzzle


def read_puzzle(path: Path | str) -> Puzzle:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PuzzleIOError(f"Cannot read puzzle from {path}: {exc}") from exc
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PuzzleFormatError(f"Error parsing JSON in {path}: {exc}") from exc
    try:
        puzzle = puzzle_from_document(document)
    except PuzzleFormatError as exc:
        LOGGER.warning("Rejected puzzle file %s: %s", path, exc)
        raise
    LOGGER.info(
        "Puzzle loaded from %s (%s, %s)",
        path,
        puzzle.variant.value,
        "fill-only" if puzzle.fill_only else "template",
    )
    return puzzle
