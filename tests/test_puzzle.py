import unittest

from crosser.core.constants import CellModifier, Direction, PuzzleVariant
from crosser.core.exceptions import UnknownEntryError
from crosser.core.models import TextContent
from crosser.engine.fingerprint import content_fingerprint, grid_content
from crosser.engine.puzzle import Puzzle


def blocker_coords(puzzle: Puzzle):
    return {(cell.x, cell.y) for cell in puzzle.cells if cell.is_blocker()}


class BlockerSymmetryTests(unittest.TestCase):
    def test_weekday_mirrors_blocker(self) -> None:
        puzzle = Puzzle(PuzzleVariant.WEEKDAY)
        puzzle.cycle_blocker(3, 1)
        self.assertEqual(blocker_coords(puzzle), {(3, 1), (11, 13)})
        puzzle.cycle_blocker(11, 13)
        self.assertEqual(blocker_coords(puzzle), set())

    def test_sunday_mirrors_blocker(self) -> None:
        puzzle = Puzzle(PuzzleVariant.SUNDAY)
        puzzle.cycle_blocker(0, 20)
        self.assertEqual(blocker_coords(puzzle), {(0, 20), (20, 0)})

    def test_center_toggles_once(self) -> None:
        for variant, center in ((PuzzleVariant.WEEKDAY, 7), (PuzzleVariant.SUNDAY, 10)):
            with self.subTest(variant=variant):
                puzzle = Puzzle(variant)
                puzzle.cycle_blocker(center, center)
                self.assertEqual(blocker_coords(puzzle), {(center, center)})
                puzzle.cycle_blocker(center, center)
                self.assertEqual(blocker_coords(puzzle), set())

    def test_middle_row_off_center_is_mirrored(self) -> None:
        puzzle = Puzzle(PuzzleVariant.WEEKDAY)
        puzzle.cycle_blocker(2, 7)
        self.assertEqual(blocker_coords(puzzle), {(2, 7), (12, 7)})

    def test_mini_and_asymmetric_toggle_single_cell(self) -> None:
        for variant in (PuzzleVariant.MINI, PuzzleVariant.WEEKDAY_ASYMMETRIC):
            with self.subTest(variant=variant):
                puzzle = Puzzle(variant)
                puzzle.cycle_blocker(0, 0)
                self.assertEqual(blocker_coords(puzzle), {(0, 0)})

    def test_unblocking_gives_empty_text_cell(self) -> None:
        puzzle = Puzzle(PuzzleVariant.MINI)
        puzzle.modify_sq_contents(1, 1, "Q", append=False)
        puzzle.cycle_modifier(1, 1)
        puzzle.cycle_blocker(1, 1)
        puzzle.cycle_blocker(1, 1)
        self.assertEqual(puzzle.at(1, 1).content, TextContent("", None))

    def test_mirror_is_rebuilt_once_with_consistent_entries(self) -> None:
        puzzle = Puzzle(PuzzleVariant.WEEKDAY)
        puzzle.cycle_blocker(4, 0)
        row_top = [e for e in puzzle.across_entries if puzzle.cells[e.start].y == 0]
        row_bottom = [e for e in puzzle.across_entries if puzzle.cells[e.start].y == 14]
        self.assertEqual([e.length for e in row_top], [4, 10])
        self.assertEqual([e.length for e in row_bottom], [10, 4])


class CellContentTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = Puzzle(PuzzleVariant.MINI)

    def test_modifier_cycle(self) -> None:
        seen = []
        for _ in range(4):
            self.assertTrue(self.puzzle.cycle_modifier(2, 2))
            seen.append(self.puzzle.at(2, 2).modifier)
        self.assertEqual(seen, [CellModifier.SHADING, CellModifier.CIRCLE, None, CellModifier.SHADING])

    def test_modifier_keeps_letters(self) -> None:
        self.puzzle.modify_sq_contents(2, 2, "A", append=False)
        self.puzzle.cycle_modifier(2, 2)
        self.assertEqual(self.puzzle.at(2, 2).content, TextContent("A", CellModifier.SHADING))

    def test_modifier_rejected_on_blocker(self) -> None:
        self.puzzle.cycle_blocker(2, 2)
        self.assertFalse(self.puzzle.cycle_modifier(2, 2))
        self.assertTrue(self.puzzle.at(2, 2).is_blocker())

    def test_modifier_does_not_rebuild(self) -> None:
        entries = self.puzzle.across_entries
        self.puzzle.cycle_modifier(0, 0)
        self.assertIs(self.puzzle.across_entries, entries)

    def test_replace_and_append_letters(self) -> None:
        self.puzzle.cycle_modifier(1, 3)
        self.puzzle.modify_sq_contents(1, 3, "H", append=False)
        self.puzzle.modify_sq_contents(1, 3, "E", append=True)
        self.assertEqual(self.puzzle.at(1, 3).content, TextContent("HE", CellModifier.SHADING))
        self.puzzle.modify_sq_contents(1, 3, "X", append=False)
        self.assertEqual(self.puzzle.at(1, 3).letters, "X")

    def test_clear_keeps_modifier(self) -> None:
        self.puzzle.modify_sq_contents(0, 4, "Z", append=False)
        self.puzzle.cycle_modifier(0, 4)
        self.puzzle.cycle_modifier(0, 4)
        self.puzzle.clear_sq_contents(0, 4)
        self.assertEqual(self.puzzle.at(0, 4).content, TextContent("", CellModifier.CIRCLE))

    def test_text_edits_ignore_blockers(self) -> None:
        self.puzzle.cycle_blocker(3, 3)
        self.puzzle.modify_sq_contents(3, 3, "A", append=True)
        self.puzzle.clear_sq_contents(3, 3)
        self.assertTrue(self.puzzle.at(3, 3).is_blocker())
        self.assertEqual(self.puzzle.at(3, 3).letters, "")


class ClueQueryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = Puzzle(PuzzleVariant.MINI)

    def test_set_clue_text_updates_entry_and_start_cell(self) -> None:
        self.puzzle.set_clue_text(7, Direction.ACROSS, "Middle row")
        entry = self.puzzle.find_entry(7, Direction.ACROSS)
        self.assertEqual(entry.clue, "Middle row")
        self.assertEqual(self.puzzle.at(0, 2).across_clue_text, "Middle row")

    def test_unknown_label_raises(self) -> None:
        with self.assertRaises(UnknownEntryError):
            self.puzzle.set_clue_text(6, Direction.DOWN, "No such entry")
        with self.assertRaises(LookupError):
            self.puzzle.find_entry(42, Direction.ACROSS)

    def test_square_clue_texts(self) -> None:
        self.puzzle.set_clue_text(1, Direction.ACROSS, "Top")
        self.puzzle.set_clue_text(3, Direction.DOWN, "Centre column")
        self.assertEqual(self.puzzle.get_square_clue_texts(2, 0), ("1A: Top", "3D: Centre column"))
        self.assertEqual(self.puzzle.get_square_clue_texts(4, 1), ("6A: ", "5D: "))

    def test_blocker_has_no_clue_entries(self) -> None:
        self.puzzle.cycle_blocker(1, 1)
        self.assertEqual(self.puzzle.get_clue_entries(1, 1), (None, None))
        self.assertEqual(self.puzzle.get_square_clue_texts(1, 1), ("", ""))

    def test_entry_answer_marks_empty_cells(self) -> None:
        self.puzzle.modify_sq_contents(0, 0, "C", append=False)
        self.puzzle.modify_sq_contents(2, 0, "T", append=False)
        self.puzzle.modify_sq_contents(3, 0, "H", append=True)
        entry = self.puzzle.find_entry(1, Direction.ACROSS)
        self.assertEqual(self.puzzle.entry_answer(entry), "C_TH_")


class SolvedStateTests(unittest.TestCase):
    def test_fingerprint_covers_letters_and_blockers(self) -> None:
        puzzle = Puzzle(PuzzleVariant.MINI)
        self.assertEqual(puzzle.fingerprint(), content_fingerprint(""))
        puzzle.cycle_blocker(1, 0)
        puzzle.modify_sq_contents(0, 0, "A", append=False)
        puzzle.modify_sq_contents(2, 0, "B", append=False)
        puzzle.modify_sq_contents(2, 0, "C", append=True)
        self.assertEqual(grid_content(puzzle.cells), "A#BC")
        self.assertEqual(puzzle.fingerprint(), content_fingerprint("A#BC"))

    def test_fingerprint_ignores_modifiers_and_clues(self) -> None:
        puzzle = Puzzle(PuzzleVariant.MINI)
        before = puzzle.fingerprint()
        puzzle.cycle_modifier(0, 0)
        puzzle.set_clue_text(1, Direction.DOWN, "Anything")
        self.assertEqual(puzzle.fingerprint(), before)

    def test_fingerprint_is_stable_unsigned_64_bit(self) -> None:
        value = content_fingerprint("ABC#DEF")
        self.assertEqual(value, content_fingerprint("ABC#DEF"))
        self.assertGreaterEqual(value, 0)
        self.assertLess(value, 2 ** 64)
        self.assertNotEqual(value, content_fingerprint("ABC#DEG"))

    def test_is_solved_requires_target(self) -> None:
        puzzle = Puzzle(PuzzleVariant.MINI)
        self.assertFalse(puzzle.is_solved())
        puzzle.solved_fingerprint = puzzle.fingerprint()
        self.assertTrue(puzzle.is_solved())
        puzzle.modify_sq_contents(4, 4, "Z", append=False)
        self.assertFalse(puzzle.is_solved())


class FillOnlyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = Puzzle(PuzzleVariant.WEEKDAY)
        self.puzzle.set_clue_text(1, Direction.ACROSS, "Frozen")
        self.puzzle.fill_only = True

    def test_structural_edits_are_ignored(self) -> None:
        self.puzzle.cycle_blocker(0, 0)
        self.assertEqual(blocker_coords(self.puzzle), set())
        self.assertFalse(self.puzzle.cycle_modifier(0, 0))
        self.assertIsNone(self.puzzle.at(0, 0).modifier)

    def test_clue_edits_are_ignored(self) -> None:
        self.puzzle.set_clue_text(1, Direction.ACROSS, "Changed")
        self.assertEqual(self.puzzle.find_entry(1, Direction.ACROSS).clue, "Frozen")

    def test_letters_can_still_be_entered(self) -> None:
        self.puzzle.modify_sq_contents(0, 0, "A", append=False)
        self.assertEqual(self.puzzle.at(0, 0).letters, "A")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
