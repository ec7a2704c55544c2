"""CLI entrypoint for the crossword grid engine."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from crosser.core.constants import DEFAULT_TITLE, PuzzleVariant
from crosser.core.exceptions import CrosserError
from crosser.engine.puzzle import Puzzle
from crosser.io.cro_file import read_puzzle, write_puzzle
from crosser.utils.logger import configure_logging
from crosser.utils.pretty import print_puzzle


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create, inspect and publish crossword templates (*.cro)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="Write an empty editable template")
    new.add_argument(
        "--variant",
        type=str,
        choices=[v.value for v in PuzzleVariant],
        default=PuzzleVariant.WEEKDAY.value,
        help="Puzzle size and symmetry rule",
    )
    new.add_argument("--title", type=str, default=DEFAULT_TITLE, help="Puzzle title")
    new.add_argument("--output", type=Path, required=True, help="Path of the .cro file")

    show = commands.add_parser("show", help="Print a puzzle's grid and clues")
    show.add_argument("path", type=Path, help="Path of the .cro file")

    publish = commands.add_parser(
        "publish",
        help="Strip the letters from a filled template and store its solution fingerprint",
    )
    publish.add_argument("path", type=Path, help="Filled template to publish")
    publish.add_argument("--output", type=Path, required=True, help="Path of the solvable .cro file")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    try:
        if args.command == "new":
            write_puzzle(Puzzle(PuzzleVariant(args.variant), title=args.title), args.output)
        elif args.command == "show":
            puzzle = read_puzzle(args.path)
            puzzle.title = args.path.stem
            print_puzzle(puzzle)
        elif args.command == "publish":
            puzzle = read_puzzle(args.path)
            if puzzle.fill_only:
                parser.error(f"{args.path} is already a published puzzle")
            write_puzzle(puzzle, args.output, strip_grid=True)
    except CrosserError as exc:
        parser.exit(1, f"error: {exc}\n")


if __name__ == "__main__":  # pragma: no cover
    main()
