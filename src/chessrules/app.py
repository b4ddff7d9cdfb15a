"""Command-line entry point.

Usage:
    chessrules [MOVE ...] [--moves] [--check] [-v]

Each MOVE is ``x,y:x,y`` (from and to squares, 0-based, top-left origin).
The moves are played from the starting position and the final board is
printed. ``--check`` runs the built-in acceptance checks instead.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

from chessrules.core.applicator import (
    attempt_move_by_coordinates,
    attempt_moves_by_coordinates,
)
from chessrules.core.move_generator import legal_moves
from chessrules.core.position import new_game
from chessrules.core.types import Coord, parse_coord

_LOGGER = logging.getLogger(__name__)

STARTING_DIAGRAM = """\
r k b q k b k r
p p p p p p p p
. . . . . . . .
. . . . . . . .
. . . . . . . .
. . . . . . . .
P P P P P P P P
R K B Q K B K R"""


def parse_move_arg(text: str) -> tuple[Coord, Coord]:
    """Parse ``"x,y:x,y"`` into a ``(from, to)`` pair."""
    parts = text.split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid move: {text!r} (expected x,y:x,y)")
    return parse_coord(parts[0]), parse_coord(parts[1])


@dataclass(frozen=True)
class Check:
    description: str
    expected: object
    actual: Callable[[], object]

    def run(self) -> bool:
        return self.actual() == self.expected


def acceptance_checks() -> list[Check]:
    start = new_game()
    return [
        Check("new game has 32 pieces", 32, lambda: len(start.pieces)),
        Check("starting diagram", STARTING_DIAGRAM, start.render),
        Check("20 possible starting moves", 20, lambda: len(legal_moves(start))),
        Check(
            "can play e4",
            STARTING_DIAGRAM.replace(
                ". . . . . . . .\n. . . . . . . .\nP P P P P P P P",
                ". . . . P . . .\n. . . . . . . .\nP P P P . P P P",
            ),
            lambda: attempt_move_by_coordinates(start, (4, 6), (4, 4)).render(),
        ),
        Check(
            "can't move black pawn first",
            start,
            lambda: attempt_move_by_coordinates(start, (4, 1), (4, 3)),
        ),
        Check(
            "can't move pawn three squares",
            start,
            lambda: attempt_move_by_coordinates(start, (4, 6), (4, 3)),
        ),
    ]


def run_checks(out: TextIO | None = None) -> bool:
    """Run the acceptance checks and print a pass/fail summary to *out*."""
    out = out if out is not None else sys.stdout
    checks = acceptance_checks()
    failed = [check for check in checks if not check.run()]
    for check in failed:
        print(f"FAIL: {check.description}", file=out)
    if failed:
        print(f"{len(failed)} of {len(checks)} checks failed", file=out)
    else:
        print(f"all {len(checks)} checks passed", file=out)
    return not failed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessrules",
        description="Play coordinate moves from the starting position.",
    )
    parser.add_argument("moves", nargs="*", metavar="MOVE", help="x,y:x,y")
    parser.add_argument(
        "--moves",
        dest="list_moves",
        action="store_true",
        help="list the legal moves of the final position",
    )
    parser.add_argument(
        "--check", action="store_true", help="run the built-in acceptance checks"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.check:
        return 0 if run_checks() else 1

    try:
        pairs = [parse_move_arg(text) for text in args.moves]
    except ValueError as exc:
        _LOGGER.warning("%s", exc)
        return 2

    result = attempt_moves_by_coordinates(new_game(), pairs)
    print(result.position.render())
    if not result.ok:
        _LOGGER.warning(
            "Stopped after %d move(s): %s", result.position.ply_count, result.rejection
        )

    if args.list_moves:
        for move in legal_moves(result.position):
            print(move)

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
