"""Applying moves: commit, checked attempts with typed results, and undo."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from chessrules.core.board import piece_at
from chessrules.core.enums import RejectReason
from chessrules.core.move import Move
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import Coord

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a move attempt.

    On rejection ``position`` is the position the attempt started from.
    """

    position: Position
    rejection: RejectReason | None = None

    @property
    def ok(self) -> bool:
        return self.rejection is None


def commit(position: Position, move: Move) -> Position:
    """Apply an already-validated *move*, returning the new position."""
    from_x, from_y = move.from_sq
    to_x, to_y = move.to_sq

    piece = piece_at(position.pieces, from_x, from_y)
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    # Drop the acting piece and whatever stands on the destination
    remaining = [
        p for p in position.pieces if p.coord != move.to_sq and p.coord != move.from_sq
    ]
    remaining.append(piece.moved_to(to_x, to_y))

    _LOGGER.debug("Commit %s %s %s", piece.color, piece.piece_type, move)
    return Position(
        pieces=frozenset(remaining),
        history=(*position.history, position.pieces),
    )


def try_move(position: Position, move: Move) -> MoveResult:
    """Validate and apply *move*; never raises for an illegal move."""
    reason = Rules.check_move(position, move)
    if reason is not None:
        _LOGGER.debug("Move %s rejected: %s", move, reason)
        return MoveResult(position, reason)
    return MoveResult(commit(position, move))


def attempt_move(position: Position, move: Move) -> Position:
    """New position if *move* is legal, otherwise *position* unchanged."""
    return try_move(position, move).position


def attempt_move_by_coordinates(
    position: Position, from_sq: Coord, to_sq: Coord
) -> Position:
    return attempt_move(position, Move(from_sq, to_sq))


def attempt_moves_by_coordinates(
    position: Position, moves: Iterable[tuple[Coord, Coord]]
) -> MoveResult:
    """Play a sequence of ``(from, to)`` pairs, stopping at the first rejection.

    The result holds the last position reached; ``rejection`` is set when a
    move in the sequence was refused.
    """
    for from_sq, to_sq in moves:
        result = try_move(position, Move(from_sq, to_sq))
        if not result.ok:
            return result
        position = result.position
    return MoveResult(position)


def undo(position: Position) -> Position:
    """The position before the last committed move."""
    if not position.history:
        raise ValueError("No move to undo")
    return Position(pieces=position.history[-1], history=position.history[:-1])
