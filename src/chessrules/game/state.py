"""Game session — holds the current position and a record of played moves."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.applicator import try_move, undo
from chessrules.core.board import piece_at
from chessrules.core.enums import Color, RejectReason
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when a session is asked to play a move the rules refuse."""

    def __init__(self, move: Move, reason: RejectReason) -> None:
        super().__init__(f"Illegal move {move}: {reason}")
        self.move = move
        self.reason = reason


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Tracks the current position and move history of one game.

    This is a pure data/logic class — no I/O. Positions themselves are
    immutable; the session just swaps which one is current.
    """

    position: Position = field(default_factory=Position.initial)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game."""
        self.position = position if position is not None else Position.initial()
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def play(self, move: Move) -> MoveRecord:
        """Validate and apply *move*; raise :class:`IllegalMoveError` if refused."""
        before = self.position
        result = try_move(before, move)
        if not result.ok:
            assert result.rejection is not None
            raise IllegalMoveError(move, result.rejection)

        piece = piece_at(before.pieces, *move.from_sq)
        assert piece is not None
        record = MoveRecord(
            move=move,
            piece=piece,
            captured=piece_at(before.pieces, *move.to_sq),
        )
        self.position = result.position
        self.move_history.append(record)
        _LOGGER.debug("Ply %d: %s", self.ply_count, move)
        return record

    def play_coordinates(
        self, from_sq: tuple[int, int], to_sq: tuple[int, int]
    ) -> MoveRecord:
        return self.play(Move(from_sq, to_sq))

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None
        record = self.move_history.pop()
        self.position = undo(self.position)
        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def ply_count(self) -> int:
        """Number of half-moves in the current position's history."""
        return self.position.ply_count

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.position).generate_legal_moves()
