"""Position — immutable piece placement plus the history of prior placements."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.board import check_placement, initial_pieces, piece_at, render
from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.types import on_board_coord


@dataclass(frozen=True, slots=True)
class Position:
    """A snapshot of the board from which the side to move is derived.

    ``history`` holds every earlier piece set, oldest first. Its length parity
    gives the turn: even means white to move.
    """

    pieces: frozenset[Piece]
    history: tuple[frozenset[Piece], ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        # Accept any iterable of pieces from callers building custom positions.
        object.__setattr__(self, "pieces", frozenset(self.pieces))
        object.__setattr__(
            self, "history", tuple(frozenset(snapshot) for snapshot in self.history)
        )
        check_placement(self.pieces)

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position with an empty history."""
        return cls(initial_pieces())

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return Color.WHITE if len(self.history) % 2 == 0 else Color.BLACK

    @property
    def ply_count(self) -> int:
        return len(self.history)

    def piece_at(self, x: int, y: int) -> Piece | None:
        """The piece on (x, y); off-board or malformed coordinates raise."""
        x, y = on_board_coord((x, y))
        return piece_at(self.pieces, x, y)

    def pieces_of(self, color: Color) -> list[Piece]:
        """*color*'s pieces in reading order (top row first, left to right)."""
        return sorted(
            (p for p in self.pieces if p.color == color), key=lambda p: (p.y, p.x)
        )

    # ── Display ──────────────────────────────────────────────────────────

    def render(self) -> str:
        return render(self.pieces)

    def __str__(self) -> str:
        return self.render()


def new_game() -> Position:
    """Fresh game: standard arrangement, white to move."""
    return Position.initial()


def turn_of(position: Position) -> Color:
    return position.side_to_move
