"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Row delta of a forward pawn step (white moves up the board)."""
        return -1 if self == Color.WHITE else 1

    @property
    def home_rank(self) -> int:
        """Row the pawns of this color start on."""
        return 6 if self == Color.WHITE else 1

    @property
    def back_rank(self) -> int:
        return 7 if self == Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class MoveKind(IntEnum):
    """Move classification. Only quiet moves and captures are generated."""

    BASIC = 0
    CAPTURE = 1


class RejectReason(Enum):
    """Why a move attempt was refused."""

    NO_PIECE_AT_SOURCE = "no piece at source square"
    WRONG_TURN = "piece does not belong to the side to move"
    OFF_BOARD = "destination is off the board"
    FRIENDLY_OCCUPIED_DESTINATION = "destination holds a friendly piece"
    NOT_IN_MOVE_SET = "move is not allowed for this piece"

    def __str__(self) -> str:
        return self.value
