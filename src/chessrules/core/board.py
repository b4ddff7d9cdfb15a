"""Board helpers: piece placement queries and text rendering over a piece set."""

from __future__ import annotations

from collections.abc import Iterable

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, is_on_board

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

EMPTY_SQUARE = "."


def initial_pieces() -> frozenset[Piece]:
    """Standard starting arrangement (queens on file d, kings on file e)."""
    pieces: list[Piece] = []
    for color in (Color.WHITE, Color.BLACK):
        for x, pt in enumerate(BACK_RANK):
            pieces.append(Piece(pt, color, x, color.back_rank))
        for x in range(BOARD_SIZE):
            pieces.append(Piece(PieceType.PAWN, color, x, color.home_rank))
    return frozenset(pieces)


def piece_at(pieces: Iterable[Piece], x: int, y: int) -> Piece | None:
    """The piece on (x, y), or ``None`` when the square is empty."""
    for piece in pieces:
        if piece.x == x and piece.y == y:
            return piece
    return None


def check_placement(pieces: Iterable[Piece]) -> None:
    """Raise ``ValueError`` unless every piece is on the board, one per square."""
    seen: set[tuple[int, int]] = set()
    for piece in pieces:
        if not is_on_board(piece.x, piece.y):
            raise ValueError(f"Piece off the board: {piece!r}")
        if piece.coord in seen:
            raise ValueError(f"Two pieces on square {piece.coord}")
        seen.add(piece.coord)


def render(pieces: Iterable[Piece]) -> str:
    """8 lines of 8 space-separated characters, top row (y=0) first."""
    by_square = {piece.coord: piece.char for piece in pieces}
    rows: list[str] = []
    for y in range(BOARD_SIZE):
        row = [by_square.get((x, y), EMPTY_SQUARE) for x in range(BOARD_SIZE)]
        rows.append(" ".join(row))
    return "\n".join(rows)
