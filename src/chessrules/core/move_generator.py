"""Pseudo-legal and legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, MoveKind, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Coord, is_on_board, on_board_coord

if TYPE_CHECKING:
    from chessrules.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
    (-2, 1),
    (-1, 2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class MoveGenerator:
    """Generates moves for the side to move in a :class:`Position`.

    Check is not considered: a move that exposes the mover's king is still
    returned.
    """

    __slots__ = ("_pos", "_squares")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._squares: dict[Coord, Piece] = {p.coord: p for p in position.pieces}

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """Pseudo-legal moves that also pass :meth:`Rules.check_move`."""
        from chessrules.core.rules import Rules

        pseudo = self.generate_pseudo_legal_moves()
        return [
            move
            for move in pseudo
            if Rules.check_move(self._pos, move, pseudo_legal=pseudo) is None
        ]

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """Movement-pattern moves of every piece belonging to the side to move."""
        moves: list[Move] = []
        color = self._pos.side_to_move
        for piece in self._pos.pieces_of(color):
            moves.extend(self.moves_for(piece))
        return moves

    def moves_for(self, piece: Piece) -> list[Move]:
        """Movement-pattern moves for a single *piece*, whoever's turn it is."""
        moves: list[Move] = []
        match piece.piece_type:
            case PieceType.PAWN:
                self._gen_pawn(piece, moves)
            case PieceType.KNIGHT:
                self._gen_stepping(piece, KNIGHT_OFFSETS, moves)
            case PieceType.BISHOP:
                self._gen_sliding(piece, BISHOP_DIRS, moves)
            case PieceType.ROOK:
                self._gen_sliding(piece, ROOK_DIRS, moves)
            case PieceType.QUEEN:
                self._gen_sliding(piece, ROOK_DIRS, moves)
                self._gen_sliding(piece, BISHOP_DIRS, moves)
            case PieceType.KING:
                self._gen_stepping(piece, KING_OFFSETS, moves)
            case _:
                raise TypeError(f"No move rule for piece type {piece.piece_type!r}")
        return moves

    def moves_from(self, x: int, y: int) -> list[Move]:
        """Legal moves of the piece standing on (x, y) (empty if none)."""
        sq = on_board_coord((x, y))
        return [move for move in self.generate_legal_moves() if move.from_sq == sq]

    # -- Piece-specific generators (private) -------------------------------

    def _is_empty(self, x: int, y: int) -> bool:
        return (x, y) not in self._squares

    def _enemy_at(self, x: int, y: int, color: Color) -> bool:
        target = self._squares.get((x, y))
        return target is not None and target.color != color

    def _gen_pawn(self, piece: Piece, moves: list[Move]) -> None:
        x, y = piece.x, piece.y
        step = piece.color.pawn_direction

        one_y = y + step
        if is_on_board(x, one_y) and self._is_empty(x, one_y):
            moves.append(Move((x, y), (x, one_y)))
            two_y = y + 2 * step
            if y == piece.color.home_rank and self._is_empty(x, two_y):
                moves.append(Move((x, y), (x, two_y)))

        for dx in (1, -1):
            cap_x = x + dx
            if is_on_board(cap_x, one_y) and self._enemy_at(cap_x, one_y, piece.color):
                moves.append(Move((x, y), (cap_x, one_y), MoveKind.CAPTURE))

    def _gen_stepping(
        self,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        for dx, dy in offsets:
            tx, ty = piece.x + dx, piece.y + dy
            if not is_on_board(tx, ty):
                continue
            target = self._squares.get((tx, ty))
            if target is None:
                moves.append(Move(piece.coord, (tx, ty)))
            elif target.color != piece.color:
                moves.append(Move(piece.coord, (tx, ty), MoveKind.CAPTURE))

    def _gen_sliding(
        self,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        for dx, dy in directions:
            tx, ty = piece.x + dx, piece.y + dy
            while is_on_board(tx, ty):
                target = self._squares.get((tx, ty))
                if target is None:
                    moves.append(Move(piece.coord, (tx, ty)))
                    tx += dx
                    ty += dy
                    continue
                if target.color != piece.color:
                    moves.append(Move(piece.coord, (tx, ty), MoveKind.CAPTURE))
                break


def legal_moves(position: Position) -> list[Move]:
    """All legal moves for the side to move in *position*."""
    return MoveGenerator(position).generate_legal_moves()
