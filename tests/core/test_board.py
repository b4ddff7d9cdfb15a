"""Tests for board helpers and the Piece value object."""

import pytest

from chessrules.core.board import check_placement, initial_pieces, piece_at, render
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece

STARTING_DIAGRAM = """\
r k b q k b k r
p p p p p p p p
. . . . . . . .
. . . . . . . .
. . . . . . . .
. . . . . . . .
P P P P P P P P
R K B Q K B K R"""


class TestInitialPieces:
    def test_count(self) -> None:
        assert len(initial_pieces()) == 32

    def test_sixteen_per_side(self) -> None:
        pieces = initial_pieces()
        assert sum(p.color == Color.WHITE for p in pieces) == 16
        assert sum(p.color == Color.BLACK for p in pieces) == 16

    def test_kings_on_e_file(self) -> None:
        pieces = initial_pieces()
        assert piece_at(pieces, 4, 7) == Piece(PieceType.KING, Color.WHITE, 4, 7)
        assert piece_at(pieces, 4, 0) == Piece(PieceType.KING, Color.BLACK, 4, 0)

    def test_queens_on_d_file(self) -> None:
        pieces = initial_pieces()
        assert piece_at(pieces, 3, 7) == Piece(PieceType.QUEEN, Color.WHITE, 3, 7)
        assert piece_at(pieces, 3, 0) == Piece(PieceType.QUEEN, Color.BLACK, 3, 0)

    def test_pawn_rows(self) -> None:
        pieces = initial_pieces()
        for x in range(8):
            assert piece_at(pieces, x, 6) == Piece(PieceType.PAWN, Color.WHITE, x, 6)
            assert piece_at(pieces, x, 1) == Piece(PieceType.PAWN, Color.BLACK, x, 1)

    def test_empty_middle(self) -> None:
        pieces = initial_pieces()
        for y in range(2, 6):
            for x in range(8):
                assert piece_at(pieces, x, y) is None


class TestRender:
    def test_starting_diagram(self) -> None:
        assert render(initial_pieces()) == STARTING_DIAGRAM

    def test_empty_board(self) -> None:
        lines = render([]).split("\n")
        assert lines == [". . . . . . . ."] * 8

    def test_single_piece(self) -> None:
        text = render([Piece(PieceType.ROOK, Color.BLACK, 7, 7)])
        assert text.split("\n")[7] == ". . . . . . . r"


class TestPlacement:
    def test_overlap_raises(self) -> None:
        pieces = [
            Piece(PieceType.ROOK, Color.WHITE, 2, 2),
            Piece(PieceType.PAWN, Color.BLACK, 2, 2),
        ]
        with pytest.raises(ValueError, match="Two pieces"):
            check_placement(pieces)

    def test_off_board_raises(self) -> None:
        with pytest.raises(ValueError, match="off the board"):
            check_placement([Piece(PieceType.KING, Color.WHITE, 8, 0)])


class TestPiece:
    @pytest.mark.parametrize(
        ("piece_type", "char"),
        [
            (PieceType.PAWN, "P"),
            (PieceType.ROOK, "R"),
            (PieceType.KNIGHT, "K"),
            (PieceType.BISHOP, "B"),
            (PieceType.QUEEN, "Q"),
            (PieceType.KING, "K"),
        ],
    )
    def test_white_char(self, piece_type: PieceType, char: str) -> None:
        assert Piece(piece_type, Color.WHITE, 0, 0).char == char

    def test_black_char_lowercase(self) -> None:
        assert str(Piece(PieceType.QUEEN, Color.BLACK, 0, 0)) == "q"

    def test_moved_to_keeps_identity(self) -> None:
        piece = Piece(PieceType.BISHOP, Color.BLACK, 2, 0)
        moved = piece.moved_to(5, 3)
        assert moved == Piece(PieceType.BISHOP, Color.BLACK, 5, 3)
        assert piece.coord == (2, 0)
