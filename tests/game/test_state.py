"""Tests for GameState."""

import pytest

from chessrules.core.enums import Color, PieceType, RejectReason
from chessrules.core.move import Move
from chessrules.core.position import Position
from chessrules.game.state import GameState, IllegalMoveError


class TestGameStateSetup:
    def test_default(self) -> None:
        gs = GameState()
        assert gs.position == Position.initial()
        assert gs.side_to_move == Color.WHITE
        assert gs.ply_count == 0
        assert gs.fullmove_display == 1

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.play(Move((4, 6), (4, 4)))
        assert gs.ply_count == 1
        gs.setup()  # reset
        assert gs.ply_count == 0
        assert gs.side_to_move == Color.WHITE

    def test_setup_custom_position(self) -> None:
        custom = Position(frozenset(), (frozenset(),))
        gs = GameState()
        gs.setup(custom)
        assert gs.position is custom
        assert gs.side_to_move == Color.BLACK
        assert gs.ply_count == 1
        assert gs.fullmove_display == 1

    def test_counts_follow_position_history(self) -> None:
        start = Position.initial()
        custom = Position(start.pieces, (start.pieces,) * 3)
        gs = GameState()
        gs.setup(custom)
        assert gs.ply_count == custom.ply_count == 3
        assert gs.fullmove_display == 2
        assert gs.move_history == []
        gs.play_coordinates((4, 1), (4, 3))
        assert gs.ply_count == 4
        assert gs.fullmove_display == 3


class TestGameStateMoves:
    def test_play_records(self) -> None:
        gs = GameState()
        record = gs.play(Move((4, 6), (4, 4)))
        assert record.piece.piece_type == PieceType.PAWN
        assert not record.was_capture
        assert gs.side_to_move == Color.BLACK
        assert gs.move_history == [record]

    def test_capture_recorded(self) -> None:
        gs = GameState()
        gs.play_coordinates((4, 6), (4, 4))
        gs.play_coordinates((3, 1), (3, 3))
        record = gs.play_coordinates((4, 4), (3, 3))
        assert record.was_capture
        assert record.captured.color == Color.BLACK
        assert gs.fullmove_display == 2

    def test_illegal_move_raises(self) -> None:
        gs = GameState()
        with pytest.raises(IllegalMoveError) as exc_info:
            gs.play_coordinates((4, 1), (4, 3))
        assert exc_info.value.reason == RejectReason.WRONG_TURN
        assert gs.ply_count == 0

    def test_illegal_move_is_value_error(self) -> None:
        gs = GameState()
        with pytest.raises(ValueError, match="Illegal move 4,6->4,3"):
            gs.play_coordinates((4, 6), (4, 3))

    def test_legal_moves(self) -> None:
        assert len(GameState().legal_moves()) == 20


class TestGameStateUndo:
    def test_undo_last_move(self) -> None:
        gs = GameState()
        gs.play_coordinates((4, 6), (4, 4))
        undone = gs.undo_last_move()
        assert undone == Move((4, 6), (4, 4))
        assert gs.position == Position.initial()
        assert gs.ply_count == 0

    def test_undo_empty(self) -> None:
        assert GameState().undo_last_move() is None
