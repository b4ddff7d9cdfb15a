"""Core domain layer — pure chess move rules with zero external dependencies.

Quick start::

    from chessrules.core import MoveGenerator, attempt_move_by_coordinates, new_game

    pos = new_game()
    for move in MoveGenerator(pos).generate_legal_moves():
        print(move)
    pos = attempt_move_by_coordinates(pos, (4, 6), (4, 4))
    print(pos.render())
"""

from chessrules.core.applicator import (
    MoveResult,
    attempt_move,
    attempt_move_by_coordinates,
    attempt_moves_by_coordinates,
    commit,
    try_move,
    undo,
)
from chessrules.core.board import initial_pieces, piece_at, render
from chessrules.core.enums import Color, MoveKind, PieceType, RejectReason
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator, legal_moves
from chessrules.core.piece import Piece
from chessrules.core.position import Position, new_game, turn_of
from chessrules.core.rules import Rules
from chessrules.core.types import Coord, is_on_board, parse_coord

__all__ = [
    # Enums
    "Color",
    "MoveKind",
    "PieceType",
    "RejectReason",
    # Types / helpers
    "Coord",
    "initial_pieces",
    "is_on_board",
    "parse_coord",
    "piece_at",
    "render",
    # Domain objects
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Position",
    "Rules",
    # Operations
    "attempt_move",
    "attempt_move_by_coordinates",
    "attempt_moves_by_coordinates",
    "commit",
    "legal_moves",
    "new_game",
    "try_move",
    "turn_of",
    "undo",
]
