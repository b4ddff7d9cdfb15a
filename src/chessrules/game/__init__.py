"""Game session layer — a mutable wrapper around immutable positions.

Quick start::

    from chessrules.game import GameState

    gs = GameState()
    gs.play_coordinates((4, 6), (4, 4))
    print(gs.position)
"""

from chessrules.game.state import GameState, IllegalMoveError, MoveRecord

__all__ = [
    "GameState",
    "IllegalMoveError",
    "MoveRecord",
]
