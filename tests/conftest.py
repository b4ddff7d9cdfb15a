"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.piece import Piece
from chessrules.core.position import Position, new_game


@pytest.fixture
def start() -> Position:
    """Standard starting position, white to move."""
    return new_game()


@pytest.fixture
def make_position() -> Callable[..., Position]:
    """Factory for custom positions.

    A single empty history entry hands the move to black.
    """

    def _make(*pieces: Piece, black_to_move: bool = False) -> Position:
        history = (frozenset(),) if black_to_move else ()
        return Position(frozenset(pieces), history)

    return _make
