"""Move legality: turn ownership, board bounds, occupancy and move-set membership."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

from chessrules.core.board import piece_at
from chessrules.core.enums import RejectReason
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import is_on_board

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Check exposure is not part of legality.

    @staticmethod
    def check_move(
        position: Position,
        move: Move,
        pseudo_legal: Collection[Move] | None = None,
    ) -> RejectReason | None:
        """Return why *move* is illegal in *position*, or ``None`` if it is legal.

        *pseudo_legal* lets a caller that already generated the move set
        skip regenerating it.
        """
        from_x, from_y = move.from_sq
        to_x, to_y = move.to_sq

        piece = (
            piece_at(position.pieces, from_x, from_y)
            if is_on_board(from_x, from_y)
            else None
        )
        if piece is None:
            return RejectReason.NO_PIECE_AT_SOURCE
        if piece.color != position.side_to_move:
            return RejectReason.WRONG_TURN
        if not is_on_board(to_x, to_y):
            return RejectReason.OFF_BOARD

        target = piece_at(position.pieces, to_x, to_y)
        if target is not None and target.color == piece.color:
            return RejectReason.FRIENDLY_OCCUPIED_DESTINATION

        if pseudo_legal is None:
            pseudo_legal = MoveGenerator(position).moves_for(piece)
        if move not in pseudo_legal:
            return RejectReason.NOT_IN_MOVE_SET
        return None

    @staticmethod
    def is_legal(position: Position, move: Move) -> bool:
        reason = Rules.check_move(position, move)
        if reason is not None:
            _LOGGER.debug("Move %s rejected: %s", move, reason)
        return reason is None
