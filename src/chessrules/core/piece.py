"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Coord


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a piece standing on a square."""

    piece_type: PieceType
    color: Color
    x: int
    y: int

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    @property
    def char(self) -> str:
        """First letter of the type name (uppercase = white, lowercase = black)."""
        letter = self.piece_type.name[0]
        return letter if self.color == Color.WHITE else letter.lower()

    def moved_to(self, x: int, y: int) -> Piece:
        """Copy of this piece standing on (x, y)."""
        return replace(self, x=x, y=y)

    def __str__(self) -> str:
        return self.char
