"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.enums import MoveKind
from chessrules.core.types import Coord, as_coord


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable transition between two squares.

    Equality and hashing use the squares only, so a caller-built
    ``Move((4, 6), (4, 4))`` matches the generated one regardless of ``kind``.
    """

    from_sq: Coord
    to_sq: Coord
    kind: MoveKind = field(default=MoveKind.BASIC, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "from_sq", as_coord(self.from_sq))
        object.__setattr__(self, "to_sq", as_coord(self.to_sq))

    @property
    def is_capture(self) -> bool:
        return self.kind == MoveKind.CAPTURE

    def __str__(self) -> str:
        (fx, fy), (tx, ty) = self.from_sq, self.to_sq
        return f"{fx},{fy}->{tx},{ty}"
