"""Coordinate type alias and board-bounds helpers.

Board layout (row-major, top-left origin)::

    (0, 0) ... (7, 0)    black back rank
    (0, 1) ... (7, 1)    black pawns
      ...
    (0, 6) ... (7, 6)    white pawns
    (0, 7) ... (7, 7)    white back rank
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (x, y)

BOARD_SIZE = 8


def is_on_board(x: int, y: int) -> bool:
    """Whether (x, y) lies inside the 8x8 board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def as_coord(value: object) -> Coord:
    """Normalise a caller-supplied (x, y) pair.

    Off-board integers are accepted here; only malformed values are rejected.
    """
    try:
        x, y = value  # type: ignore[misc]
    except (TypeError, ValueError):
        raise ValueError(f"Invalid coordinate: {value!r}") from None
    if isinstance(x, bool) or isinstance(y, bool):
        raise ValueError(f"Invalid coordinate: {value!r}")
    if not isinstance(x, int) or not isinstance(y, int):
        raise ValueError(f"Invalid coordinate: {value!r}")
    return (x, y)


def on_board_coord(value: object) -> Coord:
    """Like :func:`as_coord` but also requires the square to be on the board."""
    x, y = as_coord(value)
    if not is_on_board(x, y):
        raise ValueError(f"Coordinate off the board: {(x, y)!r}")
    return (x, y)


def parse_coord(text: str) -> Coord:
    """Parse ``"x,y"``, e.g. ``"4,6"`` → ``(4, 6)``."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Invalid coordinate: {text!r}")
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(f"Invalid coordinate: {text!r}") from None
