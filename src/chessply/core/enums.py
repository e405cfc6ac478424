"""Core enumerations for the move-generation domain."""

from __future__ import annotations

from enum import IntEnum


class Mark(IntEnum):
    """Side that owns a piece."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Mark:
        return Mark(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Piece(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class PlyKind(IntEnum):
    """Whether a ply lands on an empty square or takes a piece."""

    MOVE = 0
    CAPTURE = 1


class SquareClass(IntEnum):
    """Outcome of inspecting a candidate destination."""

    OFF_BOARD = 0
    EMPTY = 1
    BLOCKED = 2
    CAPTURABLE = 3
