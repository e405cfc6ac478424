"""Step tables: the movement pattern of each piece kind as (d_rank, d_file)."""

from __future__ import annotations

from dataclasses import dataclass

from chessply.core.enums import Piece
from chessply.core.types import Step

KNIGHT_STEPS: tuple[Step, ...] = (
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
)

KING_STEPS: tuple[Step, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[Step, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Step, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Step, ...] = BISHOP_DIRS + ROOK_DIRS


@dataclass(frozen=True, slots=True)
class StepTable:
    """Ordered offsets plus whether each one repeats as a ray."""

    offsets: tuple[Step, ...]
    repeating: bool = False

    def __post_init__(self) -> None:
        if (0, 0) in self.offsets:
            raise ValueError("Zero step in table")


# Pawns move differently per side and capture only diagonally; they have no table.
STEP_TABLES: dict[Piece, StepTable] = {
    Piece.KNIGHT: StepTable(KNIGHT_STEPS),
    Piece.BISHOP: StepTable(BISHOP_DIRS, repeating=True),
    Piece.ROOK: StepTable(ROOK_DIRS, repeating=True),
    Piece.QUEEN: StepTable(QUEEN_DIRS, repeating=True),
    Piece.KING: StepTable(KING_STEPS),
}


def step_table_for(piece: Piece) -> StepTable:
    """Movement table for *piece*."""
    try:
        return STEP_TABLES[piece]
    except KeyError:
        raise ValueError(f"No step table for {piece.name}") from None
