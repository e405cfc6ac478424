"""Pseudo-legal ply generation driven by step tables."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chessply.core.board import Board
from chessply.core.enums import Mark, Piece
from chessply.core.ply import Ply
from chessply.core.step_tables import STEP_TABLES, StepTable, step_table_for
from chessply.core.steps import RayPlyIterator, StepPlyIterator
from chessply.core.types import Position

_LOGGER = logging.getLogger(__name__)


def iter_plies(
    board: Board,
    origin: Position,
    table: StepTable,
    mark: Mark | None = None,
) -> Iterator[Ply]:
    """Lazy plies from *origin* following *table*."""
    if table.repeating:
        return RayPlyIterator(board, table.offsets, origin, mark)
    return StepPlyIterator(board, table.offsets, origin, mark)


# -- Per-piece entry points -------------------------------------------------


def knight_plies(board: Board, origin: Position) -> Iterator[Ply]:
    return iter_plies(board, origin, STEP_TABLES[Piece.KNIGHT])


def king_plies(board: Board, origin: Position) -> Iterator[Ply]:
    return iter_plies(board, origin, STEP_TABLES[Piece.KING])


def bishop_plies(board: Board, origin: Position) -> Iterator[Ply]:
    return iter_plies(board, origin, STEP_TABLES[Piece.BISHOP])


def rook_plies(board: Board, origin: Position) -> Iterator[Ply]:
    return iter_plies(board, origin, STEP_TABLES[Piece.ROOK])


def queen_plies(board: Board, origin: Position) -> Iterator[Ply]:
    return iter_plies(board, origin, STEP_TABLES[Piece.QUEEN])


class MoveGenerator:
    """Generates pseudo-legal plies for pieces on a :class:`Board`.

    Only reads the board. King safety, castling, en passant, promotion and
    pawn moves are left to the legality layer.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def plies_from(self, origin: Position) -> Iterator[Ply]:
        """Plies for the piece standing on *origin* (nothing if empty)."""
        occupant = self._board[origin]
        if occupant is None:
            return iter(())
        table = step_table_for(occupant.piece)
        return iter_plies(self._board, origin, table, occupant.mark)

    def generate_pseudo_legal_plies(self, mark: Mark) -> list[Ply]:
        """All plies for *mark*'s pieces that have a step table."""
        plies: list[Ply] = []
        board = self._board
        for origin in board.pieces(mark):
            occupant = board[origin]
            assert occupant is not None
            table = STEP_TABLES.get(occupant.piece)
            if table is None:
                _LOGGER.debug("Skipping %s on %s", occupant.piece.name, origin)
                continue
            plies.extend(iter_plies(board, origin, table, mark))
        return plies

    def captures(self, mark: Mark) -> list[Ply]:
        """Capture subset of :meth:`generate_pseudo_legal_plies`."""
        return [ply for ply in self.generate_pseudo_legal_plies(mark) if ply.is_capture]
