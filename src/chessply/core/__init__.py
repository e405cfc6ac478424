"""Core domain layer — step-driven pseudo-legal ply generation.

Quick start::

    from chessply.core import MoveGenerator, Position, board_from_placement

    board = board_from_placement("8/8/8/5p2/8/4N3/8/8")
    gen = MoveGenerator(board)
    for ply in gen.plies_from(Position.parse("e3")):
        print(ply)
"""

from chessply.core.board import Board
from chessply.core.board_square import BoardSquare
from chessply.core.enums import Mark, Piece, PlyKind, SquareClass
from chessply.core.move_generator import (
    MoveGenerator,
    bishop_plies,
    iter_plies,
    king_plies,
    knight_plies,
    queen_plies,
    rook_plies,
)
from chessply.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessply.core.ply import Ply
from chessply.core.step_tables import (
    BISHOP_DIRS,
    KING_STEPS,
    KNIGHT_STEPS,
    QUEEN_DIRS,
    ROOK_DIRS,
    STEP_TABLES,
    StepTable,
    step_table_for,
)
from chessply.core.steps import RayPlyIterator, StepPlyIterator, classify_target
from chessply.core.types import BOARD_SIZE, Position, Step

__all__ = [
    # Enums
    "Mark",
    "Piece",
    "PlyKind",
    "SquareClass",
    # Types / helpers
    "BOARD_SIZE",
    "Position",
    "Step",
    # Domain objects
    "Board",
    "BoardSquare",
    "Ply",
    # Step tables
    "BISHOP_DIRS",
    "KING_STEPS",
    "KNIGHT_STEPS",
    "QUEEN_DIRS",
    "ROOK_DIRS",
    "STEP_TABLES",
    "StepTable",
    "step_table_for",
    # Generation
    "MoveGenerator",
    "RayPlyIterator",
    "StepPlyIterator",
    "bishop_plies",
    "classify_target",
    "iter_plies",
    "king_plies",
    "knight_plies",
    "queen_plies",
    "rook_plies",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
