"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from chessply.core.board import Board
from chessply.core.board_square import BoardSquare
from chessply.core.enums import Mark, Piece
from chessply.core.types import Position

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for Qt bridge tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def knight_board() -> Board:
    """White knight (4,4), white pawn (2,3), black pawn (6,5)."""
    #   | 0 1 2 3 4 5 6 7
    # - + - - - - - - - -
    # 2 | . . . P . * . .
    # 3 | . . * . . . * .
    # 4 | . . . . N . . .
    # 5 | . . * . . . * .
    # 6 | . . . * . p . .
    board = Board()
    board.set_piece(Position(4, 4), BoardSquare(Mark.WHITE, Piece.KNIGHT))
    board.set_piece(Position(2, 3), BoardSquare(Mark.WHITE, Piece.PAWN))
    board.set_piece(Position(6, 5), BoardSquare(Mark.BLACK, Piece.PAWN))
    return board
