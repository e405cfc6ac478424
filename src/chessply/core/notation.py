"""FEN piece-placement parsing and serialization."""

from __future__ import annotations

from chessply.core.board import Board
from chessply.core.board_square import BoardSquare
from chessply.core.types import BOARD_SIZE, Position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(placement: str) -> Board:
    """Parse the piece-placement field of a FEN string into a :class:`Board`.

    Only the first whitespace-separated field is read, so a full FEN works too.
    """
    fields = placement.split()
    if not fields:
        raise ValueError(f"Empty placement: {placement!r}")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - 1 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                board[Position(rank, file)] = BoardSquare.from_char(ch)
                file += 1
            if file > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if file != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialize *board* as a FEN piece-placement field."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        row = ""
        empty = 0
        for file in range(BOARD_SIZE):
            square = board[Position(rank, file)]
            if square is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(square)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
