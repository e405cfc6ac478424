"""Board - occupancy of an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessply.core.board_square import BoardSquare
from chessply.core.enums import Mark, Piece
from chessply.core.types import BOARD_SIZE, Position

_BACK_RANK: tuple[Piece, ...] = (
    Piece.ROOK,
    Piece.KNIGHT,
    Piece.BISHOP,
    Piece.QUEEN,
    Piece.KING,
    Piece.BISHOP,
    Piece.KNIGHT,
    Piece.ROOK,
)


class Board:
    """Mutable grid mapping each :class:`Position` to an optional occupant.

    Holds no move knowledge. Generators only read it; callers must not mutate
    a board while an iterator over it is still in use.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[BoardSquare | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, position: Position) -> BoardSquare | None:
        return self._grid[position.rank][position.file]

    def __setitem__(self, position: Position, square: BoardSquare | None) -> None:
        self._grid[position.rank][position.file] = square

    def get_piece(self, position: Position) -> BoardSquare | None:
        return self[position]

    def set_piece(self, position: Position, square: BoardSquare | None) -> None:
        """Replace whatever occupies *position* (``None`` empties it)."""
        self[position] = square

    def clear_piece(self, position: Position) -> None:
        self[position] = None

    def is_empty(self, position: Position) -> bool:
        return self[position] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Position, BoardSquare]]:
        """Occupied squares in rank-major order."""
        for rank, row in enumerate(self._grid):
            for file, square in enumerate(row):
                if square is not None:
                    yield Position(rank, file), square

    def pieces(self, mark: Mark) -> list[Position]:
        """Positions holding *mark*'s pieces."""
        return [pos for pos, square in self.occupied() if square.mark == mark]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(BOARD_SIZE):
            b[Position(1, f)] = BoardSquare(Mark.WHITE, Piece.PAWN)
            b[Position(6, f)] = BoardSquare(Mark.BLACK, Piece.PAWN)
        for f, piece in enumerate(_BACK_RANK):
            b[Position(0, f)] = BoardSquare(Mark.WHITE, piece)
            b[Position(7, f)] = BoardSquare(Mark.BLACK, piece)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = [str(sq) if sq else "." for sq in self._grid[rank]]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
