"""Step-driven ply iterators shared by every piece kind.

Both iterators are lazy and single-pass: nothing is computed until
``next()`` is called, results follow the order of the step table, and once
exhausted they keep raising ``StopIteration``. They hold a plain reference to
the board and never write to it, so the board must stay unchanged for as
long as an iterator is in use.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from chessply.core.board import Board
from chessply.core.enums import Mark, SquareClass
from chessply.core.ply import Ply
from chessply.core.types import BOARD_SIZE, Position, Step


def classify_target(
    board: Board, target: Position | None, mark: Mark | None
) -> SquareClass:
    """Classify *target* for a piece owned by *mark*.

    With ``mark=None`` (no mover known) every occupant counts as capturable.
    """
    if target is None:
        return SquareClass.OFF_BOARD
    occupant = board[target]
    if occupant is None:
        return SquareClass.EMPTY
    if occupant.is_enemy_of(mark):
        return SquareClass.CAPTURABLE
    return SquareClass.BLOCKED


def _resolve_mark(board: Board, origin: Position, mark: Mark | None) -> Mark | None:
    if mark is not None:
        return mark
    occupant = board[origin]
    return occupant.mark if occupant is not None else None


class StepPlyIterator(Iterator[Ply]):
    """Applies each step of the table once (knight, king)."""

    __slots__ = ("_board", "_steps", "_origin", "_mark", "_cursor")

    def __init__(
        self,
        board: Board,
        steps: Sequence[Step],
        origin: Position,
        mark: Mark | None = None,
    ) -> None:
        self._board = board
        self._steps = steps
        self._origin = origin
        self._mark = _resolve_mark(board, origin, mark)
        self._cursor = 0

    def __iter__(self) -> StepPlyIterator:
        return self

    def __next__(self) -> Ply:
        steps = self._steps
        while self._cursor < len(steps):
            step = steps[self._cursor]
            self._cursor += 1
            target = self._origin + step
            target_class = classify_target(self._board, target, self._mark)
            if target_class == SquareClass.EMPTY:
                return Ply.new_move(self._origin, target)
            if target_class == SquareClass.CAPTURABLE:
                return Ply.new_capture(self._origin, target)
        raise StopIteration


class RayPlyIterator(Iterator[Ply]):
    """Repeats each direction of the table until blocked (bishop, rook, queen).

    A friendly occupant ends the ray without a ply; an enemy occupant ends it
    after a capture ply.
    """

    __slots__ = ("_board", "_steps", "_origin", "_mark", "_cursor", "_distance")

    def __init__(
        self,
        board: Board,
        steps: Sequence[Step],
        origin: Position,
        mark: Mark | None = None,
    ) -> None:
        self._board = board
        self._steps = steps
        self._origin = origin
        self._mark = _resolve_mark(board, origin, mark)
        self._cursor = 0
        self._distance = 1

    def __iter__(self) -> RayPlyIterator:
        return self

    def _end_ray(self) -> None:
        self._cursor += 1
        self._distance = 1

    def __next__(self) -> Ply:
        steps = self._steps
        while self._cursor < len(steps):
            if self._distance >= BOARD_SIZE:
                self._end_ray()
                continue
            d_rank, d_file = steps[self._cursor]
            target = self._origin.offset(
                d_rank * self._distance, d_file * self._distance
            )
            target_class = classify_target(self._board, target, self._mark)
            if target_class == SquareClass.EMPTY:
                self._distance += 1
                return Ply.new_move(self._origin, target)
            self._end_ray()
            if target_class == SquareClass.CAPTURABLE:
                return Ply.new_capture(self._origin, target)
        raise StopIteration
