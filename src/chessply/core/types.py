"""Board coordinates and step helpers.

Board layout (rank-major, rank 0 is White's home rank):
    a1=(0, 0), b1=(0, 1), ..., h1=(0, 7)
    a2=(1, 0), ...
    ...
    a8=(7, 0), ..., h8=(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

BOARD_SIZE = 8

_FILE_NAMES = "abcdefgh"

Step: TypeAlias = tuple[int, int]  # (d_rank, d_file)


def is_on_board(rank: int, file: int) -> bool:
    """Check whether (rank, file) lies on the board."""
    return 0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Immutable on-board (rank, file) coordinate."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not is_on_board(self.rank, self.file):
            raise ValueError(f"Position off board: ({self.rank}, {self.file})")

    # ── Arithmetic ───────────────────────────────────────────────────────

    def offset(self, d_rank: int, d_file: int) -> Position | None:
        """Shifted position, or ``None`` when the result leaves the board."""
        rank = self.rank + d_rank
        file = self.file + d_file
        if not is_on_board(rank, file):
            return None
        return Position(rank, file)

    def __add__(self, step: Step) -> Position | None:
        if not isinstance(step, tuple):
            return NotImplemented
        d_rank, d_file = step
        return self.offset(d_rank, d_file)

    # ── Names ────────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        """Human-readable name, e.g. (3, 4) → 'e4'."""
        return _FILE_NAMES[self.file] + str(self.rank + 1)

    @classmethod
    def parse(cls, name: str) -> Position:
        """Parse square name, e.g. 'e4' → Position(3, 4)."""
        if len(name) != 2 or name[0] not in _FILE_NAMES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(int(name[1]) - 1, _FILE_NAMES.index(name[0]))

    def __str__(self) -> str:
        return self.name


def all_positions() -> list[Position]:
    """Every board position in rank-major order."""
    return [Position(r, f) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)]
