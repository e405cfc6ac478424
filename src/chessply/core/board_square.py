"""BoardSquare value object: which side's piece sits on a square."""

from __future__ import annotations

from dataclasses import dataclass

from chessply.core.enums import Mark, Piece

# Lowercase FEN letter per piece kind; the mark decides the case.
_PIECE_LETTERS: dict[Piece, str] = {
    Piece.PAWN: "p",
    Piece.KNIGHT: "n",
    Piece.BISHOP: "b",
    Piece.ROOK: "r",
    Piece.QUEEN: "q",
    Piece.KING: "k",
}

_LETTER_PIECES: dict[str, Piece] = {v: k for k, v in _PIECE_LETTERS.items()}


@dataclass(frozen=True, slots=True)
class BoardSquare:
    """Occupant of a square: a piece kind owned by one side."""

    mark: Mark
    piece: Piece

    def __str__(self) -> str:
        """FEN letter, uppercase for white."""
        letter = _PIECE_LETTERS[self.piece]
        return letter.upper() if self.mark == Mark.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> BoardSquare:
        """Occupant for a FEN letter, e.g. 'N' → white knight."""
        piece = _LETTER_PIECES.get(char.lower()) if len(char) == 1 else None
        if piece is None:
            raise ValueError(f"Invalid piece letter: {char!r}")
        return cls(Mark.WHITE if char.isupper() else Mark.BLACK, piece)

    def is_enemy_of(self, mark: Mark | None) -> bool:
        """Whether a piece of *mark* may capture this occupant."""
        return mark is None or self.mark == mark.opposite
