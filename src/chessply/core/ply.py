"""Ply value object (one candidate half-move)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from chessply.core.enums import PlyKind
from chessply.core.types import Position


@dataclass(frozen=True, slots=True)
class Ply:
    """Origin → destination transition, not yet checked for full legality.

    Equality and hashing look only at the two squares; ``kind`` is carried
    along for legality filtering and display.
    """

    origin: Position
    destination: Position
    kind: PlyKind = field(default=PlyKind.MOVE, compare=False)

    @classmethod
    def new_move(cls, origin: Position, destination: Position) -> Ply:
        return cls(origin, destination, PlyKind.MOVE)

    @classmethod
    def new_capture(cls, origin: Position, destination: Position) -> Ply:
        return cls(origin, destination, PlyKind.CAPTURE)

    @property
    def is_capture(self) -> bool:
        return self.kind == PlyKind.CAPTURE

    # ── Display / serialisation ──────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.origin.name}{self.destination.name}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.origin.name,
            "to": self.destination.name,
            "capture": self.is_capture,
        }
