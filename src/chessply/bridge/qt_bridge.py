"""Qt bridge that generates plies on request and publishes them as signals."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessply.bridge.host import to_host_value
from chessply.core.board import Board
from chessply.core.move_generator import MoveGenerator
from chessply.core.types import Position

_LOGGER = logging.getLogger(__name__)


class PlyWorker(QObject):
    """Thread-affine worker that answers ply requests for a single square.

    ``plies_ready`` carries the plies as host values (list of dicts).
    """

    plies_ready = pyqtSignal(int, object)
    generation_error = pyqtSignal(int, str)

    __slots__ = ("_captures_only",)

    def __init__(self, *, captures_only: bool = False) -> None:
        super().__init__()
        self._captures_only = captures_only

    @pyqtSlot(object, object, int)
    def request_plies(
        self, board_obj: object, origin_obj: object, request_id: int
    ) -> None:
        """Generate plies for the piece on *origin_obj* and emit the result."""
        if not isinstance(board_obj, Board):
            self.generation_error.emit(request_id, "Worker received invalid board")
            return
        if not isinstance(origin_obj, Position):
            self.generation_error.emit(request_id, "Worker received invalid origin")
            return

        _LOGGER.debug("Ply request %d for %s", request_id, origin_obj)
        try:
            plies = list(MoveGenerator(board_obj).plies_from(origin_obj))
            if self._captures_only:
                plies = [ply for ply in plies if ply.is_capture]
            payload = to_host_value(plies)
        except Exception as exc:
            self.generation_error.emit(request_id, str(exc))
            return

        self.plies_ready.emit(request_id, payload)

    @pyqtSlot(bool)
    def set_captures_only(self, captures_only: bool) -> None:
        """Only publish captures (takes effect on the next request)."""
        self._captures_only = captures_only
