"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.core.position import Position
from checkie.engine.config import RateConfig
from checkie.engine.search import IEngine, SearchEngine


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    The search runs on a private copy of the requested position. ``cancel``
    does not interrupt it; the result is dropped instead.
    """

    best_move_ready = pyqtSignal(int, object, float, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, float)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine")

    def __init__(self, config: RateConfig | None = None) -> None:
        super().__init__()
        self._engine: IEngine = SearchEngine(config)
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, position_obj: object, request_id: int) -> None:
        """Search for the best move in *position_obj* and emit result."""
        if not isinstance(position_obj, Position):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(position_obj.copy())
        except Exception as exc:
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id, result.score)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Drop the result of the current search."""
        self._cancel_event.set()

    def set_config(self, config: RateConfig) -> None:
        """Replace the rating configuration (takes effect on the next search)."""
        self._engine = SearchEngine(config)
