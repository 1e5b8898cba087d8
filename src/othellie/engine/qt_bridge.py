"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import threading
from dataclasses import replace

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from othellie.core.state import IGameState
from othellie.engine.minimax_search import MinimaxEngine
from othellie.engine.search import IEngine, SearchConfig


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Each worker owns its own engine, so statistics and memo tables are
    never shared between threads.  :meth:`cancel` does not interrupt a
    running search; it only suppresses delivery of its result.
    """

    best_move_ready = pyqtSignal(int, object, int, int, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, int, int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_config", "_engine", "_time_limit_ms")

    def __init__(
        self,
        config: SearchConfig | None = None,
        *,
        time_limit_ms: int | None = 700,
    ) -> None:
        super().__init__()
        self._config = config or SearchConfig()
        self._engine: IEngine = MinimaxEngine(self._config)
        self._time_limit_ms = time_limit_ms
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, state_obj: object, request_id: int) -> None:
        """Search for the best move in *state_obj* and emit result."""
        if not isinstance(state_obj, IGameState):
            self.search_error.emit(request_id, "Engine received invalid game state")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(state_obj, self._time_limit_ms)
        except Exception as exc:
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(
                request_id,
                result.evaluation,
                result.depth,
                result.nodes,
            )
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.evaluation,
            result.depth,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Drop the result of the current search when it finishes."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_time_limit(self, time_limit_ms: int) -> None:
        """Update the thinking-time budget (takes effect on the next search)."""
        self._time_limit_ms = time_limit_ms

    @pyqtSlot(int)
    def set_depth_limit(self, depth_limit: int) -> None:
        """Rebuild the engine with a new depth limit.

        The new engine starts with fresh statistics and an empty memo table.
        """
        self._config = replace(self._config, depth_limit=depth_limit)
        self._engine = MinimaxEngine(self._config)

    @property
    def engine(self) -> IEngine:
        return self._engine
