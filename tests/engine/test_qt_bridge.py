"""Tests for Qt engine bridge worker."""

from __future__ import annotations

import pytest

pytest.importorskip("PyQt6")

from game_fakes import OthelloBoard  # noqa: E402
from PyQt6.QtTest import QSignalSpy  # noqa: E402

from othellie.core.state import IGameState  # noqa: E402
from othellie.engine.minimax_search import MinimaxEngine  # noqa: E402
from othellie.engine.qt_bridge import EngineWorker  # noqa: E402
from othellie.engine.search import SearchConfig, SearchResult  # noqa: E402

pytestmark = pytest.mark.usefixtures("qapp")


class _CancellingEngine:
    def __init__(self, worker: EngineWorker) -> None:
        self._worker = worker

    def search(
        self, state: IGameState | None, time_limit_ms: int | None = None
    ) -> SearchResult:
        del time_limit_ms
        self._worker.cancel()
        return SearchResult(
            best_move=state.valid_moves()[0],
            evaluation=0,
            depth=1,
            nodes=1,
        )


class _NoMoveEngine:
    def search(
        self, _state: IGameState | None, time_limit_ms: int | None = None
    ) -> SearchResult:
        del time_limit_ms
        return SearchResult(best_move=None, evaluation=0, depth=0, nodes=0)


class _FailingEngine:
    def search(
        self, _state: IGameState | None, time_limit_ms: int | None = None
    ) -> SearchResult:
        del time_limit_ms
        raise RuntimeError("collaborator exploded")


class _RecordingEngine:
    def __init__(self) -> None:
        self.budgets: list[int | None] = []

    def search(
        self, state: IGameState | None, time_limit_ms: int | None = None
    ) -> SearchResult:
        self.budgets.append(time_limit_ms)
        return SearchResult(
            best_move=state.valid_moves()[0], evaluation=-2, depth=3, nodes=40
        )


class TestEngineWorker:
    def test_emits_cancelled_when_search_is_cancelled(self) -> None:
        worker = EngineWorker()
        worker._engine = _CancellingEngine(worker)

        cancelled = QSignalSpy(worker.search_cancelled)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(OthelloBoard.initial(), 7)

        assert len(cancelled) == 1
        assert cancelled[0][0] == 7
        assert len(best_moves) == 0

    def test_emits_no_move_when_search_returns_none(self) -> None:
        worker = EngineWorker()
        worker._engine = _NoMoveEngine()

        no_move = QSignalSpy(worker.search_no_move)
        best_moves = QSignalSpy(worker.best_move_ready)
        errors = QSignalSpy(worker.search_error)

        worker.request_move(OthelloBoard.initial(), 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(best_moves) == 0
        assert len(errors) == 0

    def test_emits_error_for_invalid_state(self) -> None:
        worker = EngineWorker()

        errors = QSignalSpy(worker.search_error)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move("not a board", 3)

        assert len(errors) == 1
        assert errors[0][0] == 3
        assert len(best_moves) == 0

    def test_emits_error_when_engine_raises(self) -> None:
        worker = EngineWorker()
        worker._engine = _FailingEngine()

        errors = QSignalSpy(worker.search_error)

        worker.request_move(OthelloBoard.initial(), 5)

        assert len(errors) == 1
        assert errors[0][1] == "collaborator exploded"

    def test_forwards_result_and_time_limit(self) -> None:
        worker = EngineWorker(time_limit_ms=250)
        engine = _RecordingEngine()
        worker._engine = engine
        worker.set_time_limit(90)

        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(OthelloBoard.initial(), 2)

        assert engine.budgets == [90]
        assert len(best_moves) == 1
        assert list(best_moves[0]) == [2, (2, 3), -2, 3, 40]

    def test_real_engine_picks_legal_move(self) -> None:
        board = OthelloBoard.initial()
        worker = EngineWorker(SearchConfig(depth_limit=2))

        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(board, 1)

        assert len(best_moves) == 1
        assert best_moves[0][1] in board.valid_moves()

    def test_set_depth_limit_rebuilds_engine(self) -> None:
        worker = EngineWorker(SearchConfig(depth_limit=2))
        worker.request_move(OthelloBoard.initial(), 1)
        previous = worker.engine

        worker.set_depth_limit(3)

        assert worker.engine is not previous
        assert isinstance(worker.engine, MinimaxEngine)
        assert worker.engine.config.depth_limit == 3
        assert worker.engine.total_parents == 0
