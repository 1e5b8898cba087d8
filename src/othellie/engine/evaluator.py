"""Memoizing static evaluator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from othellie.engine.search import Heuristic, HeuristicFn

if TYPE_CHECKING:
    from othellie.core.state import IGameState
    from othellie.engine.stats import SearchStatistics


def score_heuristic(state: IGameState) -> int:
    """Raw game score of the player to move."""
    return state.score(state.current_player)


def mobility_heuristic(state: IGameState) -> int:
    """Number of legal moves available to the player to move."""
    return len(state.valid_moves())


_HEURISTICS: dict[Heuristic, HeuristicFn] = {
    Heuristic.SCORE: score_heuristic,
    Heuristic.MOBILITY: mobility_heuristic,
}


def resolve_heuristic(heuristic: Heuristic | HeuristicFn) -> HeuristicFn:
    if isinstance(heuristic, Heuristic):
        return _HEURISTICS[heuristic]
    return heuristic


class Evaluator:
    """Scores positions from the perspective of the player to move.

    Results are memoized by position equality for the evaluator's whole
    lifetime.  Only cache misses count as static evaluations.
    """

    __slots__ = ("_heuristic", "_memo", "_stats")

    def __init__(
        self,
        stats: SearchStatistics,
        heuristic: Heuristic | HeuristicFn = Heuristic.SCORE,
    ) -> None:
        self._stats = stats
        self._heuristic = resolve_heuristic(heuristic)
        self._memo: dict[IGameState, int] = {}

    def evaluate(self, state: IGameState | None) -> int:
        if state is None:
            return 0

        cached = self._memo.get(state)
        if cached is not None:
            return cached

        value = self._heuristic(state)
        self._stats.record_evaluation()
        self._memo[state] = value
        return value

    @property
    def memo_size(self) -> int:
        return len(self._memo)
