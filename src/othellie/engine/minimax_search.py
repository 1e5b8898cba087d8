"""Move selector: one parameterized minimax engine for every search variant."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from othellie.engine import alphabeta
from othellie.engine.context import SearchContext
from othellie.engine.deepening import IterativeDeepening
from othellie.engine.evaluator import Evaluator
from othellie.engine.search import IEngine, SearchConfig, SearchResult
from othellie.engine.stats import SearchStatistics
from othellie.engine.timer import SearchTimer

if TYPE_CHECKING:
    from othellie.core.state import IGameState, Move

_LOGGER = logging.getLogger(__name__)


class MinimaxEngine(IEngine):
    """Selects moves with alpha-beta, iterative deepening or negascout.

    Every instance owns its statistics and memo table.  Instances are not
    thread-safe; give each concurrent game or player its own engine.

    Args:
        config: Search configuration; defaults to a depth-4 alpha-beta
            search with the raw-score heuristic.
        name: Display name used in log messages.
    """

    __slots__ = ("_config", "_deepening", "_evaluator", "_name", "_stats")

    def __init__(self, config: SearchConfig | None = None, *, name: str = "") -> None:
        self._config = config or SearchConfig()
        self._name = name or f"Minimax ({self._config.algorithm.name.lower()})"
        self._stats = SearchStatistics()
        self._evaluator = Evaluator(self._stats, self._config.heuristic)
        self._deepening = IterativeDeepening(
            self._config, self._evaluator, self._stats
        )

    # ── IEngine protocol ─────────────────────────────────────────────────

    def select_move(
        self,
        state: IGameState | None,
        time_limit_ms: int | None = None,
    ) -> Move | None:
        """Return the best move for the player to move, or ``None``.

        ``None`` means no move is available: the caller should treat it as
        a pass or the end of the game.
        """
        return self.search(state, time_limit_ms).best_move

    def search(
        self,
        state: IGameState | None,
        time_limit_ms: int | None = None,
    ) -> SearchResult:
        """Search *state* and return the chosen move with diagnostics.

        *time_limit_ms* overrides the configured budget for this call.  It
        only applies to the time-bounded algorithms, which need either a
        budget or a finite depth limit.

        Raises:
            ValueError: A time-bounded algorithm has an unbounded depth and
                no time budget.
        """
        if self._config.reset_statistics:
            self._stats.reset()
        if state is None:
            return SearchResult(best_move=None, evaluation=0, depth=0, nodes=0)

        nodes_before = self._stats.explored_successors
        if self._config.algorithm.is_time_bounded:
            budget = time_limit_ms
            if budget is None:
                budget = self._config.time_limit_ms
            timer = SearchTimer(budget)
            if not timer.has_budget and not self._config.is_depth_bounded:
                raise ValueError(
                    "Unbounded depth requires a time limit for "
                    f"{self._config.algorithm.name.lower()} search"
                )
            timer.start()
            outcome = self._deepening.run(state, timer)
            best_child = outcome.best_child
            evaluation = outcome.evaluation
            depth = outcome.depth
        else:
            ctx = SearchContext(
                evaluator=self._evaluator,
                stats=self._stats,
                viewpoint=state.current_player,
                depth_limit=self._config.depth_limit,
                board_cells=self._config.board_cells,
            )
            best_child, evaluation = alphabeta.search_root(state, ctx)
            depth = self._config.depth_limit

        nodes = self._stats.explored_successors - nodes_before
        if best_child is None:
            _LOGGER.debug("%s: no move available", self._name)
            return SearchResult(best_move=None, evaluation=0, depth=0, nodes=nodes)

        _LOGGER.debug(
            "%s: move=%s eval=%d depth=%d nodes=%d memo=%d [%s]",
            self._name,
            best_child.previous_move,
            evaluation,
            depth,
            nodes,
            self._evaluator.memo_size,
            self._stats,
        )
        return SearchResult(
            best_move=best_child.previous_move,
            evaluation=evaluation,
            depth=depth,
            nodes=nodes,
        )

    # ── Statistics ───────────────────────────────────────────────────────

    @property
    def statistics(self) -> SearchStatistics:
        return self._stats

    @property
    def static_evaluations(self) -> int:
        return self._stats.static_evaluations

    @property
    def nodes_generated(self) -> int:
        return self._stats.nodes_generated

    @property
    def total_successors(self) -> int:
        return self._stats.total_successors

    @property
    def total_parents(self) -> int:
        return self._stats.total_parents

    @property
    def average_branching_factor(self) -> float:
        return self._stats.average_branching_factor

    @property
    def effective_branching_factor(self) -> float:
        return self._stats.effective_branching_factor

    def reset_statistics(self) -> None:
        self._stats.reset()

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def evaluator(self) -> Evaluator:
        return self._evaluator

    def evaluate(self, state: IGameState | None) -> int:
        """Static evaluation of *state* through the engine's memo table."""
        return self._evaluator.evaluate(state)
