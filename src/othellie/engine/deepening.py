"""Time-bounded iterative-deepening driver."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from othellie.engine import alphabeta, negascout
from othellie.engine.context import SearchContext
from othellie.engine.search import SearchAlgorithm
from othellie.engine.timer import SearchTimer

if TYPE_CHECKING:
    from othellie.core.state import IGameState
    from othellie.engine.evaluator import Evaluator
    from othellie.engine.search import SearchConfig
    from othellie.engine.stats import SearchStatistics

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class DeepeningOutcome:
    """Choice of the deepest completed pass."""

    best_child: IGameState | None
    evaluation: int
    depth: int
    passes: int


class IterativeDeepening:
    """Re-runs a bounded root search at increasing depth until time runs out.

    Pass ``d`` searches ``d + 1`` plies.  Pass 0 only evaluates the root
    successors statically, so it always completes and a move is always
    available when the position has one.  Each completed pass replaces the
    choice of the shallower one; a later pass cut short by the deadline is
    discarded.  Deepening also stops when the configured depth limit is
    reached or when a pass never hit the depth limit (the tree is
    exhausted).
    """

    __slots__ = ("_config", "_evaluator", "_stats", "_root_search")

    def __init__(
        self,
        config: SearchConfig,
        evaluator: Evaluator,
        stats: SearchStatistics,
    ) -> None:
        self._config = config
        self._evaluator = evaluator
        self._stats = stats
        if config.algorithm == SearchAlgorithm.NEGASCOUT:
            self._root_search = negascout.search_root
        else:
            self._root_search = alphabeta.search_root

    def run(
        self,
        state: IGameState,
        timer: SearchTimer | None = None,
    ) -> DeepeningOutcome:
        if timer is None:
            timer = SearchTimer.unlimited()

        best_child: IGameState | None = None
        best_eval = 0
        completed_depth = 0
        passes = 0
        depth = 0

        while True:
            limit = depth + 1
            ctx = SearchContext(
                evaluator=self._evaluator,
                stats=self._stats,
                viewpoint=state.current_player,
                depth_limit=limit,
                time_bounded=True,
                board_cells=self._config.board_cells,
                timer=timer,
            )
            child, value = self._root_search(state, ctx, stop_on_timeout=depth > 0)
            passes += 1

            if child is None and not ctx.interrupted:
                break

            if child is not None and not ctx.interrupted:
                best_child = child
                best_eval = value
                completed_depth = limit
                _LOGGER.debug(
                    "Pass %d complete: move=%s eval=%d remaining=%.3fs",
                    limit,
                    child.previous_move,
                    value,
                    timer.remaining,
                )
            else:
                _LOGGER.debug("Pass %d interrupted by deadline, discarded", limit)

            if timer.expired():
                break
            if self._config.is_depth_bounded and limit >= self._config.depth_limit:
                break
            if ctx.depth_cutoffs == 0:
                break
            depth += 1

        return DeepeningOutcome(best_child, best_eval, completed_depth, passes)
