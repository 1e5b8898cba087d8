"""Per-search mutable state and the terminal/cutoff test."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from othellie.engine.search import OTHELLO_CELLS, UNBOUNDED_DEPTH
from othellie.engine.timer import SearchTimer

if TYPE_CHECKING:
    from othellie.core.enums import Player
    from othellie.core.state import IGameState
    from othellie.engine.evaluator import Evaluator
    from othellie.engine.stats import SearchStatistics


@dataclass(slots=True)
class SearchContext:
    """State shared by every node of one search pass.

    ``viewpoint`` is the root mover; the min/max pair reports values from
    that player's perspective.  ``time_bounded`` enables the saturation and
    deadline cutoffs used by the iterative-deepening searches.
    """

    evaluator: Evaluator
    stats: SearchStatistics
    viewpoint: Player
    depth_limit: int = UNBOUNDED_DEPTH
    time_bounded: bool = False
    board_cells: int = OTHELLO_CELLS
    timer: SearchTimer | None = None
    depth_cutoffs: int = 0
    interrupted: bool = False

    def is_terminal(self, state: IGameState, depth: int) -> bool:
        if state.status.is_over:
            return True

        if self.time_bounded and self._is_saturated(state):
            return True

        if self.depth_limit != UNBOUNDED_DEPTH and depth >= self.depth_limit:
            self.depth_cutoffs += 1
            return True

        if self.time_bounded and self.timer is not None and self.timer.expired():
            self.interrupted = True
            return True

        return False

    def _is_saturated(self, state: IGameState) -> bool:
        player = state.current_player
        occupied = state.score(player) + state.score(state.opponent(player))
        return occupied >= self.board_cells

    def evaluate(self, state: IGameState) -> int:
        """Static value from the perspective of *state*'s player to move."""
        return self.evaluator.evaluate(state)

    def leaf_value(self, state: IGameState) -> int:
        """Static value from the root mover's perspective."""
        value = self.evaluator.evaluate(state)
        if state.current_player == self.viewpoint:
            return value
        return -value

    @property
    def timed_out(self) -> bool:
        return self.time_bounded and self.timer is not None and self.timer.expired()

    def expand(self, state: IGameState) -> list[IGameState] | None:
        """Generate successors and record the expansion.

        Returns ``None`` when the position has no continuation at all.
        ``None`` entries are counted as generated but dropped.
        """
        successors = list(state.successors())
        if not successors:
            return None
        self.stats.record_expansion(len(successors))
        return [child for child in successors if child is not None]
