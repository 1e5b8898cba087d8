"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from othellie.core.state import IGameState, Move
    from othellie.engine.stats import SearchStatistics

UNBOUNDED_DEPTH = -1
INF_SCORE = 1_000_000
OTHELLO_CELLS = 64

HeuristicFn = Callable[["IGameState"], int]


class SearchAlgorithm(IntEnum):
    """Inner search routine used by the engine."""

    ALPHA_BETA = 0  # fixed depth, no deadline
    ITERATIVE_DEEPENING = 1  # min/max pair under a time budget
    NEGASCOUT = 2  # null-window search under a time budget

    @property
    def is_time_bounded(self) -> bool:
        return self is not SearchAlgorithm.ALPHA_BETA


class Heuristic(StrEnum):
    """Built-in static evaluation strategies."""

    SCORE = "score"
    MOBILITY = "mobility"


@dataclass(slots=True, frozen=True)
class SearchConfig:
    """Construction-time engine configuration.

    ``time_limit_ms`` is a duration budget measured from the start of each
    move computation, not an absolute instant.
    """

    depth_limit: int = 4
    algorithm: SearchAlgorithm = SearchAlgorithm.ALPHA_BETA
    heuristic: Heuristic | HeuristicFn = Heuristic.SCORE
    board_cells: int = OTHELLO_CELLS
    time_limit_ms: int | None = None
    reset_statistics: bool = False

    def __post_init__(self) -> None:
        if self.depth_limit < 0 and self.depth_limit != UNBOUNDED_DEPTH:
            raise ValueError(
                f"Depth limit must be >= 0 or {UNBOUNDED_DEPTH} (unbounded), "
                f"got {self.depth_limit}"
            )
        if self.board_cells <= 0:
            raise ValueError("Board cell count must be positive")
        if self.time_limit_ms is not None and self.time_limit_ms < 0:
            raise ValueError("Time limit must be >= 0 ms")
        if not isinstance(self.heuristic, Heuristic) and not callable(self.heuristic):
            raise ValueError(f"Unknown heuristic: {self.heuristic!r}")

    @property
    def is_depth_bounded(self) -> bool:
        return self.depth_limit != UNBOUNDED_DEPTH


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by one move computation.

    ``evaluation`` is the chosen successor's value from the perspective of
    the player to move in that successor, so lower is better for the mover.
    """

    best_move: Move | None
    evaluation: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Capability interface for move-selection engines."""

    @property
    def statistics(self) -> SearchStatistics: ...

    def search(
        self,
        state: IGameState | None,
        time_limit_ms: int | None = None,
    ) -> SearchResult: ...

    def select_move(
        self,
        state: IGameState | None,
        time_limit_ms: int | None = None,
    ) -> Move | None: ...
