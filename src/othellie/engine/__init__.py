"""Othello search engine: evaluator, statistics and minimax searchers.

The Qt worker bridge lives in :mod:`othellie.engine.qt_bridge` and needs
the optional ``qt`` extra.
"""

from othellie.engine.evaluator import Evaluator, mobility_heuristic, score_heuristic
from othellie.engine.minimax_search import MinimaxEngine
from othellie.engine.search import (
    INF_SCORE,
    UNBOUNDED_DEPTH,
    Heuristic,
    IEngine,
    SearchAlgorithm,
    SearchConfig,
    SearchResult,
)
from othellie.engine.stats import SearchStatistics
from othellie.engine.timer import SearchTimer

__all__ = [
    "INF_SCORE",
    "UNBOUNDED_DEPTH",
    "Evaluator",
    "Heuristic",
    "IEngine",
    "MinimaxEngine",
    "SearchAlgorithm",
    "SearchConfig",
    "SearchResult",
    "SearchStatistics",
    "SearchTimer",
    "mobility_heuristic",
    "score_heuristic",
]
