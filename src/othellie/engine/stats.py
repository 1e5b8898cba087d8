"""Search statistics recorder."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(slots=True)
class SearchStatistics:
    """Running counters for branching-factor diagnostics.

    Owned by a single engine.  Not thread-safe: concurrent searches need
    their own engine instances.
    """

    static_evaluations: int = 0
    total_successors: int = 0
    total_parents: int = 0
    explored_successors: int = 0

    def record_expansion(self, successor_count: int) -> None:
        self.total_successors += successor_count
        self.total_parents += 1

    def record_explored(self) -> None:
        self.explored_successors += 1

    def record_evaluation(self) -> None:
        self.static_evaluations += 1

    @property
    def nodes_generated(self) -> int:
        return self.explored_successors

    @property
    def average_branching_factor(self) -> float:
        """Successors generated per expanded node; NaN before any expansion."""
        if self.total_parents == 0:
            return math.nan
        return self.total_successors / self.total_parents

    @property
    def effective_branching_factor(self) -> float:
        """Successors explored after pruning per expanded node; NaN if none."""
        if self.total_parents == 0:
            return math.nan
        return self.explored_successors / self.total_parents

    def reset(self) -> None:
        self.static_evaluations = 0
        self.total_successors = 0
        self.total_parents = 0
        self.explored_successors = 0

    def __str__(self) -> str:
        return (
            f"evals={self.static_evaluations} "
            f"generated={self.total_successors} "
            f"explored={self.explored_successors} "
            f"parents={self.total_parents} "
            f"abf={self.average_branching_factor:.2f} "
            f"ebf={self.effective_branching_factor:.2f}"
        )
