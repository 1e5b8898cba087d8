"""Duration-budget timer polled by time-bounded searches."""

from __future__ import annotations

import time


class SearchTimer:
    """Tracks elapsed time against a budget given in milliseconds.

    The budget is a duration counted from :meth:`start`; there is no
    absolute deadline instant.  Uses monotonic time so wall-clock
    adjustments cannot shorten or extend a search.
    """

    __slots__ = ("_budget", "_started_at")

    def __init__(self, time_limit_ms: int | None) -> None:
        self._budget: float | None = (
            None if time_limit_ms is None else time_limit_ms / 1000.0
        )
        self._started_at = time.monotonic()

    def start(self) -> None:
        self._started_at = time.monotonic()

    @property
    def has_budget(self) -> bool:
        return self._budget is not None

    @property
    def elapsed(self) -> float:
        """Seconds since :meth:`start`."""
        return time.monotonic() - self._started_at

    @property
    def remaining(self) -> float:
        if self._budget is None:
            return float("inf")
        return max(0.0, self._budget - self.elapsed)

    def expired(self) -> bool:
        return self._budget is not None and self.elapsed >= self._budget

    @classmethod
    def unlimited(cls) -> SearchTimer:
        return cls(None)
