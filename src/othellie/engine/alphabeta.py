"""Fixed-depth minimax with alpha-beta pruning.

``max_value`` and ``min_value`` are mutually recursive and report values
from the root mover's perspective (``SearchContext.viewpoint``).  Depth is
counted in plies from the root and increases after a node's successors are
generated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from othellie.engine.search import INF_SCORE

if TYPE_CHECKING:
    from othellie.core.state import IGameState
    from othellie.engine.context import SearchContext


def max_value(
    state: IGameState,
    alpha: int,
    beta: int,
    depth: int,
    ctx: SearchContext,
) -> int:
    if ctx.is_terminal(state, depth):
        return ctx.leaf_value(state)

    children = ctx.expand(state)
    if not children:
        return ctx.leaf_value(state)
    depth += 1

    value = -INF_SCORE
    for child in children:
        ctx.stats.record_explored()
        value = max(value, min_value(child, alpha, beta, depth, ctx))
        if value >= beta:
            return value
        alpha = max(alpha, value)
    return value


def min_value(
    state: IGameState,
    alpha: int,
    beta: int,
    depth: int,
    ctx: SearchContext,
) -> int:
    if ctx.is_terminal(state, depth):
        return ctx.leaf_value(state)

    children = ctx.expand(state)
    if not children:
        return ctx.leaf_value(state)
    depth += 1

    value = INF_SCORE
    for child in children:
        ctx.stats.record_explored()
        value = min(value, max_value(child, alpha, beta, depth, ctx))
        if value <= alpha:
            return value
        beta = min(beta, value)
    return value


def reply_value(child: IGameState, ctx: SearchContext) -> int:
    """Value of a root successor from its own mover's perspective.

    The root mover prefers the successor with the lowest reply value.
    """
    return -min_value(child, -INF_SCORE, INF_SCORE, 1, ctx)


def search_root(
    state: IGameState,
    ctx: SearchContext,
    *,
    stop_on_timeout: bool = False,
) -> tuple[IGameState | None, int]:
    """Search every root successor and return ``(best_child, reply_value)``.

    Ties keep the first successor in iteration order.  With
    *stop_on_timeout* the remaining root successors are skipped once the
    time budget is spent.
    """
    best_child: IGameState | None = None
    best_value = INF_SCORE

    for child in state.successors():
        if child is None:
            continue
        if stop_on_timeout and ctx.timed_out:
            ctx.interrupted = True
            break

        value = reply_value(child, ctx)
        if best_child is None or value < best_value:
            best_child = child
            best_value = value

    return best_child, best_value
