"""Negascout: negamax search with null-window probing.

Scores are reported from the perspective of the player to move at each
node; callers negate when combining across plies.  For the same depth and
evaluator the root values match the alpha-beta min/max pair.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from othellie.engine.search import INF_SCORE

if TYPE_CHECKING:
    from othellie.core.state import IGameState
    from othellie.engine.context import SearchContext

# Below this remaining depth a null-window result is already exact.
_EXACT_PROBE_DEPTH = 2


def negascout(
    state: IGameState,
    depth: int,
    alpha: int,
    beta: int,
    ctx: SearchContext,
) -> int:
    """Search *state* with *depth* plies remaining."""
    ply = ctx.depth_limit - depth
    if ctx.is_terminal(state, ply) or depth <= 0:
        return ctx.evaluate(state)

    children = ctx.expand(state)
    if not children:
        return ctx.evaluate(state)

    score = -INF_SCORE
    bound = beta
    for child in children:
        ctx.stats.record_explored()
        current = -negascout(child, depth - 1, -bound, -alpha, ctx)
        if current > score:
            if bound == beta or depth <= _EXACT_PROBE_DEPTH:
                score = current
            else:
                score = -negascout(child, depth - 1, -beta, -current, ctx)

        alpha = max(alpha, score)
        if alpha >= beta:
            return alpha
        bound = alpha + 1

    return score


def search_root(
    state: IGameState,
    ctx: SearchContext,
    *,
    stop_on_timeout: bool = False,
) -> tuple[IGameState | None, int]:
    """Negascout counterpart of :func:`othellie.engine.alphabeta.search_root`."""
    best_child: IGameState | None = None
    best_value = INF_SCORE

    for child in state.successors():
        if child is None:
            continue
        if stop_on_timeout and ctx.timed_out:
            ctx.interrupted = True
            break

        value = negascout(child, ctx.depth_limit - 1, -INF_SCORE, INF_SCORE, ctx)
        if best_child is None or value < best_value:
            best_child = child
            best_value = value

    return best_child, best_value
