"""Game-state interface consumed by the search engine.

The engine never builds or mutates positions; it only reads them through
this protocol.  Any board implementation providing these members (and a
structural ``__eq__``/``__hash__``) can be searched.
"""

from __future__ import annotations

from collections.abc import Collection, Hashable, Iterable
from typing import Protocol, runtime_checkable

from othellie.core.enums import GameStatus, Player

Move = Hashable
"""Opaque move token, e.g. a ``(row, col)`` pair."""


@runtime_checkable
class IGameState(Protocol):
    """Immutable snapshot of an Othello position."""

    @property
    def previous_move(self) -> Move | None:
        """The move that produced this state from its parent."""
        ...

    @property
    def status(self) -> GameStatus: ...

    @property
    def current_player(self) -> Player: ...

    def opponent(self, player: Player) -> Player: ...

    def score(self, player: Player) -> int:
        """Number of discs (or game score) owned by *player*."""
        ...

    def valid_moves(self) -> Collection[Move]:
        """Legal moves for the player to move."""
        ...

    def successors(self) -> Iterable[IGameState | None]:
        """All positions reachable in one ply.

        Entries may be ``None``; the engine skips them.
        """
        ...

    def __hash__(self) -> int: ...

    def __eq__(self, other: object) -> bool: ...
