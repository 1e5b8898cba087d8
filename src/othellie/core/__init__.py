"""Core domain layer — the game-state contract the engine searches over.

The engine does not implement Othello rules.  A board implementation only
needs to satisfy :class:`IGameState`::

    from othellie.core import GameStatus, IGameState, Player
"""

from othellie.core.enums import GameStatus, Player
from othellie.core.state import IGameState, Move

__all__ = [
    "GameStatus",
    "IGameState",
    "Move",
    "Player",
]
