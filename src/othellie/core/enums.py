"""Core enumerations shared with the game-state collaborator."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side to move. Black moves first in Othello."""

    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class GameStatus(IntEnum):
    """Status reported by a game state.

    Anything other than ``PLAYING`` ends the search at that node.
    """

    PLAYING = 0
    BLACK_WINS = 1
    WHITE_WINS = 2
    DRAW = 3
    NO_MOVES = 4

    @property
    def is_over(self) -> bool:
        return self is not GameStatus.PLAYING
