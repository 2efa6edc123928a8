"""Players, cells and game results.

GameResult doubles as the search score: it is ordered so that the first
player maximizes and the second player minimizes it.

    FIRST_WINS > DRAW == IN_PROGRESS > SECOND_WINS

DRAW and IN_PROGRESS share a rank, so neither is < or > the other, while
``==`` still tells them apart (a finished draw is not a game in progress).
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class Player(Enum):
    FIRST = "X"
    SECOND = "O"

    @property
    def opponent(self) -> "Player":
        return Player.SECOND if self is Player.FIRST else Player.FIRST

    @property
    def symbol(self) -> str:
        return self.value

    def __lt__(self, other):
        if not isinstance(other, Player):
            return NotImplemented
        return self is Player.SECOND and other is Player.FIRST

    def __gt__(self, other):
        if not isinstance(other, Player):
            return NotImplemented
        return self is Player.FIRST and other is Player.SECOND


# None marks an empty cell.
Cell = Optional[Player]


class GameResult(Enum):
    FIRST_WINS = "first_wins"
    SECOND_WINS = "second_wins"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"

    @classmethod
    def win(cls, player: Player) -> "GameResult":
        return cls.FIRST_WINS if player is Player.FIRST else cls.SECOND_WINS

    @classmethod
    def worst_for(cls, player: Player) -> "GameResult":
        """Initial best score for ``player``: a win for the opponent."""
        return cls.win(player.opponent)

    @property
    def winner(self) -> Optional[Player]:
        if self is GameResult.FIRST_WINS:
            return Player.FIRST
        if self is GameResult.SECOND_WINS:
            return Player.SECOND
        return None

    @property
    def rank(self) -> int:
        return _RANK[self]

    @property
    def is_terminal(self) -> bool:
        return self is not GameResult.IN_PROGRESS

    def __lt__(self, other):
        if not isinstance(other, GameResult):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, GameResult):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, GameResult):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, GameResult):
            return NotImplemented
        return self.rank >= other.rank


_RANK = {
    GameResult.FIRST_WINS: 1,
    GameResult.DRAW: 0,
    GameResult.IN_PROGRESS: 0,
    GameResult.SECOND_WINS: -1,
}
