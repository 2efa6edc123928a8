"""Static line heuristics, used only to order moves before search."""
from enum import Enum

from ninarow.config import CONFIG, EvalConfig
from ninarow.core.board import Board
from ninarow.core.types import Player


class Ordering(str, Enum):
    NONE = "none"
    LINE_POTENTIAL = "line_potential"
    NEAR_WIN = "near_win"


class Evaluator:
    def __init__(self, cfg: EvalConfig = None):
        self.cfg = cfg or CONFIG.eval

    def line_potential(self, board: Board, player: Player) -> int:
        """Lines still open to ``player`` minus lines still open to the opponent."""
        cells = board.cells
        opponent = player.opponent
        open_for_player = 0
        open_for_opponent = 0
        for line in board.lines:
            owners = {cells[i] for i in line}
            if opponent not in owners:
                open_for_player += 1
            if player not in owners:
                open_for_opponent += 1
        return open_for_player - open_for_opponent

    def near_win(self, board: Board, player: Player) -> int:
        """Bonus for lines ``player`` can complete next move, penalty for the opponent's."""
        cells = board.cells
        target = board.size - 1
        score = 0
        for line in board.lines:
            mine = theirs = 0
            for i in line:
                if cells[i] is player:
                    mine += 1
                elif cells[i] is not None:
                    theirs += 1
            if mine == target and theirs == 0:
                score += self.cfg.near_win_bonus
            elif theirs == target and mine == 0:
                score -= self.cfg.near_win_penalty
        return score

    def evaluate(self, board: Board, player: Player, ordering: Ordering = Ordering.LINE_POTENTIAL) -> int:
        if ordering is Ordering.LINE_POTENTIAL:
            return self.line_potential(board, player)
        if ordering is Ordering.NEAR_WIN:
            return self.near_win(board, player)
        return 0
