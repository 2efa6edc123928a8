import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ninarow.config import CONFIG, SearchConfig
from ninarow.core.board import Board
from ninarow.core.evaluator import Evaluator, Ordering
from ninarow.core.transposition import TranspositionTable
from ninarow.core.types import GameResult, Player
from ninarow.core.utils import format_info

logger = logging.getLogger(__name__)

# Full window: worst result for the maximizer, best result for the maximizer
ALPHA_START = GameResult.SECOND_WINS
BETA_START = GameResult.FIRST_WINS

CACHE_NONE = "none"
CACHE_EXACT = "exact"
CACHE_SYMMETRIC = "symmetric"


class Strategy(str, Enum):
    MINIMAX = "minimax"
    MINIMAX_CACHED = "minimax_cached"
    ALPHA_BETA = "alpha_beta"
    ALPHA_BETA_CACHED = "alpha_beta_cached"
    ALPHA_BETA_CACHED_SYMMETRIC = "alpha_beta_cached_symmetric"


@dataclass(frozen=True)
class SearchPlan:
    prune: bool
    cache: str = CACHE_NONE


PLANS = {
    Strategy.MINIMAX: SearchPlan(prune=False),
    Strategy.MINIMAX_CACHED: SearchPlan(prune=False, cache=CACHE_EXACT),
    Strategy.ALPHA_BETA: SearchPlan(prune=True),
    Strategy.ALPHA_BETA_CACHED: SearchPlan(prune=True, cache=CACHE_EXACT),
    Strategy.ALPHA_BETA_CACHED_SYMMETRIC: SearchPlan(prune=True, cache=CACHE_SYMMETRIC),
}


@dataclass
class SearchStats:
    result: Optional[GameResult] = None
    nodes: int = 0
    cache_hits: int = 0
    cutoffs: int = 0
    elapsed: float = 0.0


class SearchEngine:
    def __init__(self, strategy=Strategy.ALPHA_BETA, ordering=Ordering.NONE,
                 evaluator: Optional[Evaluator] = None, depth: Optional[int] = None):
        self.strategy = Strategy(strategy)
        self.ordering = Ordering(ordering)
        self.plan = PLANS[self.strategy]
        self.evaluator = evaluator or Evaluator()
        self.max_depth = depth

    @classmethod
    def from_config(cls, cfg: Optional[SearchConfig] = None) -> "SearchEngine":
        cfg = cfg or CONFIG.search
        return cls(cfg.strategy, cfg.ordering, depth=cfg.depth)

    def new_table(self) -> Optional[TranspositionTable]:
        """Fresh cache for one top-level search, or None if the plan has none."""
        if self.plan.cache == CACHE_NONE:
            return None
        return TranspositionTable(symmetric=self.plan.cache == CACHE_SYMMETRIC)

    def _root_depth(self, board: Board) -> int:
        empties = board.empty_count()
        if self.max_depth is None:
            return empties
        return max(0, min(self.max_depth, empties))

    def search(self, board: Board, player: Optional[Player] = None) -> SearchStats:
        """Game-theoretic value of ``board`` with ``player`` choosing at the root.

        The board is searched in place and handed back unchanged.
        """
        stats = SearchStats()
        tt = self.new_table()
        side = player or board.turn
        start_time = time.perf_counter()
        stats.result = self._search(board, self._root_depth(board), ALPHA_START, BETA_START,
                                    side, stats, tt)
        stats.elapsed = time.perf_counter() - start_time
        logger.info(format_info(self.strategy.value, stats))
        return stats

    def search_best_move(self, board: Board) -> Tuple[Optional[int], SearchStats]:
        """Best move for the side to move, or None if the game is over.

        Children are searched in index order with a full window each; the
        first strictly best one wins ties.
        """
        stats = SearchStats()
        start_time = time.perf_counter()
        current = board.classify_result()
        if current.is_terminal:
            stats.result = current
            return None, stats

        side = board.turn
        own_win = GameResult.win(side)
        tt = self.new_table()
        child_depth = max(0, self._root_depth(board) - 1)
        best_move = None
        best_score = None

        for move in board.legal_moves():
            board.apply_move(move)
            score = self._search(board, child_depth, ALPHA_START, BETA_START, board.turn, stats, tt)
            board.undo_move()

            if best_score is None or _better(score, best_score, side):
                best_move, best_score = move, score
            if best_score is own_win:
                break

        stats.result = best_score
        stats.elapsed = time.perf_counter() - start_time
        logger.info("%s bestmove %s", format_info(self.strategy.value, stats), best_move)
        return best_move, stats

    def _search(self, board: Board, depth: int, alpha: GameResult, beta: GameResult,
                side: Player, stats: SearchStats, tt: Optional[TranspositionTable]) -> GameResult:
        # Cached values assume the side to move is the side choosing.
        use_tt = tt is not None and side is board.turn
        if use_tt:
            entry = tt.get(board)
            if entry is not None and entry.depth >= depth:
                stats.cache_hits += 1
                return entry.result

        stats.nodes += 1
        result = board.classify_result()
        if result.is_terminal:
            if use_tt:
                tt.store(board, board.empty_count(), result)
            return result
        if depth <= 0:
            return result

        alpha_orig, beta_orig = alpha, beta
        maximizing = side is Player.FIRST
        best = GameResult.worst_for(side)

        for move in self._order_moves(board):
            board.apply_move(move)
            score = self._search(board, depth - 1, alpha, beta, board.turn, stats, tt)
            board.undo_move()

            if maximizing:
                if score > best:
                    best = score
                if best > alpha:
                    alpha = best
                if self.plan.prune and best >= beta:
                    stats.cutoffs += 1
                    break
            else:
                if score < best:
                    best = score
                if best < beta:
                    beta = best
                if self.plan.prune and best <= alpha:
                    stats.cutoffs += 1
                    break

        if use_tt and self._is_exact(best, alpha_orig, beta_orig):
            tt.store(board, depth, best)
        return best

    def _is_exact(self, value: GameResult, alpha: GameResult, beta: GameResult) -> bool:
        """False when ``value`` is only a bound from a pruned window."""
        if not self.plan.prune:
            return True
        if value <= alpha and value is not GameResult.SECOND_WINS:
            return False
        if value >= beta and value is not GameResult.FIRST_WINS:
            return False
        return True

    def _order_moves(self, board: Board) -> List[int]:
        moves = board.legal_moves()
        if self.ordering is Ordering.NONE:
            return moves
        mover = board.turn
        scores = []
        for move in moves:
            board.apply_move(move)
            scores.append(self.evaluator.evaluate(board, mover, self.ordering))
            board.undo_move()
        return [m for _, m in sorted(zip(scores, moves), key=lambda x: x[0], reverse=True)]


def _better(score: GameResult, best: GameResult, side: Player) -> bool:
    return score > best if side is Player.FIRST else score < best


def search(board: Board, strategy=Strategy.ALPHA_BETA,
           maximizing_player: Optional[Player] = None) -> GameResult:
    return SearchEngine(strategy).search(board, maximizing_player).result


def find_best_move(board: Board, strategy=Strategy.ALPHA_BETA) -> Optional[int]:
    move, _stats = SearchEngine(strategy).search_best_move(board)
    return move
