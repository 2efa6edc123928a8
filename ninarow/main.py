import random
from typing import Optional

from ninarow.config import CONFIG
from ninarow.core.board import Board, GameOver
from ninarow.core.search import SearchEngine
from ninarow.core.types import GameResult


class Engine:
    """A live game: one board plus the search used to pick engine moves."""

    def __init__(self, size: Optional[int] = None, strategy=None, ordering=None, depth=None):
        cfg = CONFIG.search
        self.board = Board(size if size is not None else CONFIG.game.board_size)
        self.search = SearchEngine(
            strategy or cfg.strategy,
            ordering or cfg.ordering,
            depth=depth if depth is not None else cfg.depth,
        )
        self.last_stats = None

    def reset(self, size: Optional[int] = None):
        self.board = Board(size if size is not None else self.board.size)
        self.last_stats = None

    def make_move(self, index: int):
        if self.board.is_game_over():
            raise GameOver(f"Game is already over ({self.board.classify_result().value})")
        self.board.apply_move(index)

    def undo_move(self):
        self.board.undo_move()

    def best_move(self) -> Optional[int]:
        """Search a copy so the live board is never touched mid-search."""
        move, self.last_stats = self.search.search_best_move(self.board.copy())
        return move

    def play_best_move(self) -> Optional[int]:
        move = self.best_move()
        if move is not None:
            self.board.apply_move(move)
        return move

    def play_random_move(self, rng: Optional[random.Random] = None) -> Optional[int]:
        moves = self.board.legal_moves()
        if not moves or self.board.is_game_over():
            return None
        move = (rng or random).choice(moves)
        self.board.apply_move(move)
        return move

    def result(self) -> GameResult:
        return self.board.classify_result()

    def is_game_over(self) -> bool:
        return self.board.is_game_over()

    def print_board(self):
        self.board.print_board()
