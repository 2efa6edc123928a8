"""Core engine components: board, win-lines, evaluators, search, and transposition table."""

from .types import Player, GameResult
from .board import (
    Board,
    new_board,
    MoveError,
    OutOfRange,
    OccupiedCell,
    NoMoveToUndo,
    GameOver,
    UnsupportedBoardSize,
    BoardDesyncError,
)
from .evaluator import Evaluator, Ordering
from .search import SearchEngine, SearchStats, Strategy, search, find_best_move
from .transposition import TranspositionTable
