"""N-in-a-row board with move history tracking."""
from __future__ import annotations

from typing import Iterable, List, Tuple

from ninarow.core.lines import win_lines, is_supported_size
from ninarow.core.types import Cell, GameResult, Player


class MoveError(ValueError):
    """A move or undo request the board cannot honour. The board is unchanged."""


class OutOfRange(MoveError):
    pass


class OccupiedCell(MoveError):
    pass


class NoMoveToUndo(MoveError):
    pass


class GameOver(MoveError):
    """A move was requested after the game already ended."""


class UnsupportedBoardSize(ValueError):
    pass


class BoardDesyncError(RuntimeError):
    """Cell grid and move history disagree. Not recoverable."""


class Board:
    def __init__(self, size: int = 3):
        """Create an empty ``size`` x ``size`` board with FIRST to move."""
        if not is_supported_size(size):
            raise UnsupportedBoardSize(f"Unsupported board size: {size!r}")
        self.size = size
        self.cells: List[Cell] = [None] * (size * size)
        self.turn = Player.FIRST
        self.move_history: List[int] = []
        self._lines = win_lines(size)

    @classmethod
    def from_moves(cls, size: int, moves: Iterable[int]) -> "Board":
        """Replay ``moves`` from the empty position."""
        board = cls(size)
        for index in moves:
            board.apply_move(index)
        return board

    def reset(self):
        """Reset to the empty position."""
        self.cells = [None] * (self.size * self.size)
        self.turn = Player.FIRST
        self.move_history.clear()

    def copy(self) -> "Board":
        b = Board(self.size)
        b.cells = self.cells[:]
        b.turn = self.turn
        b.move_history = self.move_history[:]
        return b

    def key(self) -> Tuple[Cell, ...]:
        """Canonical cache key: cell contents only."""
        return tuple(self.cells)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __hash__(self):
        return hash(self.key())

    def __len__(self):
        return len(self.cells)

    def apply_move(self, index: int):
        """Mark ``index`` for the side to move and pass the turn."""
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self.cells):
            raise OutOfRange(f"Index {index!r} is outside 0..{len(self.cells) - 1}")
        if self.cells[index] is not None:
            raise OccupiedCell(f"Cell {index} is already taken by {self.cells[index].symbol}")
        self.cells[index] = self.turn
        self.move_history.append(index)
        self.turn = self.turn.opponent

    def undo_move(self):
        """Take back the last move."""
        if not self.move_history:
            raise NoMoveToUndo("No moves have been played")
        index = self.move_history.pop()
        if self.cells[index] is None:
            raise BoardDesyncError(f"Undo target {index} is already empty")
        self.cells[index] = None
        self.turn = self.turn.opponent

    @property
    def lines(self):
        return self._lines

    def legal_moves(self) -> List[int]:
        """Empty cell indices in ascending order."""
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def occupied_count(self) -> int:
        return sum(1 for cell in self.cells if cell is not None)

    def empty_count(self) -> int:
        return len(self.cells) - self.occupied_count()

    def classify_result(self) -> GameResult:
        """Win for the owner of the first complete line, else draw / in progress."""
        cells = self.cells
        for line in self._lines:
            owner = cells[line[0]]
            if owner is not None and all(cells[i] is owner for i in line):
                return GameResult.win(owner)
        if None in cells:
            return GameResult.IN_PROGRESS
        return GameResult.DRAW

    def is_game_over(self) -> bool:
        return self.classify_result().is_terminal

    def rotate_90(self) -> "Board":
        """Board rotated a quarter turn: (i, j) -> (j, size-1-i).

        Turn and history are copied as-is, so the result is only meant for
        cache lookups, not for continued play.
        """
        n = self.size
        rotated = [None] * (n * n)
        for i in range(n):
            for j in range(n):
                rotated[j * n + (n - 1 - i)] = self.cells[i * n + j]
        b = Board(n)
        b.cells = rotated
        b.turn = self.turn
        b.move_history = self.move_history[:]
        return b

    def __str__(self):
        n = self.size
        sep = "-" * (n * 4 - 1)
        rows = []
        for r in range(n):
            row = self.cells[r * n:(r + 1) * n]
            rows.append(" | ".join(c.symbol if c is not None else " " for c in row))
        return ("\n" + sep + "\n").join(rows)

    def __repr__(self):
        return f"Board(size={self.size}, turn={self.turn.name}, moves={self.move_history})"

    def print_board(self):
        """Print ASCII representation."""
        print(self)


def new_board(size: int = 3) -> Board:
    return Board(size)
