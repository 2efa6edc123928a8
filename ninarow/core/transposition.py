"""Transposition cache keyed by board contents.

This module provides two pieces:

- rotation maps: for each supported board size, the index permutation that
  turns a cell tuple into its quarter-turn rotation. They are built once at
  import, the same way the win-line tables are.

- TranspositionTable: a dict keyed by the board's cell tuple. Turn and move
  history are not part of the key, so boards reached by different move
  orders share an entry. Each entry stores the GameResult together with the
  remaining depth it was searched to.

A table is meant to live for exactly one top-level search. With
``symmetric=True`` a lookup also tries the 90, 180 and 270 degree rotations
of the board; stores always use the unrotated key.

Usage (example):

    from ninarow.core.transposition import TranspositionTable

    tt = TranspositionTable(symmetric=True)
    tt.store(board, depth=5, result=GameResult.DRAW)
    entry = tt.get(board.rotate_90())
    if entry is not None:
        result, depth = entry
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ninarow.core.board import Board
from ninarow.core.lines import SUPPORTED_SIZES
from ninarow.core.types import Cell, GameResult

Key = Tuple[Cell, ...]


def make_rotation_map(size: int) -> Tuple[int, ...]:
    """Permutation ``p`` such that ``rotated[k] == cells[p[k]]``.

    Matches Board.rotate_90: cell (i, j) lands on (j, size-1-i).
    """
    perm = [0] * (size * size)
    for i in range(size):
        for j in range(size):
            perm[j * size + (size - 1 - i)] = i * size + j
    return tuple(perm)


ROTATION_MAPS: Dict[int, Tuple[int, ...]] = {n: make_rotation_map(n) for n in SUPPORTED_SIZES}


def rotate_key(key: Key, size: int) -> Key:
    perm = ROTATION_MAPS[size]
    return tuple(key[p] for p in perm)


def rotated_keys(key: Key, size: int) -> List[Key]:
    """The key followed by its 90, 180 and 270 degree rotations."""
    keys = [key]
    for _ in range(3):
        keys.append(rotate_key(keys[-1], size))
    return keys


@dataclass
class TTEntry:
    result: GameResult
    depth: int

    def __iter__(self):
        return iter((self.result, self.depth))


class TranspositionTable:
    """Per-search cache of GameResults.

    Methods:
      - get(board) -> Optional[TTEntry]
      - store(board, depth, result)
      - clear()
      - key(board) -> tuple of cells
    """

    def __init__(self, symmetric: bool = False):
        self.symmetric = symmetric
        self._table: Dict[Key, TTEntry] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self):
        return len(self._table)

    def __contains__(self, board: Board) -> bool:
        return self.key(board) in self._table

    def key(self, board: Board) -> Key:
        return board.key()

    def get(self, board: Board) -> Optional[TTEntry]:
        key = self.key(board)
        candidates = rotated_keys(key, board.size) if self.symmetric else (key,)
        for k in candidates:
            entry = self._table.get(k)
            if entry is not None:
                self.hits += 1
                return entry
        self.misses += 1
        return None

    def store(self, board: Board, depth: int, result: GameResult):
        key = self.key(board)
        entry = self._table.get(key)
        # keep the deeper search
        if entry is not None and entry.depth > depth:
            return
        self._table[key] = TTEntry(result, depth)

    def clear(self):
        self._table.clear()
        self.hits = 0
        self.misses = 0
