"""Win-line tables for every supported board size.

A win-line is a tuple of flat cell indices (row * size + col). Each table
lists rows top to bottom, columns left to right, then the main diagonal and
the anti-diagonal. Tables are built once at import and never change.
"""
from typing import Dict, Tuple

SUPPORTED_SIZES = (2, 3, 4, 5)

Line = Tuple[int, ...]


def _build_lines(size: int) -> Tuple[Line, ...]:
    rows = [tuple(r * size + c for c in range(size)) for r in range(size)]
    cols = [tuple(r * size + c for r in range(size)) for c in range(size)]
    diag = tuple(i * size + i for i in range(size))
    anti = tuple(i * size + (size - 1 - i) for i in range(size))
    return tuple(rows + cols + [diag, anti])


WIN_LINES: Dict[int, Tuple[Line, ...]] = {n: _build_lines(n) for n in SUPPORTED_SIZES}


def win_lines(size: int) -> Tuple[Line, ...]:
    """Return the win-lines for ``size``; KeyError if the size has no table."""
    return WIN_LINES[size]


def is_supported_size(size) -> bool:
    return isinstance(size, int) and not isinstance(size, bool) and size in WIN_LINES
