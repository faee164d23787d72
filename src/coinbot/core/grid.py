# src/coinbot/core/grid.py

from __future__ import annotations
from typing import List, Union

from coinbot.config import ROWS, COLS
from coinbot.errors import ColumnFullError
from coinbot.types import Cell, Grid, Mark, Move


class _OffBoard:
    """Returned by cell_at() for coordinates outside the grid."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "OFF_BOARD"


OFF_BOARD = _OffBoard()


def other(mark: Mark) -> Mark:
    return "Y" if mark == "R" else "R"


def empty_grid(rows: int = ROWS, cols: int = COLS) -> Grid:
    return [[None for _ in range(cols)] for _ in range(rows)]


def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def legal_columns(grid: Grid) -> List[Move]:
    return [Move(c) for c in range(len(grid[0])) if grid[0][c] is None]


def drop_into(grid: Grid, col: int, mark: Mark) -> int:
    """
    Gravity insertion on a raw grid. Returns the landing row.
    """
    if grid[0][col] is not None:
        raise ColumnFullError(col)

    row = 0
    while row + 1 < len(grid) and grid[row + 1][col] is None:
        row += 1

    grid[row][col] = mark
    return row


def cell_at(grid: Grid, row: int, col: int) -> Union[Cell, _OffBoard]:
    if row < 0 or row >= len(grid) or col < 0 or col >= len(grid[0]):
        return OFF_BOARD
    return grid[row][col]


def is_open(cell: Union[Cell, _OffBoard], mark: Mark) -> bool:
    # empty or already holding `mark`; off-board cells are never open
    if cell is OFF_BOARD:
        return False
    return cell is None or cell == mark
