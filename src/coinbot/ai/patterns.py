"""
Run and neighbourhood patterns around the cell a coin just landed on.

All helpers read the mark from grid[row][col] and count runs for that mark.
Off-board cells are never "open"; when only equality with the mark matters
they behave like empty cells.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from coinbot.core.grid import OFF_BOARD, cell_at, is_open
from coinbot.types import Cell, Grid

Offset = Tuple[int, int]  # (drow, dcol)

DIAGONAL_DIRECTIONS: Tuple[Offset, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
HORIZONTAL_DIRECTIONS: Tuple[Offset, ...] = ((0, -1), (0, 1))

# (orientation, offsets that must hold the mark, offset that must be open)
THREE_PATTERNS: Tuple[Tuple[str, Tuple[Offset, ...], Offset], ...] = (
    ("diagonal", ((-1, -1), (-2, -2)), (-3, -3)),
    ("diagonal", ((-1, -1), (1, 1)), (1, 2)),
    ("diagonal", ((-1, 1), (-1, 2)), (-3, 3)),
    ("diagonal", ((-1, 1), (1, -1)), (2, -2)),
    ("horizontal", ((0, -1), (0, -2)), (0, -3)),
    ("horizontal", ((0, -1), (0, 1)), (0, 2)),
)

# Read in this order. The last three report historic coordinates that do not
# match the offset read; the value always comes from that offset.
NEIGHBOUR_OFFSETS: Tuple[Tuple[Offset, Offset], ...] = (
    ((-1, -1), (-1, -1)),
    ((-1, 1), (-1, 1)),
    ((0, -1), (0, -1)),
    ((0, 1), (0, 1)),
    ((1, -1), (0, -1)),
    ((1, 0), (0, 0)),
    ((1, 1), (0, 1)),
)


@dataclass(slots=True)
class RunCounts:
    diagonal: int = 0
    horizontal: int = 0
    vertical: int = 0

    def add(self, orientation: str) -> None:
        setattr(self, orientation, getattr(self, orientation) + 1)


def _holds(grid: Grid, row: int, col: int, off: Offset, mark: Cell) -> bool:
    return cell_at(grid, row + off[0], col + off[1]) == mark


def _open_at(grid: Grid, row: int, col: int, off: Offset, mark: Cell) -> bool:
    return is_open(cell_at(grid, row + off[0], col + off[1]), mark)


def _on_board(grid: Grid, row: int, col: int, off: Offset) -> bool:
    return cell_at(grid, row + off[0], col + off[1]) is not OFF_BOARD


def count_twos(grid: Grid, row: int, col: int) -> RunCounts:
    """
    Count open two-runs through (row, col).

    For a neighbour in direction d holding the same mark: if the cell two steps
    out is on the board and open, each open cell at 3d and at -d extends the
    run. If 2d falls off the board the run must extend backwards instead,
    needing both -d and -2d open.
    """
    mark = grid[row][col]
    counts = RunCounts()

    for orientation, directions in (("diagonal", DIAGONAL_DIRECTIONS), ("horizontal", HORIZONTAL_DIRECTIONS)):
        for dr, dc in directions:
            if not _holds(grid, row, col, (dr, dc), mark):
                continue

            far2 = (2 * dr, 2 * dc)
            back1 = (-dr, -dc)
            if _on_board(grid, row, col, far2):
                if _open_at(grid, row, col, far2, mark):
                    if _open_at(grid, row, col, (3 * dr, 3 * dc), mark):
                        counts.add(orientation)
                    if _open_at(grid, row, col, back1, mark):
                        counts.add(orientation)
            elif _open_at(grid, row, col, back1, mark) and _open_at(grid, row, col, (-2 * dr, -2 * dc), mark):
                counts.add(orientation)

    if _holds(grid, row, col, (1, 0), mark) and row > 2:
        counts.vertical += 1

    return counts


def count_threes(grid: Grid, row: int, col: int) -> RunCounts:
    mark = grid[row][col]
    counts = RunCounts()

    for orientation, needed, open_off in THREE_PATTERNS:
        if all(_holds(grid, row, col, off, mark) for off in needed) and _open_at(grid, row, col, open_off, mark):
            counts.add(orientation)

    if _holds(grid, row, col, (1, 0), mark) and _holds(grid, row, col, (2, 0), mark):
        counts.vertical += 1

    return counts


def neighbouring_cells(grid: Grid, row: int, col: int) -> List[Tuple[Cell, int, int]]:
    out: List[Tuple[Cell, int, int]] = []
    for (dr, dc), (lr, lc) in NEIGHBOUR_OFFSETS:
        cell = cell_at(grid, row + dr, col + dc)
        if cell is OFF_BOARD:
            continue
        out.append((cell, row + lr, col + lc))
    return out
