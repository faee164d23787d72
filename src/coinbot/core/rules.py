from __future__ import annotations
from typing import Optional, List, Tuple

from coinbot.config import CONNECT_N
from coinbot.types import Coord, GameOutcome, Grid, Mark


def check_winner_with_line(grid: Grid) -> Optional[Tuple[Mark, List[Coord]]]:
    g = grid
    rows = len(g)
    cols = len(g[0])
    span = CONNECT_N - 1

    # Horizontal
    for r in range(rows):
        for c in range(cols - span):
            p = g[r][c]
            if p and p == g[r][c + 1] == g[r][c + 2] == g[r][c + 3]:
                return p, [(r, c + i) for i in range(CONNECT_N)]

    # Vertical
    for r in range(rows - span):
        for c in range(cols):
            p = g[r][c]
            if p and p == g[r + 1][c] == g[r + 2][c] == g[r + 3][c]:
                return p, [(r + i, c) for i in range(CONNECT_N)]

    # Diagonal down-right
    for r in range(rows - span):
        for c in range(cols - span):
            p = g[r][c]
            if p and p == g[r + 1][c + 1] == g[r + 2][c + 2] == g[r + 3][c + 3]:
                return p, [(r + i, c + i) for i in range(CONNECT_N)]

    # Diagonal down-left
    for r in range(rows - span):
        for c in range(span, cols):
            p = g[r][c]
            if p and p == g[r + 1][c - 1] == g[r + 2][c - 2] == g[r + 3][c - 3]:
                return p, [(r + i, c - i) for i in range(CONNECT_N)]

    return None


def check_winner(grid: Grid) -> Optional[Mark]:
    res = check_winner_with_line(grid)
    return res[0] if res else None


def is_full(grid: Grid) -> bool:
    return all(cell is not None for cell in grid[0])


def outcome_of(grid: Grid) -> GameOutcome:
    w = check_winner(grid)
    if w == "R":
        return GameOutcome.FIRST_WON
    if w == "Y":
        return GameOutcome.SECOND_WON
    if is_full(grid):
        return GameOutcome.DRAW
    return GameOutcome.ONGOING


def winner_through(grid: Grid, row: int, col: int) -> Optional[Mark]:
    """
    Localized variant of check_winner(): only looks at lines through (row, col).
    Equivalent to the full scan when (row, col) is the most recent coin.
    """
    p = grid[row][col]
    if p is None:
        return None

    rows = len(grid)
    cols = len(grid[0])
    for dr, dc in ((0, 1), (1, 0), (1, 1), (1, -1)):
        run = 1
        for sign in (1, -1):
            r, c = row + sign * dr, col + sign * dc
            while 0 <= r < rows and 0 <= c < cols and grid[r][c] == p:
                run += 1
                r += sign * dr
                c += sign * dc
        if run >= CONNECT_N:
            return p
    return None
