from __future__ import annotations
from typing import Optional, Iterable, List, Set

from coinbot import config
from coinbot.types import Cell, Coord, Grid
from coinbot.ui.colors import c, BOLD, DIM, FG_CYAN, FG_RED, FG_YELLOW, REVERSE


def _piece(cell: Cell, highlighted: bool) -> str:
    if cell is None:
        return " "
    s = c(cell, FG_RED if cell == "R" else FG_YELLOW)
    if highlighted:
        s = c(s, REVERSE)
    return s


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(grid: Grid, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    """
    Box-drawn board, one string per printed line, column numbers on top.
    """
    hl: Set[Coord] = set(highlight) if highlight else set()
    cols = len(grid[0])

    lines = ["  " + "   ".join(str(i + 1) for i in range(cols))]
    lines.append("┌" + "┬".join("───" for _ in range(cols)) + "┐")
    for r, row in enumerate(grid):
        lines.append("│" + "│".join(f" {_piece(cell, (r, ci) in hl)} " for ci, cell in enumerate(row)) + "│")
        if r < len(grid) - 1:
            lines.append("├" + "┼".join("───" for _ in range(cols)) + "┤")
    lines.append("└" + "┴".join("───" for _ in range(cols)) + "┘")
    return lines


def render(grid: Grid, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    for line in board_lines(grid, highlight):
        print(line)

    if status:
        print(c(status, FG_CYAN))
    print(c(f"Enter 1-{len(grid[0])} to drop. Enter q to quit.", DIM))
