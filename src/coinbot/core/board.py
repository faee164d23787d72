# src/coinbot/core/board.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from coinbot.config import ROWS, COLS
from coinbot.core.grid import copy_grid, drop_into, empty_grid, legal_columns
from coinbot.core.rules import check_winner_with_line, is_full, outcome_of
from coinbot.errors import GameOverError
from coinbot.types import Coord, GameOutcome, Grid, Mark, Move

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: Grid = field(default_factory=list)
    _outcome: GameOutcome = field(default=GameOutcome.ONGOING, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = empty_grid(self.rows, self.cols)
        else:
            self.rows = len(self.grid)
            self.cols = len(self.grid[0])
        # A board built from an existing grid gets its outcome computed once.
        self._outcome = outcome_of(self.grid)

    @property
    def outcome(self) -> GameOutcome:
        return self._outcome

    def is_terminal(self) -> bool:
        return self._outcome is not GameOutcome.ONGOING

    def grid_snapshot(self) -> Grid:
        return copy_grid(self.grid)

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, self.grid_snapshot())

    def valid_moves(self) -> List[Move]:
        return legal_columns(self.grid)

    def is_full(self) -> bool:
        return is_full(self.grid)

    def winning_line(self) -> Optional[List[Coord]]:
        res = check_winner_with_line(self.grid)
        return res[1] if res else None

    def drop(self, col: Move, player: Mark) -> int:
        """
        Drop a coin for `player` into `col` and return the landing row.

        Raises ColumnFullError (and leaves the board untouched) when the top
        cell of the column is already occupied.
        """
        c = int(col)
        if c < 0 or c >= self.cols:
            raise IndexError("Column out of range.")
        if self.is_terminal():
            raise GameOverError(f"Game is already over ({self._outcome.value}).")

        row = drop_into(self.grid, c, player)
        logger.debug("%s dropped into column %d, landed on row %d", player, c, row)

        # Full rescan, not just the lines through the new coin.
        self._outcome = outcome_of(self.grid)
        if self.is_terminal():
            logger.debug("Board reached outcome %s", self._outcome.value)
        return row
