# src/coinbot/errors.py

from __future__ import annotations


class ColumnFullError(ValueError):
    """Raised when a coin is dropped into a column whose top cell is taken."""

    def __init__(self, column: int) -> None:
        super().__init__(f"Column {column + 1} is full.")
        self.column = column


class GameOverError(RuntimeError):
    """Raised when a drop is attempted on a board that already has an outcome."""
