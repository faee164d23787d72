# src/coinbot/types.py

from __future__ import annotations
from enum import Enum
from typing import List, Literal, Optional, NewType, Tuple

Mark = Literal["R", "Y"]   # R = first player (red), Y = second player (yellow)
Cell = Optional[Mark]
Grid = List[List[Cell]]
Move = NewType("Move", int)   # column index 0..6
Coord = Tuple[int, int]       # (row, col)


class GameOutcome(Enum):
    ONGOING = "ongoing"
    FIRST_WON = "first_won"
    SECOND_WON = "second_won"
    DRAW = "draw"
