from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from coinbot.core.board import Board
from coinbot.types import Mark, Move


@dataclass(slots=True)
class GameState:
    board: Board
    current: Mark = "R"
    human: Mark = "R"
    last_status: str = ""
    moves: List[Move] = field(default_factory=list)

    @property
    def humans_turn(self) -> bool:
        return self.current == self.human
