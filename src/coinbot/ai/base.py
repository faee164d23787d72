from __future__ import annotations
from typing import Protocol

from coinbot.game.state import GameState
from coinbot.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
