from __future__ import annotations

from dataclasses import dataclass, field

from coinbot.ai.evaluator import MoveEvaluator
from coinbot.game.state import GameState
from coinbot.types import Move


@dataclass(slots=True)
class BotAgent:
    """
    The automated opponent: hands a snapshot of the live board to the
    evaluator and plays whatever column it picks for state.current.
    """
    name: str = "Computer"
    evaluator: MoveEvaluator = field(default_factory=MoveEvaluator)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        move = self.evaluator.choose_move(state.board.grid_snapshot(), state.current)
        self.last_info = dict(self.evaluator.last_info)
        return move
