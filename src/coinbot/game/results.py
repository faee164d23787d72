from __future__ import annotations

from coinbot.types import GameOutcome, Mark


def outcome_message(outcome: GameOutcome, human: Mark = "R") -> str:
    if outcome is GameOutcome.DRAW:
        return "Draw"
    if outcome is GameOutcome.ONGOING:
        raise ValueError("Game is still going.")

    winner: Mark = "R" if outcome is GameOutcome.FIRST_WON else "Y"
    return "Player Won" if winner == human else "Computer Won"
