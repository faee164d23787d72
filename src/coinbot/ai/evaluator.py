# src/coinbot/ai/evaluator.py

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from math import inf
from typing import Dict

from coinbot.ai.patterns import count_threes, count_twos, neighbouring_cells
from coinbot.core.grid import copy_grid, drop_into, legal_columns, other
from coinbot.core.rules import check_winner
from coinbot.types import Grid, Mark, Move

logger = logging.getLogger(__name__)

# Lower is better for the mover.
MOVER_WINS = -inf
HUMAN_CAN_WIN = inf

THREE_WEIGHTS = {"diagonal": -0.6, "horizontal": -0.4, "vertical": -0.2}
TWO_WEIGHTS = {"diagonal": -0.3, "horizontal": -0.2, "vertical": -0.1}
NEIGHBOUR_OWN = -0.1
NEIGHBOUR_HUMAN = 0.1


@dataclass(slots=True)
class MoveEvaluator:
    """
    One simulated ply plus a pattern heuristic around the landing cell.

    Scores follow a minimising convention: the mover plays the column with the
    lowest score. -inf means the move wins on the spot, +inf means the human
    has a winning reply somewhere. Ties go to the lowest column index.
    """
    last_info: dict = field(default_factory=dict)

    def score_column(self, grid: Grid, col: Move, mover: Mark) -> float:
        human = other(mover)
        scratch = copy_grid(grid)
        row = drop_into(scratch, col, mover)

        if check_winner(scratch) == mover:
            return MOVER_WINS

        for m in legal_columns(grid):
            # the simulated coin may have filled this column
            if scratch[0][m] is not None:
                continue
            reply_row = drop_into(scratch, m, human)
            human_won = check_winner(scratch) == human
            scratch[reply_row][m] = None
            if human_won:
                return HUMAN_CAN_WIN

        threes = count_threes(scratch, row, col)
        twos = count_twos(scratch, row, col)

        score = 0.0
        score += THREE_WEIGHTS["diagonal"] * threes.diagonal
        score += THREE_WEIGHTS["horizontal"] * threes.horizontal
        score += THREE_WEIGHTS["vertical"] * threes.vertical

        score += TWO_WEIGHTS["diagonal"] * twos.diagonal
        score += TWO_WEIGHTS["horizontal"] * twos.horizontal
        score += TWO_WEIGHTS["vertical"] * twos.vertical

        for cell, _, _ in neighbouring_cells(scratch, row, col):
            if cell == human:
                score += NEIGHBOUR_HUMAN
            elif cell == mover:
                score += NEIGHBOUR_OWN

        return score

    def score_columns(self, grid: Grid, mover: Mark) -> Dict[Move, float]:
        scores: Dict[Move, float] = {}
        for col in legal_columns(grid):
            scores[col] = self.score_column(grid, col, mover)
            logger.debug("%s column %d scored %s", mover, int(col), scores[col])
        return scores

    def choose_move(self, grid: Grid, mover: Mark) -> Move:
        t0 = time.perf_counter()

        scores = self.score_columns(grid, mover)
        if not scores:
            raise ValueError("No valid moves.")

        # dicts keep insertion order (ascending column), and min() keeps the
        # first of equal keys, so ties resolve to the lowest column
        choice = min(scores, key=lambda c: scores[c])

        elapsed = time.perf_counter() - t0
        self.last_info = {
            "move_col": int(choice) + 1,
            "eval": scores[choice],
            "scores": {int(c) + 1: s for c, s in scores.items()},
            "nodes": len(scores),
            "depth": 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.info("%s chose column %d (score %s)", mover, int(choice) + 1, scores[choice])
        return choice


def choose_move(grid: Grid, mover: Mark) -> Move:
    return MoveEvaluator().choose_move(grid, mover)
