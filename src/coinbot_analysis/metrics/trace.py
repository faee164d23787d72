from __future__ import annotations

from math import inf
from typing import Iterable, Optional

import pandas as pd

from coinbot.ai.evaluator import MoveEvaluator
from coinbot.core.board import Board
from coinbot.core.grid import other
from coinbot.types import Mark, Move

TRACE_COLS = ["ply", "mover", "column", "score", "engine_choice", "played"]


def score_trace(moves: Iterable[Move], first: Mark = "R") -> pd.DataFrame:
    """
    Replay a game and, before every ply, score each legal column for the side
    to move. One row per (ply, legal column); columns are 1-indexed.
    """
    board = Board()
    evaluator = MoveEvaluator()
    mover = first
    rows = []

    for ply, move in enumerate(moves):
        if board.is_terminal():
            raise ValueError(f"Move {ply + 1} played after the game ended.")

        grid = board.grid_snapshot()
        choice = evaluator.choose_move(grid, mover)
        scores = evaluator.last_info["scores"]

        for col, score in scores.items():
            rows.append({
                "ply": ply + 1,
                "mover": mover,
                "column": col,
                "score": score,
                "engine_choice": col == int(choice) + 1,
                "played": col == int(move) + 1,
            })

        board.drop(move, mover)
        mover = other(mover)

    return pd.DataFrame(rows, columns=TRACE_COLS)


def ply_summary(trace: pd.DataFrame) -> pd.DataFrame:
    """
    One row per ply: which column was played, which the engine wanted, and the
    best finite score on offer (NaN when every column was a sentinel).
    """
    if trace.empty:
        return pd.DataFrame(columns=["ply", "mover", "played", "engine", "agrees", "best_finite"])

    finite = trace["score"].replace([inf, -inf], float("nan"))
    grouped = trace.assign(finite=finite).groupby("ply", sort=True)

    out = pd.DataFrame({
        "mover": grouped["mover"].first(),
        "played": trace[trace["played"]].set_index("ply")["column"],
        "engine": trace[trace["engine_choice"]].set_index("ply")["column"],
        "best_finite": grouped["finite"].min(),
    }).rename_axis("ply").reset_index()
    out.insert(4, "agrees", out["played"] == out["engine"])
    return out


def agreement_rate(trace: pd.DataFrame, mover: Optional[Mark] = None) -> float:
    summary = ply_summary(trace)
    if mover is not None:
        summary = summary[summary["mover"] == mover]
    if summary.empty:
        return float("nan")
    return float(summary["agrees"].mean())
