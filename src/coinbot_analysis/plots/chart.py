from __future__ import annotations

from math import inf
from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt

from coinbot.config import COLS


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> None:
    if show:
        plt.show()
    else:
        _ensure_dir(outdir)
        fig.savefig(outdir / filename, dpi=200, bbox_inches="tight")
        plt.close(fig)


def plot_score_heatmap(trace: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    """
    Ply x column grid of evaluator scores. Sentinel (+/-inf) and illegal
    columns are left blank.
    """
    if trace.empty:
        return

    grid = (
        trace.assign(score=trace["score"].replace([inf, -inf], float("nan")))
        .pivot(index="ply", columns="column", values="score")
        .reindex(columns=range(1, COLS + 1))
    )

    fig, ax = plt.subplots(figsize=(6, max(3, 0.3 * len(grid))))
    im = ax.imshow(grid.to_numpy(dtype=float), aspect="auto", cmap="coolwarm")
    ax.set_xticks(range(len(grid.columns)))
    ax.set_xticklabels([str(c) for c in grid.columns])
    ax.set_yticks(range(len(grid.index)))
    ax.set_yticklabels([str(p) for p in grid.index])
    ax.set_xlabel("column")
    ax.set_ylabel("ply")
    ax.set_title("Evaluator score by column (lower is better for the mover)")
    fig.colorbar(im, ax=ax)

    played = trace[trace["played"]]
    ax.scatter(played["column"] - 1, played["ply"] - grid.index.min(), marker="o", facecolors="none", edgecolors="black")

    _finish(fig, outdir, "score_heatmap.png", show=show)


def plot_best_score(summary: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    if summary.empty or "best_finite" not in summary.columns:
        return

    fig = plt.figure()
    for mover, part in summary.groupby("mover"):
        plt.plot(part["ply"], part["best_finite"], marker="o", label=str(mover))
    plt.title("Best finite score per ply")
    plt.xlabel("ply")
    plt.ylabel("score")
    plt.legend()

    _finish(fig, outdir, "best_score.png", show=show)
