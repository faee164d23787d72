from __future__ import annotations

import argparse
import logging
from pathlib import Path

from ..io.transcript import load_transcript, parse_moves
from ..metrics.trace import agreement_rate, ply_summary, score_trace
from ..plots.chart import plot_best_score, plot_score_heatmap

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Replay a Connect-4 game and show the evaluator's column scores.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--moves", type=str, help='1-indexed columns, e.g. "4 4 3 5"')
    src.add_argument("--csv", type=str, help="Transcript CSV with a 'column' column (as written by coinbot --record)")

    ap.add_argument("--first", type=str, default="R", choices=["R", "Y"], help="Mark that moved first")
    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    moves = parse_moves(args.moves) if args.moves else load_transcript(Path(args.csv))
    logger.info("Replaying %d moves", len(moves))

    trace = score_trace(moves, first=args.first)
    summary = ply_summary(trace)

    print(f"\nPlies: {len(summary)}")
    print("\n=== Per-ply summary ===")
    print(summary.to_string(index=False))

    print("\n=== Agreement with engine ===")
    for mover in ("R", "Y"):
        rate = agreement_rate(trace, mover)
        print(f"{mover}: {rate:.0%}" if rate == rate else f"{mover}: n/a")

    if not args.no_plots:
        outdir = Path(args.outdir)
        plot_score_heatmap(trace, outdir, show=args.show)
        plot_best_score(summary, outdir, show=args.show)
        if not args.show:
            print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
