from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from coinbot import config
from coinbot.core.board import Board
from coinbot.game.controller import run_game
from coinbot.game.state import GameState

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Connect 4 against the computer.")
    ap.add_argument("--once", action="store_true", help="Exit after one game instead of starting a new one")
    ap.add_argument("--restart-delay", type=float, default=config.RESTART_DELAY_SEC, help="Seconds to wait before the next game")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--record", type=str, default=None, help="Write the moves of the latest finished game to this CSV")
    ap.add_argument("--log-level", type=str.upper, default=config.LOG_LEVEL, choices=LOG_LEVELS, help="Logging level")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    if args.no_color:
        config.USE_COLOR = False

    while True:
        state = GameState(board=Board())
        outcome = run_game(state=state)
        if outcome is None:
            return 0

        if args.record:
            from coinbot_analysis.io.transcript import save_transcript

            path = save_transcript(state.moves, Path(args.record))
            print(f"Saved moves to: {path.resolve()}")

        if args.once:
            return 0

        logger.debug("Restarting in %.1fs", args.restart_delay)
        time.sleep(args.restart_delay)


if __name__ == "__main__":
    raise SystemExit(main())
