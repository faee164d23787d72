from __future__ import annotations

import sys

from .cli.analyze_game import main as analyze_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Minimal subcommand router; bare flags go straight to analyze
    if argv and argv[0].lower() in {"analyze", "analysis"}:
        argv = argv[1:]

    if argv and not argv[0].startswith("-"):
        print("Usage:")
        print('  python -m coinbot_analysis analyze --moves "4 4 3 5" [--outdir figures]')
        print("  python -m coinbot_analysis analyze --csv game.csv [--show]")
        return 2

    return analyze_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
