from __future__ import annotations
from typing import Optional

from coinbot.types import Move


def parse_move(raw: str, cols: int) -> Optional[Move]:
    """
    Turn 1-indexed console input into a 0-indexed column.
    Returns None when the player asks to quit.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    if not s.isdigit():
        raise ValueError(f"Column must be a number from 1 to {cols}")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be a number from 1 to {cols}")
    return Move(col)
