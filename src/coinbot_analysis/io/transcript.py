from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pandas as pd

from coinbot.config import COLS
from coinbot.types import Move


def parse_moves(raw: str, cols: int = COLS) -> List[Move]:
    """
    Parse "4 4 3 5" or "4,4,3,5" (1-indexed columns) into 0-indexed moves.
    """
    out: List[Move] = []
    for tok in raw.replace(",", " ").split():
        if not tok.isdigit() or not 1 <= int(tok) <= cols:
            raise ValueError(f"Column must be a number from 1 to {cols}, got {tok!r}")
        out.append(Move(int(tok) - 1))
    return out


def save_transcript(moves: Iterable[Move], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame({"column": [int(m) + 1 for m in moves]})
    df.index.name = "ply"
    df.to_csv(path)
    return path


def load_transcript(path: Path, cols: int = COLS) -> List[Move]:
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")

    df = pd.read_csv(path)

    # Trim whitespace in column names just in case
    df.columns = [c.strip() for c in df.columns]

    if "column" not in df.columns:
        raise ValueError(f"CSV missing required column 'column'. Columns: {list(df.columns)}")

    values = pd.to_numeric(df["column"], errors="coerce")
    bad = values.isna() | (values % 1 != 0) | (values < 1) | (values > cols)
    if bad.any():
        raise ValueError(f"Invalid column values on rows: {df.index[bad].tolist()}")

    return [Move(int(v) - 1) for v in values]
