from __future__ import annotations

from typing import List

import pytest

from coinbot import config
from coinbot.types import Grid


def grid_from(rows: List[str]) -> Grid:
    """
    Build a grid from six 7-character strings, top row first.
    '.' is empty, 'R' and 'Y' are coins.
    """
    assert len(rows) == config.ROWS
    return [[None if ch == "." else ch for ch in row] for row in rows]


@pytest.fixture(autouse=True)
def quiet_console(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "BOT_THINK_DELAY_SEC", 0)


@pytest.fixture
def empty_rows() -> List[str]:
    return ["......."] * config.ROWS
