"""Tests for the coinbot entry point."""

import pandas as pd
import pytest

from coinbot import config, main as main_mod
from coinbot.types import GameOutcome, Move


def _fake_game(moves, outcome):
    def _run_game(state=None, **kwargs):
        state.moves.extend(Move(m) for m in moves)
        return outcome
    return _run_game


def test_once_records_transcript(monkeypatch, tmp_path):
    path = tmp_path / "games" / "last.csv"
    monkeypatch.setattr(main_mod, "run_game", _fake_game([3, 3, 2], GameOutcome.FIRST_WON))

    assert main_mod.main(["--once", "--record", str(path), "--log-level", "ERROR"]) == 0

    df = pd.read_csv(path)
    assert list(df["column"]) == [4, 4, 3]


def test_quit_stops_without_restart(monkeypatch, tmp_path):
    calls = []

    def _run_game(state=None, **kwargs):
        calls.append(state)
        return None

    monkeypatch.setattr(main_mod, "run_game", _run_game)
    monkeypatch.setattr(main_mod.time, "sleep", lambda s: calls.append("slept"))

    assert main_mod.main(["--record", str(tmp_path / "x.csv")]) == 0
    assert len(calls) == 1
    assert not (tmp_path / "x.csv").exists()


def test_restarts_with_delay(monkeypatch):
    outcomes = iter([GameOutcome.DRAW, GameOutcome.SECOND_WON, None])
    sleeps = []

    monkeypatch.setattr(main_mod, "run_game", lambda state=None, **kw: next(outcomes))
    monkeypatch.setattr(main_mod.time, "sleep", sleeps.append)

    assert main_mod.main(["--restart-delay", "0.5"]) == 0
    assert sleeps == [0.5, 0.5]


def test_no_color_flag(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", True)
    monkeypatch.setattr(main_mod, "run_game", _fake_game([], None))
    main_mod.main(["--no-color"])
    assert config.USE_COLOR is False


def test_log_level_is_validated():
    ap = main_mod.build_argparser()
    assert ap.parse_args(["--log-level", "debug"]).log_level == "DEBUG"
    with pytest.raises(SystemExit):
        ap.parse_args(["--log-level", "loud"])
