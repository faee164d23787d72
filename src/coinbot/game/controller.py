from __future__ import annotations

import logging
from typing import Optional

from coinbot.ai.base import Agent
from coinbot.ai.bot_agent import BotAgent
from coinbot.core.board import Board
from coinbot.core.grid import other
from coinbot.game.results import outcome_message
from coinbot.game.state import GameState
from coinbot.types import GameOutcome, Mark
from coinbot.ui.effects import bot_thinking
from coinbot.ui.prompts import parse_move
from coinbot.ui.render import render

logger = logging.getLogger(__name__)


def _human_turn(state: GameState) -> bool:
    """
    Read one column from the console and drop it. Returns False if the player quit.
    """
    raw = input(f"Player's turn\nEnter column(1-{state.board.cols}): ")
    try:
        move = parse_move(raw, state.board.cols)
    except ValueError as e:
        state.last_status = str(e)
        return True

    if move is None:
        return False

    try:
        state.board.drop(move, state.current)
    except ValueError:
        # ColumnFullError; nothing was placed, ask again
        state.last_status = f"Cannot place coin in column {int(move) + 1}"
        return True

    state.moves.append(move)
    state.last_status = ""
    state.current = other(state.current)
    return True


def _bot_turn(state: GameState, agent: Agent, show_thinking: bool) -> None:
    if show_thinking:
        bot_thinking(f"{agent.name} is thinking")

    move = agent.choose_move(state)
    state.board.drop(move, state.current)
    state.moves.append(move)

    info = getattr(agent, "last_info", None)
    if info:
        state.last_status = f"{agent.name} chose {info.get('move_col')} | eval={info.get('eval')} | {info.get('time_ms')}ms"
    else:
        state.last_status = f"{agent.name} chose {int(move) + 1}"
    state.current = other(state.current)


def run_game(
    bot: Optional[Agent] = None,
    human_mark: Mark = "R",
    show_thinking: bool = True,
    state: Optional[GameState] = None,
) -> Optional[GameOutcome]:
    """
    Play one human-vs-computer game on the console. Red always moves first.

    Returns the final outcome, or None if the player quit.
    """
    bot = bot or BotAgent()
    if state is None:
        state = GameState(board=Board(), current="R", human=human_mark)

    while not state.board.is_terminal():
        if state.humans_turn:
            render(state.board.grid, state.last_status)
            if not _human_turn(state):
                render(state.board.grid, "Game quit.")
                logger.info("Player quit after %d moves", len(state.moves))
                return None
        else:
            _bot_turn(state, bot, show_thinking)

    outcome = state.board.outcome
    message = outcome_message(outcome, state.human)
    render(state.board.grid, message, highlight=state.board.winning_line())
    logger.info("Game finished after %d moves: %s", len(state.moves), outcome.value)
    return outcome
