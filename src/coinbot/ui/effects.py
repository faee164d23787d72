from __future__ import annotations
import sys
import time

from coinbot import config


def bot_thinking(label: str = "Computer is thinking") -> None:
    """
    Small user-visible delay + optional spinner so bot moves are not instant.
    """
    if config.BOT_THINK_DELAY_SEC <= 0:
        return

    if not config.BOT_THINKING_SPINNER:
        time.sleep(config.BOT_THINK_DELAY_SEC)
        return

    frames = ["|", "/", "-", "\\"]
    start = time.time()
    i = 0
    while (time.time() - start) < config.BOT_THINK_DELAY_SEC:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
