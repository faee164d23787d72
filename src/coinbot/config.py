# src/coinbot/config.py

from __future__ import annotations
import os

ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# "Bot thinking" effect
BOT_THINKING_SPINNER = True
BOT_THINK_DELAY_SEC = 1  # short pause so bot moves aren't instant

# Pause before a fresh game starts
RESTART_DELAY_SEC = 5

LOG_LEVEL = os.environ.get("COINBOT_LOG_LEVEL", "WARNING")
