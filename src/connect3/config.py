# src/connect3/config.py

from __future__ import annotations

import os

ROWS = 6
COLS = 5
MATCH_LEN = 3

# Red opens every game; the AI (when enabled) always plays red.
START_PLAYER = "red"
AI_PLAYER = "red"

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect, seconds per difficulty profile
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = {
    "easy": 0.5,
    "medium": 1.0,
    "hard": 1.5,
}

# pause between cascade rounds when replaying them in the terminal
CASCADE_ROUND_DELAY_SEC = 0.4

# a cascade removes pieces every round, so this can never be reached
MAX_CASCADE_ROUNDS = ROWS * COLS

LOG_LEVEL = os.environ.get("CONNECT3_LOG_LEVEL", "WARNING").upper()
