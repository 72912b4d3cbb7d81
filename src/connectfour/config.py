# src/connectfour/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

STARTING_PLAYER = "X"
BOT_PLAYER = "O"  # bot answers the human by default

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
SPINNER_INTERVAL_SEC = 0.08

# Search
SEARCH_DEPTH = 10
# Center-outward column order (0-based 3,2,4,1,5,0,6 == 1-based 4,3,5,2,6,1,7)
SEARCH_ORDER = (3, 2, 4, 1, 5, 0, 6)

# Terminal scores dominate any heuristic sum; remaining depth is added on top.
WIN_SCORE = 100_000

# Evaluator weights per unblocked window: pieces-in-window -> score
WINDOW_WEIGHTS = {3: 100, 2: 10}

# Self-play
SELFPLAY_OPENING_PLIES = 2
SELFPLAY_RESULTS_DIR = "data/results"
