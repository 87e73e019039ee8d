"""Runtime configuration (edited live by the overlay and by CLI flags)"""

COLS, ROWS = 10, 20

CONFIG = {
    "CELL_SIZE": 30,
    "TARGET_FPS": 60,
    "SPEED_LEVEL": 1,
    "FALL_INTERVAL_MS": None,
    "SHOW_GHOST": True,
    "BAG_SEED": None,
    "HIGHSCORE_FILE": "~/.blockfall/highscore.json",
    "LOG_LEVEL": "WARNING",
}

SPEED_MIN, SPEED_MAX = 1, 10

DIFFICULTIES = {
    "easy": {"SPEED_LEVEL": 1, "SHOW_GHOST": True},
    "medium": {"SPEED_LEVEL": 7, "SHOW_GHOST": False},
}
