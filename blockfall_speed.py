"""Score keeping and fall-speed progression"""
import logging
import math
from dataclasses import dataclass

from blockfall_config import SPEED_MIN, SPEED_MAX

log = logging.getLogger(__name__)

MILESTONE_STEP = 500
MILESTONE_SCALE = 0.95
MIN_INTERVAL_MS = 50


def line_clear_points(n: int) -> int:
    return 50 * n * n if n > 0 else 0


def fall_interval_ms(level: int, scale: float = 1.0) -> int:
    base = max(100, 1000 - (level - 1) * 100)
    # halves round up
    return max(MIN_INTERVAL_MS, math.floor(base * scale + 0.5))


def clamp_level(level) -> int:
    try:
        lvl = int(level)
    except (TypeError, ValueError):
        lvl = SPEED_MIN
    return min(SPEED_MAX, max(SPEED_MIN, lvl or SPEED_MIN))


@dataclass
class SpeedState:
    """Score plus everything that feeds the fall interval.

    ``interval`` is recomputed from level and scale by ``update_interval``;
    ``set_interval_ms`` overrides it until the next recompute.
    """
    level: int = 1
    scale: float = 1.0
    next_milestone: int = MILESTONE_STEP
    score: int = 0
    interval: int = 1000

    def __post_init__(self):
        self.level = clamp_level(self.level)
        self.update_interval()

    def update_interval(self) -> int:
        self.interval = fall_interval_ms(self.level, self.scale)
        return self.interval

    def reset(self):
        """Back to the start-of-game values, keeping the chosen level."""
        self.score = 0
        self.scale = 1.0
        self.next_milestone = MILESTONE_STEP
        self.update_interval()

    def set_level(self, level) -> int:
        self.level = clamp_level(level)
        return self.update_interval()

    def set_interval_ms(self, ms) -> int:
        try:
            v = int(ms)
        except (TypeError, ValueError):
            v = 0
        self.interval = max(MIN_INTERVAL_MS, v or 1000)
        return self.interval

    def on_lines_cleared(self, n: int) -> bool:
        """Award points for ``n`` cleared rows; return True if the speed changed."""
        if n > 0:
            self.score += line_clear_points(n)
        changed = False
        while self.score >= self.next_milestone:
            self.scale *= MILESTONE_SCALE
            self.next_milestone += MILESTONE_STEP
            changed = True
            log.debug("milestone crossed, scale=%.4f next=%d", self.scale, self.next_milestone)
        if changed:
            self.update_interval()
        return changed
