"""Scoring, level progression and gravity curve"""
import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)

LINES_PER_LEVEL = 10
SCORE_TABLE = (0, 40, 100, 300, 1200)   # NES line clear points, multiplied by level+1
BASE_GRAVITY_FRAMES = 30
MIN_GRAVITY_FRAMES = 2


def gravity_frames(level: int) -> int:
    """Frames between gravity drops: 30 at level 0, two fewer per level, never below 2."""
    return max(MIN_GRAVITY_FRAMES, BASE_GRAVITY_FRAMES - 2 * level)


@dataclass
class Scoring:
    score: int = 0
    lines: int = 0
    level: int = 0

    def record_clear(self, count: int) -> int:
        """Apply one lock's cleared-row count; returns the points awarded."""
        if not 0 <= count < len(SCORE_TABLE):
            raise ValueError(f"cannot clear {count} rows with one piece")
        points = SCORE_TABLE[count] * (self.level + 1)
        self.score += points
        self.lines += count
        level = self.lines // LINES_PER_LEVEL
        if level != self.level:
            log.info("level up: %d -> %d", self.level, level)
        self.level = level
        return points
