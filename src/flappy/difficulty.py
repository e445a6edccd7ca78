"""
difficulty.py: Maps the current score to pipe speed, gap height and spawn interval.
"""

import math
from dataclasses import dataclass

from .constants import (
    BASE_SPEED, SPEED_PER_POINT, MAX_SPEED_BONUS,
    BASE_GAP, GAP_PER_POINT, MIN_GAP,
    BASE_SPAWN_INTERVAL, SPAWN_INTERVAL_PER_POINT, MIN_SPAWN_INTERVAL
)

MAX_SPEED = BASE_SPEED + MAX_SPEED_BONUS


@dataclass(frozen=True)
class Difficulty:
    speed: float            # pixels per tick
    gap_height: float       # pixels
    spawn_interval: int     # ticks


def difficulty_for(score: int) -> Difficulty:
    """
    Capped-linear difficulty curve.

    Speed rises to MAX_SPEED, the gap shrinks to MIN_GAP and pipes arrive
    more often down to MIN_SPAWN_INTERVAL ticks apart. Every value is
    monotonic in score.
    """
    if score < 0:
        raise ValueError(f"score cannot be negative: {score}")

    speed = BASE_SPEED + min(MAX_SPEED_BONUS, score * SPEED_PER_POINT)
    gap_height = max(MIN_GAP, BASE_GAP - score * GAP_PER_POINT)
    spawn_interval = max(MIN_SPAWN_INTERVAL,
                         BASE_SPAWN_INTERVAL - math.floor(score * SPAWN_INTERVAL_PER_POINT))

    return Difficulty(speed=speed, gap_height=gap_height, spawn_interval=spawn_interval)
