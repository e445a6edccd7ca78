"""
config.py: Per-game settings, seeded from constants and overridable from the environment.
"""

import os
from dataclasses import dataclass
from enum import Enum

from . import constants as c


class BlankNamePolicy(Enum):
    """What the ranking does with a name that is empty after trimming."""
    REJECT = "reject"
    SUBSTITUTE = "substitute"


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings shared by the world, controller and driver."""
    screen_width: int = c.SCREEN_WIDTH
    screen_height: int = c.SCREEN_HEIGHT
    ground_height: int = c.GROUND_HEIGHT

    gravity: float = c.GRAVITY
    flap_impulse: float = c.FLAP_IMPULSE

    ranking_size: int = c.RANKING_SIZE
    blank_name_policy: BlankNamePolicy = BlankNamePolicy.REJECT
    db_file: str = c.DB_FILE
    sound_dir: str = c.SOUND_DIR

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError("screen dimensions must be positive")
        if not 0 <= self.ground_height < self.screen_height:
            raise ValueError("ground strip must fit inside the screen")
        if self.ground_y - c.BASE_GAP - 2 * c.GAP_MARGIN < 0:
            raise ValueError("field is too short for the widest pipe gap and its margins")
        if self.ranking_size < 1:
            raise ValueError("ranking must keep at least one entry")
        if self.flap_impulse <= 0:
            raise ValueError("flap impulse must be positive")

    @property
    def ground_y(self) -> float:
        """The ground line: lower bound of the field for collisions."""
        return float(self.screen_height - self.ground_height)

    @property
    def spawn_y(self) -> float:
        return self.screen_height / 2

    @classmethod
    def from_env(cls, environ=None) -> "GameConfig":
        """Builds a config, applying FLAPPY_* overrides when present."""
        env = os.environ if environ is None else environ
        overrides = {}

        if env.get("FLAPPY_DB"):
            overrides["db_file"] = env["FLAPPY_DB"]
        if env.get("FLAPPY_SOUND_DIR"):
            overrides["sound_dir"] = env["FLAPPY_SOUND_DIR"]
        if env.get("FLAPPY_RANKING_SIZE"):
            overrides["ranking_size"] = int(env["FLAPPY_RANKING_SIZE"])
        if env.get("FLAPPY_BLANK_NAME_POLICY"):
            overrides["blank_name_policy"] = BlankNamePolicy(
                env["FLAPPY_BLANK_NAME_POLICY"].strip().lower())

        return cls(**overrides)
