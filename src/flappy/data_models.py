"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import BIRD_X, BIRD_WIDTH, BIRD_HEIGHT, PIPE_WIDTH, SCREEN_HEIGHT
from .geometry import Box, overlaps


class PipeVariant(Enum):
    """Cosmetic pipe colour; the renderer decides what each one looks like."""
    GREEN = "green"
    RED = "red"


@dataclass
class Bird:
    """The falling character. Only y, velocity and the animation phase change."""
    x: float = BIRD_X
    y: float = SCREEN_HEIGHT / 2
    velocity: float = 0.0
    width: float = BIRD_WIDTH
    height: float = BIRD_HEIGHT
    anim: int = 1                # 0 = downflap, 1 = midflap, 2 = upflap

    def reset(self, y: float):
        self.y = y
        self.velocity = 0.0
        self.anim = 1

    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass
class PipePair:
    """
    One scrolling gap pair.

    gap_center is the vertical middle of the gap. The top pipe spans from
    the top of the field to the gap, the bottom pipe from the gap down to
    the ground line.
    """
    x: float
    gap_center: float
    gap_height: float
    ground_y: float
    variant: PipeVariant = PipeVariant.GREEN
    passed: bool = False
    width: float = PIPE_WIDTH

    @property
    def gap_top(self) -> float:
        return self.gap_center - self.gap_height / 2

    @property
    def gap_bottom(self) -> float:
        return self.gap_center + self.gap_height / 2

    @property
    def right(self) -> float:
        return self.x + self.width

    def advance(self, speed: float):
        self.x -= speed

    def is_offscreen(self) -> bool:
        return self.right < 0

    def top_rect(self) -> Box:
        return Box(self.x, 0.0, self.width, self.gap_top)

    def bottom_rect(self) -> Box:
        return Box(self.x, self.gap_bottom, self.width, self.ground_y - self.gap_bottom)

    def collides_with(self, box: Box) -> bool:
        return overlaps(box, self.top_rect()) or overlaps(box, self.bottom_rect())

    def to_render_state(self):
        """Prepares a minimal dictionary for drawing or debugging."""
        return {
            "x": round(self.x, 2),
            "gap_center": round(self.gap_center, 2),
            "gap_height": round(self.gap_height, 2),
            "variant": self.variant.value,
            "passed": self.passed,
            "top": self.top_rect().as_tuple(),
            "bottom": self.bottom_rect().as_tuple(),
        }


@dataclass(frozen=True)
class RankingEntry:
    name: str
    score: int
