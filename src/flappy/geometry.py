"""
geometry.py: Axis-aligned boxes and the overlap test used for every collision.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle, (x, y) is the top-left corner."""
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def as_tuple(self) -> tuple:
        return (self.x, self.y, self.w, self.h)


def overlaps(a: Box, b: Box) -> bool:
    """True iff the boxes intersect on both axes. Touching edges do not count."""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y
