"""
physics_core.py: Bird kinematics: gravity, flap impulse, ceiling clamp and animation.
"""

from dataclasses import dataclass

from .constants import (
    GRAVITY, FLAP_IMPULSE, CEILING_Y, ANIMATION_FRAMES, ANIMATION_EVERY_TICKS
)
from .data_models import Bird


@dataclass
class PhysicsCore:
    """
    Frame-coupled bird physics, one call to tick() per rendered frame.
    Ground and pipe collisions are handled by the world, not here.
    """
    gravity: float = GRAVITY
    flap_impulse: float = FLAP_IMPULSE

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """Calculates the new position and velocity after one tick."""
        velocity += self.gravity
        y += velocity
        return max(y, CEILING_Y), velocity

    def flap(self) -> float:
        """Returns the velocity right after a flap."""
        return -self.flap_impulse

    def apply_impulse(self, bird: Bird):
        bird.velocity = self.flap()

    def tick(self, bird: Bird, frame: int):
        """Advances the bird one tick. frame is the world's tick counter."""
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)

        if frame % ANIMATION_EVERY_TICKS == 0:
            bird.anim = (bird.anim + 1) % ANIMATION_FRAMES

    def hits_ground(self, bird: Bird, ground_y: float) -> bool:
        return bird.y + bird.height >= ground_y
