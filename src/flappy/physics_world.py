"""
physics_world.py: The single-player world simulation: bird, pipes, score and run state.
"""

import logging
import math
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .config import GameConfig
from .constants import (
    PIPE_WIDTH, PIPE_SPAWN_OFFSET, PIPE_MIN_DISTANCE, GAP_MARGIN,
    RED_PIPE_CHANCE, GROUND_TILE_WIDTH, GRAVITY, FLAP_IMPULSE
)
from .data_models import Bird, PipePair, PipeVariant
from .difficulty import Difficulty, difficulty_for
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


class RunState(Enum):
    IDLE = auto()
    RUNNING = auto()
    PAUSED = auto()
    ENDED = auto()


class EventType(Enum):
    POINT = auto()
    HIT_PIPE = auto()
    HIT_GROUND = auto()


TERMINAL_EVENTS = (EventType.HIT_PIPE, EventType.HIT_GROUND)


@dataclass
class StepResult:
    """What happened during one tick."""
    events: List[EventType] = field(default_factory=list)
    score: int = 0

    @property
    def terminal(self) -> bool:
        return any(e in TERMINAL_EVENTS for e in self.events)


@dataclass(frozen=True)
class WorldSnapshot:
    """Read-only view of the world for the renderer."""
    state: RunState
    score: int
    frame: int
    bird: Tuple[float, float, float, float]
    bird_anim: int
    bird_velocity: float
    pipes: Tuple[dict, ...]
    base_scroll: float
    ground_y: float
    difficulty: Difficulty

    def to_dict(self):
        return {
            "state": self.state.name.lower(),
            "score": self.score,
            "frame": self.frame,
            "bird": {
                "box": tuple(round(v, 2) for v in self.bird),
                "anim": self.bird_anim,
                "v": round(self.bird_velocity, 2),
            },
            "pipes": list(self.pipes),
            "base_scroll": round(self.base_scroll, 2),
            "ground_y": self.ground_y,
        }


@dataclass
class WorldEngine(PhysicsCore):
    """
    Owns the bird and the pipes and advances them one tick at a time.
    Inherits bird kinematics from PhysicsCore.

    The world never schedules itself: a driver calls step() once per frame
    while the run is RUNNING. Calls in any other state are ignored.
    """
    config: GameConfig = field(default_factory=GameConfig)
    # Physics settings always come from config
    gravity: float = field(init=False, default=GRAVITY)
    flap_impulse: float = field(init=False, default=FLAP_IMPULSE)
    rng: random.Random = field(default_factory=random.Random)

    bird: Bird = field(default_factory=Bird)
    pipes: List[PipePair] = field(default_factory=list)
    score: int = 0
    state: RunState = RunState.IDLE
    frame: int = 0
    spawn_counter: int = 0
    base_scroll: float = 0.0

    def __post_init__(self):
        self.gravity = self.config.gravity
        self.flap_impulse = self.config.flap_impulse
        self.bird.reset(self.config.spawn_y)

    @property
    def difficulty(self) -> Difficulty:
        return difficulty_for(self.score)

    # -------- Lifecycle --------

    def start(self):
        """Begins a fresh run from IDLE or after a previous run ENDED."""
        if self.state in (RunState.RUNNING, RunState.PAUSED):
            logger.debug("start() ignored, run already in progress")
            return

        self._clear()
        self.state = RunState.RUNNING
        logger.info("Run started")

    def reset(self):
        """Returns to IDLE with a fresh bird and no pipes."""
        self._clear()
        self.state = RunState.IDLE

    def _clear(self):
        self.score = 0
        self.frame = 0
        self.spawn_counter = 0
        self.base_scroll = 0.0
        self.pipes.clear()
        self.bird.reset(self.config.spawn_y)

    def toggle_pause(self) -> RunState:
        if self.state is RunState.RUNNING:
            self.state = RunState.PAUSED
        elif self.state is RunState.PAUSED:
            self.state = RunState.RUNNING
        return self.state

    def impulse(self) -> bool:
        """Applies a flap impulse if the run is in progress."""
        if self.state is not RunState.RUNNING:
            return False
        self.apply_impulse(self.bird)
        return True

    # -------- Simulation --------

    def _spawn_pipe(self, difficulty: Difficulty) -> Optional[PipePair]:
        """Spawns a pipe when the interval has elapsed and there is room for it."""
        self.spawn_counter += 1
        if self.spawn_counter < difficulty.spawn_interval:
            return None

        # Keep the counter so the spawn is retried next tick
        if self.pipes:
            newest = self.pipes[-1]
            if newest.right > self.config.screen_width - PIPE_MIN_DISTANCE:
                return None

        gap_height = difficulty.gap_height
        min_top = GAP_MARGIN
        max_top = self.config.ground_y - gap_height - GAP_MARGIN
        gap_top = math.floor(self.rng.uniform(min_top, max_top))
        variant = PipeVariant.RED if self.rng.random() < RED_PIPE_CHANCE else PipeVariant.GREEN

        pipe = PipePair(
            x=float(self.config.screen_width + PIPE_SPAWN_OFFSET),
            gap_center=gap_top + gap_height / 2,
            gap_height=gap_height,
            ground_y=self.config.ground_y,
            variant=variant,
            width=PIPE_WIDTH,
        )
        self.pipes.append(pipe)
        self.spawn_counter = 0
        logger.debug("Spawned %s pipe, gap %.0f-%.0f", variant.value, pipe.gap_top, pipe.gap_bottom)
        return pipe

    def step(self) -> StepResult:
        """
        The main simulation step.
        Mutates bird, pipes and score; ends the run on the first hit.
        """
        result = StepResult(score=self.score)
        if self.state is not RunState.RUNNING:
            return result

        self.frame += 1
        difficulty = self.difficulty

        # 1. Bird
        self.tick(self.bird, self.frame)

        # 2. Spawn
        self._spawn_pipe(difficulty)

        # 3. Pipes, oldest first
        bird_box = self.bird.box()
        for pipe in list(self.pipes):
            pipe.advance(difficulty.speed)

            if not pipe.passed and pipe.right < self.bird.x:
                pipe.passed = True
                self.score += 1
                result.events.append(EventType.POINT)

            if pipe.collides_with(bird_box):
                return self._end(result, EventType.HIT_PIPE)

            if pipe.is_offscreen():
                self.pipes.remove(pipe)

        # 4. Ground
        self.base_scroll = math.fmod(self.base_scroll - difficulty.speed, GROUND_TILE_WIDTH)

        if self.hits_ground(self.bird, self.config.ground_y):
            return self._end(result, EventType.HIT_GROUND)

        result.score = self.score
        return result

    def _end(self, result: StepResult, cause: EventType) -> StepResult:
        self.state = RunState.ENDED
        result.events.append(cause)
        result.score = self.score
        logger.info("Run ended by %s with score %d", cause.name.lower(), self.score)
        return result

    def snapshot(self) -> WorldSnapshot:
        return WorldSnapshot(
            state=self.state,
            score=self.score,
            frame=self.frame,
            bird=self.bird.box().as_tuple(),
            bird_anim=self.bird.anim,
            bird_velocity=self.bird.velocity,
            pipes=tuple(p.to_render_state() for p in self.pipes),
            base_scroll=self.base_scroll,
            ground_y=self.config.ground_y,
            difficulty=self.difficulty,
        )
