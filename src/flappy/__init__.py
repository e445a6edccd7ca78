"""
Flappy: single-player gap-dodging arcade game.
Simulation core (world, difficulty, collisions) plus a pygame driver.
"""

from .config import BlankNamePolicy, GameConfig
from .data_models import Bird, PipePair, PipeVariant, RankingEntry
from .difficulty import Difficulty, difficulty_for
from .geometry import Box, overlaps
from .physics_world import EventType, RunState, StepResult, WorldEngine, WorldSnapshot
from .ranking import Ranking, RankingNameError
from .run_controller import RunController

__version__ = "1.0.0"
