"""
run_controller.py: Run lifecycle, score bookkeeping, high score and ranking hand-off.
Sits between the per-frame driver and the world simulation.
"""

import logging
import random
from typing import List, Optional, Tuple

from .audio import Cue, NullAudio
from .config import GameConfig
from .constants import DEATH_CUE_DELAY_TICKS
from .data_models import RankingEntry
from .physics_world import EventType, RunState, StepResult, WorldEngine, WorldSnapshot
from .ranking import Ranking
from .score_db import Database

logger = logging.getLogger(__name__)


class RunController:
    """
    Translates the two logical inputs (flap, toggle pause) into world calls,
    drives one world step per frame and records the outcome of each run.
    """

    def __init__(self, config: Optional[GameConfig] = None, db: Optional[Database] = None,
                 audio=None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.db = db if db is not None else Database(self.config.db_file)
        self.audio = audio if audio is not None else NullAudio()
        self.world = WorldEngine(config=self.config, rng=rng or random.Random())

        # Boot: read persisted records once
        self.high_score = self.db.get_high_score()
        self.ranking = Ranking(self.db.load_ranking(), size=self.config.ranking_size,
                               blank_name_policy=self.config.blank_name_policy)
        self.last_score: Optional[int] = None

        # Delayed cues: [ticks_left, cue]
        self._pending_cues: List[list] = []

    @property
    def state(self) -> RunState:
        return self.world.state

    # -------- Inputs --------

    def flap(self):
        """The impulse input. The first one after IDLE or ENDED starts a run."""
        if self.world.state in (RunState.IDLE, RunState.ENDED):
            self.start()
        elif self.world.impulse():
            self._play(Cue.WING)

    def toggle_pause(self) -> RunState:
        state = self.world.toggle_pause()
        logger.info("Run %s", "paused" if state is RunState.PAUSED else state.name.lower())
        return state

    def start(self):
        # a death cue still pending from the last run plays out
        self.last_score = None
        self.world.start()

    def reset(self):
        self.world.reset()

    # -------- Frame --------

    def tick(self) -> StepResult:
        """Called by the driver once per frame, in every state."""
        self._run_pending_cues()

        if self.world.state is not RunState.RUNNING:
            return StepResult(score=self.world.score)

        result = self.world.step()

        for event in result.events:
            if event is EventType.POINT:
                self._play(Cue.POINT)

        if result.terminal:
            self._on_hit(result.score)

        return result

    def _on_hit(self, final_score: int):
        self._play(Cue.HIT)
        self._pending_cues.append([DEATH_CUE_DELAY_TICKS, Cue.DIE])
        self.record_run(final_score)

    def _run_pending_cues(self):
        for pending in list(self._pending_cues):
            pending[0] -= 1
            if pending[0] <= 0:
                self._pending_cues.remove(pending)
                self._play(pending[1])

    def _play(self, cue: Cue):
        # Audio problems never interrupt the run
        try:
            self.audio.play(cue)
        except Exception as e:
            logger.debug("Cue %s failed: %s", cue.value, e)

    # -------- Scores --------

    def record_run(self, final_score: int) -> bool:
        """Stores the final score; returns True if it beat the high score."""
        self.last_score = final_score
        if final_score <= self.high_score:
            return False

        self.high_score = final_score
        self.db.set_high_score(final_score)
        logger.info("New high score: %d", final_score)
        return True

    def submit_ranking(self, name: Optional[str], score: Optional[int] = None) -> Optional[RankingEntry]:
        """
        Adds `name` to the ranking with `score` (defaults to the last run).
        Raises RankingNameError for a blank name before anything changes.
        """
        if score is None:
            if self.last_score is None:
                raise ValueError("no finished run to submit")
            score = self.last_score

        entry = self.ranking.submit(name, score)
        self.db.save_ranking(self.ranking.entries())
        if entry is not None:
            logger.info("Ranking entry saved: %s - %d", entry.name, entry.score)
        return entry

    def list_ranking(self) -> Tuple[RankingEntry, ...]:
        return self.ranking.entries()

    def snapshot(self) -> WorldSnapshot:
        return self.world.snapshot()

    def close(self):
        self.db.close()
