import random

import pytest

from flappy.config import GameConfig
from flappy.physics_world import WorldEngine
from flappy.run_controller import RunController
from flappy.score_db import Database


class RecordingAudio:
    """Collects played cues instead of making noise."""

    def __init__(self) -> None:
        self.played = []

    def play(self, cue) -> None:
        self.played.append(cue)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig(db_file=":memory:")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def db():
    database = Database(":memory:")
    yield database
    database.close()


@pytest.fixture
def audio() -> RecordingAudio:
    return RecordingAudio()


@pytest.fixture
def world(config, rng) -> WorldEngine:
    return WorldEngine(config=config, rng=rng)


@pytest.fixture
def controller(config, db, audio, rng) -> RunController:
    return RunController(config, db=db, audio=audio, rng=rng)
