import pytest

from flappy.constants import MIN_GAP, MIN_SPAWN_INTERVAL
from flappy.difficulty import MAX_SPEED, difficulty_for


def test_starting_difficulty() -> None:
    d = difficulty_for(0)
    assert d.speed == pytest.approx(2.2)
    assert d.gap_height == 200
    assert d.spawn_interval == 110


def test_difficulty_is_monotonic() -> None:
    previous = difficulty_for(0)
    for score in range(1, 400):
        current = difficulty_for(score)
        assert current.speed >= previous.speed
        assert current.gap_height <= previous.gap_height
        assert current.spawn_interval <= previous.spawn_interval
        previous = current


@pytest.mark.parametrize("score", [200, 1000, 10**6])
def test_difficulty_is_clamped_at_high_scores(score: int) -> None:
    d = difficulty_for(score)
    assert d.speed == pytest.approx(MAX_SPEED)
    assert d.gap_height == MIN_GAP
    assert d.spawn_interval == MIN_SPAWN_INTERVAL


def test_spawn_interval_is_whole_ticks() -> None:
    assert difficulty_for(5).spawn_interval == 107  # 110 - floor(3.0)
    assert difficulty_for(7).spawn_interval == 106  # 110 - floor(4.2)


def test_negative_score_is_rejected() -> None:
    with pytest.raises(ValueError):
        difficulty_for(-1)
