import pytest

from flappy.data_models import Bird, PipePair, PipeVariant
from flappy.geometry import Box

GROUND_Y = 528.0


def make_pipe(x: float = 200.0, gap_center: float = 300.0, gap_height: float = 160.0) -> PipePair:
    return PipePair(x=x, gap_center=gap_center, gap_height=gap_height, ground_y=GROUND_Y)


def test_rects_are_derived_from_gap_center() -> None:
    pipe = make_pipe()
    assert pipe.top_rect() == Box(200.0, 0.0, 52, 220.0)
    assert pipe.bottom_rect() == Box(200.0, 380.0, 52, GROUND_Y - 380.0)


def test_bottom_rect_stops_at_ground_line() -> None:
    pipe = make_pipe()
    assert pipe.bottom_rect().bottom == GROUND_Y


def test_advance_only_moves_x() -> None:
    pipe = make_pipe()
    pipe.advance(2.5)
    assert pipe.x == 197.5
    assert pipe.gap_center == 300.0
    assert pipe.gap_height == 160.0


def test_offscreen_when_right_edge_passes_left_boundary() -> None:
    pipe = make_pipe(x=-52.0)
    assert not pipe.is_offscreen()     # right edge exactly at 0
    pipe.advance(0.1)
    assert pipe.is_offscreen()


@pytest.mark.parametrize(
    "box, expected",
    [
        (Box(210, 280, 34, 24), False),   # inside the gap
        (Box(210, 200, 34, 24), True),    # clips the top pipe
        (Box(210, 370, 34, 24), True),    # clips the bottom pipe
        (Box(140, 100, 34, 24), False),   # left of the pipe
        (Box(210, 220, 34, 24), False),   # top edge touches the top pipe
    ],
)
def test_collides_with_either_pipe(box: Box, expected: bool) -> None:
    assert make_pipe().collides_with(box) is expected


def test_render_state() -> None:
    pipe = PipePair(x=10.123, gap_center=250.0, gap_height=120.0, ground_y=GROUND_Y,
                    variant=PipeVariant.RED)
    state = pipe.to_render_state()
    assert state["x"] == 10.12
    assert state["variant"] == "red"
    assert state["passed"] is False
    assert state["top"] == (10.123, 0.0, 52, 190.0)


def test_bird_reset_and_box() -> None:
    bird = Bird(y=100.0, velocity=5.0, anim=2)
    bird.reset(320.0)
    assert (bird.y, bird.velocity, bird.anim) == (320.0, 0.0, 1)
    assert bird.box() == Box(120, 320.0, 34, 24)
