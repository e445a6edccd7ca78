import pytest

from flappy.geometry import Box, overlaps


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Box(0, 0, 10, 10), Box(5, 5, 10, 10), True),
        (Box(0, 0, 10, 10), Box(2, 2, 3, 3), True),       # contained
        (Box(0, 0, 10, 10), Box(10, 0, 10, 10), False),   # touching right edge
        (Box(0, 0, 10, 10), Box(0, 10, 10, 10), False),   # touching bottom edge
        (Box(0, 0, 10, 10), Box(10, 10, 5, 5), False),    # touching corner
        (Box(0, 0, 10, 10), Box(30, 30, 5, 5), False),
        (Box(0, 0, 10, 10), Box(9.99, 9.99, 5, 5), True),
    ],
)
def test_overlaps_is_strict_and_symmetric(a: Box, b: Box, expected: bool) -> None:
    assert overlaps(a, b) is expected
    assert overlaps(b, a) is expected


def test_degenerate_box_inside_another_overlaps() -> None:
    # the strict test only needs open ranges to intersect, a zero-height box inside still counts
    assert overlaps(Box(0, 0, 10, 10), Box(2, 5, 3, 0))


def test_box_edges() -> None:
    box = Box(1.5, 2.0, 10, 4)
    assert box.right == 11.5
    assert box.bottom == 6.0
    assert box.as_tuple() == (1.5, 2.0, 10, 4)
