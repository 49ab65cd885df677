import pytest

from linesolver.grid.directions import (
    INNER_DOWN,
    INNER_DOWN_LEFT,
    INNER_DOWN_RIGHT,
    INNER_RIGHT,
    SEARCH_ORDER,
    Direction,
)


def test_search_order_labels():
    assert [d.label for d in SEARCH_ORDER] == [
        "Right", "DownRight", "Down", "DownLeft",
        "Left", "UpLeft", "Up", "UpRight",
    ]


def test_offsets():
    assert Direction.UP.offset == (0, -1)
    assert Direction.UP_RIGHT.offset == (1, -1)
    assert Direction.DOWN_LEFT.offset == (-1, 1)
    assert Direction.LEFT.step((3, 2)) == (2, 2)


def test_to_inner():
    assert Direction.RIGHT.to_inner() == (INNER_RIGHT, False)
    assert Direction.DOWN_LEFT.to_inner() == (INNER_DOWN_LEFT, False)
    assert Direction.UP.to_inner() == (INNER_DOWN, True)
    assert Direction.LEFT.to_inner() == (INNER_RIGHT, True)
    assert Direction.UP_LEFT.to_inner() == (INNER_DOWN_RIGHT, True)
    assert Direction.UP_RIGHT.to_inner() == (INNER_DOWN_LEFT, True)


@pytest.mark.parametrize("direction", SEARCH_ORDER[:4])
def test_opposite_directions_share_one_slot(direction):
    dx, dy = direction.offset
    opposite = Direction((-dx, -dy))
    origin = (2, 2)
    assert direction.store(origin) == opposite.store(direction.step(origin))


def test_store_reversed_uses_neighbor_cell():
    assert Direction.RIGHT.store((2, 1)) == (2, 1, INNER_RIGHT)
    assert Direction.LEFT.store((2, 1)) == (1, 1, INNER_RIGHT)
    assert Direction.UP_RIGHT.store((0, 1)) == (1, 0, INNER_DOWN_LEFT)


def test_rival_is_other_diagonal_of_same_square():
    # square with top-left (0, 0)
    main = Direction.DOWN_RIGHT.store((0, 0))
    anti = Direction.DOWN_LEFT.store((1, 0))
    assert Direction.DOWN_RIGHT.rival((0, 0)) == anti
    assert Direction.DOWN_LEFT.rival((1, 0)) == main
    assert Direction.UP_RIGHT.rival((0, 1)) == main
    assert Direction.UP_LEFT.rival((1, 1)) == anti


def test_orthogonal_directions_have_no_rival():
    for d in (Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP):
        assert d.rival((1, 1)) is None
        assert not d.is_diagonal


def test_diagonal_directions_have_rival():
    for d in (Direction.DOWN_RIGHT, Direction.DOWN_LEFT, Direction.UP_LEFT, Direction.UP_RIGHT):
        assert d.is_diagonal
        assert d.rival((1, 1)) is not None
