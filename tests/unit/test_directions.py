# tests/unit/test_directions.py

import pytest

from mars_rover.components import Position
from mars_rover.directions import COMPASS, Direction
from mars_rover.errors import InvalidDirection


@pytest.mark.parametrize(
    "direction, left, right",
    [
        (Direction.NORTH, Direction.WEST, Direction.EAST),
        (Direction.EAST, Direction.NORTH, Direction.SOUTH),
        (Direction.SOUTH, Direction.EAST, Direction.WEST),
        (Direction.WEST, Direction.SOUTH, Direction.NORTH),
    ],
)
def test_quarter_turns(direction: Direction, left: Direction, right: Direction) -> None:
    assert direction.turn_left() == left
    assert direction.turn_right() == right


@pytest.mark.parametrize("direction", list(Direction))
def test_turns_are_inverse(direction: Direction) -> None:
    assert direction.turn_left().turn_right() == direction
    assert direction.turn_right().turn_left() == direction


@pytest.mark.parametrize("direction", list(Direction))
def test_four_turns_return_to_start(direction: Direction) -> None:
    left = right = direction
    for _ in range(4):
        left = left.turn_left()
        right = right.turn_right()
    assert left == direction
    assert right == direction


@pytest.mark.parametrize(
    "direction, delta",
    [
        (Direction.NORTH, (0, 1)),
        (Direction.EAST, (1, 0)),
        (Direction.SOUTH, (0, -1)),
        (Direction.WEST, (-1, 0)),
    ],
)
def test_deltas(direction: Direction, delta: tuple[int, int]) -> None:
    assert direction.delta == delta
    assert (direction.dx, direction.dy) == delta


@pytest.mark.parametrize("direction", list(Direction))
def test_move_then_opposite_returns_home(direction: Direction) -> None:
    start = Position(3, -7)
    back = direction.turn_left().turn_left()
    assert back == direction.turn_right().turn_right()
    assert start.move(direction).move(back) == start


def test_compass_order_is_clockwise() -> None:
    assert COMPASS == (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


@pytest.mark.parametrize(
    "symbol, expected",
    [
        ("N", Direction.NORTH),
        ("e", Direction.EAST),
        ("S", Direction.SOUTH),
        ("w", Direction.WEST),
    ],
)
def test_from_symbol_is_case_insensitive(symbol: str, expected: Direction) -> None:
    assert Direction.from_symbol(symbol) is expected


@pytest.mark.parametrize("symbol", ["X", "", "NN", "north", " ", "1"])
def test_from_symbol_rejects_invalid(symbol: str) -> None:
    with pytest.raises(InvalidDirection) as excinfo:
        Direction.from_symbol(symbol)
    assert excinfo.value.token == symbol


def test_invalid_direction_is_value_error() -> None:
    with pytest.raises(ValueError, match="Invalid direction"):
        Direction.from_symbol("X")


def test_symbol_and_str() -> None:
    assert Direction.NORTH.symbol == "N"
    assert str(Direction.WEST) == "W"
