from typing import List

import pytest

from mars_rover.commands import Command
from mars_rover.components import UNBOUNDED, Boundary, Position
from mars_rover.directions import Direction
from mars_rover.errors import InvalidCommand, InvalidDirection
from mars_rover.rover import Rover
from mars_rover.state import RoverState
from mars_rover.step import step
from tests.test_utils import make_rover, renders_after_each

PROGRAM = "LMLMLMLMM"


def test_initial_render() -> None:
    rover = Rover.at(1, 2, "N")
    assert rover.render() == "1 2 N"
    assert str(rover) == "1 2 N"


def test_defaults_are_unbounded_and_empty() -> None:
    rover = Rover.at(0, 0, "n")
    assert rover.boundary == UNBOUNDED
    assert rover.blockers == set()


def test_default_blocker_sets_are_not_shared() -> None:
    a = Rover.at(0, 0, "N")
    b = Rover.at(0, 0, "N")
    a.blockers.add(Position(9, 9))
    assert b.blockers == set()


def test_end_to_end_sequence() -> None:
    rover = make_rover((1, 2), Direction.NORTH, (-5, -5, 5, 5))
    assert renders_after_each(rover, PROGRAM) == [
        "1 2 W",
        "0 2 W",
        "0 2 S",
        "0 1 S",
        "0 1 E",
        "1 1 E",
        "1 1 N",
        "1 2 N",
        "1 3 N",
    ]


def test_end_to_end_sequence_with_blocker() -> None:
    rover = make_rover((1, 2), Direction.NORTH, (-5, -5, 5, 5), blockers=[(1, 1)])
    assert renders_after_each(rover, PROGRAM + "M") == [
        "1 2 W",
        "0 2 W",
        "0 2 S",
        "0 1 S",
        "0 1 E",
        "0 1 E",
        "0 1 N",
        "0 2 N",
        "0 3 N",
        "0 4 N",
    ]


def test_upper_bound_clamp() -> None:
    rover = make_rover((2, 0), Direction.EAST, (-2, -2, 2, 2))
    rover.apply_command(Command.MOVE)
    assert rover.position == Position(2, 0)
    assert rover.render() == "2 0 E"


def test_blocked_then_free_move() -> None:
    rover = make_rover((0, 0), Direction.NORTH, blockers=[(0, 1)])
    rover.apply_command("M")
    assert rover.position == Position(0, 0)
    rover.direction = Direction.EAST
    rover.apply_command("M")
    assert rover.position == Position(1, 0)


def test_multiple_blockers_hold_position() -> None:
    rover = make_rover((0, 0), Direction.NORTH, blockers=[(0, 1), (1, 0)])
    rover.apply_command("M")
    assert rover.render() == "0 0 N"
    rover.direction = Direction.EAST
    rover.apply_command("M")
    assert rover.render() == "0 0 E"


@pytest.mark.parametrize("symbol", ["m", "M", Command.MOVE])
def test_apply_command_accepts_symbol_or_member(symbol: str) -> None:
    rover = Rover.at(0, 0, "N")
    rover.apply_command(symbol)
    assert rover.render() == "0 1 N"


def test_case_insensitive_rotation() -> None:
    rover = Rover.at(0, 0, "N")
    rover.apply_command("l")
    assert rover.direction == Direction.WEST
    rover.apply_command("r")
    assert rover.direction == Direction.NORTH


@pytest.mark.parametrize("symbol", ["X", "A", "", "MM"])
def test_invalid_command_raises(symbol: str) -> None:
    rover = Rover.at(0, 0, "N")
    with pytest.raises(InvalidCommand, match="Invalid command"):
        rover.apply_command(symbol)
    assert rover.render() == "0 0 N"


def test_invalid_direction_raises() -> None:
    with pytest.raises(InvalidDirection):
        Rover.at(0, 0, "X")


def test_shared_blockers_are_seen_after_mutation() -> None:
    shared: set[Position] = set()
    rover = Rover.at(0, 0, "N", blockers=shared)
    shared.add(Position(0, 1))
    rover.apply_command("M")
    assert rover.position == Position(0, 0)


def test_setters() -> None:
    rover = Rover.at(0, 0, "N")
    rover.set_position(3, 3)
    rover.set_border(-3, -3, 3, 3)
    rover.apply_command("M")
    assert rover.render() == "3 3 N"
    rover.position = Position(0, 0)
    rover.blockers = {Position(0, 1)}
    rover.apply_command("M")
    assert rover.render() == "0 0 N"


def test_position_stays_inside_boundary_and_off_blockers() -> None:
    blockers = {Position(1, 0), Position(-1, 1)}
    boundary = Boundary.symmetric(1, 1)
    rover = Rover(Position(0, 0), Direction.NORTH, boundary, blockers)
    seen: List[Position] = []
    for symbol in "MMMRMMMRMMMRMMMLMMMLMMM":
        rover.apply_command(symbol)
        seen.append(rover.position)
    assert all(boundary.contains(p) and p not in blockers for p in seen)


def test_reducer_fold_matches_facade() -> None:
    start = RoverState(Position(1, 2), Direction.NORTH, Boundary.symmetric(5, 5))
    state = start
    for symbol in PROGRAM:
        state = step(state, Command.from_symbol(symbol))
    assert state.render() == "1 3 N"
    assert start.render() == "1 2 N"
