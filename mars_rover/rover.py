"""Rover facade.

:class:`Rover` is the mutable object the mission runner drives. It keeps an
immutable :class:`~mars_rover.state.RoverState` snapshot and replaces it after
every command via the pure :func:`mars_rover.step.step` reducer.

The blocker set is held *by reference*: rovers of one run share a single
``set`` and the runner adds each rover's resting cell to it once that rover
has finished, so later rovers steer around earlier ones.

Example::

    blockers: set[Position] = set()
    rover = Rover.at(1, 2, "N", Boundary.symmetric(5, 5), blockers)
    for symbol in "LMLMLMLMM":
        rover.apply_command(symbol)
    rover.render()  # "1 3 N"
"""

from dataclasses import replace
from typing import Optional, Union

from mars_rover.commands import Command
from mars_rover.components import UNBOUNDED, Boundary, Position
from mars_rover.directions import Direction
from mars_rover.state import RoverState
from mars_rover.step import step
from mars_rover.types import BlockerSet


class Rover:
    """A single rover on the grid.

    Args:
        position: Start cell.
        direction: Start heading.
        boundary: Legal area, unbounded if omitted.
        blockers: Shared set of occupied cells. A fresh empty set is used if
            omitted; pass the same set to several rovers to share it.
    """

    def __init__(
        self,
        position: Position,
        direction: Direction,
        boundary: Boundary = UNBOUNDED,
        blockers: Optional[BlockerSet] = None,
    ) -> None:
        self._state = RoverState(position, direction, boundary)
        self._blockers: BlockerSet = set() if blockers is None else blockers

    @classmethod
    def at(
        cls,
        x: int,
        y: int,
        direction: Union[Direction, str],
        boundary: Boundary = UNBOUNDED,
        blockers: Optional[BlockerSet] = None,
    ) -> "Rover":
        """Build a rover from raw coordinates and a direction symbol.

        Raises:
            InvalidDirection: If ``direction`` is not one of N/E/S/W.
        """
        return cls(Position(x, y), Direction.from_symbol(direction), boundary, blockers)

    @property
    def position(self) -> Position:
        return self._state.position

    @position.setter
    def position(self, position: Position) -> None:
        self._state = replace(self._state, position=position)

    def set_position(self, x: int, y: int) -> None:
        self.position = Position(x, y)

    @property
    def direction(self) -> Direction:
        return self._state.direction

    @direction.setter
    def direction(self, direction: Direction) -> None:
        self._state = replace(self._state, direction=direction)

    @property
    def boundary(self) -> Boundary:
        return self._state.boundary

    @boundary.setter
    def boundary(self, boundary: Boundary) -> None:
        self._state = replace(self._state, boundary=boundary)

    def set_border(self, min_x: int, min_y: int, max_x: int, max_y: int) -> None:
        self.boundary = Boundary.from_corners(min_x, min_y, max_x, max_y)

    @property
    def blockers(self) -> BlockerSet:
        return self._blockers

    @blockers.setter
    def blockers(self, blockers: BlockerSet) -> None:
        self._blockers = blockers

    def apply_command(self, command: Union[Command, str]) -> None:
        """Apply exactly one command, mutating this rover's pose.

        Accepts a :class:`Command` or its one-character symbol in any case.
        A MOVE that would leave the boundary or enter a blocked cell is
        silently absorbed.

        Raises:
            InvalidCommand: If a string symbol is not one of L/R/M.
        """
        self._state = step(self._state, Command.from_symbol(command), self._blockers)

    def render(self) -> str:
        """Return ``"X Y D"``, e.g. ``"1 3 N"``."""
        return self._state.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Rover({self.render()!r})"
