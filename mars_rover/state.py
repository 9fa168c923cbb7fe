"""Immutable rover ``RoverState``.

A snapshot of everything the reducer needs to apply one command except the
blocker set, which is shared and mutated between rovers and therefore passed
to :func:`mars_rover.step.step` explicitly. Every transition returns a *new*
``RoverState``; the :class:`~mars_rover.rover.Rover` facade swaps its snapshot
after each command.
"""

from dataclasses import dataclass

from mars_rover.components import UNBOUNDED, Boundary, Position
from mars_rover.directions import Direction


@dataclass(frozen=True)
class RoverState:
    """Pose of a single rover plus the rectangle it is confined to.

    Attributes:
        position (Position): Current cell.
        direction (Direction): Current heading.
        boundary (Boundary): Inclusive legal area, unbounded by default.
    """

    position: Position
    direction: Direction
    boundary: Boundary = UNBOUNDED

    def render(self) -> str:
        """Canonical ``"X Y D"`` snapshot."""
        return f"{self.position.x} {self.position.y} {self.direction.symbol}"
