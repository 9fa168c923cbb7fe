"""Boundary component.

An inclusive rectangle limiting where a rover may stand. A cell lying exactly
on an edge is legal. The default, :data:`UNBOUNDED`, uses signed 32-bit
extremes as corners. An inverted rectangle (min above max) contains no cell,
so every MOVE inside it is absorbed.
"""

from dataclasses import dataclass

from mars_rover.components.position import Position

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class Boundary:
    """Closed rectangle ``lower``..``upper``.

    Attributes:
        lower: South-west corner (minimum x and y).
        upper: North-east corner (maximum x and y).
    """

    lower: Position
    upper: Position

    def contains(self, pos: Position) -> bool:
        return pos.is_within_bounds(self.lower, self.upper)

    @classmethod
    def from_corners(
        cls, min_x: int, min_y: int, max_x: int, max_y: int
    ) -> "Boundary":
        return cls(Position(min_x, min_y), Position(max_x, max_y))

    @classmethod
    def symmetric(cls, half_width: int, half_height: int) -> "Boundary":
        """Rectangle ``(-w, -h)``..``(w, h)`` centred on the origin."""
        return cls.from_corners(-half_width, -half_height, half_width, half_height)


UNBOUNDED = Boundary(Position(INT_MIN, INT_MIN), Position(INT_MAX, INT_MAX))
