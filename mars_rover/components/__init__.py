"""mars_rover.components
=======================

Value objects shared by the reducer, the :class:`~mars_rover.rover.Rover`
facade and the mission runner. They are frozen dataclasses with no mutable
state; changing a rover's pose means building a new component.

    from mars_rover.components import Position, Boundary
"""

from .boundary import INT_MAX, INT_MIN, UNBOUNDED, Boundary
from .position import Position

__all__ = [
    "Boundary",
    "INT_MAX",
    "INT_MIN",
    "Position",
    "UNBOUNDED",
]
