"""Grid collision helpers.

Pure predicates used by the movement system.
"""

from mars_rover.components import Position
from mars_rover.state import RoverState
from mars_rover.types import Blockers


def is_in_bounds(state: RoverState, pos: Position) -> bool:
    """Return True if ``pos`` lies within the rover's boundary (inclusive)."""
    return state.boundary.contains(pos)


def is_blocked_at(blockers: Blockers, pos: Position) -> bool:
    """Return True if a resting rover or obstacle occupies ``pos``."""
    return pos in blockers
