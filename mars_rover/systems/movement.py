"""Rover movement system.

Attempts a single forward step along the current heading. The step is taken
only if the destination is inside the boundary and not a blocker; otherwise
the rover "bumps" and holds position. A refused move is a normal outcome and
returns the original ``RoverState`` unchanged.
"""

import logging
from dataclasses import replace

from mars_rover.state import RoverState
from mars_rover.types import Blockers
from mars_rover.utils.grid import is_blocked_at, is_in_bounds

logger = logging.getLogger(__name__)


def movement_system(state: RoverState, blockers: Blockers) -> RoverState:
    """Move one cell forward if allowed.

    Args:
        state (RoverState): Current snapshot.
        blockers (Blockers): Cells no rover may enter.

    Returns:
        RoverState: Same object if the move is refused, otherwise a new
            snapshot at the neighbouring cell.
    """
    next_pos = state.position.move(state.direction)

    if not is_in_bounds(state, next_pos):
        logger.debug("Move to %s refused: outside boundary", next_pos)
        return state

    if is_blocked_at(blockers, next_pos):
        logger.debug("Move to %s refused: cell is blocked", next_pos)
        return state

    return replace(state, position=next_pos)
