"""Rotation system.

Turning never changes occupancy, so no boundary or blocker checks apply.
"""

from dataclasses import replace

from mars_rover.commands import Command
from mars_rover.state import RoverState


def rotation_system(state: RoverState, command: Command) -> RoverState:
    """Turn the rover a quarter turn for LEFT / RIGHT.

    Args:
        state (RoverState): Current snapshot.
        command (Command): ``Command.LEFT`` or ``Command.RIGHT``.

    Returns:
        RoverState: Snapshot with the new heading, position unchanged.

    Raises:
        ValueError: If ``command`` is not a rotation.
    """
    if command == Command.LEFT:
        return replace(state, direction=state.direction.turn_left())
    if command == Command.RIGHT:
        return replace(state, direction=state.direction.turn_right())
    raise ValueError(f"Not a rotation command: {command!r}")
