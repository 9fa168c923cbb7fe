"""Command reducer.

:func:`step` is the single transition function of the rover state machine.
It is pure: it never mutates the incoming ``RoverState`` or the blocker set and
returns a new snapshot (or the same one when a MOVE is refused).
"""

from mars_rover.commands import ROTATIONS, Command
from mars_rover.state import RoverState
from mars_rover.systems.movement import movement_system
from mars_rover.systems.rotation import rotation_system
from mars_rover.types import Blockers


def step(
    state: RoverState, command: Command, blockers: Blockers = frozenset()
) -> RoverState:
    """Apply one command.

    Args:
        state (RoverState): Snapshot before the command.
        command (Command): Instruction to apply.
        blockers (Blockers): Occupied cells, consulted on MOVE only.

    Returns:
        RoverState: Snapshot after the command.

    Raises:
        ValueError: If ``command`` is not a :class:`Command` member.
    """
    if command in ROTATIONS:
        return rotation_system(state, command)
    if command == Command.MOVE:
        return movement_system(state, blockers)
    raise ValueError(f"Command is not valid: {command!r}")

