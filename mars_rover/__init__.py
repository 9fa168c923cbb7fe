"""mars_rover
==========

Rovers on a bounded grid driven by L (turn left), R (turn right) and
M (move forward) commands.

The core is a small state machine: :class:`Direction`, :class:`Position` and
:class:`Command` value types, a pure :func:`step` reducer over an immutable
:class:`RoverState`, and the mutable :class:`Rover` facade that holds the
current snapshot together with a shared blocker set. The mission runner
(:mod:`mars_rover.mission`) and CLI (:mod:`mars_rover.cli`) sit on top.

    from mars_rover import Rover, Boundary

    rover = Rover.at(1, 2, "N", Boundary.symmetric(5, 5))
    for symbol in "LMLMLMLMM":
        rover.apply_command(symbol)
    print(rover)  # 1 3 N
"""

__version__ = "1.0.0"

from .commands import Command, parse_commands
from .components import UNBOUNDED, Boundary, Position
from .directions import Direction
from .errors import (
    InvalidCommand,
    InvalidDirection,
    MissionConfigError,
    MissionParseError,
    RoverError,
)
from .rover import Rover
from .state import RoverState
from .step import step

__all__ = [
    "Boundary",
    "Command",
    "Direction",
    "InvalidCommand",
    "InvalidDirection",
    "MissionConfigError",
    "MissionParseError",
    "Position",
    "Rover",
    "RoverError",
    "RoverState",
    "UNBOUNDED",
    "parse_commands",
    "step",
]
