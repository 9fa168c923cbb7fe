"""Common type aliases.

``Blockers`` is the read-only view the reducer needs; the runner and the
:class:`~mars_rover.rover.Rover` facade hold the mutable ``BlockerSet`` that is
shared between rovers of one run.
"""

from typing import AbstractSet, Callable, MutableSet, TYPE_CHECKING

if TYPE_CHECKING:
    from mars_rover.components import Position

Blockers = AbstractSet["Position"]
BlockerSet = MutableSet["Position"]

Emit = Callable[[str], None]
"""Sink for rendered output lines."""
