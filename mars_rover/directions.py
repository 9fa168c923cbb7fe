"""Compass headings.

:class:`Direction` is a closed string enum whose values are the one-character
symbols used on the wire (``"N"``, ``"E"``, ``"S"``, ``"W"``). Members are
declared in clockwise compass order; rotation is index arithmetic over
``COMPASS`` rather than per-member branching.

Deltas follow the mathematical convention: north increases ``y``.
"""

from enum import StrEnum
from typing import Dict, Tuple

from mars_rover.errors import InvalidDirection


class Direction(StrEnum):
    """Heading of a rover.

    Members:
        NORTH, EAST, SOUTH, WEST: Declared clockwise; value is the symbol.
    """

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step ``(dx, dy)`` for one MOVE in this heading."""
        return _DELTAS[self]

    @property
    def dx(self) -> int:
        return _DELTAS[self][0]

    @property
    def dy(self) -> int:
        return _DELTAS[self][1]

    def turn_left(self) -> "Direction":
        """Heading 90 degrees counter-clockwise (N -> W -> S -> E -> N)."""
        return COMPASS[(COMPASS.index(self) - 1) % len(COMPASS)]

    def turn_right(self) -> "Direction":
        """Heading 90 degrees clockwise (N -> E -> S -> W -> N)."""
        return COMPASS[(COMPASS.index(self) + 1) % len(COMPASS)]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Direction":
        """Parse a single direction character, case-insensitively.

        Raises:
            InvalidDirection: If ``symbol`` is not exactly one of N/E/S/W.
        """
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidDirection(symbol)
        try:
            return cls(symbol.upper())
        except ValueError:
            raise InvalidDirection(symbol) from None


COMPASS: Tuple[Direction, ...] = tuple(Direction)
"""Clockwise ordering used for rotation."""

_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}
