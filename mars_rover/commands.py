"""Rover command alphabet.

``Command`` values are the single-character symbols accepted on input. A
command string such as ``"LMLMLMLMM"`` is parsed one character at a time by
:func:`parse_commands`; the empty string is a valid, empty program.
"""

from enum import StrEnum
from typing import Tuple

from mars_rover.errors import InvalidCommand


class Command(StrEnum):
    """Single rover instruction.

    Members:
        LEFT: Rotate 90 degrees counter-clockwise in place.
        RIGHT: Rotate 90 degrees clockwise in place.
        MOVE: Step one cell forward along the current heading.
    """

    LEFT = "L"
    RIGHT = "R"
    MOVE = "M"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Command":
        """Parse a single command character, case-insensitively.

        Raises:
            InvalidCommand: If ``symbol`` is not exactly one of L/R/M.
        """
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidCommand(symbol)
        try:
            return cls(symbol.upper())
        except ValueError:
            raise InvalidCommand(symbol) from None


ROTATIONS = frozenset({Command.LEFT, Command.RIGHT})


def parse_commands(text: str) -> Tuple[Command, ...]:
    """Parse a whole command string.

    The string is validated in full before anything is returned, so a caller
    never sees a partially parsed program.

    Raises:
        InvalidCommand: With ``token`` set to the whole ``text`` if any
            character is not a command symbol.
    """
    try:
        return tuple(Command.from_symbol(ch) for ch in text)
    except InvalidCommand:
        raise InvalidCommand(text) from None
