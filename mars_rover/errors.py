"""Exception hierarchy.

Every error raised by the package derives from :class:`RoverError` (itself a
``ValueError``) so callers at the CLI boundary can catch them in one place.
Blocked or out-of-bounds moves are *not* errors; the reducer absorbs them.
"""


class RoverError(ValueError):
    """Base class for all rover input errors."""


class InvalidDirection(RoverError):
    """A direction token is not exactly one of N, E, S, W (any case)."""

    def __init__(self, token: object) -> None:
        super().__init__(f"Invalid direction: {token!r}")
        self.token = token


class InvalidCommand(RoverError):
    """A command token is not exactly one of L, R, M (any case).

    ``token`` holds the offending input as given, which may be a whole
    command string when raised by :func:`mars_rover.commands.parse_commands`.
    """

    def __init__(self, token: object) -> None:
        super().__init__(f"Invalid command: {token!r}")
        self.token = token


class MissionParseError(RoverError):
    """Positional mission tokens are malformed (missing or non-integer)."""


class MissionConfigError(RoverError):
    """A YAML mission file does not have the expected structure."""
