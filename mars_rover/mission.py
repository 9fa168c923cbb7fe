"""Mission runner.

Turns positional input such as ``5 5 1 2 N LMLMLMLMM 3 3 E MMRMMRMRRM`` into
a boundary plus a sequence of :class:`MissionSpec` groups and drives one
:class:`~mars_rover.rover.Rover` per group.

Input layout:

* ``X Y``: border. The legal area is the rectangle ``(-X, -Y)``..``(X, Y)``.
* then repeated groups ``x y D [COMMANDS]``. The command string is optional;
  a token that looks like an integer starts the next group instead.

Groups are parsed lazily by :func:`iter_missions`, so rovers before a
malformed group have already run (and printed) when the error surfaces, while
the malformed group itself never gets a rover.

Each rover's resting cell is added to the shared blocker set only after all
of its commands have been applied.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from mars_rover.commands import Command, parse_commands
from mars_rover.components import Boundary, Position
from mars_rover.directions import Direction
from mars_rover.errors import MissionParseError
from mars_rover.rover import Rover
from mars_rover.types import BlockerSet, Emit

logger = logging.getLogger(__name__)

_INT_TOKEN = re.compile(r"[+-]?\d+")

DEMO_ARGS: Tuple[str, ...] = (
    "5", "5", "1", "2", "N", "LMLMLMLMM", "3", "3", "E", "MMRMMRMRRM"
)


@dataclass(frozen=True)
class MissionSpec:
    """One rover's start pose and program.

    Attributes:
        start: Start cell.
        direction: Start heading.
        commands: Program, possibly empty.
    """

    start: Position
    direction: Direction
    commands: Tuple[Command, ...] = ()


@dataclass(frozen=True)
class MissionPlan:
    """A fully parsed batch: boundary plus missions in run order."""

    boundary: Boundary
    missions: PVector[MissionSpec] = pvector()


@dataclass(frozen=True)
class MissionResult:
    """Rendered trace of one finished mission.

    Attributes:
        spec: The mission that was run.
        initial: Render before the first command.
        steps: ``(command, render)`` after each command, in order.
        final: Resting cell, added to the blocker set.
    """

    spec: MissionSpec
    initial: str
    steps: PVector[Tuple[Command, str]]
    final: Position

    @property
    def final_render(self) -> str:
        return self.steps[-1][1] if self.steps else self.initial


def tokenize(args: Sequence[str]) -> List[str]:
    """Join argv entries and split on whitespace.

    Arguments may arrive separately or as one quoted string.
    """
    return " ".join(args).split()


def is_int_token(token: str) -> bool:
    return _INT_TOKEN.fullmatch(token) is not None


def _parse_int(token: Optional[str], what: str) -> int:
    if token is None:
        raise MissionParseError(f"missing {what}")
    if not is_int_token(token):
        raise MissionParseError(f"expected integer {what}, got {token!r}")
    return int(token)


def parse_border(tokens: Sequence[str]) -> Boundary:
    """Parse the leading ``X Y`` pair into a symmetric boundary."""
    half_width = _parse_int(tokens[0] if len(tokens) > 0 else None, "border x")
    half_height = _parse_int(tokens[1] if len(tokens) > 1 else None, "border y")
    return Boundary.symmetric(half_width, half_height)


def iter_missions(tokens: Sequence[str]) -> Iterator[MissionSpec]:
    """Lazily parse ``x y D [COMMANDS]`` groups.

    Every token of a group is validated before the group is yielded.

    Raises:
        MissionParseError: A coordinate is missing or not an integer, or the
            direction is missing.
        InvalidDirection: The direction token is not N/E/S/W.
        InvalidCommand: The command string contains a non L/R/M character.
    """
    idx = 0
    while idx < len(tokens):
        x = _parse_int(tokens[idx], "rover x")
        y = _parse_int(tokens[idx + 1] if idx + 1 < len(tokens) else None, "rover y")
        if idx + 2 >= len(tokens):
            raise MissionParseError("missing rover direction")
        direction = Direction.from_symbol(tokens[idx + 2])
        idx += 3

        commands: Tuple[Command, ...] = ()
        if idx < len(tokens) and not is_int_token(tokens[idx]):
            commands = parse_commands(tokens[idx])
            idx += 1

        yield MissionSpec(Position(x, y), direction, commands)


def parse_plan(tokens: Sequence[str]) -> MissionPlan:
    """Eagerly parse a whole token list; nothing runs if any group is bad."""
    return MissionPlan(parse_border(tokens), pvector(iter_missions(tokens[2:])))


def run_mission(
    spec: MissionSpec,
    boundary: Boundary,
    blockers: BlockerSet,
    emit: Optional[Emit] = None,
) -> MissionResult:
    """Drive one rover through its program.

    Emits ``Initial position:``, one ``After <cmd>:`` line per command and
    ``Final position:``, then adds the resting cell to ``blockers``.
    """
    rover = Rover(spec.start, spec.direction, boundary, blockers)
    initial = rover.render()
    if emit is not None:
        emit(f"Initial position: {initial}")

    steps: List[Tuple[Command, str]] = []
    for command in spec.commands:
        rover.apply_command(command)
        steps.append((command, rover.render()))
        if emit is not None:
            emit(f"After {command.symbol}: {rover.render()}")

    if emit is not None:
        emit(f"Final position: {rover.render()}")
    blockers.add(rover.position)
    logger.debug("Rover %s came to rest at %s", initial, rover.render())

    return MissionResult(spec, initial, pvector(steps), rover.position)


def run_missions(
    boundary: Boundary,
    missions: Iterable[MissionSpec],
    blockers: Optional[BlockerSet] = None,
    emit: Optional[Emit] = None,
) -> PVector[MissionResult]:
    """Run missions strictly one after another, sharing ``blockers``.

    ``missions`` may be a lazy iterator; a parse error raised while pulling
    the next group propagates after the earlier missions have completed.
    """
    if blockers is None:
        blockers = set()
    results: List[MissionResult] = []
    for index, spec in enumerate(missions):
        logger.info("Starting mission %d at %s %s", index, spec.start, spec.direction)
        results.append(run_mission(spec, boundary, blockers, emit))
    return pvector(results)


def run_plan(
    plan: MissionPlan,
    blockers: Optional[BlockerSet] = None,
    emit: Optional[Emit] = None,
) -> PVector[MissionResult]:
    return run_missions(plan.boundary, plan.missions, blockers, emit)


def run_tokens(
    tokens: Sequence[str],
    blockers: Optional[BlockerSet] = None,
    emit: Optional[Emit] = None,
) -> PVector[MissionResult]:
    """Parse the border, then parse-and-run groups one at a time."""
    boundary = parse_border(tokens)
    return run_missions(boundary, iter_missions(tokens[2:]), blockers, emit)
