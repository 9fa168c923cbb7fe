"""YAML mission files.

A mission file describes the same batch as positional arguments, in a form
that is easier to keep under version control::

    border: [5, 5]              # symmetric, or {min: [-5, -5], max: [5, 5]}
    rovers:
      - {x: 1, y: 2, direction: N, commands: LMLMLMLMM}
      - {x: 3, y: 3, direction: E, commands: MMRMMRMRRM}
      - {x: 0, y: 0, direction: S}                 # no commands

Files are parsed eagerly: a bad direction or command in any rover rejects the
whole file before a single rover is built.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import yaml
from pyrsistent import pvector

from mars_rover.commands import parse_commands
from mars_rover.components import UNBOUNDED, Boundary, Position
from mars_rover.directions import Direction
from mars_rover.errors import MissionConfigError
from mars_rover.mission import MissionPlan, MissionSpec


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise MissionConfigError(f"{path}: invalid YAML: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise MissionConfigError(f"{path}: not valid UTF-8: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MissionConfigError(f"{path}: top level must be a mapping")
    return data


def _int(value: Any, what: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise MissionConfigError(f"{what} must be an integer, got {value!r}")
    return value


def _pair(value: Any, what: str) -> Position:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise MissionConfigError(f"{what} must be a pair [x, y], got {value!r}")
    return Position(_int(value[0], f"{what}[0]"), _int(value[1], f"{what}[1]"))


def parse_border(value: Any) -> Boundary:
    """Accept ``[X, Y]`` (symmetric), ``{min: [..], max: [..]}`` or nothing."""
    if value is None:
        return UNBOUNDED
    if isinstance(value, Mapping):
        if "min" not in value or "max" not in value:
            raise MissionConfigError("border mapping needs 'min' and 'max'")
        return Boundary(_pair(value["min"], "border.min"), _pair(value["max"], "border.max"))
    half = _pair(value, "border")
    return Boundary.symmetric(half.x, half.y)


def parse_rover(entry: Any, index: int) -> MissionSpec:
    if not isinstance(entry, Mapping):
        raise MissionConfigError(f"rovers[{index}] must be a mapping")
    for key in ("x", "y", "direction"):
        if key not in entry:
            raise MissionConfigError(f"rovers[{index}] is missing '{key}'")
    commands = entry.get("commands")
    if commands is None:
        commands = ""
    if not isinstance(commands, str):
        raise MissionConfigError(f"rovers[{index}].commands must be a string")
    return MissionSpec(
        start=Position(
            _int(entry["x"], f"rovers[{index}].x"),
            _int(entry["y"], f"rovers[{index}].y"),
        ),
        direction=Direction.from_symbol(str(entry["direction"])),
        commands=parse_commands(commands),
    )


def plan_from_dict(data: Mapping[str, Any]) -> MissionPlan:
    """Build a :class:`MissionPlan` from already-loaded YAML data.

    Raises:
        MissionConfigError: Structure is wrong.
        InvalidDirection: A rover's direction is not N/E/S/W.
        InvalidCommand: A rover's commands contain a non L/R/M character.
    """
    rovers = data.get("rovers")
    if rovers is None:
        rovers = []
    if not isinstance(rovers, list):
        raise MissionConfigError("'rovers' must be a list")
    missions: List[MissionSpec] = [
        parse_rover(entry, index) for index, entry in enumerate(rovers)
    ]
    return MissionPlan(parse_border(data.get("border")), pvector(missions))


def load_mission_plan(path: Union[str, Path]) -> MissionPlan:
    return plan_from_dict(load_yaml(path))
