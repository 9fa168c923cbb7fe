"""Command-line entry point.

Usage::

    mars-rover 5 5 1 2 N LMLMLMLMM 3 3 E MMRMMRMRRM
    mars-rover "5 5 1 2 N LMLMLMLMM"
    mars-rover --config missions.yaml -v
    mars-rover --eager 5 5 1 2 N M 3 3 X M  # rejects before any rover runs
    mars-rover                      # runs the built-in demo

Rover renders go to stdout; errors and logs go to stderr. The exit status is
1 when input is rejected, 0 otherwise.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import structlog

from mars_rover import __version__
from mars_rover.config import load_mission_plan
from mars_rover.errors import (
    InvalidCommand,
    InvalidDirection,
    MissionParseError,
    RoverError,
)
from mars_rover.logging import configure_logging
from mars_rover.mission import DEMO_ARGS, parse_plan, run_plan, run_tokens, tokenize

USAGE = "Usage: mars-rover <border x> <border y> <x> <y> <direction> [commands] ..."
EXAMPLE = "Example: mars-rover 5 5 1 2 N LMLMLMLMM"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mars-rover",
        description="Drive rovers across a bounded grid with L/R/M commands.",
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        help="Border X Y, then groups of: x y direction [commands].",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="YAML mission file; positional tokens are ignored when given.",
    )
    parser.add_argument(
        "--eager",
        action="store_true",
        help="Validate every rover group before running any of them.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging on stderr."
    )
    parser.add_argument(
        "--log-json", action="store_true", help="Structured JSON log lines."
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def report_error(exc: RoverError) -> None:
    """Print a human-readable message for a rejected input on stderr."""
    if isinstance(exc, InvalidDirection):
        print(f"Error: Invalid direction '{exc.token}'.", file=sys.stderr)
    elif isinstance(exc, InvalidCommand):
        print(f"Error: Invalid commands '{exc.token}'.", file=sys.stderr)
    elif isinstance(exc, MissionParseError):
        print(f"Error parsing arguments: {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        print(EXAMPLE, file=sys.stderr)
    else:
        print(f"Error: {exc}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, log_json=args.log_json)
    log = structlog.get_logger("mars_rover.cli")

    try:
        if args.config is not None:
            plan = load_mission_plan(args.config)
            log.debug("Loaded mission file", path=args.config, rovers=len(plan.missions))
            results = run_plan(plan, emit=print)
        else:
            tokens = tokenize(args.tokens)
            if not tokens:
                print("Running default demo...")
                tokens = list(DEMO_ARGS)
            if args.eager:
                results = run_plan(parse_plan(tokens), emit=print)
            else:
                results = run_tokens(tokens, emit=print)
    except RoverError as exc:
        log.warning("Input rejected", error=str(exc), kind=type(exc).__name__)
        report_error(exc)
        return 1
    except OSError as exc:
        print(f"Error: cannot read mission file: {exc}", file=sys.stderr)
        return 1

    log.info("Run finished", rovers=len(results))
    return 0
