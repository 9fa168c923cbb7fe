"""structlog configuration for mars_rover.

Two output modes, both on stderr so stdout carries only rover renders:

- Human (default): console renderer, colored when stderr is a TTY.
- JSON (``--log-json``): one JSON object per line.

Library modules log through stdlib ``logging.getLogger(__name__)`` and stay
silent until :func:`configure_logging` installs the handler; their records
are rendered by the same structlog formatter.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

LOG_LEVEL_ENV = "MARS_ROVER_LOG_LEVEL"


def resolve_level(verbose: bool) -> int:
    """``DEBUG`` when verbose, else ``WARNING``; the env var wins if set."""
    override = os.environ.get(LOG_LEVEL_ENV)
    if override:
        level = logging.getLevelName(override.strip().upper())
        if isinstance(level, int):
            return level
    return logging.DEBUG if verbose else logging.WARNING


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    rover_level = resolve_level(verbose)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("mars_rover").setLevel(rover_level)
