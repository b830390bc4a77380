"""Command-line entry point: ``robotboard`` or ``python -m robotboard``."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from robotboard.config import BoardConfig
from robotboard.engine.core import CommandEngine
from robotboard.engine.stream import command_stream
from robotboard.logging_listeners import register_listeners

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = BoardConfig()
    parser = argparse.ArgumentParser(
        prog="robotboard",
        description="Drive robots on a bounded grid with commands read from stdin",
    )
    parser.add_argument("--max-x", type=int, default=defaults.max_x, help="Maximum board X value")
    parser.add_argument("--max-y", type=int, default=defaults.max_y, help="Maximum board Y value")
    parser.add_argument(
        "--robot-count", type=int, default=defaults.robot_count, help="Number of robots on the board"
    )
    parser.add_argument(
        "--quiet",
        action=argparse.BooleanOptionalAction,
        default=defaults.quiet,
        help="Disable error output (silently ignores bad commands)",
    )
    parser.add_argument(
        "--single",
        action="store_true",
        help="Single robot mode: commands carry no robot name",
    )
    parser.add_argument(
        "--robot-name", default=defaults.robot_name, help="Robot addressed in single robot mode"
    )
    parser.add_argument("--log-level", default=defaults.log_level)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cfg = BoardConfig(
            max_x=args.max_x,
            max_y=args.max_y,
            robot_count=args.robot_count,
            quiet=args.quiet,
            single=args.single,
            robot_name=args.robot_name,
            log_level=args.log_level.upper(),
        )
    except ValidationError as e:
        parser.error(str(e))

    logging.basicConfig(level=cfg.log_level, stream=sys.stderr)
    register_listeners()

    engine = CommandEngine(
        cfg.build_board(), default_agent=cfg.robot_name if cfg.single else None
    )
    err = None if cfg.quiet else sys.stdout
    logger.debug("board %s, expecting %d robot(s)", (cfg.max_x, cfg.max_y), cfg.expected_agents)
    try:
        command_stream(engine, sys.stdin, sys.stdout, err)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("reading commands failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
