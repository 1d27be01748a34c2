#!/usr/bin/env python3
"""
Command-line runner: reads a selection on stdin, writes its replacement to stdout.

    python -m Timeblocker schedule < tasks.md
"""

import argparse
import asyncio
import logging
import sys

from .agents.config import get_config
from .commands import (
    COMMANDS,
    build_scheduler,
    resort_selection,
    schedule_selection,
    unschedule_selection,
)
from .scheduling.parser import MalformedScheduledTaskError

logger = logging.getLogger(__name__)


def notify(message: str):
    print(message, file=sys.stderr)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Timeblocker task scheduler")
    parser.add_argument(
        "command",
        choices=list(COMMANDS.keys()),
        help="; ".join(f"{k}: {v}" for k, v in COMMANDS.items()),
    )
    parser.add_argument("--config", help="Settings file (default: $TIMEBLOCKER_CONFIG)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    selection = sys.stdin.read()
    if args.command == "schedule":
        scheduler = build_scheduler(get_config(args.config), notify=notify)
        result = asyncio.run(schedule_selection(selection, scheduler))
    elif args.command == "unschedule":
        try:
            result = unschedule_selection(selection.strip("\n"))
        except MalformedScheduledTaskError as e:
            logger.error(str(e))
            return 1
    else:
        result = resort_selection(selection)

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
