#!/usr/bin/env python3
"""
Run a single bot in a light-cycles round.

Usage:
    python backend/run_bot.py <bot_name>
    cycles-bot <bot_name>

The server address and log level come from the environment, see config.py.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

import config
from bot_client import BotClient
from domain.exceptions import BotError
from services.connection import HttpConnection

logger = logging.getLogger(__name__)


class UsageArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on bad usage."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = UsageArgumentParser(
        prog="cycles-bot",
        add_help=False,
        description="Play a light-cycles round, steering away from the closest opponent."
    )
    parser.add_argument("bot_name", type=str, help="Display name for the bot")
    if argv is None:
        argv = sys.argv[1:]
    # Any string is a valid name, including ones starting with a dash
    return parser.parse_args(["--", *argv])


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        logging.basicConfig(
            level=config.get_log_level(),
            format="%(asctime)s [%(levelname)s] %(message)s",
        )
        seed = config.get_seed()
        connection = HttpConnection()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    rng = random.Random(seed) if seed is not None else random.Random()
    bot = BotClient(args.bot_name, connection, rng=rng)

    try:
        bot.run()
    except BotError as e:
        logger.error(f"{args.bot_name}: exiting: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
