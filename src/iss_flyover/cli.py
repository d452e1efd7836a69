"""
Command line entry point: print the next ISS passes over this machine.

Usage:
    iss-flyover
    iss-flyover --json --timeout 10
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace
from datetime import timezone
from typing import List, Optional

import httpx
from dotenv import load_dotenv

from src.iss_flyover.api import next_iss_times_for_my_location
from src.iss_flyover.config import FlyoverConfig, parse_timeout
from src.iss_flyover.exceptions import ConfigurationError, ISSFlyoverError
from src.iss_flyover.formatting import format_flyover_windows

logger = logging.getLogger(__name__)


def _timeout_arg(raw: str) -> float:
    try:
        return parse_timeout("--timeout", raw)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show upcoming ISS passes for your current location"
    )
    parser.add_argument("--json", action="store_true", help="Print passes as JSON")
    parser.add_argument("--timeout", type=_timeout_arg, help="Per-request timeout in seconds")
    parser.add_argument(
        "--local-time",
        action="store_true",
        help="Show rise times in the local timezone instead of UTC",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Load environment variables from .env file
    load_dotenv()
    try:
        config = FlyoverConfig.from_env()
    except ConfigurationError as e:
        print(f"It didn't work! {e}", file=sys.stderr)
        return 2
    if args.timeout is not None:
        config = replace(config, timeout_seconds=args.timeout)

    try:
        passes = asyncio.run(next_iss_times_for_my_location(config=config))
    except (ISSFlyoverError, httpx.HTTPError) as e:
        logger.debug("Lookup failed", exc_info=True)
        print(f"It didn't work! {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([window.model_dump() for window in passes], indent=2))
    else:
        tz = None if args.local_time else timezone.utc
        for line in format_flyover_windows(passes, tz=tz):
            print(line)
    return 0
