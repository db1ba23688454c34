"""Command line entry point for skytrack.

Usage examples:
    skytrack track
    skytrack track --min-latitude 45.8 --max-latitude 47.8 --min-longitude 5.9 --max-longitude 10.5
    skytrack track --frequency 10 --iterations 3
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from skytrack import __version__
from skytrack.config import settings
from skytrack.exceptions import BoundBoxValidationError
from skytrack.models.air_traffic import BoundBox
from skytrack.services.tracker import FlightTracker

logger = logging.getLogger("skytrack.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skytrack",
        description="Print OpenSky flight records for a monitored region",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    track = subparsers.add_parser("track", help="Print flight records for a region")
    track.add_argument(
        "--min-latitude",
        type=float,
        default=settings.min_latitude,
        help="Minimum latitude of the monitored area",
    )
    track.add_argument(
        "--max-latitude",
        type=float,
        default=settings.max_latitude,
        help="Maximum latitude of the monitored area",
    )
    track.add_argument(
        "--min-longitude",
        type=float,
        default=settings.min_longitude,
        help="Minimum longitude of the monitored area",
    )
    track.add_argument(
        "--max-longitude",
        type=float,
        default=settings.max_longitude,
        help="Maximum longitude of the monitored area",
    )
    track.add_argument(
        "--frequency",
        type=float,
        default=settings.frequency,
        help="Seconds between two polls",
    )
    track.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Stop after this many polls (default: run until interrupted)",
    )
    track.set_defaults(func=cmd_track)
    return parser


def cmd_track(args: argparse.Namespace) -> int:
    box = BoundBox(
        min_latitude=args.min_latitude,
        max_latitude=args.max_latitude,
        min_longitude=args.min_longitude,
        max_longitude=args.max_longitude,
    )
    try:
        tracker = FlightTracker(box=box, frequency=args.frequency)
    except BoundBoxValidationError as exc:
        logger.error("Invalid monitoring area: %s", exc)
        return 2

    try:
        asyncio.run(tracker.run(iterations=args.iterations))
    except KeyboardInterrupt:
        logger.info("Tracking stopped")
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
